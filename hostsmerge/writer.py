# -*- coding: utf-8 -*-

# Copyright (c) Huoty, All rights reserved
# Author: Huoty <sudohuoty@163.com>

import os
import logging
import tempfile

from .utils import md5sum, md5file, suppress


HEADER = """\
# clean merged adblocking-hosts file
# generated by hostsmerge

127.0.0.1 localhost
::1 localhost

"""

log = logging.getLogger(__name__)


def render(records):
    return HEADER + "".join(f"{record}\n" for record in records)


class HostsWriter(object):
    """原子替换输出文件，内容没有变化时不做任何修改

    临时文件创建在输出文件所在目录，保证 os.replace 是原子操作
    """

    def __init__(self, path, mode=0o644):
        self.path = path
        self.mode = mode
        self.temp_path = None

    def cleanup(self):
        if self.temp_path:
            log.debug("Removing temp file '%s'", self.temp_path)
            with suppress(OSError):
                os.remove(self.temp_path)
            self.temp_path = None

    def _write_temp(self, content):
        dirname = os.path.dirname(os.path.abspath(self.path))
        fd, self.temp_path = tempfile.mkstemp(
            prefix=".hostsmerge-", suffix=".tmp", dir=dirname
        )
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fp:
            fp.write(content)
        return self.temp_path

    def write(self, content):
        """内容有变化时替换输出文件，返回是否进行了替换"""
        if md5file(self.path) == md5sum(content):
            log.info("No changes, skip rotating in place")
            return False

        try:
            temp_path = self._write_temp(content)
            log.info("Move temp file '%s' to '%s'", temp_path, self.path)
            os.replace(temp_path, self.path)
            self.temp_path = None
            log.info("Chmod '%s' to '%s'", self.path, oct(self.mode))
            os.chmod(self.path, self.mode)
        finally:
            self.cleanup()
        return True


def write_hosts(path, records, mode=0o644):
    return HostsWriter(path, mode).write(render(records))
