# -*- coding: utf-8 -*-

# Copyright (c) Huoty, All rights reserved
# Author: Huoty <sudohuoty@163.com>

import os
import re
import logging

from .error import ConfigurationError


_WHITESPACE_RE = re.compile(r"\s+")

log = logging.getLogger(__name__)


def clean_entry(line):
    """去除注释及所有空白字符"""
    return _WHITESPACE_RE.sub("", line.split("#", 1)[0])


def read_overrides(path):
    """读取白名单或黑名单文件

    返回的列表保留了空条目，以便统计进度时与文件行数对应
    """
    if not path or not os.path.isfile(path):
        raise ConfigurationError(f"override file '{path}' does not exist")

    with open(path, encoding="utf-8") as fp:
        entries = [clean_entry(line) for line in fp]
    log.debug("Read %s entries from '%s'", len(entries), path)
    return entries


def remove_override(path, entry):
    """从名单文件中删除指定条目，保留注释及其他行"""
    with open(path, encoding="utf-8") as fp:
        lines = fp.readlines()

    kept = [line for line in lines if clean_entry(line) != entry]
    if len(kept) == len(lines):
        return False

    with open(path, "w", encoding="utf-8") as fp:
        fp.writelines(kept)
    return True
