# -*- coding: utf-8 -*-

# Copyright (c) Huoty, All rights reserved
# Author: Huoty <sudohuoty@163.com>

import os
import hashlib


class cached_property(object):

    def __init__(self, func):
        self.__doc__ = getattr(func, "__doc__")
        self.func = func

    def __get__(self, obj, cls):
        if obj is None:
            return self

        value = obj.__dict__[self.func.__name__] = self.func(obj)
        return value


class suppress(object):

    def __init__(self, *exceptions, **kwargs):
        self.exceptions = exceptions
        self.logger = kwargs.get("logger") or kwargs.get("log")
        self.loglevel = kwargs.get("loglevel", "exception")

        self._log = (getattr(self.logger, self.loglevel, None)
                     if self.logger else None)

    def __enter__(self):
        return

    def __exit__(self, exc_type, exc_val, exc_tb):
        if not exc_type or not issubclass(exc_type, self.exceptions):
            return
        if exc_val and self._log:
            self._log(exc_val)
        return True


def md5sum(data):
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.md5(data).hexdigest()


def md5file(path, chunk_size=64 * 1024):
    """计算文件的 md5 值，文件不存在时返回 None"""
    if not os.path.isfile(path):
        return None
    md5 = hashlib.md5()
    with open(path, "rb") as fp:
        for chunk in iter(lambda: fp.read(chunk_size), b""):
            md5.update(chunk)
    return md5.hexdigest()


def parse_permissions(mode):
    """解析文件权限，支持整数（如 0o644）及八进制字符串（如 "644"、"0o644"）

    超出 0o777 且各位均为八进制数字的整数（如 644）按八进制字面量解析
    """
    if isinstance(mode, int):
        digits = str(mode)
        if mode > 0o777 and set(digits) <= set("01234567"):
            mode = int(digits, 8)
    else:
        mode = str(mode).strip().lower()
        if mode.startswith("0o"):
            mode = mode[2:]
        mode = int(mode, 8)
    if not 0 <= mode <= 0o7777:
        raise ValueError(f"file mode out of range: {oct(mode)}")
    return mode
