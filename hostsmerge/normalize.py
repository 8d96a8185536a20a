# -*- coding: utf-8 -*-

# Copyright (c) Huoty, All rights reserved
# Author: Huoty <sudohuoty@163.com>

"""对下载的 hosts 数据进行清洗

每个过滤器接受一个可迭代的行序列并返回新的行序列，按 FILTER_CHAIN
的固定顺序组合，后面的过滤器依赖前面的过滤器已经执行过。
"""

import re
import logging
from collections import namedtuple


BLOCK_ADDRESS = "0.0.0.0"
IPV6_BLOCK_ADDRESS = "::0"
LOOPBACK_ADDRESS = "127.0.0.1"

_INVALID_CHARS_RE = re.compile(r"[^a-zA-Z0-9. _-]")
_SPACES_RE = re.compile(r" {2,}")
_LOCALHOST_RE = re.compile(r"local(host)*(\.localdomain)*")

log = logging.getLogger(__name__)


class HostRecord(namedtuple("HostRecord", ["address", "domain"])):

    __slots__ = ()

    @classmethod
    def parse(cls, line):
        address, _, domain = line.partition(" ")
        return cls(address, domain)

    def __str__(self):
        return f"{self.address} {self.domain}"


def strip_carriage_returns(lines):
    for line in lines:
        yield line.replace("\r", "")


def rewrite_loopback(lines):
    # 指向 127.0.0.1 的条目同样视为屏蔽条目
    for line in lines:
        yield line.replace(LOOPBACK_ADDRESS, BLOCK_ADDRESS)


def strip_comments(lines):
    for line in lines:
        yield line.split("#", 1)[0]


def squeeze_whitespace(lines):
    for line in lines:
        yield line.rstrip(" \t").replace("\t", " ")


def drop_invalid_characters(lines):
    for line in lines:
        if not _INVALID_CHARS_RE.search(line):
            yield line


def collapse_spaces(lines):
    for line in lines:
        yield _SPACES_RE.sub(" ", line)


def drop_non_block(lines):
    for line in lines:
        if line == BLOCK_ADDRESS or line.startswith(BLOCK_ADDRESS + " "):
            yield line


def split_names(lines):
    # "0.0.0.0 a.com b.com" 拆分为每行一个域名
    for line in lines:
        names = line.split(" ")[1:]
        if len(names) <= 1:
            yield line
            continue
        for name in names:
            yield f"{BLOCK_ADDRESS} {name}"


def drop_localhost(lines):
    for line in lines:
        if not _LOCALHOST_RE.fullmatch(HostRecord.parse(line).domain):
            yield line


def drop_empty_domain(lines):
    for line in lines:
        if HostRecord.parse(line).domain.strip():
            yield line


def is_valid_domain(domain):
    """域名只能包含字母、数字、点、下划线及连字符，且以字母或数字开头"""
    if not domain or " " in domain or _INVALID_CHARS_RE.search(domain):
        return False
    return domain[0].isascii() and domain[0].isalnum()


def drop_invalid_domain(lines):
    for line in lines:
        if is_valid_domain(HostRecord.parse(line).domain):
            yield line


FILTER_CHAIN = (
    strip_carriage_returns,
    rewrite_loopback,
    strip_comments,
    squeeze_whitespace,
    drop_invalid_characters,
    collapse_spaces,
    drop_non_block,
    split_names,
    drop_localhost,
    drop_empty_domain,
    drop_invalid_domain,
)


def normalize(lines, filters=FILTER_CHAIN):
    """清洗 hosts 行数据，返回 HostRecord 列表"""
    for _filter in filters:
        lines = _filter(lines)
    records = [HostRecord.parse(line) for line in lines]
    log.debug("Normalized data has %s records", len(records))
    return records
