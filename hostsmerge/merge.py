# -*- coding: utf-8 -*-

# Copyright (c) Huoty, All rights reserved
# Author: Huoty <sudohuoty@163.com>

import re
import logging

from .normalize import (HostRecord, BLOCK_ADDRESS, IPV6_BLOCK_ADDRESS,
                        is_valid_domain)


log = logging.getLogger(__name__)


def compile_entry(entry):
    """名单条目可以是正则片段，不是合法的正则表达式时按字面匹配"""
    try:
        return re.compile(entry)
    except re.error:
        log.warning("Entry '%s' is not a valid pattern, match it literally",
                    entry)
        return re.compile(re.escape(entry))


def remove_whitelisted(records, whitelist):
    """删除与白名单条目匹配的记录

    匹配从域名开头开始，因此 evil.com 不会匹配到 notevil.com
    """
    patterns = [compile_entry(entry) for entry in whitelist if entry]
    if not patterns:
        return list(records)

    kept = [
        record for record in records
        if not any(pattern.match(record.domain) for pattern in patterns)
    ]
    log.debug("Removed %s whitelisted records", len(records) - len(kept))
    return kept


def add_blacklisted(records, blacklist):
    added = []
    for entry in blacklist:
        if not entry:
            continue
        # 黑名单条目按原样加入，不是合法域名时仅给出警告
        if not is_valid_domain(entry):
            log.warning("Blacklist entry '%s' is not a valid domain", entry)
        added.append(HostRecord(BLOCK_ADDRESS, entry))
    log.debug("Added %s blacklisted records", len(added))
    return list(records) + added


def sort_unique(records):
    return sorted(set(records), key=str)


def merge(records, whitelist, blacklist):
    # 先删除白名单条目再添加黑名单条目，同时出现在两个名单中的域名会被屏蔽
    log.info("Removing all whitelisted entries")
    records = remove_whitelisted(records, whitelist)
    log.info("Adding all blacklisted entries")
    records = add_blacklisted(records, blacklist)
    log.info("Sorting entries and removing duplicates")
    return sort_unique(records)


def duplicate_ipv6(records):
    """复制所有记录，地址替换为 ::0 后追加到末尾（如 dnsmasq 需要此类条目）"""
    records = list(records)
    clones = [record._replace(address=IPV6_BLOCK_ADDRESS) for record in records]
    return records + clones
