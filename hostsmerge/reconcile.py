# -*- coding: utf-8 -*-

# Copyright (c) Huoty, All rights reserved
# Author: Huoty <sudohuoty@163.com>

"""检查白名单与黑名单

白名单条目出现在清洗后的 hosts 数据中时报告为不再被屏蔽，
黑名单条目出现在其中时报告为已被屏蔽，其余条目在域名确认无法解析时报告。
check 模式仅报告问题，clean 模式直接修改名单文件。
"""

import re
import sys
import logging
from collections import namedtuple

from .merge import compile_entry
from .overrides import remove_override
from .resolve import Resolution


WHITELIST = "whitelist"
BLACKLIST = "blacklist"

NOT_BLOCKED = "no longer blocked"
ALREADY_BLOCKED = "already blocked"
NOT_RESOLVING = "not resolving"

_PATTERN_CHARS_RE = re.compile(r"[\\^$*+?{}\[\]|()]")

log = logging.getLogger(__name__)


Finding = namedtuple("Finding", ["kind", "entry", "reason"])


class Reconciler(object):

    def __init__(self, records, resolver, whitelist_path, blacklist_path,
                 clean=False, stream=None):
        self.domains = {record.domain for record in records}
        self.resolver = resolver
        self.paths = {WHITELIST: whitelist_path, BLACKLIST: blacklist_path}
        self.clean = clean
        self.stream = stream or sys.stdout

    def is_blocked(self, entry):
        if not _PATTERN_CHARS_RE.search(entry):
            return entry in self.domains
        pattern = compile_entry(entry)
        return any(pattern.fullmatch(domain) for domain in self.domains)

    def is_resolving(self, entry):
        # 查询失败时无法确定结果，视为可以解析，以免误删条目
        return self.resolver(entry) is not Resolution.EMPTY

    def _report(self, progress, kind, entry, reason):
        if self.clean:
            prefix = "non-resolving " if reason == NOT_RESOLVING else ""
            message = f"removing {prefix}entry '{entry}' from the {kind}"
            remove_override(self.paths[kind], entry)
        else:
            message = f"{kind} entry '{entry}' is {reason}"
        print(f"{progress} {message}", file=self.stream)
        log.info(message)
        return Finding(kind, entry, reason)

    def check_entries(self, kind, entries):
        findings = []
        count = len(entries)
        for counter, entry in enumerate(entries, 1):
            if not entry:
                continue

            progress = f"{counter}/{count}"
            blocked = self.is_blocked(entry)
            if kind == WHITELIST and blocked:
                reason = NOT_BLOCKED
            elif kind == BLACKLIST and blocked:
                reason = ALREADY_BLOCKED
            elif not self.is_resolving(entry):
                reason = NOT_RESOLVING
            else:
                continue
            findings.append(self._report(progress, kind, entry, reason))
        return findings

    def run(self, whitelist, blacklist):
        log.info("%s whitelist and blacklist entries",
                 "Cleaning" if self.clean else "Checking")
        findings = self.check_entries(WHITELIST, whitelist)
        findings.extend(self.check_entries(BLACKLIST, blacklist))
        return findings
