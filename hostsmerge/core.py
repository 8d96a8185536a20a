# -*- coding: utf-8 -*-

# Copyright (c) Huoty, All rights reserved
# Author: Huoty <sudohuoty@163.com>

import signal
import logging

from . import config
from .error import ConfigurationError
from .fetch import make_sources, fetch_sources
from .normalize import normalize
from .overrides import read_overrides
from .reconcile import Reconciler
from .resolve import DNSResolver
from .merge import merge, duplicate_ipv6
from .writer import HostsWriter, render
from .utils import cached_property, parse_permissions


log = logging.getLogger(__name__)


class HostsMerger(object):
    """合并多个远程屏蔽列表为一个 hosts 文件"""

    HANDLED_SIGNALS = (signal.SIGHUP, signal.SIGINT, signal.SIGTERM)

    def __init__(self, sources, whitelist_path, blacklist_path, result_path,
                 result_mode=0o644, retries=5, timeout=300, proxy=None,
                 resolver=None, check=False, clean=False, ipv6dup=False,
                 session=None):
        self.sources = sources
        self.whitelist_path = whitelist_path
        self.blacklist_path = blacklist_path
        self.result_path = result_path
        try:
            self.result_mode = parse_permissions(result_mode)
        except ValueError:
            raise ConfigurationError(
                f"invalid result permissions: {result_mode!r}"
            )
        self.retries = int(retries)
        self.timeout = timeout
        self.proxy = proxy
        self.check = check
        self.clean = clean
        self.ipv6dup = ipv6dup

        self._resolver = resolver
        self._session = session
        self._writer = None

    @classmethod
    def from_config(cls, result_path=None, **kwargs):
        config.check_config(RESULT_PATH=result_path)
        sources = make_sources(
            config.SOURCES_HOSTS_FORMAT, config.SOURCES_DOMAINS_ONLY
        )
        return cls(
            sources,
            config.WHITELIST_PATH,
            config.BLACKLIST_PATH,
            result_path or config.RESULT_PATH,
            result_mode=config.RESULT_PERMISSIONS,
            retries=config.RETRY_NUM,
            timeout=config.TIMEOUT,
            proxy=config.PROXY,
            **kwargs
        )

    @cached_property
    def resolver(self):
        return self._resolver or DNSResolver()

    def cleanup(self):
        log.info("Cleaning up temp files")
        if self._writer:
            self._writer.cleanup()

    def register_signal_handler(self):

        def handle_signal(signum, frame):
            log.warning("Received signal %s, aborting", signum)
            raise SystemExit(0)

        return {
            signum: signal.signal(signum, handle_signal)
            for signum in self.HANDLED_SIGNALS
        }

    @staticmethod
    def restore_signal_handler(handlers):
        for signum, handler in handlers.items():
            signal.signal(signum, handler)

    def read_overrides(self):
        log.info("Read blacklist and whitelist data from '%s' and '%s'",
                 self.blacklist_path, self.whitelist_path)
        return (read_overrides(self.whitelist_path),
                read_overrides(self.blacklist_path))

    def reconcile(self, records, whitelist, blacklist):
        reconciler = Reconciler(
            records,
            self.resolver,
            self.whitelist_path,
            self.blacklist_path,
            clean=self.clean,
        )
        return reconciler.run(whitelist, blacklist)

    def build(self):
        """执行下载、清洗、检查及合并，返回最终的记录列表"""
        whitelist, blacklist = self.read_overrides()

        lines = fetch_sources(
            self.sources,
            retries=self.retries,
            timeout=self.timeout,
            proxy=self.proxy,
            session=self._session,
        )
        log.info("Cleaning up downloaded data")
        records = normalize(lines)

        if self.check or self.clean:
            self.reconcile(records, whitelist, blacklist)

        records = merge(records, whitelist, blacklist)
        if self.ipv6dup:
            log.info("Duplicate data for IPv6")
            records = duplicate_ipv6(records)
        return records

    def run(self):
        """运行合并流程，返回输出文件是否被替换"""
        handlers = self.register_signal_handler()
        try:
            records = self.build()
            log.info("Generating and writing %s records", len(records))
            self._writer = HostsWriter(self.result_path, self.result_mode)
            return self._writer.write(render(records))
        finally:
            self.cleanup()
            self.restore_signal_handler(handlers)
