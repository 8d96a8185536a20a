# -*- coding: utf-8 -*-

# Copyright (c) Huoty, All rights reserved
# Author: Huoty <sudohuoty@163.com>

import enum
import logging

import dns.resolver
import dns.exception

from cacheout import LRUCache as Cache

from . import config
from .utils import cached_property


log = logging.getLogger(__name__)


class Resolution(enum.Enum):

    RESOLVED = "resolved"
    EMPTY = "empty"     # 查询成功，但没有结果
    FAILED = "failed"   # 查询失败，如超时、服务器不可用等


class DNSResolver(object):
    """检查域名是否可以解析

    只有查询成功但无结果时才视为不可解析，查询失败时无法确定结果
    """

    def __init__(self, nameservers=None, timeout=None,
                 cache_size=None, cache_ttl=None):
        self._nameservers = nameservers or config.NAMESERVERS
        self.timeout = timeout or config.DNS_TIMEOUT
        self.cache_size = cache_size or config.DNS_CACHE_SIZE
        self.cache_ttl = cache_ttl or config.DNS_CACHE_TTL

    @cached_property
    def resolver(self):
        # 指定了 DNS 服务器时无需读取系统配置
        resolver = dns.resolver.Resolver(configure=not self._nameservers)
        if self._nameservers:
            resolver.nameservers = list(self._nameservers)
        resolver.lifetime = self.timeout
        log.debug("Initialized resolver, nameservers: %s, timeout: %s",
                  resolver.nameservers, self.timeout)
        return resolver

    @cached_property
    def query_cache(self):
        return Cache(maxsize=self.cache_size, ttl=self.cache_ttl)

    def query(self, domain):
        try:
            answer = self.resolver.resolve(domain, "A")
        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
            return Resolution.EMPTY
        except dns.exception.DNSException as ex:
            log.warning("DNS lookup of '%s' failed: %s", domain, ex)
            return Resolution.FAILED
        return Resolution.RESOLVED if len(answer) else Resolution.EMPTY

    def resolves(self, domain):
        result = self.query_cache.get(domain)
        if result is None:
            result = self.query(domain)
            self.query_cache.set(domain, result)
        log.debug("Domain '%s' lookup result: %s", domain, result.value)
        return result

    __call__ = resolves
