# -*- coding: utf-8 -*-

# Copyright (c) Huoty, All rights reserved
# Author: Huoty <sudohuoty@163.com>

import enum
import logging
from time import monotonic
from importlib import import_module
from collections import namedtuple

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .error import FetchError, MissingDependencyError
from .normalize import BLOCK_ADDRESS
from .version import __version__


RETRY_STATUS_CODES = (408, 429, 500, 502, 503, 504)
RETRY_BACKOFF = 1

CHUNK_SIZE = 64 * 1024

USER_AGENT = f"hostsmerge/{__version__}"


log = logging.getLogger(__name__)


class SourceFormat(enum.Enum):

    HOSTS = "hosts"      # "<address> <domain>" 格式
    DOMAINS = "domains"  # 每行一个域名


Source = namedtuple("Source", ["url", "format"])


def make_sources(hosts_urls=None, domains_urls=None):
    sources = [Source(url, SourceFormat.HOSTS) for url in hosts_urls or []]
    sources.extend(
        Source(url, SourceFormat.DOMAINS) for url in domains_urls or []
    )
    return sources


def create_session(retries=5, proxy=None):
    session = requests.Session()
    retry = Retry(
        total=retries,
        backoff_factor=RETRY_BACKOFF,
        status_forcelist=RETRY_STATUS_CODES,
        allowed_methods=["GET"],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers["User-Agent"] = USER_AGENT

    if proxy:
        if proxy.startswith("socks"):
            try:
                import_module("socks")
            except ImportError:
                raise MissingDependencyError(
                    "missing dependency: pysocks (required by socks proxy)"
                )
        session.proxies.update({"http": proxy, "https": proxy})
    return session


def domains_to_hosts(lines):
    """域名列表转换为 hosts 格式，忽略以 # 开头的注释行"""
    return [
        f"{BLOCK_ADDRESS} {line}" for line in lines if not line.startswith("#")
    ]


def _download(session, url, timeout):
    """下载整个响应体，timeout 同时限制连接、读取及整个下载过程的时间"""
    deadline = monotonic() + timeout
    resp = session.get(url, timeout=(timeout, timeout), stream=True)
    try:
        resp.raise_for_status()
        chunks = []
        for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
            chunks.append(chunk)
            if monotonic() > deadline:
                raise FetchError(
                    f"failed to download '{url}': "
                    f"not finished within {timeout} seconds"
                )
    finally:
        resp.close()
    return b"".join(chunks)


def fetch_source(session, source, timeout=300):
    log.info("Downloading %s source '%s'", source.format.value, source.url)
    try:
        data = _download(session, source.url, timeout)
    except requests.RequestException as ex:
        raise FetchError(f"failed to download '{source.url}': {ex}")

    content = data.decode("utf-8", errors="ignore")
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    if source.format is SourceFormat.DOMAINS:
        lines = domains_to_hosts(lines)
    log.debug("Downloaded %s lines from '%s'", len(lines), source.url)
    return lines


def fetch_sources(sources, retries=5, timeout=300, proxy=None, session=None):
    """依次下载所有源，任意一个源下载失败都会抛出 FetchError"""
    own_session = session is None
    if own_session:
        session = create_session(retries, proxy)
    lines = []
    try:
        for source in sources:
            lines.extend(fetch_source(session, source, timeout))
    finally:
        if own_session:
            session.close()
    log.info("Downloaded %s sources, %s lines in total",
             len(sources), len(lines))
    return lines
