# -*- coding: utf-8 -*-

# Copyright (c) Huoty, All rights reserved
# Author: Huoty <sudohuoty@163.com>

import pytest
import requests

from hostsmerge import config
from hostsmerge.resolve import Resolution


class FakeResponse(object):
    """content 可以是字节串，或由字节串及异常组成的分块列表"""

    def __init__(self, url, content=b"", status_code=200):
        self.url = url
        self.content = content
        self.status_code = status_code
        self.closed = False

    def iter_content(self, chunk_size=1):
        if isinstance(self.content, bytes):
            chunks = [self.content[i:i + chunk_size]
                      for i in range(0, len(self.content), chunk_size)]
        else:
            chunks = self.content
        for chunk in chunks:
            if isinstance(chunk, Exception):
                raise chunk
            yield chunk

    def close(self):
        self.closed = True

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error for url: "
                                     f"{self.url}")


class FakeSession(object):
    """按 URL 返回预设内容，值为异常时抛出该异常"""

    def __init__(self, pages):
        self.pages = pages
        self.requested = []
        self.responses = []

    def get(self, url, timeout=None, stream=False):
        assert stream, "response body must be streamed"
        self.requested.append((url, timeout))
        page = self.pages[url]
        if isinstance(page, Exception):
            raise page
        if isinstance(page, tuple):
            content, status_code = page
        else:
            content, status_code = page, 200
        if isinstance(content, str):
            content = content.encode("utf-8")
        resp = FakeResponse(url, content, status_code)
        self.responses.append(resp)
        return resp


class FakeResolver(object):

    def __init__(self, results=None, default=Resolution.RESOLVED):
        self.results = results or {}
        self.default = default
        self.queried = []

    def __call__(self, domain):
        self.queried.append(domain)
        return self.results.get(domain, self.default)


@pytest.fixture(autouse=True)
def config_state(monkeypatch):
    saved = {key: val for key, val in vars(config).items() if key.isupper()}
    monkeypatch.setattr(config, "_CONFIG_DIRS", [])
    monkeypatch.setattr(config, "_HAS_BEEN_LOADED", False)
    monkeypatch.delenv("HOSTSMERGE_CONFIG_PATH", raising=False)
    yield config
    for key in [key for key in vars(config) if key.isupper()]:
        if key not in saved:
            delattr(config, key)
    for key, val in saved.items():
        setattr(config, key, val)


@pytest.fixture
def write_file(tmp_path):

    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
