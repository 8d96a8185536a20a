# -*- coding: utf-8 -*-

# Copyright (c) Huoty, All rights reserved
# Author: Huoty <sudohuoty@163.com>

import pytest

from hostsmerge.normalize import (
    HostRecord,
    normalize,
    strip_comments,
    squeeze_whitespace,
    split_names,
    is_valid_domain,
)


def domains(lines):
    return [record.domain for record in normalize(lines)]


def test_host_record():
    record = HostRecord.parse("0.0.0.0 ads.example.com")
    assert record == ("0.0.0.0", "ads.example.com")
    assert str(record) == "0.0.0.0 ads.example.com"


def test_single_filters():
    assert list(strip_comments(["0.0.0.0 a.com # ads", "# only"])) == [
        "0.0.0.0 a.com ", ""
    ]
    assert list(squeeze_whitespace(["0.0.0.0\ta.com \t"])) == [
        "0.0.0.0 a.com"
    ]
    assert list(split_names(["0.0.0.0 a.com b.com", "0.0.0.0 c.com"])) == [
        "0.0.0.0 a.com", "0.0.0.0 b.com", "0.0.0.0 c.com"
    ]


def test_normalize_cleans_lines():
    lines = [
        "# hosts file header",
        "0.0.0.0 ads.example.com\r",
        "127.0.0.1 tracker.example.com # tracker",
        "0.0.0.0\t\tspaced.example.com\t ",
        "0.0.0.0    many.example.com",
        "",
    ]
    assert normalize(lines) == [
        HostRecord("0.0.0.0", "ads.example.com"),
        HostRecord("0.0.0.0", "tracker.example.com"),
        HostRecord("0.0.0.0", "spaced.example.com"),
        HostRecord("0.0.0.0", "many.example.com"),
    ]


@pytest.mark.parametrize("line", [
    "0.0.0.0 bäd.example.com",
    "0.0.0.0 example.com/path",
    "0.0.0.0 ex@mple.com",
    "1.2.3.4 example.com",
    "::1 localhost",
    "255.255.255.255 broadcasthost",
    "0.0.0.0example.com",
    " 0.0.0.0 example.com",
    "127.0.0.1 localhost",
    "0.0.0.0 localhost.localdomain",
    "0.0.0.0 local",
    "0.0.0.0",
    "0.0.0.0   ",
    "0.0.0.0 -example.com",
    "0.0.0.0 .example.com",
    "0.0.0.0 _example.com",
    "example.com",
])
def test_normalize_drops_malformed_line(line):
    assert normalize([line]) == []


def test_normalize_keeps_localhost_lookalike():
    assert domains(["0.0.0.0 localhost.example.com"]) == [
        "localhost.example.com"
    ]


def test_normalize_splits_multiple_names():
    assert domains(["0.0.0.0 a.example.com b.example.com"]) == [
        "a.example.com", "b.example.com"
    ]


def test_normalize_is_idempotent():
    lines = [
        "127.0.0.1 a.example.com\r",
        "0.0.0.0 b.example.com c.example.com # comment",
        "0.0.0.0\td.example.com",
        "garbage line",
    ]
    once = normalize(lines)
    twice = normalize([str(record) for record in once])
    assert once == twice


@pytest.mark.parametrize("domain, expected", [
    ("ads.example.com", True),
    ("1st-party_ads.example.com", True),
    ("-ads.example.com", False),
    ("ads example.com", False),
    ("bäd.example.com", False),
    ("ads.example.com/path", False),
    ("", False),
])
def test_is_valid_domain(domain, expected):
    assert is_valid_domain(domain) is expected
