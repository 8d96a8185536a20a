# -*- coding: utf-8 -*-

# Copyright (c) Huoty, All rights reserved
# Author: Huoty <sudohuoty@163.com>

from hostsmerge.normalize import HostRecord
from hostsmerge.merge import (
    remove_whitelisted,
    add_blacklisted,
    sort_unique,
    merge,
    duplicate_ipv6,
)


def records(*domains):
    return [HostRecord("0.0.0.0", domain) for domain in domains]


def test_remove_whitelisted_is_anchored():
    data = records("evil.com", "notevil.com", "evil.com.au", "sub.evil.com")
    assert remove_whitelisted(data, ["evil.com", ""]) == records(
        "notevil.com", "sub.evil.com"
    )


def test_remove_whitelisted_pattern_entries():
    data = records("ads1.example.com", "ads2.example.com", "example.com")
    assert remove_whitelisted(data, [r"ads\d"]) == records("example.com")


def test_remove_whitelisted_invalid_pattern_is_literal():
    data = records("a(b.com", "ab.com")
    assert remove_whitelisted(data, ["a(b"]) == records("ab.com")


def test_remove_whitelisted_without_entries():
    data = records("a.com")
    assert remove_whitelisted(data, ["", ""]) == data


def test_add_blacklisted():
    assert add_blacklisted(records("a.com"), ["b.com", "", "a.com"]) == (
        records("a.com", "b.com", "a.com")
    )


def test_add_blacklisted_warns_on_invalid_entry(caplog):
    result = add_blacklisted([], ["good.com", "bäd.com", "-bad.com"])
    assert result == records("good.com", "bäd.com", "-bad.com")
    warnings = [r.getMessage() for r in caplog.records
                if r.levelname == "WARNING"]
    assert warnings == [
        "Blacklist entry 'bäd.com' is not a valid domain",
        "Blacklist entry '-bad.com' is not a valid domain",
    ]


def test_sort_unique():
    assert sort_unique(records("c.com", "a.com", "c.com", "b.com")) == (
        records("a.com", "b.com", "c.com")
    )


def test_merge_blacklist_entry_appears_once():
    result = merge(records("a.com", "b.com"), [], ["b.com", "c.com", "c.com"])
    assert result == records("a.com", "b.com", "c.com")


def test_merge_domain_on_both_lists_stays_blocked():
    result = merge(records("a.com", "both.com"), ["both.com"], ["both.com"])
    assert result == records("a.com", "both.com")


def test_duplicate_ipv6():
    data = records("a.com", "b.com")
    assert duplicate_ipv6(data) == data + [
        HostRecord("::0", "a.com"), HostRecord("::0", "b.com")
    ]
