# -*- coding: utf-8 -*-

# Copyright (c) Huoty, All rights reserved
# Author: Huoty <sudohuoty@163.com>

import os
import stat

import pytest

from hostsmerge.normalize import HostRecord
from hostsmerge.writer import HEADER, HostsWriter, render, write_hosts


RECORDS = [HostRecord("0.0.0.0", "a.com"), HostRecord("0.0.0.0", "b.com")]


def file_mode(path):
    return stat.S_IMODE(os.stat(path).st_mode)


def test_render():
    content = render(RECORDS)
    assert content.startswith("# clean merged adblocking-hosts file\n")
    assert content == HEADER + "0.0.0.0 a.com\n0.0.0.0 b.com\n"
    assert "127.0.0.1 localhost\n::1 localhost\n" in HEADER
    assert render([]) == HEADER


def test_write_new_file(tmp_path):
    path = str(tmp_path / "hosts")
    assert write_hosts(path, RECORDS, mode=0o640)
    with open(path, encoding="utf-8") as fp:
        assert fp.read() == render(RECORDS)
    assert file_mode(path) == 0o640
    assert os.listdir(str(tmp_path)) == ["hosts"]


def test_unchanged_file_is_untouched(tmp_path):
    path = str(tmp_path / "hosts")
    assert write_hosts(path, RECORDS)
    os.utime(path, (1000000000, 1000000000))
    inode = os.stat(path).st_ino

    assert not write_hosts(path, RECORDS, mode=0o600)
    assert os.stat(path).st_mtime == 1000000000
    assert os.stat(path).st_ino == inode
    assert file_mode(path) == 0o644


def test_changed_file_is_replaced(tmp_path):
    path = str(tmp_path / "hosts")
    write_hosts(path, RECORDS)
    assert write_hosts(path, RECORDS[:1])
    with open(path, encoding="utf-8") as fp:
        assert fp.read() == render(RECORDS[:1])


def test_temp_file_removed_on_failure(tmp_path, monkeypatch):
    path = str(tmp_path / "hosts")

    def replace(src, dst):
        raise OSError("replace failed")

    monkeypatch.setattr(os, "replace", replace)
    writer = HostsWriter(path)
    with pytest.raises(OSError):
        writer.write(render(RECORDS))
    assert writer.temp_path is None
    assert os.listdir(str(tmp_path)) == []
