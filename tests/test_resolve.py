import os

import pytest

from pipex.resolve import find_executable, path_directories


def _make_file(path, mode):
    path.write_text("#!/bin/sh\nexit 0\n")
    os.chmod(path, mode)
    return path


def test_path_directories_splits_on_colon():
    assert path_directories({"PATH": "/a:/b:/c"}) == ["/a", "/b", "/c"]


def test_path_directories_drops_empty_entries():
    assert path_directories({"PATH": ":/a::/b:"}) == ["/a", "/b"]


def test_path_directories_without_path_is_none():
    assert path_directories({"HOME": "/home/someone"}) is None


def test_path_directories_with_empty_value_is_none():
    assert path_directories({"PATH": ""}) is None


def test_path_directories_stops_at_equals_sign():
    assert path_directories({"PATH": "/a:/b=/c"}) == ["/a", "/b"]


def test_find_executable_in_directory(tmp_path, monkeypatch):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    prog = _make_file(bin_dir / "prog", 0o755)
    monkeypatch.chdir(tmp_path)
    assert find_executable("prog", ["/nonexistent-dir", str(bin_dir)]) == str(prog)


def test_find_executable_prefers_first_directory(tmp_path, monkeypatch):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()
    _make_file(first / "prog", 0o755)
    _make_file(second / "prog", 0o755)
    monkeypatch.chdir(tmp_path)
    assert find_executable("prog", [str(first), str(second)]) == f"{first}/prog"


def test_find_executable_skips_non_executable(tmp_path, monkeypatch):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    _make_file(bin_dir / "prog", 0o644)
    monkeypatch.chdir(tmp_path)
    assert find_executable("prog", [str(bin_dir)]) is None


def test_find_executable_absolute_path_returned_unchanged(tmp_path):
    prog = _make_file(tmp_path / "tool", 0o755)
    assert find_executable(str(prog), None) == str(prog)


def test_find_executable_relative_to_working_directory(tmp_path, monkeypatch):
    _make_file(tmp_path / "local", 0o755)
    monkeypatch.chdir(tmp_path)
    assert find_executable("local", []) == "local"


@pytest.mark.parametrize("directories", [None, []])
def test_find_executable_missing(tmp_path, monkeypatch, directories):
    monkeypatch.chdir(tmp_path)
    assert find_executable("no-such-program-here", directories) is None