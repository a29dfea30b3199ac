import os

import pytest

from nodeprune.helpers import (
    NodeModuleInfo,
    dir_size,
    format_size,
    remove_directory,
    scan_node_modules,
    version,
)


def _write(path, size):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)


def test_version():
    assert version() == "0.1.0"


def test_node_module_info_equality():
    assert NodeModuleInfo("/a", 3) == NodeModuleInfo("/a", 3)
    assert NodeModuleInfo("/a", 3).size == 3


def test_dir_size_sums_files_recursively(tmp_path):
    _write(tmp_path / "a.txt", 10)
    _write(tmp_path / "sub" / "b.txt", 25)
    _write(tmp_path / "sub" / "deeper" / "c.txt", 7)
    (tmp_path / "empty").mkdir()
    assert dir_size(tmp_path) == 10 + 25 + 7


def test_dir_size_missing_path_is_zero(tmp_path):
    assert dir_size(tmp_path / "missing") == 0


def test_dir_size_of_single_file(tmp_path):
    target = tmp_path / "file.bin"
    _write(target, 123)
    assert dir_size(target) == 123


def test_scan_finds_node_modules_sorted_largest_first(tmp_path):
    _write(tmp_path / "small" / "node_modules" / "pkg" / "index.js", 5)
    _write(tmp_path / "big" / "node_modules" / "pkg" / "index.js", 500)
    _write(tmp_path / "big" / "src" / "main.js", 1000)
    _write(tmp_path / "mid" / "node_modules" / "a.js", 50)

    results = scan_node_modules(str(tmp_path))

    assert [r.size for r in results] == [500, 50, 5]
    assert [os.path.relpath(r.path, tmp_path) for r in results] == [
        os.path.join("big", "node_modules"),
        os.path.join("mid", "node_modules"),
        os.path.join("small", "node_modules"),
    ]


def test_scan_does_not_report_nested_node_modules(tmp_path):
    outer = tmp_path / "proj" / "node_modules"
    _write(outer / "top.js", 10)
    _write(outer / "dep" / "node_modules" / "inner.js", 20)

    results = scan_node_modules(str(tmp_path))

    assert results == [NodeModuleInfo(str(outer), 30)]


def test_scan_ignores_files_named_node_modules(tmp_path):
    _write(tmp_path / "node_modules", 10)
    assert scan_node_modules(str(tmp_path)) == []


def test_scan_root_that_is_node_modules(tmp_path):
    root = tmp_path / "node_modules"
    _write(root / "x.js", 9)
    assert scan_node_modules(str(root)) == [NodeModuleInfo(str(root), 9)]


def test_scan_missing_root_returns_empty(tmp_path):
    assert scan_node_modules(str(tmp_path / "nowhere")) == []


def test_scan_sizes_match_dir_size(tmp_path):
    _write(tmp_path / "p1" / "node_modules" / "a" / "b.js", 77)
    _write(tmp_path / "p2" / "node_modules" / "c.js", 33)
    for info in scan_node_modules(str(tmp_path)):
        assert info.size == dir_size(info.path)


def test_remove_directory_removes_tree(tmp_path):
    target = tmp_path / "node_modules"
    _write(target / "a" / "b" / "c.js", 4)
    remove_directory(str(target))
    assert not target.exists()
    assert tmp_path.exists()


def test_remove_directory_missing_path_is_silent(tmp_path):
    target = tmp_path / "missing"
    remove_directory(str(target))
    assert not target.exists()


def test_remove_directory_removes_file(tmp_path):
    target = tmp_path / "file.txt"
    _write(target, 3)
    remove_directory(target)
    assert not target.exists()


@pytest.mark.parametrize("num_bytes", [0, 1, 512, 1023])
def test_format_size_plain_bytes(num_bytes):
    assert format_size(num_bytes) == f"{num_bytes} bytes"


@pytest.mark.parametrize(
    ("num_bytes", "expected"),
    [
        (1024, "1.00 KB"),
        (1024 * 1024, "1.00 MB"),
        (1024 * 1024 * 1024, "1.00 GB"),
    ],
)
def test_format_size_unit_boundaries(num_bytes, expected):
    assert format_size(num_bytes) == expected


@pytest.mark.parametrize(
    ("num_bytes", "suffix"),
    [
        (1024 * 1024 - 1, " KB"),
        (1024 * 1024 * 1024 - 1, " MB"),
        (5 * 1024 * 1024 * 1024 * 1024, " GB"),
    ],
)
def test_format_size_unit_selection(num_bytes, suffix):
    result = format_size(num_bytes)
    assert result.endswith(suffix)
    number = result[: -len(suffix)]
    assert len(number.split(".")[1]) == 2