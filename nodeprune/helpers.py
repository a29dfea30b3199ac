"""Filesystem helpers: locating node_modules directories, sizing and removing them."""

from __future__ import annotations

import os
import shutil
import stat
from collections.abc import Callable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

_VERSION = "0.1.0"
_NODE_MODULES = "node_modules"

_KB = 1024
_MB = _KB * 1024
_GB = _MB * 1024


@dataclass(frozen=True)
class NodeModuleInfo:
    """A node_modules directory and the total size of the files beneath it."""

    path: str
    size: int


def version() -> str:
    """Return the application version."""
    return _VERSION


def remove_directory(path: str | os.PathLike[str]) -> None:
    """Delete ``path`` and everything beneath it; a missing path is not an error."""
    if not os.path.lexists(path):
        return
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    else:
        os.remove(path)


def _walk(
    root: str,
    prune: Callable[[str, os.stat_result], bool] | None = None,
) -> Iterator[tuple[str, os.stat_result]]:
    """Yield ``(path, lstat)`` for ``root`` and its descendants in lexical order.

    Symbolic links are not followed and entries that cannot be read are
    silently skipped. Directories for which ``prune`` returns true are yielded
    but not descended into.
    """
    try:
        root_stat = os.lstat(root)
    except OSError:
        return

    stack = [(root, root_stat)]
    while stack:
        path, st = stack.pop()
        yield path, st
        if not stat.S_ISDIR(st.st_mode):
            continue
        if prune is not None and prune(path, st):
            continue
        try:
            names = sorted(os.listdir(path))
        except OSError:
            continue
        children = []
        for name in names:
            child = os.path.join(path, name)
            try:
                children.append((child, os.lstat(child)))
            except OSError:
                continue
        stack.extend(reversed(children))


def dir_size(path: str | os.PathLike[str]) -> int:
    """Return the total size in bytes of all non-directory entries under ``path``."""
    return sum(
        st.st_size
        for _, st in _walk(os.fspath(path))
        if not stat.S_ISDIR(st.st_mode)
    )


def _is_node_modules(path: str, st: os.stat_result) -> bool:
    return (
        stat.S_ISDIR(st.st_mode)
        and os.path.basename(os.path.normpath(path)) == _NODE_MODULES
    )


def scan_node_modules(root_path: str | os.PathLike[str]) -> list[NodeModuleInfo]:
    """Find every node_modules directory under ``root_path``, largest first.

    Directories nested inside a node_modules directory are not reported
    separately; their size counts towards the outer one.
    """
    found = [
        path
        for path, st in _walk(os.fspath(root_path), prune=_is_node_modules)
        if _is_node_modules(path, st)
    ]
    if not found:
        return []

    with ThreadPoolExecutor() as pool:
        sizes = list(pool.map(dir_size, found))

    results = [NodeModuleInfo(path, size) for path, size in zip(found, sizes)]
    results.sort(key=lambda info: info.size, reverse=True)
    return results


def format_size(num_bytes: int) -> str:
    """Render a byte count as a human-readable string using binary units."""
    if num_bytes >= _GB:
        return f"{num_bytes / _GB:.2f} GB"
    if num_bytes >= _MB:
        return f"{num_bytes / _MB:.2f} MB"
    if num_bytes >= _KB:
        return f"{num_bytes / _KB:.2f} KB"
    return f"{num_bytes} bytes"