"""Interactive scanning, reporting and pruning of node_modules directories."""

from __future__ import annotations

import os
import re
import sys
import time
from collections.abc import Iterable
from dataclasses import dataclass

from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from nodeprune.helpers import (
    NodeModuleInfo,
    format_size,
    remove_directory,
    scan_node_modules,
)

_MB = 1024 * 1024
_GB = 1024 * _MB

_HEADER_STYLE = "bold color(99)"
_ROW_STYLES = ("color(241)", "color(245)")

_BUCKET_BOUNDS = (
    ("Huge (> 1GB)", _GB, sys.maxsize),
    ("Large (100MB-1GB)", 100 * _MB, _GB),
    ("Medium (10MB-100MB)", 10 * _MB, 100 * _MB),
    ("Small (1MB-10MB)", _MB, 10 * _MB),
    ("Tiny (< 1MB)", 0, _MB),
)


class ScannerError(Exception):
    """Raised when scanning, confirming or pruning fails."""


@dataclass
class SizeBucket:
    """A size range and the directories that fall into it."""

    name: str
    minimum: int
    maximum: int
    count: int = 0
    total: int = 0

    def contains(self, size: int) -> bool:
        return self.minimum <= size < self.maximum


def size_distribution(results: Iterable[NodeModuleInfo]) -> list[SizeBucket]:
    """Group directories into size buckets, from largest range to smallest."""
    buckets = [SizeBucket(name, low, high) for name, low, high in _BUCKET_BOUNDS]
    for info in results:
        bucket = next((b for b in buckets if b.contains(info.size)), None)
        if bucket is not None:
            bucket.count += 1
            bucket.total += info.size
    return buckets


class Scanner:
    """Finds node_modules directories under a root path and offers to prune them."""

    def __init__(self, root_path: str | os.PathLike[str], console: Console | None = None) -> None:
        self.root_path = os.fspath(root_path)
        self.console = console if console is not None else Console()
        self.results: list[NodeModuleInfo] = []
        self.total_size = 0
        self.duration = 0.0

    def _info(self, message: str) -> None:
        self.console.print(Text.assemble(("INFO ", "bold cyan"), message))

    def _header(self, title: str) -> None:
        self.console.print()
        self.console.print(Text(title, style=_HEADER_STYLE), justify="center")
        self.console.print()

    def _confirm(
        self,
        title: str,
        description: str,
        affirmative: str,
        negative: str,
        context: str,
    ) -> bool:
        self.console.print(Text(title, style="bold"))
        self.console.print(Text(description, style="dim"))
        prompt = Text(f"{affirmative} (y) / {negative} (n)")
        try:
            return Confirm.ask(prompt, console=self.console, default=False)
        except (EOFError, KeyboardInterrupt) as err:
            reason = str(err) or type(err).__name__
            raise ScannerError(f"{context}: {reason}") from err

    def confirm_scan(self) -> bool:
        """Ask whether the scan should go ahead."""
        return self._confirm(
            "Are you sure you want to scan for node_modules?",
            "This operation may take some time depending on the directory size.",
            "Yes, scan",
            "No, cancel",
            "confirmation error",
        )

    def scan(self) -> None:
        """Scan the root path and record the results, largest first."""
        self._info(f"Scanning for node_modules directories from: {self.root_path}")
        start = time.perf_counter()
        try:
            with self.console.status("Scanning for node_modules... This may take some time"):
                results = scan_node_modules(self.root_path)
        except OSError as err:
            raise ScannerError(f"error during scan: {err}") from err
        self.duration = time.perf_counter() - start
        self.results = results
        self.total_size = sum(info.size for info in results)

    def display_results(self) -> None:
        """Print a summary, the largest directories and the size distribution."""
        self._info(
            f"Found {len(self.results)} node_modules directories in {self.duration:.3f}s"
        )
        self._info(f"Total space used: {format_size(self.total_size)}")
        self.display_largest_directories(30)
        self.display_size_distribution()

    def ask_for_pruning(self) -> None:
        """Offer to prune directories when any were found."""
        if not self.results:
            return
        wanted = self._confirm(
            "Would you like to prune node_modules directories?",
            f"You can free up to {format_size(self.total_size)} of disk space",
            "Yes, let me select directories",
            "No, keep them all",
            "pruning confirmation error",
        )
        if wanted:
            self.prune_node_modules()

    def _relative(self, path: str) -> str:
        try:
            return os.path.relpath(path, self.root_path)
        except ValueError:
            return path

    def display_largest_directories(self, top_count: int) -> None:
        """Print the ``top_count`` largest directories as a tree under the root."""
        self._header("Largest node_modules Directories")
        tree = Tree(Text(self.root_path, style="bold color(35)"), guide_style="color(63)")
        for info in self.results[:max(top_count, 0)]:
            label = f"{self._relative(info.path)} ({format_size(info.size)})"
            tree.add(Text(label, style="color(212)"))
        self.console.print(tree)

    def display_size_distribution(self) -> None:
        """Print how many directories fall into each size range."""
        self._header("Size Distribution")
        table = Table(box=None, row_styles=list(_ROW_STYLES), header_style="bold")
        table.add_column("Size Category", min_width=20)
        table.add_column("Count", min_width=14)
        table.add_column("Total Size", min_width=14)
        for bucket in size_distribution(self.results):
            table.add_row(bucket.name, str(bucket.count), format_size(bucket.total))
        self.console.print(table)

    def _select_paths(self) -> list[str]:
        self.console.print(Text("Select node_modules directories to prune", style="bold"))
        for number, info in enumerate(self.results, start=1):
            self.console.print(Text(f"{number:>3}. {info.path} ({format_size(info.size)})"))
        prompt = Text("Numbers to prune, separated by commas or spaces (blank for none)")
        while True:
            try:
                answer = Prompt.ask(prompt, console=self.console, default="", show_default=False)
            except (EOFError, KeyboardInterrupt) as err:
                reason = str(err) or type(err).__name__
                raise ScannerError(f"selection error: {reason}") from err
            chosen = self._parse_selection(answer)
            if chosen is not None:
                return [self.results[i].path for i in sorted(chosen)]
            self.console.print(
                Text(f"Please enter numbers between 1 and {len(self.results)}", style="red")
            )

    def _parse_selection(self, answer: str) -> set[int] | None:
        chosen: set[int] = set()
        for token in filter(None, re.split(r"[,\s]+", answer.strip())):
            if not token.isdigit():
                return None
            number = int(token)
            if not 1 <= number <= len(self.results):
                return None
            chosen.add(number - 1)
        return chosen

    def prune_node_modules(self) -> None:
        """Let the user pick directories, confirm, and delete them."""
        if not self.results:
            raise ScannerError("no node_modules directories found to prune")

        selected = self._select_paths()
        if not selected:
            self._info("No directories selected for pruning")
            return

        sizes = {info.path: info.size for info in self.results}
        to_free = sum(sizes.get(path, 0) for path in selected)

        confirmed = self._confirm(
            "Are you sure you want to prune these directories?",
            f"This will permanently delete {len(selected)} directories "
            f"(total {format_size(to_free)})",
            "Yes, delete them",
            "No, cancel",
            "confirmation error",
        )
        if not confirmed:
            self._info("Pruning cancelled")
            return

        try:
            with self.console.status("Pruning node_modules directories..."):
                self.prune(selected)
        except ScannerError as err:
            raise ScannerError(f"pruning error: {err}") from err

        self._info(
            f"Successfully pruned {len(selected)} directories, "
            f"freed {format_size(to_free)} of disk space"
        )

    def prune(self, paths: Iterable[str]) -> None:
        """Delete each of ``paths``, stopping at the first failure."""
        for path in paths:
            try:
                remove_directory(path)
            except OSError as err:
                raise ScannerError(f"failed to remove {path}: {err}") from err