"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from rich.console import Console

from nodeprune.scanner import Scanner, ScannerError

_USAGE_HINT = "Expected 'scan' subcommand"


class App:
    """Dispatches the ``scan`` subcommand."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console()

    def run(self, argv: Sequence[str]) -> None:
        """Run the subcommand named in ``argv`` (program name excluded)."""
        args = list(argv)
        if not args or args[0] != "scan":
            self.console.print(_USAGE_HINT)
            return

        parser = argparse.ArgumentParser(prog="scan")
        parser.add_argument(
            "-path",
            "--path",
            default="/",
            help="Root path to scan for node_modules directories",
        )
        options = parser.parse_args(args[1:])
        self._scan(options.path)

    def _scan(self, root_path: str) -> None:
        scanner = Scanner(root_path, self.console)
        if not scanner.confirm_scan():
            self.console.print("Scan operation cancelled by user.")
            return
        scanner.scan()
        scanner.display_results()
        scanner.ask_for_pruning()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the application and return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        App().run(argv)
    except ScannerError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())