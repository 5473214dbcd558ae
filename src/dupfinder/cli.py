#!/usr/bin/env python3
"""
dupfinder CLI: command line interface for duplicate file detection.
Groups files by size or by content digest and prints every group with two or more files.
Nothing is moved or deleted.
"""
from __future__ import annotations
import argparse
import sys
import os
import time
from pathlib import Path
from typing import List, NoReturn, Optional
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from dupfinder.core.errors import DupFinderError
from dupfinder.core.models import DuplicateGroup, ScanParams, ScanStats, SearchStyle
from dupfinder.commands import ScanCommand
from dupfinder.utils.convert_utils import ConvertUtils
from dupfinder.aliases import (
    ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT,
    SEARCH_STYLE_ALIASES, SEARCH_STYLE_CHOICES, SEARCH_STYLE_HELP_TEXT,
    EPILOG_TEXT
)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dupfinder",
            description="dupfinder: find duplicate files by size or by contents",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "--input", "-i",
            required=True,
            type=str,
            help="Input directory to scan for duplicates"
        )

        parser.add_argument(
            "--by", "-b",
            choices=SEARCH_STYLE_CHOICES,
            default="size",
            type=str,
            dest="search_style",
            help=SEARCH_STYLE_HELP_TEXT
        )
        parser.add_argument(
            "--algorithm", "-a",
            choices=ALGORITHM_CHOICES,
            default="sha1",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )
        parser.add_argument(
            "--prefilter",
            action="store_true",
            help="With --by contents: hash only files whose size is shared by another file"
        )

        parser.add_argument(
            "--app-dir",
            default="",
            type=str,
            metavar='',
            dest="app_dir",
            help="Application data directory. Default: per-user data dir"
        )

        # Filtering options
        parser.add_argument(
            "--min-size", "-m",
            default="",
            type=str,
            metavar='',
            help="Minimum file size (e.g., 500KB, 1MB). Default: no limit"
        )
        parser.add_argument(
            "--max-size", "-M",
            default="",
            type=str,
            metavar='',
            help="Maximum file size (e.g., 10MB, 1GB). Default: no limit"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show statistics and debug logging"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate argument combinations before execution."""
        if args.quiet and args.verbose:
            self.error_exit("--quiet and --verbose cannot be used together")

        style = SEARCH_STYLE_ALIASES[args.search_style]
        if args.prefilter and style is not SearchStyle.BY_CONTENTS:
            self.warning("--prefilter only applies to --by contents; ignoring it")

        for option, value in (("--min-size", args.min_size), ("--max-size", args.max_size)):
            if value and not ConvertUtils.is_valid_size_format(value):
                self.error_exit(f"Invalid size format for {option}: {value}")

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams.from_human_readable(
                root_dir=str(Path(args.input).expanduser().absolute()),
                min_size_str=args.min_size,
                max_size_str=args.max_size,
                app_dir=str(Path(args.app_dir).expanduser().absolute()) if args.app_dir else "",
                search_style=SEARCH_STYLE_ALIASES[args.search_style],
                algorithm=ALGORITHM_ALIASES[args.algorithm],
                prefilter_by_size=args.prefilter,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def run_scan(self, params: ScanParams) -> List[DuplicateGroup]:
        """Execute the scan and report engine errors."""
        command = ScanCommand()
        if self.verbose:
            print(f"Finding duplicates (by {params.search_style.display_name.lower()})...")

        try:
            groups, stats = command.execute(params)
        except DupFinderError as e:
            self.error_exit(str(e))

        if self.verbose:
            self.output_stats(stats)
        return groups

    @staticmethod
    def output_stats(stats: ScanStats) -> None:
        print()
        print(stats.summary())

    def output_results(self, groups: List[DuplicateGroup], search_style: SearchStyle) -> None:
        """Output duplicate groups as plain text in scan order."""
        if self.quiet:
            return

        if not groups:
            print("No duplicate groups found.")
            return

        total_files = sum(g.duplicate_count for g in groups)
        print(f"\nFound {len(groups)} duplicate groups ({total_files} files)")

        for idx, group in enumerate(groups, 1):
            if search_style is SearchStyle.BY_SIZE:
                label = f"Size: {ConvertUtils.bytes_to_human(int(group.key))}"
            else:
                label = f"Digest: {group.key}"
            print(f"\nGroup {idx} | {label} | Files: {group.duplicate_count}")
            for path in group.paths:
                print(f"   {path}")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"Warning: {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        if self.verbose:
            logging.getLogger("dupfinder").setLevel(logging.DEBUG)

        self.validate_args(args)
        params = self.create_params(args)

        if not self.quiet:
            print(f"Scanning directory: {params.root_dir}")

        groups = self.run_scan(params)
        self.output_results(groups, params.search_style)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\nCompleted in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
