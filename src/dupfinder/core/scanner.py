"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Recursive directory walker.
Features:
- Yields (path, size) for every regular file under the root
- Stable order: entries of each directory are visited in sorted order,
  files of a directory before its subdirectories
- Skips symbolic links and directories that cannot be listed
- Optional size filters
- Strict mode: a listed file that cannot be stat'ed raises instead of being skipped
"""

import os
import stat
from typing import Iterator, Optional, Tuple
import logging

from dupfinder.core.errors import FileReadFailure

logger = logging.getLogger(__name__)


class FileScannerImpl:
    """
    Walks a directory tree and yields regular files lazily.

    Attributes:
        root_dir: Root directory to walk
        min_size: Minimum file size in bytes (optional, inclusive)
        max_size: Maximum file size in bytes (optional, inclusive)
        strict: Raise FileReadFailure for listed files that vanished or cannot
            be stat'ed (content scans); otherwise log a warning and skip them
    """

    def __init__(
        self,
        root_dir: str,
        min_size: Optional[int] = None,
        max_size: Optional[int] = None,
        strict: bool = False,
    ):
        self.root_dir = root_dir
        self.min_size = min_size
        self.max_size = max_size
        self.strict = strict
        self.skipped_dirs = 0

    def scan(self) -> Iterator[Tuple[str, int]]:
        """
        Yield (path, size) pairs in walk order.
        The root is assumed to be a directory; validation belongs to the caller.

        Raises:
            FileReadFailure: In strict mode, for a listed file that cannot be stat'ed
        """
        logger.debug("Walking directory: %s", self.root_dir)
        logger.debug("Filters: min_size=%s, max_size=%s", self.min_size, self.max_size)

        for root, dirs, files in os.walk(self.root_dir, onerror=self._on_walk_error):
            # Sorting in place also fixes the order os.walk descends in
            dirs.sort()
            for filename in sorted(files):
                path = os.path.join(root, filename)
                size = self._regular_file_size(path)
                if size is None:
                    continue
                if not self._size_passes(size):
                    logger.debug("Skipping %s (size %d bytes outside range)", path, size)
                    continue
                yield path, size

    def _on_walk_error(self, error: OSError) -> None:
        self.skipped_dirs += 1
        logger.warning("Skipping unreadable directory %s: %s", error.filename, error.strerror)

    def _regular_file_size(self, path: str) -> Optional[int]:
        """Size of a regular file, or None for links, special files and (non-strict) vanished entries."""
        try:
            if os.path.islink(path):
                logger.debug("Skipping symbolic link: %s", path)
                return None
            stat_result = os.stat(path)
        except OSError as e:
            if self.strict:
                raise FileReadFailure(path, e) from e
            logger.warning("Could not stat %s: %s", path, e)
            return None

        if not stat.S_ISREG(stat_result.st_mode):
            logger.debug("Skipping special file: %s", path)
            return None
        return stat_result.st_size

    def _size_passes(self, size: int) -> bool:
        """
        Check if file size is within configured limits.
        Args:
            size: File size in bytes
        Returns:
            True if file meets size criteria
        """
        if self.min_size is not None and size < self.min_size:
            return False
        if self.max_size is not None and size > self.max_size:
            return False
        return True


def walk_files(root_dir: str) -> Iterator[Tuple[str, int]]:
    """Unfiltered walk: every regular file under root_dir."""
    return FileScannerImpl(root_dir).scan()
