"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/finder.py
Duplicate scan orchestrator.

Walks a directory tree once, derives a comparison key for every regular file
with the configured search style and records (key, path) in a key index.
Any key that ends up with two or more paths is a duplicate group.

Two search styles are available:
- BY_SIZE: key is the byte size (candidates only, nothing is read)
- BY_CONTENTS: key is the content digest (confirmed duplicates)

With `prefilter_by_size=True`, BY_CONTENTS hashes only files whose size is
shared with at least one other file. The resulting groups are the same as a
plain content scan; files with a unique size never enter the index.
"""

import os
from collections import Counter
from typing import Iterator, List, Optional, Tuple
import logging

from dupfinder.core.bootstrap import create_app_dir
from dupfinder.core.errors import InvalidSearchDirectory
from dupfinder.core.hasher import HasherImpl, get_algorithm
from dupfinder.core.index import InMemoryKeyIndex
from dupfinder.core.interfaces import KeyIndex
from dupfinder.core.keys import build_key_deriver
from dupfinder.core.models import DuplicateGroup, HashAlgorithmName, SearchStyle
from dupfinder.core.scanner import FileScannerImpl

logger = logging.getLogger(__name__)


def validate_search_dir(dir_to_search: str) -> None:
    """
    Raises:
        InvalidSearchDirectory: If the path is missing or not a directory
    """
    if not os.path.exists(dir_to_search):
        raise InvalidSearchDirectory(dir_to_search, InvalidSearchDirectory.DOES_NOT_EXIST)
    if not os.path.isdir(dir_to_search):
        raise InvalidSearchDirectory(dir_to_search, InvalidSearchDirectory.NOT_A_DIRECTORY)


class DuplicateFinder:
    """
    Holds the key index, the search style and the app directory for one scan.

    Attributes:
        app_dir: Application data directory, created on construction
        index: Key index receiving (key, path) observations
        search_style: How comparison keys are derived (default BY_SIZE)
        files_scanned: Regular files accepted by the walker in the last scan
    """

    def __init__(
        self,
        app_dir: str,
        index: Optional[KeyIndex] = None,
        search_style: SearchStyle = SearchStyle.BY_SIZE,
        algorithm: HashAlgorithmName = HashAlgorithmName.SHA1,
        min_size: Optional[int] = None,
        max_size: Optional[int] = None,
        prefilter_by_size: bool = False,
    ):
        create_app_dir(app_dir)
        self.app_dir = app_dir
        self._owns_index = index is None
        self.index = index if index is not None else InMemoryKeyIndex()
        self.min_size = min_size
        self.max_size = max_size
        self.prefilter_by_size = prefilter_by_size
        self.files_scanned = 0
        self._hasher = HasherImpl(get_algorithm(algorithm))
        self.search_style = search_style

    @property
    def search_style(self) -> SearchStyle:
        return self._search_style

    @search_style.setter
    def search_style(self, value: SearchStyle) -> None:
        self._derive_key = build_key_deriver(value, self._hasher)
        self._search_style = value

    @property
    def algorithm(self) -> str:
        return self._hasher.algorithm.name

    def find_duplicate_files(self, dir_to_search: str) -> None:
        """
        Scan dir_to_search and fill the index.

        Raises:
            InvalidSearchDirectory: Before any traversal, if the root is unusable
            FileReadFailure: Under BY_CONTENTS, on the first file that cannot be read.
                The index is left partially filled and should be discarded.
            ValueError: If an injected index already holds entries
        """
        validate_search_dir(dir_to_search)
        self._reset_index()

        logger.debug("Scanning %s by %s", dir_to_search, self.search_style.value)
        scanner = FileScannerImpl(
            dir_to_search,
            min_size=self.min_size,
            max_size=self.max_size,
            strict=self.search_style is SearchStyle.BY_CONTENTS,
        )
        self.files_scanned = 0

        if self.prefilter_by_size and self.search_style is SearchStyle.BY_CONTENTS:
            entries = self._shared_size_entries(scanner.scan())
        else:
            entries = self._counted(scanner.scan())

        for path, size in entries:
            self.index.add(self._derive_key(path, size), path)

        logger.debug("Scan finished: %d files", self.files_scanned)

    def groups(self) -> Iterator[DuplicateGroup]:
        return self.index.groups()

    def _reset_index(self) -> None:
        """Each scan starts from an empty index."""
        if self._owns_index:
            self.index = InMemoryKeyIndex()
        elif len(self.index):
            raise ValueError("Injected key index must be empty before a scan")

    def _counted(self, entries: Iterator[Tuple[str, int]]) -> Iterator[Tuple[str, int]]:
        for entry in entries:
            self.files_scanned += 1
            yield entry

    def _shared_size_entries(self, entries: Iterator[Tuple[str, int]]) -> List[Tuple[str, int]]:
        """Walk order preserved; files with a unique size are dropped."""
        walked = list(self._counted(entries))
        size_counts = Counter(size for _, size in walked)
        shared = [(path, size) for path, size in walked if size_counts[size] >= 2]
        logger.debug("Size prefilter kept %d of %d files for hashing", len(shared), len(walked))
        return shared
