"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/index.py
In-memory key index: comparison key -> ordered list of paths.
"""

import threading
from typing import Dict, Iterator, List, Tuple

from dupfinder.core.interfaces import KeyIndex
from dupfinder.core.models import DuplicateGroup


class InMemoryKeyIndex(KeyIndex):
    """
    Append-only index built during one scan.
    Keys keep first-insertion order (dict ordering) and paths keep the order
    in which they were added. Readers get tuples, never the internal lists.
    """

    def __init__(self):
        self._entries: Dict[str, List[str]] = {}
        self._lock = threading.Lock()

    def add(self, key: str, path: str) -> None:
        with self._lock:
            self._entries.setdefault(key, []).append(path)

    def groups(self) -> Iterator[DuplicateGroup]:
        """Lazily yields every key holding two or more paths."""
        for key, paths in self._entries.items():
            if len(paths) >= 2:
                yield DuplicateGroup(key=key, paths=tuple(paths))

    def paths(self, key: str) -> Tuple[str, ...]:
        return tuple(self._entries.get(key, ()))

    def keys(self) -> List[str]:
        return list(self._entries)

    def file_count(self) -> int:
        """Total number of paths recorded across all keys."""
        return sum(len(paths) for paths in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self):
        return f"<InMemoryKeyIndex keys={len(self._entries)}, files={self.file_count()}>"
