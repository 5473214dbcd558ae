"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used by the scanning engine.
These protocols rely on structural typing via `typing.Protocol`, so any object
with matching methods can be plugged in.

Key Components:
---------------
- KeyIndex: Append-only mapping from comparison key to the paths seen under it.
- HashAlgorithm: Factory for incremental hash objects (SHA-1, xxHash64, ...).
- KeyDeriver: Callable turning a scanned file into its comparison key.
"""

from typing import Protocol, Iterator, Tuple
from dupfinder.core.models import DuplicateGroup


# ===== Interfaces =====

class KeyIndex(Protocol):
    """
    Interface for the key index filled during a scan.

    Methods:
        add: Record a path under a key.
        groups: Iterate keys that collected two or more paths.
        paths: Paths recorded under one key.
        __len__: Number of distinct keys.
    """
    def add(self, key: str, path: str) -> None:
        """Append path to the sequence stored under key."""
        ...

    def groups(self) -> Iterator[DuplicateGroup]:
        """Yield duplicate groups in first-insertion order of their keys."""
        ...

    def paths(self, key: str) -> Tuple[str, ...]:
        ...

    def __len__(self) -> int:
        """Number of distinct keys recorded."""
        ...


class HashObject(Protocol):
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for hash algorithms.

    Allows plugging in different hashing functions like SHA-1 or xxHash
    without affecting the rest of the scanning logic.
    """
    name: str

    def new(self) -> HashObject:
        """Return a fresh incremental hash object."""
        ...


class KeyDeriver(Protocol):
    """Computes the comparison key of a regular file."""
    def __call__(self, path: str, size: int) -> str: ...
