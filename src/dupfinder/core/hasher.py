"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/hasher.py
Streams file contents through a hash algorithm and returns a hex digest.

- SHA-1 (160 bit, 40 hex chars) is the default and the authoritative check
- xxHash64 (16 hex chars) is available as a faster non-cryptographic option
- Files are read in fixed-size chunks, one file open at a time
"""

import hashlib
from typing import Dict, Optional

import xxhash

from dupfinder.core.errors import FileReadFailure
from dupfinder.core.interfaces import HashAlgorithm, HashObject
from dupfinder.core.models import HashAlgorithmName

CHUNK_SIZE = 1024 * 1024  # 1 MiB


class Sha1AlgorithmImpl(HashAlgorithm):
    name = HashAlgorithmName.SHA1.value

    def new(self) -> HashObject:
        return hashlib.sha1()


class XXHashAlgorithmImpl(HashAlgorithm):
    """xxHash64: much faster than SHA-1, but not collision resistant."""
    name = HashAlgorithmName.XXHASH64.value

    def new(self) -> HashObject:
        return xxhash.xxh64()


ALGORITHMS: Dict[HashAlgorithmName, HashAlgorithm] = {
    HashAlgorithmName.SHA1: Sha1AlgorithmImpl(),
    HashAlgorithmName.XXHASH64: XXHashAlgorithmImpl(),
}


def get_algorithm(name: HashAlgorithmName) -> HashAlgorithm:
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"Unsupported hash algorithm: {name!r}") from None


def hash_file(file_path: str, algorithm: Optional[HashAlgorithm] = None,
              chunk_size: int = CHUNK_SIZE) -> str:
    """
    Computes the hex digest of the whole file.

    Args:
        file_path: Path to the file
        algorithm: Hash algorithm to use (SHA-1 when omitted)
        chunk_size: Number of bytes read per iteration

    Returns:
        str: Lowercase hex digest

    Raises:
        FileReadFailure: If the file cannot be opened or read
    """
    algorithm = algorithm or ALGORITHMS[HashAlgorithmName.SHA1]
    digest = algorithm.new()
    try:
        with open(file_path, 'rb') as f:
            for chunk in iter(lambda: f.read(chunk_size), b""):
                digest.update(chunk)
    except OSError as e:
        raise FileReadFailure(file_path, e) from e
    return digest.hexdigest()


class HasherImpl:
    """
    Hashes whole files with a fixed algorithm.
    Callable so it can be used directly as a content key function.
    """

    def __init__(self, algorithm: Optional[HashAlgorithm] = None, chunk_size: int = CHUNK_SIZE):
        self.algorithm = algorithm or ALGORITHMS[HashAlgorithmName.SHA1]
        self.chunk_size = chunk_size

    def compute_full_hash(self, file_path: str) -> str:
        return hash_file(file_path, self.algorithm, self.chunk_size)

    __call__ = compute_full_hash
