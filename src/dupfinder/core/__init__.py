"""
Core scanning engine: walker, hasher, key index, and scan orchestrator.

This package contains the pure-Python foundation of dupfinder:
- InMemoryKeyIndex: append-only mapping from comparison key to paths
- FileScannerImpl: recursive directory walk with optional size filters
- HasherImpl + Sha1AlgorithmImpl / XXHashAlgorithmImpl: streaming file digests
- DuplicateFinder: one scan of one directory tree, by size or by contents
- Models and errors: SearchStyle, DuplicateGroup, ScanParams, ScanStats, ...

No UI dependencies, suitable for CLI and library usage.
"""

from .errors import (
    DupFinderError, InvalidSearchDirectory, FileReadFailure, DirectoryBootstrapFailure)
from .models import (
    SearchStyle, HashAlgorithmName, DuplicateGroup, ScanStats, ScanParams)
from .index import InMemoryKeyIndex
from .scanner import FileScannerImpl, walk_files
from .hasher import HasherImpl, Sha1AlgorithmImpl, XXHashAlgorithmImpl, hash_file
from .bootstrap import create_app_dir, default_app_dir
from .finder import DuplicateFinder

__all__ = [
    "DupFinderError",
    "InvalidSearchDirectory",
    "FileReadFailure",
    "DirectoryBootstrapFailure",
    "SearchStyle",
    "HashAlgorithmName",
    "DuplicateGroup",
    "ScanStats",
    "ScanParams",
    "InMemoryKeyIndex",
    "FileScannerImpl",
    "walk_files",
    "HasherImpl",
    "Sha1AlgorithmImpl",
    "XXHashAlgorithmImpl",
    "hash_file",
    "create_app_dir",
    "default_app_dir",
    "DuplicateFinder",
]
