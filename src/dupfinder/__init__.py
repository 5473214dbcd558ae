"""
dupfinder: find duplicate files in a directory tree.

Core features:
- Two search styles: BY_SIZE (byte size, candidates) and BY_CONTENTS (content digest, confirmed)
- SHA-1 digests by default, xxHash64 on request
- Optional size prefilter before hashing
- CLI interface (`dupfinder -i DIR --by contents`)
"""

from importlib.metadata import PackageNotFoundError, version as _version

try:
    __version__ = _version("dupfinder")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API, only what users should import directly
from dupfinder.commands import ScanCommand
from dupfinder.core import (
    DuplicateFinder, InMemoryKeyIndex, DuplicateGroup, ScanParams, ScanStats,
    SearchStyle, HashAlgorithmName, hash_file,
    DupFinderError, InvalidSearchDirectory, FileReadFailure, DirectoryBootstrapFailure)
from dupfinder.utils.convert_utils import ConvertUtils

__all__ = [
    "ScanCommand",
    "DuplicateFinder",
    "InMemoryKeyIndex",
    "DuplicateGroup",
    "ScanParams",
    "ScanStats",
    "SearchStyle",
    "HashAlgorithmName",
    "hash_file",
    "DupFinderError",
    "InvalidSearchDirectory",
    "FileReadFailure",
    "DirectoryBootstrapFailure",
    "ConvertUtils",
    "__version__",
]
