"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for duplicate scanning: search styles, hash algorithms,
duplicate groups, run statistics and scan parameters.
"""

from dataclasses import dataclass
from typing import Optional, Tuple
from enum import Enum


# =============================
# Enums
# =============================

class SearchStyle(Enum):
    """
    Comparison key used to group files.
    """
    BY_SIZE = "size"
    BY_CONTENTS = "contents"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            SearchStyle.BY_SIZE: "Size",
            SearchStyle.BY_CONTENTS: "Contents",
        }
        return mapping.get(self, self.value)

    @property
    def description(self) -> str:
        """Detailed description for help text."""
        mapping = {
            SearchStyle.BY_SIZE:
                "Same byte size (fast, finds candidates only)",
            SearchStyle.BY_CONTENTS:
                "Same content digest (reads every file, confirms duplicates)",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class HashAlgorithmName(Enum):
    SHA1 = "sha1"
    XXHASH64 = "xxhash64"

    @property
    def display_name(self) -> str:
        mapping = {
            HashAlgorithmName.SHA1: "SHA-1",
            HashAlgorithmName.XXHASH64: "xxHash64",
        }
        return mapping.get(self, self.value)


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class DuplicateGroup:
    """
    Paths sharing one comparison key.
    Produced by the key index on demand; never stored.
    """
    key: str
    paths: Tuple[str, ...]

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.paths)

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return self.duplicate_count >= 2

    def __repr__(self):
        return f"<DuplicateGroup key={self.key}, count={len(self.paths)}>"


class ScanStats:
    """
    Statistics collected during one scan.
    """
    def __init__(self):
        self.total_time: float = 0.0
        self.files_scanned: int = 0
        self.distinct_keys: int = 0
        self.groups_found: int = 0
        self.duplicate_files: int = 0

    def summary(self) -> str:
        lines = [
            "Scan Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s",
            f"Files scanned: {self.files_scanned}",
            f"Distinct keys: {self.distinct_keys}",
            f"Duplicate groups: {self.groups_found} ({self.duplicate_files} files)",
        ]
        return "\n".join(lines)

    def __repr__(self):
        return f"<ScanStats files={self.files_scanned}, groups={self.groups_found}>"


"""
DTO for scan parameters with built-in validation.
Interface-agnostic: used by the CLI and library callers.
"""
from dataclasses import field
from dupfinder.utils.convert_utils import ConvertUtils
from dupfinder.core.bootstrap import default_app_dir


@dataclass
class ScanParams:
    """Parameters for a scan operation with validation."""
    root_dir: str
    app_dir: str = field(default="")
    search_style: SearchStyle = SearchStyle.BY_SIZE
    algorithm: HashAlgorithmName = HashAlgorithmName.SHA1
    min_size_bytes: Optional[int] = None
    max_size_bytes: Optional[int] = None
    prefilter_by_size: bool = False

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if not self.app_dir:
            self.app_dir = default_app_dir()

        if self.min_size_bytes is not None and self.min_size_bytes < 0:
            raise ValueError("Minimum size cannot be negative")

        if self.max_size_bytes is not None and self.max_size_bytes < 0:
            raise ValueError("Maximum size cannot be negative")

        if (self.min_size_bytes is not None and self.max_size_bytes is not None
                and self.max_size_bytes < self.min_size_bytes):
            raise ValueError("Maximum size cannot be less than minimum size")

    @staticmethod
    def from_human_readable(
            root_dir: str,
            min_size_str: str = "",
            max_size_str: str = "",
            app_dir: str = "",
            search_style: SearchStyle = SearchStyle.BY_SIZE,
            algorithm: HashAlgorithmName = HashAlgorithmName.SHA1,
            prefilter_by_size: bool = False,
    ) -> 'ScanParams':
        """
        Factory method to create params from human-readable inputs.
        Empty size strings mean "no bound".
        """
        min_size = ConvertUtils.human_to_bytes(min_size_str) if min_size_str else None
        max_size = ConvertUtils.human_to_bytes(max_size_str) if max_size_str else None

        return ScanParams(
            root_dir=root_dir,
            app_dir=app_dir,
            search_style=search_style,
            algorithm=algorithm,
            min_size_bytes=min_size,
            max_size_bytes=max_size,
            prefilter_by_size=prefilter_by_size,
        )
