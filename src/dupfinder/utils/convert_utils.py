"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
Size conversions for CLI input (--min-size 500K) and report output.
"""
import re

_SIZE_PATTERN = re.compile(r"^\s*(?P<value>[+-]?\d+(?:\.\d+)?|[+-]?\.\d+)\s*(?P<unit>[KMGTP]?B?)\s*$")

_UNIT_FACTORS = {
    "": 1, "B": 1,
    "K": 1024, "KB": 1024,
    "M": 1024 ** 2, "MB": 1024 ** 2,
    "G": 1024 ** 3, "GB": 1024 ** 3,
    "T": 1024 ** 4, "TB": 1024 ** 4,
    "P": 1024 ** 5, "PB": 1024 ** 5,
}


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 1.50KB, 3.20MB).
        """
        if size_bytes < 0:
            return "0B"

        value = float(size_bytes)
        for unit in ["B", "KB", "MB", "GB", "TB", "PB"]:
            if value < 1024:
                return f"{value:.2f}{unit}"
            value /= 1024
        return f"{value:.2f}EB"

    @staticmethod
    def human_to_bytes(size_str: str) -> int:
        """
        Convert human-readable size string to bytes (binary multiples).
        Supports formats: '1.5GB', '2048KB', '1000', '1K', '1M', '1G', etc.
        Raises ValueError for negative sizes or invalid formats.
        """
        match = _SIZE_PATTERN.match(size_str.upper())
        if not match:
            raise ValueError(
                f"Invalid size format: '{size_str}'. "
                f"Supported formats: 1.5GB, 2048KB, 1000, 1K, 1M, etc."
            )

        value = float(match.group("value"))
        if value < 0:
            raise ValueError(f"Negative size not allowed: '{size_str}'")
        return int(value * _UNIT_FACTORS[match.group("unit")])

    @staticmethod
    def is_valid_size_format(size_str: str) -> bool:
        try:
            ConvertUtils.human_to_bytes(size_str)
            return True
        except ValueError:
            return False
