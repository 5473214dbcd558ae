"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exceptions raised by the scanning engine.
Each error carries the offending path so callers can branch on attributes
instead of parsing messages.
"""

from typing import Optional


class DupFinderError(Exception):
    """Base class for all engine errors."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class InvalidSearchDirectory(DupFinderError):
    """Root path is missing or is not a directory."""

    DOES_NOT_EXIST = "does not exist"
    NOT_A_DIRECTORY = "not a directory"

    def __init__(self, path: str, reason: str):
        super().__init__(f"Not a valid search directory: {path!r} {reason}", path)
        self.reason = reason


class FileReadFailure(DupFinderError):
    """A file could not be opened or fully read while hashing."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        message = f"Failed to read {path!r}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, path)
        self.cause = cause


class DirectoryBootstrapFailure(DupFinderError):
    """The application directory path is taken by something that is not a directory."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        if cause is None:
            message = f"file exists at {path!r}, expected a directory"
        else:
            message = f"could not create app directory {path!r}: {cause}"
        super().__init__(message, path)
        self.cause = cause
