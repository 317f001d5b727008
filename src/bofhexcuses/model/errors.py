"""
Model Errors
============
Exceptions raised by the excuse model and the word-list loader.

Both concrete errors also derive from the matching builtin, so callers can
catch ``FileNotFoundError`` or ``IndexError`` without importing this module.
"""
from __future__ import annotations

from typing import Optional


class BofhError(Exception):
    """Base class for every error raised by the package."""


class ResourceNotFoundError(BofhError, FileNotFoundError):
    """A word-list source could not be located, opened or read."""

    def __init__(self, source: str, reason: Optional[str] = None) -> None:
        self.source = source
        self.reason = reason
        message = f"Word list '{source}' not found"
        if reason:
            message += f": {reason}"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class IndexOutOfRangeError(BofhError, IndexError):
    """
    A column index or selection does not fit the shape of the model.

    ``limit`` is the exclusive upper bound the index was checked against.
    """

    def __init__(self, message: str, index: Optional[int] = None, limit: Optional[int] = None) -> None:
        self.index = index
        self.limit = limit
        super().__init__(message)
