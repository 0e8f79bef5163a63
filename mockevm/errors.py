"""Exception types raised by mockevm."""

from __future__ import annotations


class MockEvmError(Exception):
    """Base class for all mockevm errors."""


class DataUnavailable(MockEvmError):
    """The candidate source file is missing, unreadable, or not UTF-8.

    Attributes:
        path: The file that could not be loaded.
    """

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"Candidate data unavailable: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
