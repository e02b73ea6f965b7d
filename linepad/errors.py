"""Exception types raised across linepad.

Capacity limits and cursor movement at buffer edges never raise; they are
reported as no-ops by the buffer and cursor. Only conditions the session
cannot recover from are modelled here.
"""

from typing import Optional


class LinepadError(Exception):
    """Base class for linepad errors."""


class PersistenceError(LinepadError):
    """A file could not be read or written.

    Attributes:
        filename: The path that failed
        reason: Human readable cause (usually the OS error text)
    """

    def __init__(self, filename: str, reason: str, cause: Optional[BaseException] = None):
        super().__init__(f"cannot access {filename}: {reason}")
        self.filename = filename
        self.reason = reason
        self.cause = cause


class UsageError(LinepadError):
    """Invalid command line arguments."""
