"""Base exception and error kinds for lintcache."""

from enum import Enum
from typing import Dict, Optional


class ErrorKind(Enum):
    """Discriminant the boundary layers use to map failures to responses."""

    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    REMOTE = "remote"
    CORRUPTION = "corruption"
    INTERNAL = "internal"


class LintCacheError(Exception):
    """Base exception for all lintcache errors."""

    kind = ErrorKind.INTERNAL

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


def classify(exc: BaseException) -> ErrorKind:
    """Return the error kind for *exc*; anything unrecognised is internal."""
    if isinstance(exc, LintCacheError):
        return exc.kind
    return ErrorKind.INTERNAL
