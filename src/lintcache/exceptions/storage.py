"""Result store and lint engine errors."""

from .base import ErrorKind, LintCacheError


class CorruptionError(LintCacheError):
    """Raised when a stored entry with the current format cannot be decoded."""

    kind = ErrorKind.CORRUPTION

    def __init__(self, key: str, reason: str):
        super().__init__(f"Corrupt cache entry: {key}", details={"key": key, "reason": reason})
        self.key = key
        self.reason = reason


class PersistenceError(LintCacheError):
    """Raised when the key-value backend fails to read or write."""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            f"Store {operation} failed", details={"operation": operation, "reason": reason}
        )
        self.operation = operation
        self.reason = reason


class LintError(LintCacheError):
    """Raised by the linter when a file cannot be decoded or parsed.

    The aggregator records this as a problem on the file instead of
    failing the whole package.
    """

    def __init__(self, filename: str, message: str):
        super().__init__(message)
        self.filename = filename

    def __str__(self) -> str:
        return self.message
