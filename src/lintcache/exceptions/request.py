"""Request and configuration errors."""

from .base import ErrorKind, LintCacheError


class BadRequestError(LintCacheError):
    """Raised when a package path fails the validity check."""

    kind = ErrorKind.BAD_REQUEST

    def __init__(self, path: str, reason: str = "invalid package path"):
        super().__init__(f"Bad request: {path!r}", details={"path": path, "reason": reason})
        self.path = path
        self.reason = reason


class ConfigurationError(LintCacheError):
    """Raised when configuration values or files are invalid."""

    pass
