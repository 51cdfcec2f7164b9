"""Source fetch errors: missing packages and unreachable hosts."""

from .base import ErrorKind, LintCacheError


class NotFoundError(LintCacheError):
    """Raised when a package path does not resolve to a real directory."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, path: str, reason: str = "not found"):
        super().__init__(f"Package not found: {path}", details={"path": path, "reason": reason})
        self.path = path
        self.reason = reason


class RemoteError(LintCacheError):
    """Raised when an upstream host was reached (or tried) and failed."""

    kind = ErrorKind.REMOTE

    def __init__(self, host: str, reason: str):
        super().__init__(f"Error accessing {host}", details={"host": host, "reason": reason})
        self.host = host
        self.reason = reason
