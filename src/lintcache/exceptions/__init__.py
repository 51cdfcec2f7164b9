"""Exception hierarchy for lintcache."""

from .base import ErrorKind, LintCacheError, classify
from .fetch import NotFoundError, RemoteError
from .request import BadRequestError, ConfigurationError
from .storage import CorruptionError, LintError, PersistenceError

__all__ = [
    "ErrorKind",
    "LintCacheError",
    "classify",
    "BadRequestError",
    "ConfigurationError",
    "NotFoundError",
    "RemoteError",
    "CorruptionError",
    "PersistenceError",
    "LintError",
]
