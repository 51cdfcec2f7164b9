"""Key-value backends for the result store.

Backends hold opaque bytes under string keys and only offer single-key
operations; last writer wins.
"""

from __future__ import annotations

import sqlite3
import threading
from functools import wraps
from pathlib import Path
from typing import Any, Callable, Iterator, Optional, Protocol, TypeVar

from diskcache import Cache, Timeout

from ..exceptions import PersistenceError
from ..logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class KeyValueStore(Protocol):
    def put(self, key: str, value: bytes) -> None: ...

    def get(self, key: str) -> Optional[bytes]: ...

    def delete(self, key: str) -> bool: ...

    def keys(self) -> Iterator[str]: ...

    def stats(self) -> dict[str, Any]: ...

    def close(self) -> None: ...


def _backend_errors(operation: str) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Re-raise backend failures of *operation* as PersistenceError."""

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return func(*args, **kwargs)
            except (OSError, sqlite3.Error, Timeout) as e:
                raise PersistenceError(operation, f"{type(e).__name__}: {e}") from e

        return wrapper

    return decorator


class DiskStore:
    """SQLite-backed store on top of ``diskcache.Cache``.

    Safe to share between threads and processes; each call is atomic.
    """

    def __init__(self, directory: str | Path):
        self.directory = str(directory)
        self._cache = Cache(self.directory)
        logger.debug("Disk store opened at %s", self.directory)

    @_backend_errors("put")
    def put(self, key: str, value: bytes) -> None:
        self._cache.set(key, value)

    @_backend_errors("get")
    def get(self, key: str) -> Optional[bytes]:
        return self._cache.get(key)

    @_backend_errors("delete")
    def delete(self, key: str) -> bool:
        return self._cache.delete(key)

    @_backend_errors("keys")
    def keys(self) -> Iterator[str]:
        # Materialise so iteration is not interleaved with deletes.
        return iter(list(self._cache.iterkeys()))

    @_backend_errors("stats")
    def stats(self) -> dict[str, Any]:
        return {
            "backend": "disk",
            "directory": self.directory,
            "size": len(self._cache),
            "volume": self._cache.volume(),
        }

    def close(self) -> None:
        self._cache.close()


class MemoryStore:
    """In-process store; contents are lost when the process exits."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data: dict[str, bytes] = {}

    def put(self, key: str, value: bytes) -> None:
        with self._lock:
            self._data[key] = bytes(value)

    def get(self, key: str) -> Optional[bytes]:
        with self._lock:
            return self._data.get(key)

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._data.pop(key, None) is not None

    def keys(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._data))

    def stats(self) -> dict[str, Any]:
        with self._lock:
            return {
                "backend": "memory",
                "size": len(self._data),
                "volume": sum(len(v) for v in self._data.values()),
            }

    def close(self) -> None:
        pass
