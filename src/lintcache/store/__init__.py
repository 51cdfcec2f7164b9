"""Persistence for analysis records."""

from .kv import DiskStore, KeyValueStore, MemoryStore
from .results import FORMAT_VERSION, ResultStore, StoredEnvelope, read_version

__all__ = [
    "DiskStore",
    "FORMAT_VERSION",
    "KeyValueStore",
    "MemoryStore",
    "ResultStore",
    "StoredEnvelope",
    "read_version",
]
