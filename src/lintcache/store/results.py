"""Versioned result store.

Records are written inside an envelope that carries the serialization
format version. An entry written under a different version reads as a
cache miss and gets recomputed, so changing the record shape only needs a
``FORMAT_VERSION`` bump, never a migration.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional

from ..exceptions import CorruptionError
from ..logging_config import get_logger
from ..models import AnalysisRecord
from .kv import KeyValueStore

logger = get_logger(__name__)

# Bump when AnalysisRecord.to_dict() changes shape.
FORMAT_VERSION = 1


def read_version(raw: bytes) -> tuple[int, dict[str, Any]]:
    """Return the format version of envelope bytes and the parsed envelope.

    Only the version is checked here, so an entry written under another
    format can be recognised whatever its payload looks like.

    Raises:
        ValueError: The bytes are not an envelope with an integer version
    """
    obj = json.loads(raw)
    if not isinstance(obj, dict):
        raise ValueError("envelope is not an object")
    version = obj.get("version")
    if not isinstance(version, int) or isinstance(version, bool):
        raise ValueError("envelope is missing its version")
    return version, obj


@dataclass(frozen=True)
class StoredEnvelope:
    payload: bytes
    format_version: int

    def encode(self) -> bytes:
        return json.dumps(
            {"version": self.format_version, "data": self.payload.decode("utf-8")},
            separators=(",", ":"),
        ).encode("utf-8")

    @classmethod
    def decode(cls, raw: bytes) -> StoredEnvelope:
        """Parse envelope bytes; raises ValueError if they are not an envelope."""
        version, obj = read_version(raw)
        data = obj.get("data")
        if not isinstance(data, str):
            raise ValueError("envelope data is not a string")
        return cls(payload=data.encode("utf-8"), format_version=version)


def serialize_record(record: AnalysisRecord) -> bytes:
    return json.dumps(record.to_dict(), separators=(",", ":")).encode("utf-8")


def deserialize_record(payload: bytes) -> AnalysisRecord:
    return AnalysisRecord.from_dict(json.loads(payload))


class ResultStore:
    """Persists analysis records by package path."""

    def __init__(self, backend: KeyValueStore, format_version: int = FORMAT_VERSION):
        self.backend = backend
        self.format_version = format_version

    def put(self, key: str, record: AnalysisRecord) -> None:
        envelope = StoredEnvelope(payload=serialize_record(record), format_version=self.format_version)
        self.backend.put(key, envelope.encode())
        logger.debug("Stored %s (%d file(s))", key, len(record.files))

    def get(self, key: str) -> Optional[AnalysisRecord]:
        """Return the stored record, or None when absent or stale.

        The format version is compared before anything else is decoded, so
        an entry from another version is a miss whatever its payload holds.

        Raises:
            CorruptionError: The entry cannot be read even though its
                format version is current (or it is not an envelope at all).
        """
        raw = self.backend.get(key)
        if raw is None:
            return None

        try:
            version, _ = read_version(raw)
        except ValueError as e:
            raise CorruptionError(key, f"unreadable envelope: {e}") from e

        if version != self.format_version:
            logger.debug(
                "Ignoring %s: format version %d != %d",
                key,
                version,
                self.format_version,
            )
            return None

        try:
            envelope = StoredEnvelope.decode(raw)
            return deserialize_record(envelope.payload)
        except (ValueError, KeyError, TypeError) as e:
            raise CorruptionError(key, f"{type(e).__name__}: {e}") from e

    def prune_stale(self) -> int:
        """Delete entries written under another format version.

        Stale entries are never read again once the version moves on, and
        paths nobody requests again would otherwise stay forever. Entries
        without a readable version are kept and logged.
        """
        removed = 0
        for key in self.backend.keys():
            raw = self.backend.get(key)
            if raw is None:
                continue
            try:
                version, _ = read_version(raw)
            except ValueError as e:
                logger.warning("Skipping unreadable entry %s: %s", key, e)
                continue
            if version != self.format_version:
                if self.backend.delete(key):
                    removed += 1
        logger.info("Pruned %d stale entr%s", removed, "y" if removed == 1 else "ies")
        return removed

    def stats(self) -> dict[str, Any]:
        return {**self.backend.stats(), "format_version": self.format_version}

    def close(self) -> None:
        self.backend.close()
