"""Request-scoped confidence filtering of analysis records."""

from __future__ import annotations

import math
from typing import Optional

from .models import AnalysisRecord, FileReport

DEFAULT_MIN_CONFIDENCE = 0.8


def parse_min_confidence(raw: Optional[str], default: float = DEFAULT_MIN_CONFIDENCE) -> float:
    """Parse a caller-supplied threshold, falling back to *default*."""
    if raw is None:
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return default
    if math.isnan(value):
        return default
    return value


def filter_by_confidence(record: AnalysisRecord, min_confidence: float) -> AnalysisRecord:
    """Return a copy of *record* without problems below *min_confidence*.

    Files left without problems are dropped. The input record is not
    modified, and the result is meant for display only.
    """
    files = []
    for f in record.files:
        problems = tuple(p for p in f.problems if p.confidence >= min_confidence)
        if problems:
            files.append(FileReport(name=f.name, browse_url=f.browse_url, problems=problems))
    return record.with_files(tuple(files))
