"""Build JSON response bodies from analysis records."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Optional

from ..models import AnalysisRecord


def timeago(t: datetime, now: Optional[datetime] = None) -> str:
    """Describe how long ago *t* was, e.g. ``"3 minutes ago"``."""
    if now is None:
        now = datetime.now(t.tzinfo)
    d = now - t
    if d < timedelta(seconds=1):
        return "just now"
    if d < timedelta(seconds=2):
        return "one second ago"
    if d < timedelta(minutes=1):
        return f"{int(d.total_seconds())} seconds ago"
    if d < timedelta(minutes=2):
        return "one minute ago"
    if d < timedelta(hours=1):
        return f"{int(d.total_seconds() // 60)} minutes ago"
    if d < timedelta(hours=2):
        return "one hour ago"
    if d < timedelta(hours=48):
        return f"{int(d.total_seconds() // 3600)} hours ago"
    return f"{d.days} days ago"


def record_to_json(record: AnalysisRecord, now: Optional[datetime] = None) -> dict[str, Any]:
    """Serialize *record* for ``GET /{path}``, adding links and the age."""
    data = record.to_dict()
    data["updated_ago"] = timeago(record.updated_at, now)
    data["problem_count"] = record.problem_count
    for file_data, report in zip(data["files"], record.files):
        for problem_data, problem in zip(file_data["problems"], report.problems):
            problem_data["url"] = record.line_url(report, problem.line)
    return data
