"""Data models for cached lint results.

Records are immutable: a refresh builds a new ``AnalysisRecord`` rather than
touching a stored one. ``to_dict``/``from_dict`` define the JSON-safe shape
shared by the result store payload and the presentation layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Problem:
    line: int  # 0 = no specific line (whole-file failure)
    text: str
    line_text: str = ""
    confidence: float = 0.0  # 0.0-1.0, higher = more likely a true positive

    def to_dict(self) -> dict[str, Any]:
        return {
            "line": self.line,
            "text": self.text,
            "line_text": self.line_text,
            "confidence": self.confidence,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Problem:
        return cls(
            line=int(data["line"]),
            text=str(data["text"]),
            line_text=str(data.get("line_text", "")),
            confidence=float(data.get("confidence", 0.0)),
        )


@dataclass(frozen=True)
class FileReport:
    name: str
    browse_url: str
    problems: tuple[Problem, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "browse_url": self.browse_url,
            "problems": [p.to_dict() for p in self.problems],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FileReport:
        return cls(
            name=str(data["name"]),
            browse_url=str(data["browse_url"]),
            problems=tuple(Problem.from_dict(p) for p in data["problems"]),
        )


@dataclass(frozen=True)
class AnalysisRecord:
    """Aggregated lint result for one package path.

    ``files`` keeps fetch order and only holds files with at least one
    problem.
    """

    path: str
    updated_at: datetime
    line_format: str
    browse_url: str
    files: tuple[FileReport, ...] = field(default_factory=tuple)

    @property
    def problem_count(self) -> int:
        return sum(len(f.problems) for f in self.files)

    def line_url(self, file: FileReport, line: int) -> str:
        """Link to *line* of *file*, or the file itself when there is no line."""
        if line <= 0 or not self.line_format:
            return file.browse_url
        return self.line_format.format(url=file.browse_url, line=line)

    def with_files(self, files: tuple[FileReport, ...]) -> AnalysisRecord:
        return replace(self, files=files)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "updated_at": self.updated_at.isoformat(),
            "line_format": self.line_format,
            "browse_url": self.browse_url,
            "files": [f.to_dict() for f in self.files],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalysisRecord:
        """Rebuild a record; raises KeyError/TypeError/ValueError on bad input."""
        return cls(
            path=str(data["path"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
            line_format=str(data["line_format"]),
            browse_url=str(data["browse_url"]),
            files=tuple(FileReport.from_dict(f) for f in data["files"]),
        )
