"""Fetched package source."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SourceFile:
    name: str
    data: bytes
    browse_url: str


@dataclass(frozen=True)
class SourceDirectory:
    path: str
    line_format: str  # e.g. "{url}#L{line}"
    browse_url: str
    files: tuple[SourceFile, ...] = field(default_factory=tuple)
