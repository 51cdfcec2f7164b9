"""Test doubles shared across lintcache tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Union

from lintcache.exceptions import NotFoundError
from lintcache.lint import LintFinding
from lintcache.source import SourceDirectory, SourceFile


class FakeFetcher:
    """Serves canned directories and records every fetch."""

    def __init__(self, directories=None, errors=None):
        self.directories: dict[str, SourceDirectory] = dict(directories or {})
        self.errors: dict[str, Exception] = dict(errors or {})
        self.calls: list[str] = []
        self.user_agent = "test"
        self.closed = False

    def fetch(self, path: str) -> SourceDirectory:
        self.calls.append(path)
        if path in self.errors:
            raise self.errors[path]
        if path not in self.directories:
            raise NotFoundError(path)
        return self.directories[path]

    def close(self) -> None:
        self.closed = True


class ScriptedLinter:
    """Returns canned findings (or raises canned errors) per file name."""

    def __init__(self, script: dict[str, Union[list[LintFinding], Exception]]):
        self.script = script
        self.calls: list[str] = []

    def lint(self, filename: str, data: bytes) -> list[LintFinding]:
        self.calls.append(filename)
        result = self.script.get(filename, [])
        if isinstance(result, Exception):
            raise result
        return list(result)


class TickingClock:
    """Deterministic clock that advances one second per call."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


def finding(line: int, text: str, confidence: float, line_text: str = "") -> LintFinding:
    return LintFinding(
        line=line,
        column=0,
        text=text,
        line_text=line_text,
        confidence=confidence,
        category="test",
        rule="test",
    )


def directory(path: str, *names: str) -> SourceDirectory:
    return SourceDirectory(
        path=path,
        line_format="{url}#L{line}",
        browse_url=f"https://example.com/{path}",
        files=tuple(
            SourceFile(name=n, data=b"x = 1\n", browse_url=f"https://example.com/{path}/{n}")
            for n in names
        ),
    )


