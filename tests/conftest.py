"""Shared test fixtures for lintcache tests."""

from __future__ import annotations

import os

import pytest

from helpers import FakeFetcher, ScriptedLinter, TickingClock, directory, finding
from lintcache.analyzer import PackageAnalyzer
from lintcache.service import LintService
from lintcache.store import MemoryStore, ResultStore


@pytest.fixture
def results():
    """Result store over an in-memory backend."""
    return ResultStore(MemoryStore())


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def example_package():
    """``example.com/a``: one file with findings at 0.9 and 0.5, one clean file."""
    fetcher = FakeFetcher({"example.com/a": directory("example.com/a", "a.py", "clean.py")})
    linter = ScriptedLinter(
        {
            "a.py": [
                finding(3, "public function f should have a docstring", 0.9, "def f():"),
                finding(7, "use isinstance() rather than comparing types", 0.5),
            ],
            "clean.py": [],
        }
    )
    return fetcher, linter


@pytest.fixture
def make_service(results, clock):
    """Build a LintService around the given fetcher/linter (all paths valid)."""

    def _make(fetcher, linter, validate_path=lambda path: True):
        analyzer = PackageAnalyzer(fetcher, linter, results, source_suffix=".py", clock=clock)
        return LintService(analyzer, results, validate_path=validate_path)

    return _make


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Run with an empty home, cwd at *tmp_path* and no LINTCACHE_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("LINTCACHE_"):
            monkeypatch.delenv(name)
    return tmp_path
