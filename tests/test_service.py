"""Tests for cache orchestration in LintService."""

import threading

import pytest

from helpers import FakeFetcher, ScriptedLinter, directory, finding
from lintcache.exceptions import BadRequestError, LintError, NotFoundError
from lintcache.filter import DEFAULT_MIN_CONFIDENCE, filter_by_confidence
from lintcache.source import is_valid_path
from lintcache.store import FORMAT_VERSION, MemoryStore, ResultStore


class TestResolve:
    def test_second_resolve_is_served_from_cache(self, make_service, example_package):
        fetcher, linter = example_package
        service = make_service(fetcher, linter)

        first = service.resolve("example.com/a")
        second = service.resolve("example.com/a")

        assert second == first
        assert second.updated_at == first.updated_at
        assert fetcher.calls == ["example.com/a"]

    def test_refresh_always_recomputes(self, make_service, example_package):
        fetcher, linter = example_package
        service = make_service(fetcher, linter)

        first = service.resolve("example.com/a")
        refreshed = service.resolve("example.com/a", refresh=True)

        assert fetcher.calls == ["example.com/a", "example.com/a"]
        assert refreshed.updated_at > first.updated_at
        assert refreshed.files == first.files
        assert service.resolve("example.com/a") == refreshed

    def test_refresh_skips_store_read(self, make_service, example_package, results):
        fetcher, linter = example_package
        service = make_service(fetcher, linter)
        results.backend.put("example.com/a", b"corrupt")

        record = service.resolve("example.com/a", refresh=True)
        assert record.path == "example.com/a"

    def test_invalid_path_is_bad_request(self, make_service, example_package):
        fetcher, linter = example_package
        service = make_service(fetcher, linter, validate_path=is_valid_path)
        with pytest.raises(BadRequestError):
            service.resolve("github.com/../etc")
        assert fetcher.calls == []

    def test_not_found_writes_nothing(self, make_service, results):
        service = make_service(FakeFetcher(), ScriptedLinter({}))
        with pytest.raises(NotFoundError):
            service.resolve("bogus/pkg")
        assert list(results.backend.keys()) == []

    def test_stale_format_is_recomputed(self, make_service, example_package, results):
        fetcher, linter = example_package
        service = make_service(fetcher, linter)
        old = service.resolve("example.com/a")
        ResultStore(results.backend, format_version=FORMAT_VERSION + 1).put("example.com/a", old)

        fresh = service.resolve("example.com/a")

        assert len(fetcher.calls) == 2
        assert fresh.updated_at > old.updated_at
        assert results.get("example.com/a") == fresh

    def test_example_package_with_thresholds(self, make_service, example_package):
        fetcher, linter = example_package
        record = make_service(fetcher, linter).resolve("example.com/a")

        default = filter_by_confidence(record, DEFAULT_MIN_CONFIDENCE)
        assert len(default.files) == 1
        assert [p.confidence for p in default.files[0].problems] == [0.9]

        low = filter_by_confidence(record, 0.3)
        assert len(low.files) == 1
        assert len(low.files[0].problems) == 2

    def test_parse_failure_file(self, make_service):
        fetcher = FakeFetcher({"p": directory("p", "bad.py")})
        linter = ScriptedLinter({"bad.py": LintError("bad.py", "bad.py:3:1: unexpected indent")})
        record = make_service(fetcher, linter).resolve("p")
        (report,) = record.files
        assert [(p.line, p.text) for p in report.problems] == [(0, "bad.py:3:1: unexpected indent")]

    def test_concurrent_misses_each_recompute(self, make_service):
        barrier = threading.Barrier(4)

        class SlowFetcher(FakeFetcher):
            def fetch(self, path):
                barrier.wait(timeout=5)
                return super().fetch(path)

        fetcher = SlowFetcher({"p": directory("p", "a.py")})
        service = make_service(fetcher, ScriptedLinter({"a.py": [finding(1, "x", 1.0)]}))
        records = []
        lock = threading.Lock()

        def worker():
            record = service.resolve("p")
            with lock:
                records.append(record)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(fetcher.calls) == 4
        assert len(records) == 4
        assert service.results.get("p") in records


class TestBuildService:
    def test_wires_collaborators(self, tmp_path):
        from lintcache.config import ServiceConfig
        from lintcache.service import build_service

        config = ServiceConfig(cache_dir=str(tmp_path / "cache"), app_id="wiring")
        service, fetcher = build_service(config, backend=MemoryStore())
        try:
            assert fetcher.user_agent == "wiring"
            assert fetcher.include("a.py")
            assert not fetcher.include("a.md")
            assert service.analyzer.source_suffix == ".py"
        finally:
            service.close()
            fetcher.close()
