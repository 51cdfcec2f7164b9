"""Package analyzer: fetch, lint every source file, persist the record."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from .aggregator import lint_file
from .lint import Linter
from .logging_config import get_logger
from .models import AnalysisRecord
from .source import SourceFetcher
from .store import ResultStore

logger = get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PackageAnalyzer:
    """Builds a fresh ``AnalysisRecord`` for a package path.

    Fetch errors propagate untouched and nothing is stored for them. The
    record is stored before it is returned; if storing fails the caller
    gets the error, not the record.
    """

    def __init__(
        self,
        fetcher: SourceFetcher,
        linter: Linter,
        results: ResultStore,
        source_suffix: str = ".py",
        clock: Callable[[], datetime] = utc_now,
    ):
        self.fetcher = fetcher
        self.linter = linter
        self.results = results
        self.source_suffix = source_suffix
        self.clock = clock

    def run(self, path: str) -> AnalysisRecord:
        directory = self.fetcher.fetch(path)
        updated_at = self.clock()

        files = []
        linted = 0
        for source_file in directory.files:
            if not source_file.name.endswith(self.source_suffix):
                continue
            linted += 1
            report = lint_file(self.linter, source_file.name, source_file.data, source_file.browse_url)
            if report is not None:
                files.append(report)

        record = AnalysisRecord(
            path=path,
            updated_at=updated_at,
            line_format=directory.line_format,
            browse_url=directory.browse_url,
            files=tuple(files),
        )
        self.results.put(path, record)
        logger.info(
            "Linted %s: %d file(s), %d with problems, %d problem(s)",
            path,
            linted,
            len(record.files),
            record.problem_count,
        )
        return record
