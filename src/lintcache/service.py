"""Cache orchestration: serve stored results, recompute on miss or refresh."""

from __future__ import annotations

from typing import Callable, Optional

import httpx

from .analyzer import PackageAnalyzer
from .config import ServiceConfig
from .exceptions import BadRequestError
from .lint import Linter
from .logging_config import get_logger
from .models import AnalysisRecord
from .source import GitHubFetcher, is_valid_path
from .store import DiskStore, KeyValueStore, ResultStore

logger = get_logger(__name__)


class LintService:
    """Entry point for the presentation layers.

    There is no per-path locking: concurrent misses for the same path each
    run the analyzer and the last store write wins. Records are derived
    data, so a lost update only costs a recomputation.
    """

    def __init__(
        self,
        analyzer: PackageAnalyzer,
        results: ResultStore,
        validate_path: Callable[[str], bool] = is_valid_path,
    ):
        self.analyzer = analyzer
        self.results = results
        self.validate_path = validate_path

    def resolve(self, path: str, refresh: bool = False) -> AnalysisRecord:
        """Return the record for *path*, linting it when needed.

        Raises:
            BadRequestError: *path* is not a valid package path
            NotFoundError: the package does not exist upstream
            RemoteError: the upstream host failed
            CorruptionError: the stored entry cannot be decoded
            PersistenceError: the store failed
        """
        if not self.validate_path(path):
            raise BadRequestError(path)

        if not refresh:
            record = self.results.get(path)
            if record is not None:
                logger.debug("Cache hit: %s", path)
                return record
            logger.debug("Cache miss: %s", path)
        else:
            logger.info("Refreshing %s", path)

        return self.analyzer.run(path)

    def close(self) -> None:
        self.results.close()


def build_service(
    config: ServiceConfig,
    backend: Optional[KeyValueStore] = None,
    client: Optional[httpx.Client] = None,
) -> tuple[LintService, GitHubFetcher]:
    """Wire the default collaborators described by *config*.

    Returns the service and its fetcher, whose user agent the one-time
    process setup fills in.
    """
    fetcher = GitHubFetcher(
        client=client,
        token=config.github_token,
        timeout=config.fetch_timeout_seconds,
        user_agent=config.app_id,
        include=lambda name: name.endswith(config.source_suffix),
    )
    results = ResultStore(backend if backend is not None else DiskStore(config.cache_dir))
    analyzer = PackageAnalyzer(
        fetcher=fetcher,
        linter=Linter(),
        results=results,
        source_suffix=config.source_suffix,
    )
    return LintService(analyzer, results), fetcher
