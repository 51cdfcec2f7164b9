"""Source fetching: path validation and hosted-repository fetchers."""

from typing import Protocol

from .github import GitHubFetcher
from .models import SourceDirectory, SourceFile
from .paths import SUPPORTED_HOSTS, is_valid_path


class SourceFetcher(Protocol):
    """Fetchers resolve a package path to its files or raise NotFound/Remote errors."""

    user_agent: str

    def fetch(self, path: str) -> SourceDirectory: ...


__all__ = [
    "GitHubFetcher",
    "SourceDirectory",
    "SourceFetcher",
    "SourceFile",
    "SUPPORTED_HOSTS",
    "is_valid_path",
]
