"""Fetch a package directory from GitHub through the contents API."""

from __future__ import annotations

from typing import Callable, Optional

import httpx

from ..exceptions import NotFoundError, RemoteError
from ..logging_config import get_logger
from .models import SourceDirectory, SourceFile
from .paths import split_path

logger = get_logger(__name__)

API_BASE = "https://api.github.com"
LINE_FORMAT = "{url}#L{line}"


class GitHubFetcher:
    """Lists a repository directory and downloads the files it accepts.

    ``user_agent`` may be replaced after construction; the one-time process
    setup does so once the serving host is known.
    """

    host = "github.com"

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        token: Optional[str] = None,
        timeout: float = 30.0,
        user_agent: str = "lintcache",
        include: Optional[Callable[[str], bool]] = None,
    ):
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._token = token
        self.user_agent = user_agent
        self.include = include or (lambda name: True)

    def close(self) -> None:
        self._client.close()

    def _headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/vnd.github+json",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _get(self, url: str, path: Optional[str] = None) -> httpx.Response:
        """GET *url*; a 404 means the package is missing only when *path* is given."""
        try:
            response = self._client.get(url, headers=self._headers())
        except httpx.TransportError as e:
            raise RemoteError(self.host, f"{type(e).__name__}: {e}") from e
        if response.status_code == 404 and path is not None:
            raise NotFoundError(path, "no such repository or directory")
        if response.status_code >= 400:
            raise RemoteError(self.host, f"HTTP {response.status_code} for {url}")
        return response

    def fetch(self, path: str) -> SourceDirectory:
        """Fetch the accepted files of the directory named by *path*.

        Raises:
            NotFoundError: The repository or directory does not exist
            RemoteError: GitHub could not be reached or returned an error
        """
        elements = split_path(path)
        if len(elements) < 3 or elements[0] != self.host:
            raise NotFoundError(path, "not a GitHub path")
        owner, repo, subdir = elements[1], elements[2], "/".join(elements[3:])

        listing_url = f"{API_BASE}/repos/{owner}/{repo}/contents/{subdir}".rstrip("/")
        try:
            entries = self._get(listing_url, path).json()
        except ValueError as e:
            raise RemoteError(self.host, f"invalid JSON from contents API: {e}") from e
        if not isinstance(entries, list):
            raise NotFoundError(path, "not a directory")

        files = []
        for entry in entries:
            if not isinstance(entry, dict):
                raise RemoteError(self.host, "unexpected listing entry")
            name = entry.get("name", "")
            if entry.get("type") != "file" or not self.include(name):
                continue
            download_url = entry.get("download_url")
            if not download_url:
                continue
            response = self._get(download_url)
            files.append(
                SourceFile(name=name, data=response.content, browse_url=entry.get("html_url", ""))
            )

        browse_url = f"https://github.com/{owner}/{repo}/tree/HEAD/{subdir}".rstrip("/")
        logger.info("Fetched %d file(s) from %s", len(files), path)
        return SourceDirectory(
            path=path,
            line_format=LINE_FORMAT,
            browse_url=browse_url,
            files=tuple(files),
        )
