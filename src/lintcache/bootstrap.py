"""One-time process setup."""

from __future__ import annotations

import threading
from typing import Any, Callable

from .config import ServiceConfig
from .logging_config import get_logger
from .source import SourceFetcher

logger = get_logger(__name__)


class RunOnce:
    """Runs a callable exactly once, however many threads race to call it.

    Later callers block until the first call has finished. If the first call
    raises, the flag stays unset and the next caller tries again.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def __call__(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> bool:
        """Run *func* if nobody has yet; return True if this call ran it."""
        if self._done:
            return False
        with self._lock:
            if self._done:
                return False
            func(*args, **kwargs)
            self._done = True
            return True


def configure_process(config: ServiceConfig, host: str, fetcher: SourceFetcher) -> None:
    """Announce the contact address and set the fetch user agent."""
    logger.info("Contact email: %s", config.contact_email)
    fetcher.user_agent = f"{config.app_id} (+http://{host}/-/bot)"
