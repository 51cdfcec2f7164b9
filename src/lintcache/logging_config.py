"""Logging setup for lintcache: a rich handler on stderr plus module loggers."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "lintcache"

# Libraries that log every request at INFO.
_CHATTY_LOGGERS = ("httpx", "httpcore")


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Route lintcache logs to stderr through rich.

    ``verbose`` turns on DEBUG (cache hits and misses, per-file counts) and
    lets HTTP client request logs through; ``quiet`` keeps only errors.
    Calling it again replaces the previous handler.
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        markup=False,
        show_path=verbose,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    logger = logging.getLogger(ROOT_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the ``lintcache`` logger, or a child of it for *name*."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
