"""CLI entry point; importing the command modules registers them."""

import typer

app = typer.Typer(
    name="lintcache",
    help="lintcache - cached lint results for hosted Python packages",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .cache import cache_info as _cache_info, cache_prune as _cache_prune  # noqa: F401, E402
from .check import check as _check  # noqa: F401, E402
from .serve import serve as _serve  # noqa: F401, E402


def main() -> None:
    app()
