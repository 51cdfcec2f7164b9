"""Shared CLI helpers."""

from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import ServiceConfig, load_config
from ..exceptions import ConfigurationError, ErrorKind, RemoteError, classify
from ..logging_config import setup_logging

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
    **overrides: Any,
) -> ServiceConfig:
    """Configure logging and build settings from CLI options."""
    setup_logging(verbose=verbose, quiet=quiet and not verbose)
    try:
        return load_config(config_file=config, **overrides)
    except ConfigurationError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)


def fail(exc: Exception) -> typer.Exit:
    """Print *exc* the way the HTTP layer would describe it and return the exit."""
    kind = classify(exc)
    if kind is ErrorKind.BAD_REQUEST:
        console.print(f"[red]Invalid package path:[/red] {escape(getattr(exc, 'path', ''))}")
        return typer.Exit(2)
    if kind is ErrorKind.NOT_FOUND:
        console.print(f"[red]Package not found:[/red] {escape(getattr(exc, 'path', ''))}")
    elif isinstance(exc, RemoteError):
        console.print(f"[red]Error accessing {exc.host}.[/red] {escape(exc.reason)}")
    else:
        console.print(f"[red]Internal error:[/red] {escape(str(exc))}")
    return typer.Exit(1)
