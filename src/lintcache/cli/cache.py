"""Cache management commands."""

from pathlib import Path
from typing import Optional

import typer

from ..exceptions import LintCacheError
from ..store import DiskStore, ResultStore
from . import app
from ._common import console, fail, resolve_config


@app.command()
def cache_info(
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Config file"),
):
    """Show result store information and statistics."""
    settings = resolve_config(config=config, quiet=True)
    results = ResultStore(DiskStore(settings.cache_dir))
    try:
        stats = results.stats()
    except LintCacheError as exc:
        raise fail(exc)
    finally:
        results.close()

    console.print("[bold cyan]lintcache store[/bold cyan]")
    console.print()
    console.print(f"Directory: [blue]{stats.get('directory', 'N/A')}[/blue]")
    console.print(f"Entries: [yellow]{stats.get('size', 0)}[/yellow]")
    console.print(f"Size: [yellow]{stats.get('volume', 0)} bytes[/yellow]")
    console.print(f"Format version: [yellow]{stats['format_version']}[/yellow]")


@app.command()
def cache_prune(
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Config file"),
):
    """Delete entries written under an older format version."""
    settings = resolve_config(config=config, quiet=True)
    results = ResultStore(DiskStore(settings.cache_dir))
    try:
        removed = results.prune_stale()
    except LintCacheError as exc:
        raise fail(exc)
    finally:
        results.close()
    console.print(f"[green]Removed {removed} stale entr{'y' if removed == 1 else 'ies'}[/green]")
