"""``lintcache check``: lint one package through the cache."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..filter import filter_by_confidence
from ..server.serializers import record_to_json, timeago
from ..service import build_service
from ..store import MemoryStore
from . import app
from ._common import console, fail, resolve_config


@app.command()
def check(
    path: str = typer.Argument(..., help="Package path, e.g. github.com/owner/repo/pkg"),
    refresh: bool = typer.Option(False, "--refresh", help="Ignore the cached result"),
    min_confidence: Optional[float] = typer.Option(
        None, "--min-confidence", help="Hide problems below this confidence", min=0.0
    ),
    json_output: bool = typer.Option(False, "--json", help="Output in machine-readable JSON format"),
    memory: bool = typer.Option(False, "--memory", help="Do not persist results to disk"),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Config file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging"),
):
    """
    Show lint problems for a package, linting it on a cache miss.

    [bold cyan]Examples:[/bold cyan]

      lintcache check github.com/psf/requests/src/requests

      lintcache check github.com/owner/repo --refresh --min-confidence 0.2
    """
    settings = resolve_config(config=config, verbose=verbose, quiet=True)
    service, fetcher = build_service(settings, backend=MemoryStore() if memory else None)
    try:
        record = service.resolve(path, refresh=refresh)
    except Exception as exc:
        raise fail(exc)
    finally:
        service.close()
        fetcher.close()

    threshold = settings.min_confidence if min_confidence is None else min_confidence
    filtered = filter_by_confidence(record, threshold)

    if json_output:
        console.print_json(json.dumps(record_to_json(filtered)))
        return

    console.print(f"[bold]{filtered.path}[/bold] [dim]updated {timeago(filtered.updated_at)}[/dim]")
    if not filtered.files:
        console.print(f"[green]No problems at confidence >= {threshold}[/green]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("File")
    table.add_column("Line", justify="right")
    table.add_column("Confidence", justify="right")
    table.add_column("Problem")
    for report in filtered.files:
        for problem in report.problems:
            table.add_row(
                report.name,
                str(problem.line) if problem.line else "-",
                f"{problem.confidence:.2f}",
                problem.text,
            )
    console.print(table)
    console.print(f"{filtered.problem_count} problem(s) in {len(filtered.files)} file(s)")
