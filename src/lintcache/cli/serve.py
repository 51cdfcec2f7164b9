"""``lintcache serve``: HTTP server for cached lint results."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import console, resolve_config


@app.command()
def serve(
    port: Optional[int] = typer.Option(None, help="Port to listen on"),
    host: Optional[str] = typer.Option(None, help="Host to bind to"),
    memory: bool = typer.Option(False, "--memory", help="Do not persist results to disk"),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Config file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging"),
) -> None:
    """Serve lint results over HTTP."""
    import uvicorn

    from ..server.app import create_app
    from ..service import build_service
    from ..store import MemoryStore

    settings = resolve_config(config=config, verbose=verbose, host=host, port=port)
    service, fetcher = build_service(settings, backend=MemoryStore() if memory else None)
    asgi_app = create_app(service, settings, fetcher=fetcher)

    url = f"http://{settings.host}:{settings.port}"
    console.print(f"[bold]lintcache[/bold] → [link={url}]{url}[/link]")
    console.print("[dim]Press Ctrl+C to stop[/dim]")

    try:
        uvicorn.run(
            asgi_app,
            host=settings.host,
            port=settings.port,
            log_level="info" if verbose else "warning",
        )
    except KeyboardInterrupt:
        pass
    finally:
        service.close()
        fetcher.close()
        console.print("\n[dim]Stopped.[/dim]")
