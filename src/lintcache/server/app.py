"""Starlette ASGI application serving cached lint results."""

from __future__ import annotations

from functools import wraps
from typing import Awaitable, Callable, Optional

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, RedirectResponse, Response
from starlette.routing import Route

from ..bootstrap import RunOnce, configure_process
from ..config import ServiceConfig
from ..exceptions import ErrorKind, RemoteError, classify
from ..filter import filter_by_confidence, parse_min_confidence
from ..logging_config import get_logger
from ..service import LintService
from ..source import SourceFetcher
from .serializers import record_to_json

logger = get_logger(__name__)

Endpoint = Callable[[Request], Awaitable[Response]]

_STATUS_TEXT = {
    400: "Bad Request",
    404: "Not Found",
    500: "Internal Server Error",
}


def error_response(exc: Exception) -> Response:
    """Map an exception to the response the client sees.

    Internal details are logged, never returned.
    """
    kind = classify(exc)
    if kind is ErrorKind.BAD_REQUEST:
        return PlainTextResponse(_STATUS_TEXT[400], status_code=400)
    if kind is ErrorKind.NOT_FOUND:
        return PlainTextResponse(_STATUS_TEXT[404], status_code=404)
    if kind is ErrorKind.REMOTE and isinstance(exc, RemoteError):
        logger.info("Remote error %s: %s", exc.host, exc)
        return PlainTextResponse(f"Error accessing {exc.host}.", status_code=500)
    logger.error("Internal error %s", exc, exc_info=exc)
    return PlainTextResponse(_STATUS_TEXT[500], status_code=500)


def create_app(
    service: LintService,
    config: ServiceConfig,
    fetcher: Optional[SourceFetcher] = None,
) -> Starlette:
    """Build the Starlette application wired to *service*.

    Args:
        service: The lint service resolving package paths
        config: Service configuration (contact address, default threshold)
        fetcher: Fetcher whose user agent the first request configures
    """
    setup_once = RunOnce()

    def handler(func: Endpoint) -> Endpoint:
        @wraps(func)
        async def wrapper(request: Request) -> Response:
            try:
                if fetcher is not None:
                    setup_once(configure_process, config, request.url.netloc, fetcher)
                return await func(request)
            except Exception as exc:  # mapped to a response, details logged
                return error_response(exc)

        return wrapper

    @handler
    async def home(request: Request) -> Response:
        return JSONResponse(
            {
                "service": config.app_id,
                "contact": config.contact_email,
                "usage": "GET /github.com/<owner>/<repo>[/<dir>]?minConfidence=0.8",
            }
        )

    @handler
    async def bot(request: Request) -> Response:
        return PlainTextResponse(
            f"Contact {config.contact_email} for help with the {config.app_id} bot."
        )

    @handler
    async def refresh(request: Request) -> Response:
        if request.method != "POST":
            return PlainTextResponse("Method Not Allowed", status_code=405)
        # "importPath" is the field name older clients post.
        params = request.query_params
        path = params.get("importPath") or params.get("path", "")
        record = await run_in_threadpool(service.resolve, path, True)
        return RedirectResponse(f"/{record.path}", status_code=301)

    @handler
    async def package(request: Request) -> Response:
        path = request.path_params["path"]
        record = await run_in_threadpool(service.resolve, path, False)
        min_confidence = parse_min_confidence(
            request.query_params.get("minConfidence"), default=config.min_confidence
        )
        filtered = filter_by_confidence(record, min_confidence)
        return JSONResponse(record_to_json(filtered))

    routes = [
        Route("/", home, methods=["GET", "HEAD"]),
        Route("/-/bot", bot, methods=["GET", "HEAD"]),
        # All methods, so a GET is refused here instead of matching as a package path.
        Route("/-/refresh", refresh, methods=["GET", "HEAD", "POST"]),
        Route("/{path:path}", package, methods=["GET", "HEAD"]),
    ]
    return Starlette(routes=routes)
