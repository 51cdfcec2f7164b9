"""HTTP server for lintcache."""

from __future__ import annotations

from .app import create_app, error_response
from .serializers import record_to_json, timeago

__all__ = ["create_app", "error_response", "record_to_json", "timeago"]
