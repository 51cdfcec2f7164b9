"""
lintcache - cached lint results for hosted Python packages

Fetches the Python files of a package directory on GitHub, lints them,
stores the aggregated result keyed by package path and serves it until
someone asks for a refresh.
"""

__version__ = "0.1.0"

from .filter import DEFAULT_MIN_CONFIDENCE, filter_by_confidence, parse_min_confidence
from .models import AnalysisRecord, FileReport, Problem
from .service import LintService, build_service

__all__ = [
    "LintService",  # Main entry point
    "build_service",
    "AnalysisRecord",
    "FileReport",
    "Problem",
    "filter_by_confidence",
    "parse_min_confidence",
    "DEFAULT_MIN_CONFIDENCE",
]
