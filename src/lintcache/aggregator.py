"""Turn linter output for one file into a serializable ``FileReport``."""

from __future__ import annotations

from typing import Optional

from .exceptions import LintError
from .lint import Linter
from .models import FileReport, Problem


def lint_file(linter: Linter, name: str, data: bytes, browse_url: str) -> Optional[FileReport]:
    """Lint one file.

    Returns ``None`` for a clean file. A file the linter cannot parse gets a
    single ``line=0`` problem carrying the failure message; the error is
    recorded, not raised.
    """
    try:
        findings = linter.lint(name, data)
    except LintError as e:
        return FileReport(name=name, browse_url=browse_url, problems=(Problem(line=0, text=str(e)),))

    if not findings:
        return None

    problems = tuple(
        Problem(
            line=f.line,
            text=f.text,
            line_text=f.line_text,
            confidence=f.confidence,
        )
        for f in findings
    )
    return FileReport(name=name, browse_url=browse_url, problems=problems)
