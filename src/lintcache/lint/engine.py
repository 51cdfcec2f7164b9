"""Linter: parses one Python file and runs every registered rule over it."""

from __future__ import annotations

import ast
from dataclasses import dataclass
from typing import Optional, Sequence

from ..exceptions import LintError
from ..logging_config import get_logger
from .rules import RULES, Rule

logger = get_logger(__name__)


@dataclass(frozen=True)
class LintFinding:
    line: int
    column: int
    text: str
    line_text: str
    confidence: float
    category: str
    rule: str


class LintContext:
    """Parsed file plus helpers rules use to report findings."""

    def __init__(self, filename: str, source: str, tree: ast.Module):
        self.filename = filename
        self.source = source
        self.tree = tree
        self.lines = source.splitlines()

    def line_text(self, line: int) -> str:
        if 1 <= line <= len(self.lines):
            return self.lines[line - 1]
        return ""


class Linter:
    """Runs a set of rules over Python source.

    ``lint`` either returns the findings, sorted by position, or raises
    ``LintError`` when the file cannot be decoded or parsed.
    """

    def __init__(self, rules: Optional[Sequence[Rule]] = None):
        self.rules = tuple(RULES if rules is None else rules)

    def lint(self, filename: str, data: bytes) -> list[LintFinding]:
        try:
            source = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise LintError(filename, f"{filename}: cannot decode as UTF-8: {e.reason}")

        try:
            tree = ast.parse(source, filename=filename)
        except SyntaxError as e:
            raise LintError(filename, f"{filename}:{e.lineno}:{e.offset}: {e.msg}")
        except ValueError as e:
            raise LintError(filename, f"{filename}: {e}")
        except (MemoryError, RecursionError):
            raise LintError(filename, f"{filename}: too deeply nested to parse")

        ctx = LintContext(filename, source, tree)
        findings: list[LintFinding] = []
        for rule in self.rules:
            for line, column, text in rule.check(ctx):
                findings.append(
                    LintFinding(
                        line=line,
                        column=column,
                        text=text,
                        line_text=ctx.line_text(line),
                        confidence=rule.confidence,
                        category=rule.category,
                        rule=rule.name,
                    )
                )

        findings.sort(key=lambda f: (f.line, f.column))
        logger.debug("%s: %d finding(s)", filename, len(findings))
        return findings
