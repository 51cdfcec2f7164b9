"""Python lint engine used to analyse fetched source files."""

from .engine import LintContext, LintFinding, Linter
from .rules import RULES, Rule

__all__ = ["Linter", "LintFinding", "LintContext", "Rule", "RULES"]
