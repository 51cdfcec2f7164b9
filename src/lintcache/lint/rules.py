"""Rule registry: declarative lint rule definitions.

Each rule yields ``(line, column, text)`` tuples for one parsed file. The
confidence is fixed per rule; style rules that are often deliberate
carry a lower confidence so the default threshold hides them.
"""

from __future__ import annotations

import ast
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator

if TYPE_CHECKING:
    from .engine import LintContext

Hit = tuple[int, int, str]

_SNAKE_CASE = re.compile(r"^_*[a-z0-9]+(_[a-z0-9]+)*_*$")
_CAP_WORDS = re.compile(r"^_*[A-Z][A-Za-z0-9]*$")

# Framework hooks that must keep their camelCase names.
_CAMEL_CASE_HOOKS = {
    "setUp",
    "tearDown",
    "setUpClass",
    "tearDownClass",
    "setUpModule",
    "tearDownModule",
    "asyncSetUp",
    "asyncTearDown",
}

_FUNCTION_NODES = (ast.FunctionDef, ast.AsyncFunctionDef)


@dataclass(frozen=True)
class Rule:
    name: str
    category: str
    confidence: float
    check: Callable[[LintContext], Iterator[Hit]]


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def check_module_docstring(ctx: LintContext) -> Iterator[Hit]:
    if ctx.tree.body and ast.get_docstring(ctx.tree) is None:
        yield 1, 0, "module should have a docstring"


def check_public_docstrings(ctx: LintContext) -> Iterator[Hit]:
    for node in ctx.tree.body:
        if isinstance(node, _FUNCTION_NODES) and _is_public(node.name):
            if ast.get_docstring(node) is None:
                yield node.lineno, node.col_offset, (
                    f"public function {node.name} should have a docstring"
                )
        elif isinstance(node, ast.ClassDef) and _is_public(node.name):
            if ast.get_docstring(node) is None:
                yield node.lineno, node.col_offset, (
                    f"public class {node.name} should have a docstring"
                )
            for item in node.body:
                if (
                    isinstance(item, _FUNCTION_NODES)
                    and _is_public(item.name)
                    and ast.get_docstring(item) is None
                ):
                    yield item.lineno, item.col_offset, (
                        f"public method {node.name}.{item.name} should have a docstring"
                    )


def check_function_names(ctx: LintContext) -> Iterator[Hit]:
    for node in ast.walk(ctx.tree):
        if not isinstance(node, _FUNCTION_NODES):
            continue
        name = node.name
        if name in _CAMEL_CASE_HOOKS or name.startswith(("visit_", "leave_")):
            continue
        if not _SNAKE_CASE.match(name):
            yield node.lineno, node.col_offset, f"function name {name} should be snake_case"


def check_class_names(ctx: LintContext) -> Iterator[Hit]:
    for node in ast.walk(ctx.tree):
        if isinstance(node, ast.ClassDef) and not _CAP_WORDS.match(node.name):
            yield node.lineno, node.col_offset, f"class name {node.name} should be CapWords"


def _is_none(node: ast.expr) -> bool:
    return isinstance(node, ast.Constant) and node.value is None


def _is_type_call(node: ast.expr) -> bool:
    return (
        isinstance(node, ast.Call)
        and isinstance(node.func, ast.Name)
        and node.func.id == "type"
        and len(node.args) == 1
    )


def _comparisons(ctx: LintContext) -> Iterator[tuple[ast.Compare, ast.cmpop, ast.expr, ast.expr]]:
    for node in ast.walk(ctx.tree):
        if not isinstance(node, ast.Compare):
            continue
        left = node.left
        for op, right in zip(node.ops, node.comparators):
            yield node, op, left, right
            left = right


def check_none_comparison(ctx: LintContext) -> Iterator[Hit]:
    for node, op, left, right in _comparisons(ctx):
        if isinstance(op, (ast.Eq, ast.NotEq)) and (_is_none(left) or _is_none(right)):
            if isinstance(op, ast.Eq):
                text = "comparison to None should use 'is', not '=='"
            else:
                text = "comparison to None should use 'is not', not '!='"
            yield node.lineno, node.col_offset, text


def check_type_comparison(ctx: LintContext) -> Iterator[Hit]:
    for node, op, left, right in _comparisons(ctx):
        if isinstance(op, (ast.Eq, ast.NotEq)) and (_is_type_call(left) or _is_type_call(right)):
            yield node.lineno, node.col_offset, "use isinstance() rather than comparing types"


def check_bare_except(ctx: LintContext) -> Iterator[Hit]:
    for node in ast.walk(ctx.tree):
        if isinstance(node, ast.ExceptHandler) and node.type is None:
            yield node.lineno, node.col_offset, (
                "bare 'except:' also catches SystemExit and KeyboardInterrupt; name the exception"
            )


def _is_mutable_literal(node: ast.expr) -> bool:
    if isinstance(node, (ast.List, ast.Dict, ast.Set, ast.ListComp, ast.DictComp, ast.SetComp)):
        return True
    return (
        isinstance(node, ast.Call)
        and isinstance(node.func, ast.Name)
        and node.func.id in ("list", "dict", "set")
    )


def check_mutable_defaults(ctx: LintContext) -> Iterator[Hit]:
    for node in ast.walk(ctx.tree):
        if not isinstance(node, (*_FUNCTION_NODES, ast.Lambda)):
            continue
        defaults = [*node.args.defaults, *(d for d in node.args.kw_defaults if d is not None)]
        name = getattr(node, "name", "lambda")
        for default in defaults:
            if _is_mutable_literal(default):
                yield default.lineno, default.col_offset, (
                    f"mutable default argument in {name}; default to None and build the value inside"
                )


def check_star_imports(ctx: LintContext) -> Iterator[Hit]:
    for node in ast.walk(ctx.tree):
        if isinstance(node, ast.ImportFrom) and any(a.name == "*" for a in node.names):
            module = "." * node.level + (node.module or "")
            yield node.lineno, node.col_offset, (
                f"wildcard import from {module} hides where names come from"
            )


def check_lambda_assignment(ctx: LintContext) -> Iterator[Hit]:
    for node in ast.walk(ctx.tree):
        if (
            isinstance(node, ast.Assign)
            and len(node.targets) == 1
            and isinstance(node.targets[0], ast.Name)
            and isinstance(node.value, ast.Lambda)
        ):
            yield node.lineno, node.col_offset, (
                f"define {node.targets[0].id} with def instead of assigning a lambda"
            )


RULES: tuple[Rule, ...] = (
    Rule("public-docstring", "docs", 1.0, check_public_docstrings),
    Rule("module-docstring", "docs", 0.2, check_module_docstring),
    Rule("function-name", "naming", 0.9, check_function_names),
    Rule("class-name", "naming", 0.9, check_class_names),
    Rule("none-comparison", "correctness", 0.9, check_none_comparison),
    Rule("bare-except", "errors", 0.8, check_bare_except),
    Rule("mutable-default", "correctness", 0.8, check_mutable_defaults),
    Rule("star-import", "imports", 0.7, check_star_imports),
    Rule("lambda-assignment", "style", 0.6, check_lambda_assignment),
    Rule("type-comparison", "style", 0.5, check_type_comparison),
)
