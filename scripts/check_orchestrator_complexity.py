#!/usr/bin/env python3
"""Guard the traversal use-cases against growth and silently dropped errors.

Two rules apply to every top-level function in ``application/use_cases.py``:

* the function body, nested blocks included, stays under ``MAX_STATEMENTS``;
* every ``except`` clause either re-raises, routes the error through the
  quit/log policy helper, or logs it. A handler that only returns or passes
  would hide a failure from both policies.
"""

from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
TARGET = ROOT / "src/image_converter/application/use_cases.py"
MAX_STATEMENTS = 60
POLICY_HELPER = "_handle_failure"
LOG_METHODS = frozenset({"debug", "info", "warning", "error", "critical", "exception"})


def _statement_count(function: ast.FunctionDef) -> int:
    return sum(
        1 for node in ast.walk(function) if isinstance(node, ast.stmt) and node is not function
    )


def _reports_error(handler: ast.ExceptHandler) -> bool:
    for node in ast.walk(handler):
        if isinstance(node, ast.Raise):
            return True
        if not isinstance(node, ast.Call):
            continue
        func = node.func
        if isinstance(func, ast.Name) and func.id == POLICY_HELPER:
            return True
        if (
            isinstance(func, ast.Attribute)
            and func.attr in LOG_METHODS
            and isinstance(func.value, ast.Name)
            and func.value.id == "logger"
        ):
            return True
    return False


def find_violations(source: str) -> list[str]:
    """Return one message per rule broken by the module in ``source``."""
    tree = ast.parse(source)
    violations: list[str] = []
    for node in tree.body:
        if not isinstance(node, ast.FunctionDef):
            continue
        stmt_count = _statement_count(node)
        if stmt_count > MAX_STATEMENTS:
            violations.append(f"{node.name}: {stmt_count} statements")
        for handler in ast.walk(node):
            if isinstance(handler, ast.ExceptHandler) and not _reports_error(handler):
                violations.append(
                    f"{node.name}:{handler.lineno}: except clause neither raises, "
                    f"calls {POLICY_HELPER} nor logs"
                )
    return violations


def main() -> None:
    """Fail when a use-case grows too large or drops an error silently."""
    violations = find_violations(TARGET.read_text(encoding="utf-8"))
    if violations:
        raise SystemExit(
            "Use-case checks failed:\n" + "\n".join(f"- {v}" for v in violations)
        )
    print("Orchestrator complexity check passed.")


if __name__ == "__main__":
    main()
