from __future__ import annotations

from typing import Sequence

from ..budgets.model import Diagnostic, Severity

REPORT_PREFIX = "budgets: "


def build_report(diagnostics: Sequence[Diagnostic], max_diagnostics: int | None = None) -> dict[str, object]:
    """Counts and status always cover every diagnostic; ``max_diagnostics`` only caps the listed ones."""
    errors = sum(1 for d in diagnostics if d.severity is Severity.ERROR)
    warnings = len(diagnostics) - errors
    shown = shown_diagnostics(diagnostics, max_diagnostics)
    payload: dict[str, object] = {
        "schema_version": 1,
        "tool": "budgetctl",
        "kind": "budgets",
        "status": "pass" if errors == 0 else "fail",
        "warning_count": warnings,
        "error_count": errors,
        "diagnostics": [d.as_dict() for d in shown],
    }
    if len(shown) < len(diagnostics):
        payload["truncated"] = True
    return payload


def shown_diagnostics(diagnostics: Sequence[Diagnostic], max_diagnostics: int | None = None) -> list[Diagnostic]:
    if max_diagnostics is None:
        return list(diagnostics)
    return list(diagnostics[: max(max_diagnostics, 0)])


def render_text(diagnostics: Sequence[Diagnostic]) -> list[str]:
    return [f"{REPORT_PREFIX}{d.severity.value}: {d.message}" for d in diagnostics]
