from __future__ import annotations

from .report import build_report, render_text, shown_diagnostics

__all__ = ["build_report", "render_text", "shown_diagnostics"]
