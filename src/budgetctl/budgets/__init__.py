"""Size budget evaluation engine."""

from __future__ import annotations

from .calculators import calculate
from .evaluator import evaluate, partition_rules
from .model import BudgetRule, BudgetType, Diagnostic, Severity, SizedEntity, Threshold, ThresholdKind
from .sizes import format_size, parse_size
from .thresholds import check_thresholds, derive_thresholds

__all__ = [
    "BudgetRule",
    "BudgetType",
    "Diagnostic",
    "Severity",
    "SizedEntity",
    "Threshold",
    "ThresholdKind",
    "calculate",
    "check_thresholds",
    "derive_thresholds",
    "evaluate",
    "format_size",
    "parse_size",
    "partition_rules",
]
