from __future__ import annotations

from typing import Iterable, Iterator

from .model import BudgetRule, Diagnostic, Severity, Threshold, ThresholdKind
from .sizes import format_size, parse_size


def _threshold(rule: BudgetRule, expression: str, kind: ThresholdKind, severity: Severity) -> Threshold:
    direction = 1 if kind is ThresholdKind.MAX else -1
    return Threshold(limit=parse_size(expression, rule.baseline, direction), kind=kind, severity=severity)


def derive_thresholds(rule: BudgetRule) -> Iterator[Threshold]:
    if rule.maximum_warning is not None:
        yield _threshold(rule, rule.maximum_warning, ThresholdKind.MAX, Severity.WARNING)
    if rule.maximum_error is not None:
        yield _threshold(rule, rule.maximum_error, ThresholdKind.MAX, Severity.ERROR)
    if rule.minimum_warning is not None:
        yield _threshold(rule, rule.minimum_warning, ThresholdKind.MIN, Severity.WARNING)
    if rule.minimum_error is not None:
        yield _threshold(rule, rule.minimum_error, ThresholdKind.MIN, Severity.ERROR)
    # Symmetric fields bracket the baseline: floor first, then ceiling.
    if rule.warning is not None:
        yield _threshold(rule, rule.warning, ThresholdKind.MIN, Severity.WARNING)
        yield _threshold(rule, rule.warning, ThresholdKind.MAX, Severity.WARNING)
    if rule.error is not None:
        yield _threshold(rule, rule.error, ThresholdKind.MIN, Severity.ERROR)
        yield _threshold(rule, rule.error, ThresholdKind.MAX, Severity.ERROR)


def check_thresholds(thresholds: Iterable[Threshold], size: int, label: str) -> Iterator[Diagnostic]:
    """Yield one diagnostic per threshold that ``size`` violates."""
    for threshold in thresholds:
        if threshold.kind is ThresholdKind.MAX:
            if size <= threshold.limit:
                continue
            message = (
                f"Exceeded maximum budget for {label}. Budget {format_size(threshold.limit)} was exceeded by "
                f"{format_size(size - threshold.limit)} with a total of {format_size(size)}."
            )
        else:
            if size >= threshold.limit:
                continue
            message = (
                f"Failed to meet minimum budget for {label}. Budget {format_size(threshold.limit)} was not met by "
                f"{format_size(threshold.limit - size)} with a total of {format_size(size)}."
            )
        yield Diagnostic(
            severity=threshold.severity,
            message=message,
            label=label,
            kind=threshold.kind,
            size=size,
            limit=threshold.limit,
        )
