from __future__ import annotations

from budgetctl.budgets import BudgetRule, BudgetType, Severity, Threshold, ThresholdKind
from budgetctl.budgets.thresholds import check_thresholds, derive_thresholds

KB = 1024


def test_rule_without_threshold_fields_yields_nothing() -> None:
    assert list(derive_thresholds(BudgetRule(type=BudgetType.ALL))) == []


def test_thresholds_follow_field_order() -> None:
    rule = BudgetRule(
        type=BudgetType.ALL,
        maximum_warning="2kb",
        maximum_error="3kb",
        minimum_warning="1kb",
        minimum_error="512",
        warning="4kb",
        error="5kb",
    )
    got = [(t.kind, t.severity) for t in derive_thresholds(rule)]
    assert got == [
        (ThresholdKind.MAX, Severity.WARNING),
        (ThresholdKind.MAX, Severity.ERROR),
        (ThresholdKind.MIN, Severity.WARNING),
        (ThresholdKind.MIN, Severity.ERROR),
        (ThresholdKind.MIN, Severity.WARNING),
        (ThresholdKind.MAX, Severity.WARNING),
        (ThresholdKind.MIN, Severity.ERROR),
        (ThresholdKind.MAX, Severity.ERROR),
    ]


def test_symmetric_threshold_brackets_baseline() -> None:
    rule = BudgetRule(type=BudgetType.INITIAL, baseline="100kb", warning="10%")
    floor, ceiling = derive_thresholds(rule)
    assert floor == Threshold(limit=90 * KB, kind=ThresholdKind.MIN, severity=Severity.WARNING)
    assert ceiling == Threshold(limit=110 * KB, kind=ThresholdKind.MAX, severity=Severity.WARNING)


def test_minimum_threshold_is_subtracted_from_baseline() -> None:
    rule = BudgetRule(type=BudgetType.ALL, baseline="10kb", minimum_error="2kb", maximum_error="2kb")
    limits = {t.kind: t.limit for t in derive_thresholds(rule)}
    assert limits == {ThresholdKind.MAX: 12 * KB, ThresholdKind.MIN: 8 * KB}


def test_derive_thresholds_is_lazy() -> None:
    rule = BudgetRule(type=BudgetType.ALL, maximum_warning="1kb", maximum_error="2kb")
    stream = derive_thresholds(rule)
    assert next(stream).severity is Severity.WARNING
    assert next(stream).severity is Severity.ERROR
    assert next(stream, None) is None


def test_check_thresholds_maximum_message() -> None:
    threshold = Threshold(limit=KB, kind=ThresholdKind.MAX, severity=Severity.ERROR)
    (diag,) = check_thresholds([threshold], 1536, "foo.js")
    assert diag.severity is Severity.ERROR
    assert diag.message == (
        "Exceeded maximum budget for foo.js. Budget 1 kB was exceeded by 512 bytes with a total of 1.5 kB."
    )
    assert (diag.label, diag.kind, diag.size, diag.limit) == ("foo.js", ThresholdKind.MAX, 1536, KB)


def test_check_thresholds_minimum_message() -> None:
    threshold = Threshold(limit=KB, kind=ThresholdKind.MIN, severity=Severity.WARNING)
    (diag,) = check_thresholds([threshold], 512, "bar.js")
    assert diag.severity is Severity.WARNING
    assert diag.message == (
        "Failed to meet minimum budget for bar.js. Budget 1 kB was not met by 512 bytes with a total of 512 bytes."
    )


def test_check_thresholds_equal_to_limit_passes() -> None:
    thresholds = [
        Threshold(limit=KB, kind=ThresholdKind.MAX, severity=Severity.ERROR),
        Threshold(limit=KB, kind=ThresholdKind.MIN, severity=Severity.ERROR),
    ]
    assert list(check_thresholds(thresholds, KB, "exact.js")) == []
