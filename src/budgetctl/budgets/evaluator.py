from __future__ import annotations

from typing import Iterable, Iterator

from ..manifest import BuildManifest
from .calculators import calculate
from .model import BudgetRule, BudgetType, Diagnostic
from .thresholds import check_thresholds, derive_thresholds


def evaluate(rules: Iterable[BudgetRule], manifest: BuildManifest) -> Iterator[Diagnostic]:
    """Lazily yield budget violations in rule, threshold, then size order."""
    for rule in rules:
        sizes = calculate(rule, manifest)
        for threshold in derive_thresholds(rule):
            for entity in sizes:
                yield from check_thresholds((threshold,), entity.size, entity.label)


def partition_rules(rules: Iterable[BudgetRule]) -> tuple[list[BudgetRule], list[BudgetRule]]:
    """Split rules into (per-file component style rules, whole-build rules)."""
    per_file: list[BudgetRule] = []
    whole_build: list[BudgetRule] = []
    for rule in rules:
        (per_file if rule.type is BudgetType.ANY_COMPONENT_STYLE else whole_build).append(rule)
    return per_file, whole_build
