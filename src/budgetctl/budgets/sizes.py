"""Size expressions ("150kb", "5%", "2mb") and their human-readable rendering."""

from __future__ import annotations

import math
import re
from fractions import Fraction

from ..errors import ConfigurationError

_SIZE_PATTERN = re.compile(r"^\s*(?P<number>\d+(?:\.\d+)?)\s*(?P<unit>%|[kmg]?b)?\s*$", re.IGNORECASE)

_MULTIPLIERS = {
    "": 1,
    "b": 1,
    "kb": 1024,
    "mb": 1024 * 1024,
    "gb": 1024 * 1024 * 1024,
}

_MAGNITUDES = ("bytes", "kB", "MB", "GB")


def split_size(expression: str) -> tuple[Fraction, str]:
    """Return the numeric part and the lower-cased unit ("" when absent)."""
    match = _SIZE_PATTERN.match(str(expression))
    if not match:
        raise ConfigurationError(
            f"invalid size expression `{expression}`: expected <number>[b|kb|mb|gb|%]",
            kind="invalid_size",
        )
    return Fraction(match.group("number")), (match.group("unit") or "").lower()


def parse_size(expression: str, baseline: str | None = None, direction: int = 1) -> int:
    """Resolve a size expression to a byte count.

    With a non-zero ``baseline`` the expression is a delta added to
    (``direction=1``) or subtracted from (``direction=-1``) the baseline, and
    percentages are taken of the baseline. Without one the expression is an
    absolute size; a percentage then resolves to ``0``.

    Fractional results are floored for ``direction=1`` and ceiled for
    ``direction=-1``, so strict integer comparisons against the result match
    comparisons against the exact limit.
    """
    if direction not in (1, -1):
        raise ValueError(f"direction must be 1 or -1, got {direction!r}")
    baseline_bytes = _absolute_bytes(baseline) if baseline else 0
    number, unit = split_size(expression)
    if unit == "%":
        value = baseline_bytes * number / 100
    else:
        value = number * _MULTIPLIERS[unit]
    limit = value if baseline_bytes == 0 else baseline_bytes + direction * value
    return math.floor(limit) if direction == 1 else math.ceil(limit)


def _absolute_bytes(expression: str) -> Fraction:
    number, unit = split_size(expression)
    if unit == "%":
        raise ConfigurationError(f"baseline `{expression}` must be an absolute size, not a percentage", kind="invalid_size")
    return number * _MULTIPLIERS[unit]


def format_size(size: int) -> str:
    if size <= 0:
        return "0 bytes"
    index = 0
    while index < len(_MAGNITUDES) - 1 and size >= 1024 ** (index + 1):
        index += 1
    value = round(size / 1024**index, 2)
    rendered = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{rendered} {_MAGNITUDES[index]}"
