from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from ..errors import ConfigurationError
from .sizes import parse_size, split_size


class BudgetType(str, Enum):
    ALL = "all"
    ALL_SCRIPT = "allScript"
    ANY = "any"
    ANY_SCRIPT = "anyScript"
    ANY_COMPONENT_STYLE = "anyComponentStyle"
    BUNDLE = "bundle"
    INITIAL = "initial"

    @classmethod
    def parse(cls, value: str | BudgetType) -> BudgetType:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip())
        except ValueError:
            raise ConfigurationError(
                f"unknown budget type `{value}`: must be one of {sorted(t.value for t in cls)}",
                kind="unknown_type",
            ) from None


class ThresholdKind(str, Enum):
    MAX = "maximum"
    MIN = "minimum"


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"


# Config key -> dataclass field, in threshold derivation order.
THRESHOLD_FIELDS: tuple[tuple[str, str], ...] = (
    ("maximumWarning", "maximum_warning"),
    ("maximumError", "maximum_error"),
    ("minimumWarning", "minimum_warning"),
    ("minimumError", "minimum_error"),
    ("warning", "warning"),
    ("error", "error"),
)


@dataclass(frozen=True)
class BudgetRule:
    type: BudgetType
    name: str | None = None
    baseline: str | None = None
    maximum_warning: str | None = None
    maximum_error: str | None = None
    minimum_warning: str | None = None
    minimum_error: str | None = None
    warning: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", BudgetType.parse(self.type))
        if self.name is not None:
            object.__setattr__(self, "name", str(self.name).strip() or None)
        if self.type is BudgetType.BUNDLE and not self.name:
            raise ConfigurationError("budget of type `bundle` requires a `name`", kind="missing_name")
        if self.baseline is not None:
            baseline = _expression(self.baseline)
            if split_size(baseline)[1] == "%":
                raise ConfigurationError(f"baseline `{baseline}` must be an absolute size, not a percentage", kind="invalid_size")
            object.__setattr__(self, "baseline", baseline)
        for _, attr in THRESHOLD_FIELDS:
            raw = getattr(self, attr)
            if raw is None:
                continue
            expression = _expression(raw)
            parse_size(expression, self.baseline)
            object.__setattr__(self, attr, expression)

    @property
    def label(self) -> str:
        return f"{self.type.value}:{self.name}" if self.name else self.type.value


def _expression(value: object) -> str:
    if isinstance(value, bool):
        raise ConfigurationError(f"invalid size expression `{value}`", kind="invalid_size")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, float):
        return format(Decimal(repr(value)), "f")
    if isinstance(value, int):
        return str(value)
    return str(value).strip()


@dataclass(frozen=True)
class Threshold:
    limit: int
    kind: ThresholdKind
    severity: Severity


@dataclass(frozen=True)
class SizedEntity:
    size: int
    label: str


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    message: str
    label: str = ""
    kind: ThresholdKind | None = None
    size: int = 0
    limit: int = 0

    def as_dict(self) -> dict[str, object]:
        return {
            "severity": self.severity.value,
            "message": self.message,
            "label": self.label,
            "kind": self.kind.value if self.kind else None,
            "size": self.size,
            "limit": self.limit,
        }
