from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..budgets.model import THRESHOLD_FIELDS, BudgetRule
from ..budgets.sizes import parse_size, split_size
from ..core.schema_utils import SCHEMA_ROOT, load_json, validate_json
from ..core.yaml_utils import load_yaml
from ..errors import ConfigurationError
from ..logging import log_event

BUDGETS_SCHEMA = SCHEMA_ROOT / "budgets.schema.json"


def _read(path: Path) -> Any:
    try:
        if path.suffix in {".yaml", ".yml"}:
            return load_yaml(path)
        return load_json(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"cannot read budget file {path}: {exc}", kind="unreadable") from exc


def rules_from_payload(payload: Any, source: Path | str | None = None, json_output: bool = False) -> list[BudgetRule]:
    validate_json(payload, BUDGETS_SCHEMA, source=source)
    rows = payload["budgets"] if isinstance(payload, dict) else payload
    rules: list[BudgetRule] = []
    for idx, row in enumerate(rows):
        try:
            rule = BudgetRule(
                type=row["type"],
                name=row.get("name"),
                baseline=row.get("baseline"),
                **{attr: row.get(key) for key, attr in THRESHOLD_FIELDS},
            )
        except ConfigurationError as exc:
            origin = f"{source}: " if source else ""
            raise ConfigurationError(f"{origin}budgets[{idx}]: {exc.message}", kind=exc.kind) from exc
        if rule.baseline is None or parse_size(rule.baseline) == 0:
            relative = [key for key, attr in THRESHOLD_FIELDS if getattr(rule, attr) and split_size(getattr(rule, attr))[1] == "%"]
            if relative:
                log_event(
                    "warn",
                    "config",
                    "percentage-without-baseline",
                    json_output=json_output,
                    budget=rule.label,
                    fields=",".join(relative),
                )
        rules.append(rule)
    return rules


def load_budgets(path: Path, json_output: bool = False) -> list[BudgetRule]:
    return rules_from_payload(_read(path), source=path, json_output=json_output)
