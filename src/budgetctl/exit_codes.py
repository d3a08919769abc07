from __future__ import annotations

import json
from pathlib import Path

ERROR_REGISTRY = Path(__file__).resolve().parent / "contracts" / "error-registry.json"


def _load_registry() -> dict[str, int]:
    payload = json.loads(ERROR_REGISTRY.read_text(encoding="utf-8"))
    mapping: dict[str, int] = {}
    for row in payload.get("codes", []):
        mapping[str(row["name"])] = int(row["code"])
    return mapping


_REG = _load_registry()

OK = 0
ERR_BUDGET = _REG["BUDGET_ERR_BUDGET"]
ERR_USAGE = _REG["BUDGET_ERR_USAGE"]
ERR_CONFIG = _REG["BUDGET_ERR_CONFIG"]
ERR_MANIFEST = _REG["BUDGET_ERR_MANIFEST"]
ERR_INTERNAL = _REG["BUDGET_ERR_INTERNAL"]
