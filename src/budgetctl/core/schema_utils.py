from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import ConfigurationError, ScriptError

SCHEMA_ROOT = Path(__file__).resolve().parents[1] / "contracts" / "schema"


def load_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def validate_json(
    payload: object,
    schema_path: Path,
    error_cls: type[ScriptError] = ConfigurationError,
    source: Path | str | None = None,
) -> None:
    import jsonschema

    schema = load_json(schema_path)
    try:
        jsonschema.validate(payload, schema)
    except jsonschema.ValidationError as exc:
        where = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        origin = f"{source}: " if source else ""
        raise error_cls(f"{origin}schema violation at `{where}`: {exc.message}", kind="schema") from exc
