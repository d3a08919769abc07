from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

from budgetctl.manifest import Asset, BuildManifest, Chunk

ROOT = Path(__file__).resolve().parents[1]
KB = 1024


def make_manifest(assets: dict[str, int], chunks: list[dict[str, object]] | None = None) -> BuildManifest:
    return BuildManifest(
        chunks={
            str(idx): Chunk(
                names=frozenset(row.get("names", ())),  # type: ignore[arg-type]
                files=tuple(row.get("files", ())),  # type: ignore[arg-type]
                initial=bool(row.get("initial", False)),
            )
            for idx, row in enumerate(chunks or [])
        },
        assets={name: Asset(name, size) for name, size in assets.items()},
    )


def write_json(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


def run_budgetctl(*args: str, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(ROOT / "src")
    env.pop("CI", None)
    env.pop("BUDGETCTL_FORMAT", None)
    return subprocess.run(
        [sys.executable, "-m", "budgetctl", *args],
        cwd=(cwd or ROOT),
        env=env,
        text=True,
        capture_output=True,
        check=False,
    )
