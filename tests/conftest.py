from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import settings
from hypothesis.database import DirectoryBasedExampleDatabase

from budgetctl.manifest import BuildManifest
from helpers import KB, make_manifest

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

_ROOT = Path(__file__).resolve().parents[1]
_HYPOTHESIS_DB = _ROOT / "artifacts/budgetctl/.hypothesis/examples"
_HYPOTHESIS_DB.parent.mkdir(parents=True, exist_ok=True)
settings.register_profile("budgetctl", database=DirectoryBasedExampleDatabase(_HYPOTHESIS_DB), deadline=None)
settings.load_profile("budgetctl")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture
def app_manifest() -> BuildManifest:
    return make_manifest(
        {
            "main.js": 3 * KB,
            "main.js.map": 40 * KB,
            "vendor.js": 5 * KB,
            "lazy.js": KB,
            "styles.css": 2 * KB,
            "logo.svg": 512,
        },
        [
            {"names": ["main"], "files": ["main.js", "main.js.map"], "initial": True},
            {"names": ["vendor"], "files": ["vendor.js"], "initial": True},
            {"names": ["lazy"], "files": ["lazy.js"], "initial": False},
            {"names": ["styles"], "files": ["styles.css"], "initial": True},
        ],
    )
