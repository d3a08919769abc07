"""Aggregate a build manifest into labelled sizes, one strategy per budget type."""

from __future__ import annotations

from typing import Iterable

from ..errors import ConfigurationError
from ..manifest import BuildManifest, Chunk
from .model import BudgetRule, BudgetType, SizedEntity

MAP_EXTENSIONS = (".map",)
SCRIPT_EXTENSIONS = (".js",)
STYLE_EXTENSIONS = (".css",)


def _is_map(name: str) -> bool:
    return name.endswith(MAP_EXTENSIONS)


def _chunk_files_size(manifest: BuildManifest, chunks: Iterable[Chunk]) -> int:
    files = [f for chunk in chunks for f in chunk.files if not _is_map(f)]
    return sum(manifest.asset_for(f).size for f in files)


def _per_asset(manifest: BuildManifest, extensions: tuple[str, ...] | None) -> list[SizedEntity]:
    return [
        SizedEntity(asset.size, asset.name)
        for asset in manifest.assets.values()
        if not _is_map(asset.name) and (extensions is None or asset.name.endswith(extensions))
    ]


def calculate(rule: BudgetRule, manifest: BuildManifest) -> list[SizedEntity]:
    match rule.type:
        case BudgetType.BUNDLE:
            if not rule.name:
                raise ConfigurationError("budget of type `bundle` requires a `name`", kind="missing_name")
            named = [chunk for chunk in manifest.chunks.values() if rule.name in chunk.names]
            if not named:
                return []
            return [SizedEntity(_chunk_files_size(manifest, named), rule.name)]
        case BudgetType.INITIAL:
            initial = [chunk for chunk in manifest.chunks.values() if chunk.initial]
            return [SizedEntity(_chunk_files_size(manifest, initial), "initial")]
        case BudgetType.ALL_SCRIPT:
            return [SizedEntity(sum(e.size for e in _per_asset(manifest, SCRIPT_EXTENSIONS)), "total scripts")]
        case BudgetType.ALL:
            return [SizedEntity(sum(e.size for e in _per_asset(manifest, None)), "total")]
        case BudgetType.ANY_COMPONENT_STYLE:
            return _per_asset(manifest, STYLE_EXTENSIONS)
        case BudgetType.ANY_SCRIPT:
            return _per_asset(manifest, SCRIPT_EXTENSIONS)
        case BudgetType.ANY:
            return _per_asset(manifest, None)
        case _:
            raise ConfigurationError(f"unknown budget type `{rule.type}`", kind="unknown_type")
