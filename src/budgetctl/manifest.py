from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .core.schema_utils import SCHEMA_ROOT, load_json, validate_json
from .errors import ManifestIntegrityError

MANIFEST_SCHEMA = SCHEMA_ROOT / "manifest.schema.json"


@dataclass(frozen=True)
class Chunk:
    names: frozenset[str] = frozenset()
    files: tuple[str, ...] = ()
    initial: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", frozenset(str(n) for n in self.names))
        object.__setattr__(self, "files", tuple(str(f) for f in self.files))
        object.__setattr__(self, "initial", bool(self.initial))


@dataclass(frozen=True)
class Asset:
    name: str
    size: int

    def __post_init__(self) -> None:
        size = int(self.size)
        if size < 0:
            raise ManifestIntegrityError(f"asset `{self.name}` has negative size {size}")
        object.__setattr__(self, "size", size)


@dataclass(frozen=True)
class BuildManifest:
    """Read-only view of a finished build: chunk id -> chunk, file name -> asset."""

    chunks: Mapping[str, Chunk] = field(default_factory=dict)
    assets: Mapping[str, Asset] = field(default_factory=dict)

    def asset_for(self, file: str) -> Asset:
        asset = self.assets.get(file)
        if asset is None:
            raise ManifestIntegrityError(f"could not find asset for file: {file}")
        return asset

    @classmethod
    def single_asset(cls, name: str, size: int) -> BuildManifest:
        return cls(chunks={}, assets={name: Asset(name, size)})

    @classmethod
    def from_stats(cls, stats: Mapping[str, Any]) -> BuildManifest:
        chunk_rows = stats.get("chunks")
        asset_rows = stats.get("assets")
        if chunk_rows is None:
            raise ManifestIntegrityError("build stats did not include chunk information", kind="missing_chunks")
        if asset_rows is None:
            raise ManifestIntegrityError("build stats did not include asset information", kind="missing_assets")
        chunks: dict[str, Chunk] = {}
        for idx, row in enumerate(chunk_rows):
            chunk_id = str(row.get("id", idx))
            if chunk_id in chunks:
                raise ManifestIntegrityError(f"duplicate chunk id `{chunk_id}`", kind="duplicate_chunk")
            chunks[chunk_id] = Chunk(
                names=row.get("names", ()),
                files=row.get("files", ()),
                initial=row.get("initial", False),
            )
        assets: dict[str, Asset] = {}
        for row in asset_rows:
            name = str(row["name"])
            if name in assets:
                raise ManifestIntegrityError(f"duplicate asset `{name}`", kind="duplicate_asset")
            assets[name] = Asset(name, row["size"])
        return cls(chunks=chunks, assets=assets)


def load_manifest(path: Path) -> BuildManifest:
    try:
        payload = load_json(path)
    except (OSError, ValueError) as exc:
        raise ManifestIntegrityError(f"cannot read build manifest {path}: {exc}", kind="unreadable") from exc
    validate_json(payload, MANIFEST_SCHEMA, error_cls=ManifestIntegrityError, source=path)
    return BuildManifest.from_stats(payload)
