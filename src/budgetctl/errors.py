from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import ERR_CONFIG, ERR_MANIFEST


@dataclass
class ScriptError(Exception):
    message: str
    code: int
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


class ConfigurationError(ScriptError):
    """A budget rule or budget file that cannot be evaluated."""

    def __init__(self, message: str, kind: str = "invalid_config") -> None:
        super().__init__(message, ERR_CONFIG, kind)


class ManifestIntegrityError(ScriptError):
    """The build manifest contradicts itself, e.g. a chunk file without an asset."""

    def __init__(self, message: str, kind: str = "manifest_integrity") -> None:
        super().__init__(message, ERR_MANIFEST, kind)
