from importlib import resources
from types import MappingProxyType
from typing import Any, Mapping

import toml
from returns.result import Failure, Result, Success

from implibgen.domain.entities import DefinitionAsset
from implibgen.errors import UnsupportedVersion
from implibgen.types import Version

DEFS_DIR = resources.files("implibgen") / "defs"


def _version_key(entry: dict[str, Any]) -> Version | None:
    version = entry.get("version")
    return (version[0], version[1]) if version else None


def _load_definitions() -> Mapping[Version | None, DefinitionAsset]:
    """Reads the manifest and every `.def` file it lists, once, at import time."""
    manifest = toml.loads((DEFS_DIR / "manifest.toml").read_text(encoding="utf-8"))
    return MappingProxyType(
        {
            _version_key(entry): DefinitionAsset(
                file_name=entry["file"],
                content=(DEFS_DIR / entry["file"]).read_bytes(),
            )
            for entry in manifest.values()
        }
    )


DEFINITIONS = _load_definitions()


def supported_versions() -> tuple[Version, ...]:
    return tuple(sorted(version for version in DEFINITIONS if version is not None))


def lookup(version: Version | None) -> Result[DefinitionAsset, UnsupportedVersion]:
    key = tuple(version) if version is not None else None
    asset = DEFINITIONS.get(key)  # type: ignore
    if asset is None:
        return Failure(UnsupportedVersion(version))  # type: ignore
    return Success(asset)
