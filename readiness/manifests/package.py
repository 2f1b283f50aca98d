"""package.json loading and dependency predicates."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..files import RepoFiles
from ..logging import get_logger

PACKAGE_JSON = "package.json"

_LOGGER = get_logger("manifests.package")


@dataclass(frozen=True)
class PackageManifest:
    """Read-only view of a decoded package.json."""

    data: Mapping[str, Any]
    path: str = PACKAGE_JSON

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def section(self, key: str) -> Mapping[str, Any]:
        """Return a dependency section, or an empty mapping when absent or malformed."""
        value = self.data.get(key)
        return value if isinstance(value, Mapping) else {}


def load_package_json(files: RepoFiles) -> Optional[PackageManifest]:
    """Return the parsed package.json, or None when the file is missing.

    Malformed JSON raises :class:`~readiness.files.ManifestError`. Valid JSON
    that is not an object yields an empty manifest.
    """
    data = files.read_json(PACKAGE_JSON)
    if data is None:
        return None
    if not isinstance(data, dict):
        _LOGGER.warning("%s does not contain a JSON object; ignoring its contents", PACKAGE_JSON)
        return PackageManifest({})
    return PackageManifest(data)


def has_dependency(manifest: Optional[PackageManifest], name: str) -> bool:
    """Return True when ``name`` is declared in dependencies or devDependencies."""
    if manifest is None:
        return False
    return name in manifest.section("dependencies") or name in manifest.section(
        "devDependencies"
    )


def get_dependency_version(manifest: Optional[PackageManifest], name: str) -> Optional[str]:
    """Return the declared version, preferring dependencies over devDependencies."""
    if manifest is None:
        return None
    for key in ("dependencies", "devDependencies"):
        section = manifest.section(key)
        if name in section:
            return section[name]
    return None


__all__ = [
    "PACKAGE_JSON",
    "PackageManifest",
    "get_dependency_version",
    "has_dependency",
    "load_package_json",
]
