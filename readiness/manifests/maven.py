"""pom.xml loading and plugin/dependency predicates."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from ..files import RepoFiles

POM_FILE = "pom.xml"


@dataclass(frozen=True)
class MavenManifest:
    """Decoded pom.xml in the nested mapping-of-lists shape produced by RepoFiles."""

    data: Mapping[str, Any]
    path: str = POM_FILE

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    @property
    def project(self) -> Optional[Mapping[str, Any]]:
        project = self.data.get("project")
        return project if isinstance(project, Mapping) else None


def load_pom(files: RepoFiles) -> Optional[MavenManifest]:
    """Return the parsed pom.xml, or None when it does not exist."""
    data = files.read_xml(POM_FILE)
    if data is None:
        return None
    return MavenManifest(data)


def has_maven_plugin(pom: Optional[MavenManifest], artifact_id: str) -> bool:
    """Return True when ``project/build/plugins/plugin`` declares ``artifact_id``."""
    if pom is None or pom.project is None:
        return False
    plugins = _walk(pom.project, "build", "plugins", "plugin")
    return any(_declares(plugin, artifact_id) for plugin in plugins)


def has_maven_dependency(pom: Optional[MavenManifest], artifact_id: str) -> bool:
    """Return True when ``project/dependencies/dependency`` declares ``artifact_id``."""
    if pom is None or pom.project is None:
        return False
    dependencies = _walk(pom.project, "dependencies", "dependency")
    return any(_declares(dependency, artifact_id) for dependency in dependencies)


def _walk(node: Mapping[str, Any], *path: str) -> Iterator[Mapping[str, Any]]:
    """Yield every mapping reached by following ``path`` through lists of children.

    Anything that does not have the expected shape is skipped.
    """
    if not path:
        yield node
        return
    head, rest = path[0], path[1:]
    children = node.get(head)
    if not isinstance(children, list):
        return
    for child in children:
        if isinstance(child, Mapping):
            yield from _walk(child, *rest)


def _declares(node: Mapping[str, Any], artifact_id: str) -> bool:
    values = node.get("artifactId")
    if not isinstance(values, list):
        return False
    return artifact_id in values


__all__ = ["POM_FILE", "MavenManifest", "has_maven_dependency", "has_maven_plugin", "load_pom"]
