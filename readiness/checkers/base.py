"""Base class and shared probes for checker plugins."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..files import RepoFiles
from ..manifests import (
    GradleBuild,
    MavenManifest,
    PackageManifest,
    has_gradle_plugin,
    has_maven_plugin,
    load_gradle_build,
    load_package_json,
    load_pom,
)
from ..models import ScanContext

ToolRecord = Dict[str, Any]


class Checker(ABC):
    """Contract for checkers that produce one category of the report."""

    #: Key of this checker's section under ``checks`` in the report.
    name: str = ""

    @abstractmethod
    def check(self, context: ScanContext) -> Dict[str, Any]:
        """Return this category's section of the report."""

    @abstractmethod
    def default(self, context: ScanContext) -> Dict[str, Any]:
        """Return the section reported when nothing is configured or the check failed."""


def present(**locators: Any) -> ToolRecord:
    return {"present": True, **locators}


def absent(*nullable: str) -> ToolRecord:
    """Return a not-present record, with ``nullable`` locator fields set to None."""
    record: ToolRecord = {"present": False}
    for field_name in nullable:
        record[field_name] = None
    return record


def probe_config(
    files: RepoFiles,
    candidates: Sequence[str],
    *,
    package_key: Optional[str] = None,
) -> Optional[str]:
    """Return the first config file that exists, then fall back to package.json.

    When no standalone file matches and ``package_key`` is set, package.json is
    reported if it carries an embedded ``package_key`` block.
    """
    found = files.first_existing(candidates)
    if found is not None or package_key is None:
        return found
    manifest: Optional[PackageManifest] = load_package_json(files)
    if manifest is not None and _is_configured(manifest.get(package_key)):
        return manifest.path
    return None


def _is_configured(value: Any) -> bool:
    """Truthiness as package.json tooling sees it: an empty object or list still counts."""
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, (int, float)):
        return value == value and value != 0
    if isinstance(value, str):
        return value != ""
    return True


class JavaPluginProbe:
    """Looks up build plugins in pom.xml, then in the Gradle build file.

    ``tools`` maps a report key to ``(maven_artifact_ids, gradle_plugin_ids)``.
    Each tool stops at the first build file that declares it.
    """

    def __init__(self, tools: Mapping[str, Tuple[Sequence[str], Sequence[str]]]) -> None:
        self.tools = dict(tools)

    def defaults(self) -> Dict[str, ToolRecord]:
        return {tool: absent() for tool in self.tools}

    def probe(self, files: RepoFiles) -> Dict[str, ToolRecord]:
        results = self.defaults()
        pom: Optional[MavenManifest] = load_pom(files)

        unmatched: List[Tuple[str, Sequence[str]]] = []
        for tool, (maven_ids, gradle_ids) in self.tools.items():
            if pom is not None and any(has_maven_plugin(pom, aid) for aid in maven_ids):
                results[tool] = present(build_file=pom.path)
            else:
                unmatched.append((tool, gradle_ids))

        if not unmatched:
            return results

        gradle: Optional[GradleBuild] = load_gradle_build(files)
        if gradle is None:
            return results
        for tool, gradle_ids in unmatched:
            if any(has_gradle_plugin(gradle, pid) for pid in gradle_ids):
                results[tool] = present(build_file=gradle.build_file)
        return results


__all__ = ["Checker", "JavaPluginProbe", "ToolRecord", "absent", "present", "probe_config"]
