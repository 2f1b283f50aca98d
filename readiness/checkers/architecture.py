"""Architecture test checker (eslint-plugin-boundaries, ArchUnit)."""

from __future__ import annotations

from typing import Any, Dict

from .base import Checker, absent, present
from ..logging import get_logger
from ..manifests import (
    get_dependency_version,
    has_dependency,
    has_gradle_dependency,
    has_maven_dependency,
    load_gradle_build,
    load_package_json,
    load_pom,
)
from ..models import ScanContext

ESLINT_BOUNDARIES = "eslint-plugin-boundaries"
ARCHUNIT_GROUP = "com.tngtech.archunit"
ARCHUNIT_ARTIFACT = "archunit"


class ArchitectureChecker(Checker):
    name = "architecture_tests"

    def __init__(self) -> None:
        self.logger = get_logger("checkers.architecture")

    def check(self, context: ScanContext) -> Dict[str, Any]:
        files = context.files
        result = self.default(context)

        if context.languages.has_js_family:
            package = load_package_json(files)
            if has_dependency(package, ESLINT_BOUNDARIES):
                result["javascript"]["eslint_boundaries"] = present(
                    package=ESLINT_BOUNDARIES,
                    version=get_dependency_version(package, ESLINT_BOUNDARIES),
                )

        if context.languages.has("java"):
            pom = load_pom(files)
            if pom is not None and has_maven_dependency(pom, ARCHUNIT_ARTIFACT):
                result["java"]["archunit"] = present(build_file=pom.path)
            else:
                gradle = load_gradle_build(files)
                if gradle is not None and has_gradle_dependency(
                    gradle, ARCHUNIT_GROUP, ARCHUNIT_ARTIFACT
                ):
                    result["java"]["archunit"] = present(build_file=gradle.build_file)

        self.logger.debug("Architecture tests: %s", result)
        return result

    def default(self, context: ScanContext) -> Dict[str, Any]:
        result: Dict[str, Any] = {"javascript": {}, "java": {}}
        if context.languages.has_js_family:
            result["javascript"]["eslint_boundaries"] = absent()
        if context.languages.has("java"):
            result["java"]["archunit"] = absent()
        return result
