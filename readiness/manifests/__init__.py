"""Manifest parsers and dependency/plugin predicates."""

from .gradle import GRADLE_BUILD_FILES, GradleBuild, has_gradle_dependency, has_gradle_plugin, load_gradle_build
from .maven import POM_FILE, MavenManifest, has_maven_dependency, has_maven_plugin, load_pom
from .package import (
    PACKAGE_JSON,
    PackageManifest,
    get_dependency_version,
    has_dependency,
    load_package_json,
)

__all__ = [
    "GRADLE_BUILD_FILES",
    "GradleBuild",
    "has_gradle_dependency",
    "has_gradle_plugin",
    "load_gradle_build",
    "POM_FILE",
    "MavenManifest",
    "has_maven_dependency",
    "has_maven_plugin",
    "load_pom",
    "PACKAGE_JSON",
    "PackageManifest",
    "get_dependency_version",
    "has_dependency",
    "load_package_json",
]
