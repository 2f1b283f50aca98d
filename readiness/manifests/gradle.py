"""Gradle build file loading and pattern-based predicates.

Gradle builds are Groovy or Kotlin programs, so they are matched textually
rather than parsed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern

from ..files import RepoFiles

GRADLE_BUILD_FILES = ("build.gradle", "build.gradle.kts")


@dataclass(frozen=True)
class GradleBuild:
    """Raw text of the first Gradle build file found."""

    content: str
    build_file: str = "build.gradle"


def load_gradle_build(files: RepoFiles) -> Optional[GradleBuild]:
    """Return build.gradle, falling back to build.gradle.kts; None if neither exists."""
    for candidate in GRADLE_BUILD_FILES:
        if not files.exists(candidate):
            continue
        # Build scripts are free-form text; comments are often in a legacy encoding.
        content = files.read_text(candidate, errors="replace")
        if content is not None:
            return GradleBuild(content=content, build_file=candidate)
    return None


def has_gradle_plugin(gradle: Optional[GradleBuild], plugin_id: str) -> bool:
    """Return True when the build applies ``plugin_id``.

    Recognised forms: ``id 'x'``, ``id("x")``, a bare ``x`` on its own line
    inside a Kotlin ``plugins {}`` block, and ``apply plugin: 'x'``.
    """
    if gradle is None or not gradle.content:
        return False
    plugin = re.escape(plugin_id)
    patterns = [
        rf"""id\s+['"]{plugin}['"]""",
        rf"""id\(['"]{plugin}['"]\)""",
        rf"^\s+{plugin}\s*$",
        rf"""apply\s+plugin:\s+['"]{plugin}['"]""",
    ]
    return _search_any(gradle.content, patterns)


def has_gradle_dependency(
    gradle: Optional[GradleBuild], group_id: Optional[str], artifact_id: str
) -> bool:
    """Return True when the build declares ``group_id:artifact_id``.

    Without ``group_id`` only ``:artifact_id`` followed by ``:`` or a quote is
    required, which can collide with other artifacts sharing the suffix.
    """
    if gradle is None or not gradle.content:
        return False
    artifact = re.escape(artifact_id)
    patterns: List[str]
    if group_id:
        coordinate = f"{re.escape(group_id)}:{artifact}"
        patterns = [
            rf"""['"]{coordinate}""",
            rf"""\(['"]{coordinate}""",
        ]
    else:
        patterns = [rf""":{artifact}[:'"]"""]
    return _search_any(gradle.content, patterns)


def _search_any(content: str, patterns: List[str]) -> bool:
    compiled: List[Pattern[str]] = [re.compile(pattern, re.MULTILINE) for pattern in patterns]
    return any(pattern.search(content) for pattern in compiled)


__all__ = [
    "GRADLE_BUILD_FILES",
    "GradleBuild",
    "has_gradle_dependency",
    "has_gradle_plugin",
    "load_gradle_build",
]
