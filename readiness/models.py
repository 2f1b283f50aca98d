"""Core data models shared across readiness components."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config import ScanSettings
    from .files import RepoFiles

JAVASCRIPT = "javascript"
TYPESCRIPT = "typescript"
JAVA = "java"


@dataclass(frozen=True)
class LanguageSet:
    """Languages detected in a repository, in first-seen order."""

    detected: Tuple[str, ...] = ()
    primary: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "detected", tuple(dict.fromkeys(self.detected)))
        if self.primary is not None and self.primary not in self.detected:
            raise ValueError(f"Primary language '{self.primary}' was not detected")

    def has(self, *languages: str) -> bool:
        """Return True when any of ``languages`` was detected."""
        return any(language in self.detected for language in languages)

    @property
    def has_js_family(self) -> bool:
        return self.has(JAVASCRIPT, TYPESCRIPT)

    def to_dict(self) -> Dict[str, Any]:
        return {"detected": list(self.detected), "primary": self.primary}


@dataclass(frozen=True)
class CoverageMetric:
    """Totals for one coverage dimension."""

    total: int = 0
    covered: int = 0
    percentage: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"total": self.total, "covered": self.covered, "percentage": self.percentage}


@dataclass(frozen=True)
class CoverageSummary:
    """Normalized coverage across lines, branches, functions and statements."""

    lines: CoverageMetric = field(default_factory=CoverageMetric)
    branches: CoverageMetric = field(default_factory=CoverageMetric)
    functions: CoverageMetric = field(default_factory=CoverageMetric)
    statements: CoverageMetric = field(default_factory=CoverageMetric)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lines": self.lines.to_dict(),
            "branches": self.branches.to_dict(),
            "functions": self.functions.to_dict(),
            "statements": self.statements.to_dict(),
        }


@dataclass(frozen=True)
class ScanContext:
    """Everything a checker needs for one scan."""

    files: "RepoFiles"
    languages: LanguageSet
    settings: "ScanSettings"


@dataclass(frozen=True)
class Report:
    """Final hygiene report handed to the delivery layer."""

    metadata: Dict[str, Any]
    languages: LanguageSet
    checks: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": self.metadata,
            "languages": self.languages.to_dict(),
            "checks": self.checks,
        }

    def to_json(self, *, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)
