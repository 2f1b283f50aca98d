"""Test coverage checker.

Reads the first coverage artifact available and normalizes it into a
:class:`~readiness.models.CoverageSummary`. Two formats are understood:

* Istanbul ``coverage-summary.json`` as written by Jest and Vitest, which
  already carries percentages under ``total``.
* JaCoCo ``jacoco.xml``, whose report-level ``<counter>`` elements hold
  ``missed``/``covered`` counts that are turned into percentages here.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

from .base import Checker
from ..logging import get_logger
from ..models import JAVA, CoverageMetric, CoverageSummary, ScanContext

JS_COVERAGE_LOCATIONS: Tuple[Tuple[str, str], ...] = (
    ("coverage/coverage-summary.json", "jest"),
    ("coverage/vitest/coverage-summary.json", "vitest"),
)
JACOCO_REPORT = "target/site/jacoco/jacoco.xml"

_SUMMARY_KEYS = ("lines", "branches", "functions", "statements")
_JACOCO_COUNTERS = {
    "lines": "LINE",
    "branches": "BRANCH",
    "functions": "METHOD",
    "statements": "INSTRUCTION",
}


class CoverageChecker(Checker):
    name = "test_coverage"

    def __init__(self) -> None:
        self.logger = get_logger("checkers.coverage")

    def check(self, context: ScanContext) -> Dict[str, Any]:
        threshold = context.settings.coverage_threshold
        self.logger.info("Checking coverage (threshold: %s%%)", _format_number(threshold))

        found = self._locate(context)
        if found is None:
            self.logger.info("No coverage data found")
            return self.default(context)

        coverage_file, tool, summary = found
        meets_threshold = summary.lines.percentage >= threshold
        self.logger.info(
            "Coverage from %s (%s): lines %s%%, meets threshold: %s",
            coverage_file,
            tool,
            summary.lines.percentage,
            meets_threshold,
        )
        return {
            "available": True,
            "tools_found": [tool],
            "coverage": summary.to_dict(),
            "meets_threshold": meets_threshold,
            "threshold": _format_number(threshold),
            "coverage_file": coverage_file,
        }

    def default(self, context: ScanContext) -> Dict[str, Any]:
        return {
            "available": False,
            "tools_found": [],
            "coverage": None,
            "meets_threshold": False,
            "threshold": _format_number(context.settings.coverage_threshold),
            "coverage_file": None,
        }

    def _locate(self, context: ScanContext) -> Optional[Tuple[str, str, CoverageSummary]]:
        files = context.files

        if context.languages.has_js_family:
            for location, tool in JS_COVERAGE_LOCATIONS:
                if not files.exists(location):
                    continue
                data = files.read_json(location)
                summary = parse_summary_coverage(data)
                if summary is not None:
                    return location, tool, summary
                self.logger.warning("Coverage file %s has no total data", location)

        if context.languages.has(JAVA) and files.exists(JACOCO_REPORT):
            data = files.read_xml(JACOCO_REPORT)
            summary = parse_jacoco_coverage(data)
            if summary is not None:
                return JACOCO_REPORT, "jacoco", summary
            self.logger.warning("Coverage file %s has no report element", JACOCO_REPORT)

        return None


def parse_summary_coverage(data: Any) -> Optional[CoverageSummary]:
    """Normalize an Istanbul summary; None when it lacks a ``total`` block."""
    if not isinstance(data, Mapping):
        return None
    total = data.get("total")
    if not isinstance(total, Mapping) or not total:
        return None

    metrics: Dict[str, CoverageMetric] = {}
    for key in _SUMMARY_KEYS:
        entry = total.get(key)
        if not isinstance(entry, Mapping):
            metrics[key] = CoverageMetric()
            continue
        # Istanbul writes "Unknown" for pct when a dimension has no entries.
        metrics[key] = CoverageMetric(
            total=_as_int(entry.get("total")),
            covered=_as_int(entry.get("covered")),
            percentage=_as_number(entry.get("pct")),
        )
    return CoverageSummary(**metrics)


def parse_jacoco_coverage(data: Any) -> Optional[CoverageSummary]:
    """Normalize a decoded JaCoCo report; None when there is no ``report`` element."""
    if not isinstance(data, Mapping):
        return None
    report = data.get("report")
    if not isinstance(report, Mapping):
        return None

    counters: Dict[str, Tuple[int, int]] = {}
    raw_counters: List[Any] = report.get("counter") if isinstance(report.get("counter"), list) else []
    for counter in raw_counters:
        attributes = counter.get("$") if isinstance(counter, Mapping) else None
        if not isinstance(attributes, Mapping):
            continue
        counter_type = attributes.get("type")
        if counter_type in counters:
            continue
        counters[counter_type] = (
            _as_int(attributes.get("missed")),
            _as_int(attributes.get("covered")),
        )

    metrics = {
        key: _counter_metric(counters.get(counter_type))
        for key, counter_type in _JACOCO_COUNTERS.items()
    }
    return CoverageSummary(**metrics)


def _counter_metric(counter: Optional[Tuple[int, int]]) -> CoverageMetric:
    if counter is None:
        return CoverageMetric()
    missed, covered = counter
    total = missed + covered
    percentage = round(covered / total * 100, 2) if total > 0 else 0
    return CoverageMetric(total=total, covered=covered, percentage=percentage)


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return 0
    return 0


def _as_number(value: Any) -> float:
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value
    return 0


def _format_number(value: float) -> float | int:
    return int(value) if float(value).is_integer() else value


__all__ = [
    "CoverageChecker",
    "JACOCO_REPORT",
    "JS_COVERAGE_LOCATIONS",
    "parse_jacoco_coverage",
    "parse_summary_coverage",
]
