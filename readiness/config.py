"""Configuration loading for readiness (.readiness.yml and environment)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

import yaml

from .checkers import available_checker_names

CONFIG_FILENAME = ".readiness.yml"
DEFAULT_COVERAGE_THRESHOLD = 90.0
DEFAULT_EXCLUDE_DIRS = (".git",)


class ConfigError(RuntimeError):
    """Raised when configuration cannot be parsed or holds invalid values."""


@dataclass
class CoverageConfig:
    """Coverage settings from .readiness.yml."""

    threshold: Optional[float] = None


@dataclass
class ChecksConfig:
    """Checker enablement."""

    enabled: List[str] = field(default_factory=list)


@dataclass
class ScanConfig:
    """File search options."""

    exclude_dirs: List[str] = field(default_factory=list)


@dataclass
class ReportConfig:
    """Report delivery options."""

    endpoint: Optional[str] = None


@dataclass
class ReadinessConfig:
    """Represents the settings defined in .readiness.yml."""

    root: Path
    coverage: CoverageConfig = field(default_factory=CoverageConfig)
    checks: ChecksConfig = field(default_factory=ChecksConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


@dataclass(frozen=True)
class ScanSettings:
    """Effective settings for a single scan after merging every source."""

    coverage_threshold: float = DEFAULT_COVERAGE_THRESHOLD
    target_dir: Optional[str] = None
    endpoint: Optional[str] = None
    token: Optional[str] = None
    enabled_checks: Optional[tuple[str, ...]] = None
    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS

    @classmethod
    def from_sources(
        cls,
        config: ReadinessConfig | None = None,
        environ: Mapping[str, str] | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> "ScanSettings":
        """Merge CLI overrides, environment variables and the config file.

        Precedence is overrides > environment > file > defaults. Tokens are never
        read from the config file.
        """
        env = os.environ if environ is None else environ
        overrides = {key: value for key, value in (overrides or {}).items() if value is not None}

        threshold: Any = DEFAULT_COVERAGE_THRESHOLD
        if config is not None and config.coverage.threshold is not None:
            threshold = config.coverage.threshold
        if env.get("COVERAGE_THRESHOLD"):
            threshold = env["COVERAGE_THRESHOLD"]
        if "coverage_threshold" in overrides:
            threshold = overrides["coverage_threshold"]

        endpoint = config.report.endpoint if config is not None else None
        endpoint = env.get("ENDPOINT_URL") or endpoint
        endpoint = overrides.get("endpoint", endpoint)

        token = env.get("ENDPOINT_TOKEN") or None
        token = overrides.get("token", token)

        target_dir = env.get("TARGET_DIR") or None
        target_dir = overrides.get("target_dir", target_dir)

        enabled: Optional[tuple[str, ...]] = None
        if config is not None and config.checks.enabled:
            enabled = tuple(config.checks.enabled)

        exclude_dirs = DEFAULT_EXCLUDE_DIRS
        if config is not None and config.scan.exclude_dirs:
            exclude_dirs = tuple(config.scan.exclude_dirs)

        return cls(
            coverage_threshold=parse_threshold(threshold),
            target_dir=target_dir,
            endpoint=endpoint,
            token=token,
            enabled_checks=enabled,
            exclude_dirs=exclude_dirs,
        )


def parse_threshold(value: Any) -> float:
    """Return ``value`` as a coverage threshold, rejecting anything outside 0-100."""
    threshold = _as_float(value) if not isinstance(value, bool) else None
    if threshold is None:
        raise ConfigError(f"Coverage threshold must be a number, got {value!r}")
    if not 0 <= threshold <= 100:
        raise ConfigError(f"Coverage threshold must be between 0 and 100, got {threshold:g}")
    return threshold


def load_config(config_path: Path) -> ReadinessConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ReadinessConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    coverage_data = _as_dict(data.get("coverage"))
    coverage = CoverageConfig()
    if coverage_data.get("threshold") is not None:
        coverage.threshold = parse_threshold(coverage_data.get("threshold"))

    checks_data = _as_dict(data.get("checks"))
    checks = ChecksConfig(enabled=_as_str_list(checks_data.get("enabled")))
    _validate_checks(checks.enabled)

    scan_data = _as_dict(data.get("scan"))
    scan = ScanConfig(exclude_dirs=_as_str_list(scan_data.get("exclude_dirs")))

    report_data = _as_dict(data.get("report"))
    report = ReportConfig(endpoint=_as_str(report_data.get("endpoint")))

    return ReadinessConfig(
        root=root,
        coverage=coverage,
        checks=checks,
        scan=scan,
        report=report,
    )


def _validate_checks(enabled: List[str]) -> None:
    if not enabled:
        return
    known = set(available_checker_names())
    unknown = sorted({name.lower() for name in enabled} - known)
    if unknown:
        raise ConfigError(
            f"Unknown checks in {CONFIG_FILENAME}: {', '.join(unknown)} "
            f"(available: {', '.join(sorted(known))})"
        )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
