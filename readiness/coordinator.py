"""Coordinates language detection, checkers and report delivery."""

from __future__ import annotations

import logging
import os
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from .checkers import Checker, discover_checkers
from .config import ScanSettings, load_config
from .files import RepoFiles
from .languages import LanguageDetector
from .logging import get_logger
from .metadata import gather_metadata
from .models import Report, ScanContext
from .reporter import post_results

Deliver = Callable[[Mapping[str, Any], Optional[str], Optional[str]], None]


@dataclass
class ScanOutcome:
    """Result of a full scan-and-deliver run."""

    report: Optional[Report]
    delivered: bool
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.report is not None and self.error is None


class Coordinator:
    """Runs every checker against one repository and assembles the report."""

    def __init__(
        self,
        detector: LanguageDetector | None = None,
        checkers: Optional[Iterable[Checker]] = None,
        deliver: Deliver | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.detector = detector or LanguageDetector()
        self._checker_overrides = list(checkers) if checkers is not None else None
        self.deliver = deliver or post_results
        self.environ = os.environ if environ is None else environ
        self.logger = get_logger("coordinator")

    def load_settings(
        self, path: str = ".", overrides: Mapping[str, Any] | None = None
    ) -> Tuple[Path, ScanSettings]:
        """Resolve the directory to scan and the effective settings for it."""
        overrides = overrides or {}
        target = overrides.get("target_dir") or self.environ.get("TARGET_DIR") or path
        root = _resolve_root(target)
        config = load_config(root)
        settings = ScanSettings.from_sources(config, self.environ, overrides)
        return root, settings

    def scan(self, path: str | Path, settings: ScanSettings | None = None) -> Report:
        """Detect languages and run every selected checker concurrently."""
        if settings is None:
            root, settings = self.load_settings(str(path))
        else:
            root = _resolve_root(settings.target_dir or path)

        self.logger.info("Scanning %s", root)
        files = RepoFiles(root, settings.exclude_dirs)
        languages = self.detector.detect(files)
        context = ScanContext(files=files, languages=languages, settings=settings)

        checkers = self._select_checkers(settings)
        self.logger.debug("Running %d checkers", len(checkers))
        checks = self._execute_checkers(checkers, context)

        return Report(
            metadata=gather_metadata(self.environ),
            languages=languages,
            checks=checks,
        )

    def run(self, path: str = ".", overrides: Mapping[str, Any] | None = None) -> ScanOutcome:
        """Scan and deliver the report. Never raises; failures land in the outcome."""
        try:
            root, settings = self.load_settings(path, overrides)
            report = self.scan(root, settings)
        except Exception as exc:
            self._log_exception("Readiness scan failed", exc)
            return ScanOutcome(report=None, delivered=False, error=str(exc))

        try:
            self.deliver(report.to_dict(), settings.endpoint, settings.token)
        except Exception as exc:
            self._log_exception("Report delivery failed", exc)
            return ScanOutcome(report=report, delivered=False, error=str(exc))

        self.logger.info("Readiness check completed successfully")
        return ScanOutcome(report=report, delivered=True)

    def _select_checkers(self, settings: ScanSettings) -> List[Checker]:
        if self._checker_overrides is not None:
            return list(self._checker_overrides)
        return discover_checkers(settings.enabled_checks)

    def _execute_checkers(
        self, checkers: List[Checker], context: ScanContext
    ) -> Dict[str, Any]:
        if not checkers:
            return {}
        results: Dict[str, Any] = {}
        with ThreadPoolExecutor(
            max_workers=len(checkers), thread_name_prefix="readiness-check"
        ) as executor:
            futures: List[Tuple[Checker, Future[Dict[str, Any]]]] = [
                (checker, executor.submit(checker.check, context)) for checker in checkers
            ]
            for checker, future in futures:
                try:
                    results[checker.name] = future.result()
                except Exception as exc:
                    self._log_exception(f"Checker '{checker.name}' failed", exc)
                    results[checker.name] = checker.default(context)
        return results

    def _log_exception(self, message: str, exc: Exception) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.exception("%s: %s", message, exc)
        else:
            self.logger.error("%s: %s", message, exc)


def _resolve_root(path: str | Path) -> Path:
    root = Path(path).expanduser().resolve()
    if not root.exists():
        raise FileNotFoundError(f"Repository path not found: {path}")
    if not root.is_dir():
        raise NotADirectoryError(f"Repository path is not a directory: {path}")
    return root


__all__ = ["Coordinator", "ScanOutcome"]
