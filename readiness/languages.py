"""Marker-file based language detection."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .files import RepoFiles
from .logging import get_logger
from .manifests import GRADLE_BUILD_FILES, PACKAGE_JSON, POM_FILE
from .models import JAVA, JAVASCRIPT, TYPESCRIPT, LanguageSet

TSCONFIG = "tsconfig.json"


class LanguageDetector:
    """Detects JavaScript, TypeScript and Java from well-known marker files.

    Markers are probed in a fixed order so ``detected`` is reproducible. The
    first language found becomes primary, except that TypeScript always wins.
    """

    MARKERS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
        (JAVASCRIPT, (PACKAGE_JSON,)),
        (TYPESCRIPT, (TSCONFIG,)),
        (JAVA, (POM_FILE, *GRADLE_BUILD_FILES)),
    )

    def __init__(self) -> None:
        self.logger = get_logger("languages")

    def detect(self, files: RepoFiles) -> LanguageSet:
        detected: List[str] = []
        primary: Optional[str] = None

        for language, markers in self.MARKERS:
            marker = files.first_existing(markers)
            if marker is None:
                self.logger.debug("No %s marker found (%s)", language, ", ".join(markers))
                continue
            self.logger.debug("Detected %s via %s", language, marker)
            detected.append(language)
            if language == TYPESCRIPT or primary is None:
                primary = language

        self.logger.info(
            "Detected languages: %s (primary: %s)",
            ", ".join(detected) or "none",
            primary or "none",
        )
        return LanguageSet(detected=tuple(detected), primary=primary)


__all__ = ["LanguageDetector", "TSCONFIG"]
