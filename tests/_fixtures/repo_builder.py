"""Helper utilities for constructing temporary repositories in tests."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any, Mapping

from readiness.config import ScanSettings
from readiness.files import RepoFiles
from readiness.languages import LanguageDetector
from readiness.models import ScanContext


class RepoBuilder:
    """Utility for writing files into a throwaway repository and probing it."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "repo"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the repository."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def write_json(self, relative: str, payload: Any) -> None:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def files(self) -> RepoFiles:
        return RepoFiles(self.root)

    def context(self, settings: ScanSettings | None = None) -> ScanContext:
        """Return a scan context with languages detected from the current files."""
        files = self.files()
        return ScanContext(
            files=files,
            languages=LanguageDetector().detect(files),
            settings=settings or ScanSettings(),
        )

    def path(self) -> Path:
        """Return the repository root path."""
        return self.root


POM_WITH_CHECKSTYLE = """
<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
  <groupId>com.example</groupId>
  <artifactId>test-app</artifactId>
  <version>1.0.0</version>

  <build>
    <plugins>
      <plugin>
        <groupId>org.apache.maven.plugins</groupId>
        <artifactId>maven-checkstyle-plugin</artifactId>
        <version>3.3.0</version>
      </plugin>
    </plugins>
  </build>

  <dependencies>
    <dependency>
      <groupId>com.tngtech.archunit</groupId>
      <artifactId>archunit</artifactId>
      <version>1.2.1</version>
      <scope>test</scope>
    </dependency>
  </dependencies>
</project>
"""


__all__ = ["POM_WITH_CHECKSTYLE", "RepoBuilder"]
