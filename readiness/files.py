"""File access rooted at an explicit repository directory."""

from __future__ import annotations

import json
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, Iterable, List

_DEFAULT_EXCLUDED_DIRS = (".git",)


class ManifestError(ValueError):
    """Raised when an existing JSON or XML file cannot be decoded."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Failed to parse {path}: {detail}")
        self.path = path
        self.detail = detail


class RepoFiles:
    """Answers existence, search and read queries relative to ``root``.

    Every probe path is relative to the root handed in at construction time, so
    several scans of different repositories can run side by side in one process.
    Missing files are reported as ``False``/``None``; only malformed content in a
    file that does exist raises.
    """

    def __init__(self, root: str | Path, exclude_dirs: Iterable[str] | None = None) -> None:
        self.root = Path(root).expanduser().resolve()
        self.exclude_dirs = frozenset(
            exclude_dirs if exclude_dirs is not None else _DEFAULT_EXCLUDED_DIRS
        )

    def path(self, relative: str) -> Path:
        return self.root / relative

    def exists(self, relative: str) -> bool:
        """Return True when ``relative`` names a regular file (not a directory)."""
        return self.path(relative).is_file()

    def first_existing(self, candidates: Iterable[str]) -> str | None:
        """Return the first candidate that exists, probing in order."""
        for candidate in candidates:
            if self.exists(candidate):
                return candidate
        return None

    def find(self, pattern: str) -> List[str]:
        """Return sorted POSIX paths of files matching ``pattern`` under the root."""
        matches: List[str] = []
        for path in self.root.glob(pattern):
            if not path.is_file():
                continue
            rel = path.relative_to(self.root)
            if any(part in self.exclude_dirs for part in rel.parts[:-1]):
                continue
            matches.append(rel.as_posix())
        return sorted(matches)

    def find_any(self, patterns: Iterable[str]) -> List[str]:
        """Return matches for several patterns, preserving pattern order."""
        found: List[str] = []
        for pattern in patterns:
            for match in self.find(pattern):
                if match not in found:
                    found.append(match)
        return found

    def read_text(self, relative: str, *, errors: str = "strict") -> str | None:
        """Return the decoded file, or None when missing.

        Pass ``errors="replace"`` for free-form text where stray bytes must not fail.
        """
        try:
            return self.path(relative).read_text(encoding="utf-8", errors=errors)
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            return None

    def read_json(self, relative: str) -> Any | None:
        text = self._read_manifest_text(relative)
        if text is None:
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ManifestError(relative, str(exc)) from exc

    def read_xml(self, relative: str) -> Dict[str, Any] | None:
        text = self._read_manifest_text(relative)
        if text is None:
            return None
        try:
            root = ET.fromstring(text)
        except ET.ParseError as exc:
            raise ManifestError(relative, str(exc)) from exc
        return {_local_name(root.tag): _element_to_node(root)}

    def _read_manifest_text(self, relative: str) -> str | None:
        try:
            return self.read_text(relative)
        except UnicodeDecodeError as exc:
            raise ManifestError(relative, str(exc)) from exc


def _local_name(tag: str) -> str:
    return re.sub(r"^\{.*?}", "", tag)


def _element_to_node(element: ET.Element) -> Any:
    """Decode an element into nested mappings of child-tag -> list of nodes.

    Repeated and single children are both stored as lists. Attributes live under
    ``"$"``; text of an element that also has attributes or children lives under
    ``"_"``. A bare leaf decodes to its stripped text.
    """
    text = (element.text or "").strip()
    children = list(element)
    attributes = {_local_name(key): value for key, value in element.attrib.items()}

    if not children and not attributes:
        return text

    node: Dict[str, Any] = {}
    if attributes:
        node["$"] = attributes
    if text:
        node["_"] = text
    for child in children:
        if not isinstance(child.tag, str):
            continue
        node.setdefault(_local_name(child.tag), []).append(_element_to_node(child))
    return node


__all__ = ["ManifestError", "RepoFiles"]
