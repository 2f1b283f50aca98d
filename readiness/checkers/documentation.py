"""Agent documentation checker (AGENTS.md and SKILL.md)."""

from __future__ import annotations

from typing import Any, Dict

from .base import Checker
from ..logging import get_logger
from ..models import ScanContext


class DocumentationChecker(Checker):
    """Looks for AGENTS.md in its usual homes and every SKILL.md in the tree."""

    name = "documentation"

    AGENTS_MD_LOCATIONS = ("AGENTS.md", "docs/AGENTS.md", ".github/AGENTS.md")
    SKILL_MD_PATTERN = "**/SKILL.md"

    def __init__(self) -> None:
        self.logger = get_logger("checkers.documentation")

    def check(self, context: ScanContext) -> Dict[str, Any]:
        files = context.files
        agents_md = files.first_existing(self.AGENTS_MD_LOCATIONS)
        skill_files = files.find(self.SKILL_MD_PATTERN)
        self.logger.debug(
            "AGENTS.md: %s; SKILL.md files: %d", agents_md or "not found", len(skill_files)
        )
        return {
            "agents_md": {"present": agents_md is not None, "path": agents_md},
            "skill_md": {"count": len(skill_files), "paths": skill_files},
        }

    def default(self, context: ScanContext) -> Dict[str, Any]:
        return {
            "agents_md": {"present": False, "path": None},
            "skill_md": {"count": 0, "paths": []},
        }
