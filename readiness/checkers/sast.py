"""Static application security testing (SAST) checker."""

from __future__ import annotations

from typing import Any, Dict

from .base import Checker, absent, present
from ..logging import get_logger
from ..models import ScanContext

CODEQL_WORKFLOWS = (".github/workflows/*codeql*.yml", ".github/workflows/*codeql*.yaml")
SEMGREP_CONFIGS = (".semgrep.yml", ".semgrep.yaml", "semgrep.yml", "semgrep.yaml")
SEMGREP_WORKFLOWS = (".github/workflows/*semgrep*.yml", ".github/workflows/*semgrep*.yaml")


class SastChecker(Checker):
    """Detects CodeQL workflows and Semgrep configuration. Runs for every language."""

    name = "sast"

    def __init__(self) -> None:
        self.logger = get_logger("checkers.sast")

    def check(self, context: ScanContext) -> Dict[str, Any]:
        files = context.files
        result = self.default(context)

        codeql_workflows = files.find_any(CODEQL_WORKFLOWS)
        if codeql_workflows:
            result["codeql"] = present(workflow_file=codeql_workflows[0])

        semgrep_config = files.first_existing(SEMGREP_CONFIGS)
        if semgrep_config is not None:
            result["semgrep"] = present(config_file=semgrep_config)
        else:
            semgrep_workflows = files.find_any(SEMGREP_WORKFLOWS)
            if semgrep_workflows:
                result["semgrep"] = present(workflow_file=semgrep_workflows[0])

        self.logger.debug("SAST result: %s", result)
        return result

    def default(self, context: ScanContext) -> Dict[str, Any]:
        return {"codeql": absent(), "semgrep": absent()}
