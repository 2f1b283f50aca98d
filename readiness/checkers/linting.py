"""Linter checker."""

from __future__ import annotations

from typing import Any, Dict

from .base import Checker, JavaPluginProbe, absent, present, probe_config
from ..logging import get_logger
from ..models import ScanContext

ESLINT_CONFIGS = (
    ".eslintrc",
    ".eslintrc.js",
    ".eslintrc.cjs",
    ".eslintrc.json",
    ".eslintrc.yml",
    ".eslintrc.yaml",
    "eslint.config.js",
    "eslint.config.cjs",
    "eslint.config.mjs",
)


class LintingChecker(Checker):
    """Detects ESLint for JS/TS and SpotBugs, PMD for Java."""

    name = "linting"

    java_plugins = JavaPluginProbe(
        {
            "spotbugs": (("spotbugs-maven-plugin",), ("com.github.spotbugs", "spotbugs")),
            "pmd": (("maven-pmd-plugin",), ("pmd",)),
        }
    )

    def __init__(self) -> None:
        self.logger = get_logger("checkers.linting")

    def check(self, context: ScanContext) -> Dict[str, Any]:
        result = self.default(context)

        if context.languages.has_js_family:
            config_file = probe_config(context.files, ESLINT_CONFIGS, package_key="eslintConfig")
            self.logger.debug("ESLint config: %s", config_file or "not found")
            result["javascript"]["eslint"] = (
                present(config_file=config_file)
                if config_file is not None
                else absent("config_file")
            )

        if context.languages.has("java"):
            result["java"] = self.java_plugins.probe(context.files)
            self.logger.debug("Java linters: %s", result["java"])

        return result

    def default(self, context: ScanContext) -> Dict[str, Any]:
        result: Dict[str, Any] = {"javascript": {}, "java": {}}
        if context.languages.has_js_family:
            result["javascript"]["eslint"] = absent("config_file")
        if context.languages.has("java"):
            result["java"] = self.java_plugins.defaults()
        return result
