"""Code formatter checker."""

from __future__ import annotations

from typing import Any, Dict

from .base import Checker, JavaPluginProbe, absent, present, probe_config
from ..logging import get_logger
from ..models import ScanContext

PRETTIER_CONFIGS = (
    ".prettierrc",
    ".prettierrc.json",
    ".prettierrc.js",
    ".prettierrc.cjs",
    "prettier.config.js",
    "prettier.config.cjs",
)


class FormatterChecker(Checker):
    """Detects Prettier for JS/TS and Checkstyle, Spotless, google-java-format for Java."""

    name = "formatters"

    java_plugins = JavaPluginProbe(
        {
            "checkstyle": (("maven-checkstyle-plugin",), ("checkstyle",)),
            "spotless": (("spotless-maven-plugin",), ("com.diffplug.spotless", "spotless")),
            "google_java_format": ((), ("com.google.googlejavaformat",)),
        }
    )

    def __init__(self) -> None:
        self.logger = get_logger("checkers.formatters")

    def check(self, context: ScanContext) -> Dict[str, Any]:
        result = self.default(context)

        if context.languages.has_js_family:
            config_file = probe_config(context.files, PRETTIER_CONFIGS, package_key="prettier")
            self.logger.debug("Prettier config: %s", config_file or "not found")
            result["javascript"]["prettier"] = (
                present(config_file=config_file)
                if config_file is not None
                else absent("config_file")
            )

        if context.languages.has("java"):
            result["java"] = self.java_plugins.probe(context.files)
            self.logger.debug("Java formatters: %s", result["java"])

        return result

    def default(self, context: ScanContext) -> Dict[str, Any]:
        result: Dict[str, Any] = {"javascript": {}, "java": {}}
        if context.languages.has_js_family:
            result["javascript"]["prettier"] = absent("config_file")
        if context.languages.has("java"):
            result["java"] = self.java_plugins.defaults()
        return result
