"""Type checking checker."""

from __future__ import annotations

from typing import Any, Dict

from .base import Checker, absent, present
from ..languages import TSCONFIG
from ..models import JAVA, TYPESCRIPT, ScanContext


class TypeCheckingChecker(Checker):
    name = "type_checking"

    def check(self, context: ScanContext) -> Dict[str, Any]:
        result: Dict[str, Any] = {TYPESCRIPT: {}, JAVA: {}}

        if context.languages.has(TYPESCRIPT):
            if context.files.exists(TSCONFIG):
                result[TYPESCRIPT] = present(config_file=TSCONFIG)
            else:
                result[TYPESCRIPT] = absent("config_file")

        # Java is statically typed by the compiler; nothing to configure.
        if context.languages.has(JAVA):
            result[JAVA] = present(builtin=True)

        return result

    def default(self, context: ScanContext) -> Dict[str, Any]:
        result: Dict[str, Any] = {TYPESCRIPT: {}, JAVA: {}}
        if context.languages.has(TYPESCRIPT):
            result[TYPESCRIPT] = absent("config_file")
        if context.languages.has(JAVA):
            result[JAVA] = absent()
        return result
