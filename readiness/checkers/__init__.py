"""Checker plugin implementations and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Iterable, List, Sequence, Set

from .architecture import ArchitectureChecker
from .base import Checker
from .coverage import CoverageChecker
from .documentation import DocumentationChecker
from .formatters import FormatterChecker
from .linting import LintingChecker
from .sast import SastChecker
from .type_checking import TypeCheckingChecker

_ENTRY_POINT_GROUP = "readiness.checkers"

# Order matches the ``checks`` section of the report.
_BUILTIN_FACTORIES: dict[str, Callable[[], Checker]] = {
    "documentation": DocumentationChecker,
    "formatters": FormatterChecker,
    "type_checking": TypeCheckingChecker,
    "linting": LintingChecker,
    "sast": SastChecker,
    "architecture_tests": ArchitectureChecker,
    "test_coverage": CoverageChecker,
}


def discover_checkers(enabled: Sequence[str] | None = None) -> List[Checker]:
    """Return instantiated checkers, honoring optional enabled names."""

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {name.lower() for name in enabled}

    checkers: List[Checker] = []
    seen: Set[str] = set()

    def _add(name: str, factory: Callable[[], Checker]) -> None:
        key = name.lower()
        if enabled_set is not None and key not in enabled_set:
            return
        if key in seen:
            return
        instance = factory()
        if not isinstance(instance, Checker):
            raise TypeError(f"Checker factory for '{name}' did not return a Checker instance")
        if not instance.name:
            instance.name = key
        checkers.append(instance)
        seen.add(key)

    for name, factory in _BUILTIN_FACTORIES.items():
        _add(name, factory)

    for entry in _iter_entry_points():
        name = entry.name
        try:
            loaded = entry.load()
        except Exception as exc:
            raise RuntimeError(f"Failed to load checker entry point '{name}': {exc}") from exc

        def _factory(obj: object = loaded) -> Checker:
            return _coerce_checker(obj)

        _add(name, _factory)

    if enabled_set is not None:
        missing = enabled_set - seen
        if missing:
            raise ValueError(f"Unknown checkers requested: {', '.join(sorted(missing))}")

    return checkers


def available_checker_names() -> List[str]:
    """Return built-in checker names followed by those registered as entry points."""
    names = list(_BUILTIN_FACTORIES)
    for entry in _iter_entry_points():
        name = entry.name.lower()
        if name not in names:
            names.append(name)
    return names


def _coerce_checker(obj: object) -> Checker:
    if isinstance(obj, Checker):
        return obj
    if isinstance(obj, type) and issubclass(obj, Checker):
        return obj()
    if callable(obj):
        instance = obj()
        if isinstance(instance, Checker):
            return instance
    raise TypeError("Checker entry point must be a Checker subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "ArchitectureChecker",
    "Checker",
    "CoverageChecker",
    "DocumentationChecker",
    "FormatterChecker",
    "LintingChecker",
    "SastChecker",
    "TypeCheckingChecker",
    "available_checker_names",
    "discover_checkers",
]
