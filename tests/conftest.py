from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.repo_builder import RepoBuilder


@pytest.fixture
def repo_builder(tmp_path: Path) -> RepoBuilder:
    """Provide a reusable repo builder rooted at the pytest tmp_path."""
    return RepoBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _clear_ci_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's CI variables from leaking into settings under test."""
    for key in (
        "COVERAGE_THRESHOLD",
        "TARGET_DIR",
        "ENDPOINT_URL",
        "ENDPOINT_TOKEN",
        "GITHUB_REPOSITORY",
        "GITHUB_SHA",
        "GITHUB_REF",
        "GITHUB_RUN_ID",
        "GITHUB_SERVER_URL",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_readiness_logger() -> Iterator[None]:
    """Drop handlers installed by configure_logging so they never outlive a test."""
    yield
    logger = logging.getLogger("readiness")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
