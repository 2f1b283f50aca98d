"""Repository metadata gathered from CI environment variables."""

from __future__ import annotations

import os
from datetime import UTC, datetime
from typing import Any, Dict, Mapping

from . import __version__

_UNKNOWN = "unknown"
_REF_PREFIXES = ("refs/heads/", "refs/tags/")


def gather_metadata(
    environ: Mapping[str, str] | None = None, *, now: datetime | None = None
) -> Dict[str, Any]:
    """Describe the repository and CI run that produced a report."""
    env = os.environ if environ is None else environ
    name = env.get("GITHUB_REPOSITORY") or "unknown/unknown"
    server_url = (env.get("GITHUB_SERVER_URL") or "https://github.com").rstrip("/")
    run_id = env.get("GITHUB_RUN_ID") or _UNKNOWN
    timestamp = (now or datetime.now(UTC)).isoformat().replace("+00:00", "Z")

    return {
        "repository": {
            "name": name,
            "url": f"{server_url}/{name}",
            "commit_sha": env.get("GITHUB_SHA") or _UNKNOWN,
            "branch": _branch_from_ref(env.get("GITHUB_REF") or _UNKNOWN),
            "run_id": run_id,
            "run_url": f"{server_url}/{name}/actions/runs/{run_id}",
        },
        "timestamp": timestamp,
        "workflow_version": __version__,
    }


def _branch_from_ref(ref: str) -> str:
    for prefix in _REF_PREFIXES:
        if ref.startswith(prefix):
            return ref[len(prefix):]
    return ref


__all__ = ["gather_metadata"]
