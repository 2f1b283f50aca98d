"""Delivery of finished reports to an HTTP endpoint or stdout."""

from __future__ import annotations

import json
import sys
from typing import Any, Mapping, Optional, TextIO
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from . import __version__
from .logging import get_logger

_LOGGER = get_logger("reporter")
USER_AGENT = f"ai-readiness/{__version__}"


class DeliveryError(RuntimeError):
    """Raised when the report could not be posted to the endpoint."""


def post_results(
    report: Mapping[str, Any],
    endpoint: Optional[str],
    token: Optional[str] = None,
    *,
    timeout: float = 30.0,
    stream: TextIO | None = None,
) -> None:
    """POST ``report`` as JSON to ``endpoint``.

    Without an endpoint the report is printed to ``stream`` (stdout by default).
    When the POST fails the report is printed as well so it is not lost, and
    :class:`DeliveryError` is raised.
    """
    out = stream if stream is not None else sys.stdout
    if not endpoint:
        _LOGGER.info("No endpoint URL provided, writing report to stdout")
        _print_report(report, out)
        return

    headers = {
        "Content-Type": "application/json",
        "User-Agent": USER_AGENT,
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"

    data = json.dumps(report).encode("utf-8")

    try:
        request = Request(endpoint, data=data, headers=headers, method="POST")
        with urlopen(request, timeout=timeout) as response:  # type: ignore[arg-type]
            status = getattr(response, "status", 200)
    except HTTPError as exc:
        _LOGGER.error("Failed to post results: HTTP %s: %s", exc.code, exc.reason)
        _print_report(report, out)
        raise DeliveryError(f"HTTP {exc.code}: {exc.reason}") from exc
    except URLError as exc:
        _LOGGER.error("Failed to post results: %s", exc.reason)
        _print_report(report, out)
        raise DeliveryError(f"Failed to reach {endpoint}: {exc.reason}") from exc
    except ValueError as exc:
        # Raised by Request for a URL without a scheme or host.
        _LOGGER.error("Invalid endpoint URL %r: %s", endpoint, exc)
        _print_report(report, out)
        raise DeliveryError(f"Invalid endpoint URL {endpoint!r}: {exc}") from exc
    except OSError as exc:
        # Socket timeouts and resets while reading the response.
        _LOGGER.error("Failed to post results: %s", exc)
        _print_report(report, out)
        raise DeliveryError(f"Failed to deliver to {endpoint}: {exc}") from exc

    if not 200 <= status < 300:
        _LOGGER.error("Failed to post results: HTTP %s", status)
        _print_report(report, out)
        raise DeliveryError(f"HTTP {status}")

    _LOGGER.info("Successfully posted results to %s", endpoint)


def _print_report(report: Mapping[str, Any], stream: TextIO) -> None:
    stream.write(json.dumps(report, indent=2))
    stream.write("\n")
    stream.flush()


__all__ = ["DeliveryError", "USER_AGENT", "post_results"]
