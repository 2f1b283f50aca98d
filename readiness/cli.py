"""CLI entrypoints for readiness commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .coordinator import Coordinator
from .logging import configure_logging


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readiness",
        description="Report which engineering-hygiene tools a repository has configured.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan_parser = subparsers.add_parser(
        "scan",
        help="Scan a repository and deliver the readiness report.",
    )
    _add_verbose_option(scan_parser, suppress_default=True)
    scan_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the repository root (defaults to current directory).",
    )
    scan_parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Minimum line coverage percentage (defaults to 90).",
    )
    scan_parser.add_argument(
        "--endpoint",
        default=None,
        help="URL that receives the report via HTTP POST. Printed to stdout when unset.",
    )
    scan_parser.add_argument(
        "--token",
        default=None,
        help="Bearer token sent with the report.",
    )
    scan_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Also write the report JSON to this file.",
    )
    scan_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when the scan or delivery fails.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service exposing scans.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="0.0.0.0", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to bind.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for readiness commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "scan":
        overrides = {
            "coverage_threshold": args.threshold,
            "endpoint": args.endpoint,
            "token": args.token,
        }
        outcome = Coordinator().run(args.path, overrides)
        if outcome.report is not None and args.output is not None:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(outcome.report.to_json(indent=2) + "\n", encoding="utf-8")
        if not outcome.ok and args.strict:
            parser.exit(1, f"readiness scan failed: {outcome.error}\n")
        # A failed scan must not break the calling CI job unless --strict is set.
        parser.exit(0)
    elif args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
