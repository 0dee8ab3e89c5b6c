"""
Command line entry point.

Usage::

    hrc process notes.md --levels levels.json
    hrc process notes.md --levels levels.json --output outline.md -v
    hrc serve --port 8420

The level file is JSON, either a list of level objects or
``{"levels": [...]}``; see ``hrc.config.LevelSpec`` for the keys.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from hrc import __version__
from hrc.config import LevelConfigError, build_level_configs, load_level_specs
from hrc.documents import DocumentIOError, process_file
from hrc.hardening import ErrorFormatter, InputValidator, ValidationError
from hrc.reporting import build_summary_text

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hrc",
        description="Rewrite pattern-matched lines into a numbered outline.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    process = subparsers.add_parser("process", help="Renumber a document")
    process.add_argument("input", help="Document to process")
    process.add_argument(
        "--levels", "-l", required=True, help="JSON file with the level configuration"
    )
    process.add_argument(
        "--output", "-o", help="Output path (default: <name>.processed<ext>)"
    )
    process.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8420)

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )


def run_process(args: argparse.Namespace) -> int:
    """Run the ``process`` command. Returns the exit status."""
    validator = InputValidator()
    try:
        input_path = validator.validate_file_path(args.input)
        output_path = (
            validator.validate_file_path(args.output, must_exist=False)
            if args.output
            else None
        )
        levels = build_level_configs(load_level_specs(Path(args.levels)))
        outcome = process_file(input_path, levels, output_path)
    except (ValidationError, LevelConfigError, DocumentIOError) as exc:
        error = ErrorFormatter().format_processing_error(exc)
        logger.debug("Processing failed: %s", error.technical_detail)
        print(str(error), file=sys.stderr)
        return 1

    print(build_summary_text(outcome.result, outcome.output_path), end="")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        _configure_logging(verbose=False)
        from hrc.server import run_server

        run_server(host=args.host, port=args.port)
        return 0

    _configure_logging(args.verbose)
    return run_process(args)


if __name__ == "__main__":
    sys.exit(main())
