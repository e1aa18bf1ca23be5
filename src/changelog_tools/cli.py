"""Command-line interface for changelog-tools."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from . import __version__
from .errors import ChangelogError
from .logging_utils import setup_logging
from .options import BULLETS, HYPHEN, SerializationOptions
from .paths import ensure_dir, log_dir
from .processor import extract_release_notes
from .runtime_config import (
    resolve_console_level,
    resolve_fallback,
    resolve_log_level,
)
from .version import build_help_epilog


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with its `extract` sub-command."""
    parser = argparse.ArgumentParser(
        prog="changelog-tools",
        description="CLI tools for working with changelogs.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=build_help_epilog(),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument(
        "--quiet", action="store_true", help="Only show warnings and errors"
    )
    parser.add_argument("--log-file", help="Write logs to a file path")

    subparsers = parser.add_subparsers(dest="command")
    extract_parser = subparsers.add_parser(
        "extract",
        help="Extract the notes of one release from a changelog.",
        description="Print the changelog section of one release to stdout.",
    )
    extract_parser.add_argument(
        "-e",
        "--extract-version",
        metavar="VERSION",
        help="Extract a specific version from the changelog (e.g., 1.0.0)",
    )
    extract_parser.add_argument(
        "-i",
        "--input",
        metavar="FILE",
        help=(
            "Path to changelog file "
            "(default: searches for CHANGELOG.md in current directory)"
        ),
    )
    extract_parser.add_argument(
        "-f",
        "--fallback",
        metavar="TEXT",
        help="Fallback text if the version number is not found",
    )
    extract_parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Also write the extracted notes to this file",
    )
    extract_parser.add_argument(
        "-b",
        "--bullet",
        choices=BULLETS,
        default=HYPHEN,
        help="List bullet marker used in the output (default: -)",
    )
    extract_parser.set_defaults(print_help=extract_parser.print_help)
    return parser


def run_extract(args: argparse.Namespace) -> int:
    """Extract release notes and write them to stdout (and `--output`)."""
    notes = extract_release_notes(
        args.extract_version,
        input_path=args.input,
        fallback=resolve_fallback(args.fallback),
        serialization=SerializationOptions(bullet=args.bullet),
    )
    if args.output:
        output_path = Path(args.output)
        ensure_dir(output_path.parent)
        output_path.write_text(notes, encoding="utf-8")
    sys.stdout.write(notes)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = logging.getLogger(__name__)
    try:
        level = resolve_log_level(verbose=args.verbose, quiet=args.quiet)
        setup_logging(
            log_dir=log_dir(),
            level=level,
            log_file=Path(args.log_file) if args.log_file else None,
            console_level=resolve_console_level(
                verbose=args.verbose, quiet=args.quiet
            ),
        )
        if getattr(args, "command", None) != "extract" or not args.extract_version:
            getattr(args, "print_help", parser.print_help)()
            return 0
        return run_extract(args)
    except (ChangelogError, OSError) as exc:
        logger.info("Extraction failed: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:  # pragma: no cover - top-level safety net
        logger.exception("Unhandled error: %s", exc)
        print("Unexpected error. Re-run with --verbose for details.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
