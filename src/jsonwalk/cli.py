"""Command-line JSON validator.

Usage:
    jsonwalk FILE...              Validate files, print diagnostics for invalid ones
    jsonwalk --suite FILE...      Check files against JSONTestSuite naming:
                                    y*  must be valid
                                    n*  must be invalid
                                    i*  implementation-defined (reported only)

Exit Codes:
    0: All files valid (or, with --suite, all expectations met)
    1: At least one invalid file (or unmet expectation)
    2: At least one file could not be read

Each file is read completely into memory before validation; the engine
works on resident text only.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from jsonwalk import __version__
from jsonwalk.diagnostics import (
    Diagnostic,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
    SourceTooLargeError,
    ValidationResult,
)
from jsonwalk.syntax import JsonValidator

__all__ = ["main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_UNREADABLE = 2

# JSONTestSuite file name prefixes
_EXPECT_VALID = "y"
_EXPECT_INVALID = "n"
_IMPLEMENTATION_DEFINED = "i"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonwalk",
        description="Validate JSON files without building a parse tree.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="JSON files to validate")
    parser.add_argument(
        "--suite",
        action="store_true",
        help="treat files as JSONTestSuite cases (y_/n_/i_ name prefixes)",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.RUST.value,
        help="diagnostic output format (default: rust)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="maximum array/object nesting depth",
    )
    parser.add_argument(
        "--max-size",
        type=int,
        default=None,
        help="maximum file size in bytes (0 disables the limit)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _with_path(diagnostic: Diagnostic, path: Path) -> Diagnostic:
    return replace(diagnostic, source_path=str(path))


def _validate_file(
    validator: JsonValidator, path: Path
) -> ValidationResult | Diagnostic:
    """Validate one file; return a Diagnostic instead if it cannot be read.

    The unreadable Diagnostic already names the file. Diagnostics inside a
    ValidationResult do not; callers attach the path when printing.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        logger.debug("Failed to read %s: %s", path, e)
        return ErrorTemplate.file_unreadable(str(path), e.strerror or str(e))

    try:
        return validator.validate(data)
    except SourceTooLargeError as e:
        assert e.diagnostic is not None  # noqa: S101 - always built from a template
        # Oversize input is rejected like malformed input, not as unreadable
        return ValidationResult.invalid(0, e.diagnostic)


def _run_files(
    validator: JsonValidator, files: Sequence[Path], formatter: DiagnosticFormatter
) -> int:
    status = EXIT_OK
    for path in files:
        outcome = _validate_file(validator, path)
        if isinstance(outcome, Diagnostic):
            print(formatter.format(outcome), file=sys.stderr)
            status = max(status, EXIT_UNREADABLE)
            continue
        if outcome.is_valid:
            logger.info("%s: valid %s", path, outcome.kind)
            continue
        for diagnostic in outcome.errors:
            print(formatter.format(_with_path(diagnostic, path)), file=sys.stderr)
        status = max(status, EXIT_INVALID)
    return status


def _run_suite(
    validator: JsonValidator, files: Sequence[Path], formatter: DiagnosticFormatter
) -> int:
    status = EXIT_OK
    for path in files:
        prefix = path.name[:1]
        if prefix not in (_EXPECT_VALID, _EXPECT_INVALID, _IMPLEMENTATION_DEFINED):
            print(f"invalid test: {path}")
            status = max(status, EXIT_INVALID)
            continue

        outcome = _validate_file(validator, path)
        if isinstance(outcome, Diagnostic):
            print(formatter.format(outcome), file=sys.stderr)
            status = max(status, EXIT_UNREADABLE)
            continue

        if prefix == _IMPLEMENTATION_DEFINED:
            verdict = "accepted" if outcome.is_valid else "rejected"
            logger.info("%s: implementation-defined, %s", path, verdict)
            continue

        if outcome.is_valid != (prefix == _EXPECT_VALID):
            print(f"test failed: {path}")
            for diagnostic in outcome.errors:
                print(formatter.format(_with_path(diagnostic, path)))
            status = max(status, EXIT_INVALID)
    return status


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``jsonwalk`` console script."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    validator = JsonValidator(
        max_source_size=args.max_size, max_nesting_depth=args.max_depth
    )
    formatter = DiagnosticFormatter(output_format=OutputFormat(args.format))

    if args.suite:
        return _run_suite(validator, args.files, formatter)
    return _run_files(validator, args.files, formatter)


if __name__ == "__main__":
    sys.exit(main())
