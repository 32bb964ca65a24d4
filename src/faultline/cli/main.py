"""CLI entrypoint for Faultline reports."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from faultline import __version__
from faultline.config import load_config
from faultline.constants.branding import CLI_DESCRIPTION
from faultline.constants.config import VALID_COLOR_MODES
from faultline.exceptions import ConfigError, ResultError
from faultline.exceptions.validation import format_errors
from faultline.loader import load_analysis_result, validate_result_document
from faultline.reporting import ConsoleOutput, get_formatter


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="faultline",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    report = subparsers.add_parser("report", help="Render an analysis result as a terminal report")
    report.add_argument("-i", "--input", type=Path, required=True, help="Analysis result JSON file")
    report.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding faultline.yaml")
    report.add_argument("-c", "--config", type=Path, help="Explicit config file")
    report.add_argument("-f", "--formatter", default=None, help="Registered formatter name (default: terminal)")
    report.add_argument(
        "-w",
        "--width",
        type=_positive_int,
        default=None,
        help="Terminal width used to size separators (default: detect)",
    )
    color = report.add_mutually_exclusive_group()
    color.add_argument(
        "--color",
        choices=sorted(VALID_COLOR_MODES),
        default=None,
        help="Colour mode for status lines (default: auto)",
    )
    color.add_argument("--no-color", action="store_true", help="Disable colored output")
    report.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")

    validate = subparsers.add_parser("validate-result", help="Validate an analysis result file without reporting")
    validate.add_argument("-i", "--input", type=Path, required=True, help="Analysis result JSON file")
    validate.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-result":
        return _handle_validate_result(args)

    if args.command != "report":
        parser.error(f"Unsupported command: {args.command}")

    return _handle_report(args)


def _handle_report(args: argparse.Namespace) -> int:
    """Load config and result, then render the report to stdout."""
    try:
        config = load_config(args.root, args.config).with_overrides(
            formatter=args.formatter,
            color="never" if args.no_color else args.color,
            terminal_width=args.width,
        )
        reporter = get_formatter(config.formatter, width_provider=config.width_provider())
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        result = load_analysis_result(args.input)
    except ResultError as exc:
        print(f"Result error: {exc}", file=sys.stderr)
        return 2

    output = ConsoleOutput(sys.stdout, color=config.use_color(sys.stdout))
    return int(reporter.format_result(result, output))


def _handle_validate_result(args: argparse.Namespace) -> int:
    """Validate a result document and report problems."""
    errors = validate_result_document(args.input)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Result document is valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
