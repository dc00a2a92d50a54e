"""
Command-line interface for rutify.

Example: python -m rutify format 18927589-7 20901792k --format compact
"""

import argparse
import sys
from typing import Any, Callable, Dict, List, Optional

from . import __version__
from .core import (
    extract_body,
    extract_check_digit,
    generate_check_digit,
    is_format,
    normalize,
    rutify,
    rutify_and_validate,
    validate_rut,
)
from .log_config import configure_logging, get_logger
from .options import RutFormat
from .settings import get_settings

logger = get_logger(__name__)

FORMAT_CHOICES = [f.value for f in RutFormat]


def build_options(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Build the options mapping from CLI arguments and settings.

    Args:
        args: Parsed arguments

    Returns:
        Options mapping for the core operations
    """
    config = get_settings()
    return {
        "separator": args.separator if args.separator is not None else config.default_separator,
        "format": args.format or config.default_format.value,
        "strict": args.strict,
        "normalize": not args.no_normalize,
    }


def _emit_values(values: List[str], operation: Callable[[str], Any]) -> int:
    """Print one result per input; return 1 if any input was rejected."""
    failed = 0
    for value in values:
        result = operation(value)
        if result is False:
            print(f"invalid RUT: {value!r}", file=sys.stderr)
            failed += 1
        else:
            print(result)
    return 1 if failed else 0


def _emit_flags(values: List[str], operation: Callable[[str], bool], labels=("true", "false")) -> int:
    """Print a label per input; return 1 if any check was negative."""
    failed = 0
    for value in values:
        ok = operation(value)
        print(labels[0] if ok else labels[1])
        if not ok:
            failed += 1
    return 1 if failed else 0


def run_command(args: argparse.Namespace) -> int:
    """
    Dispatch a parsed command.

    Returns:
        Exit code (0 if every input succeeded, 1 otherwise)
    """
    command = args.command
    values = args.values

    if command == "generate":
        return _emit_values(values, generate_check_digit)

    if command == "normalize":
        return _emit_values(values, normalize)

    if command == "is-format":
        return _emit_flags(values, lambda v: is_format(v, args.target))

    options = build_options(args)

    if command == "format":
        return _emit_values(values, lambda v: rutify(v, options))

    if command == "body":
        return _emit_values(values, lambda v: extract_body(v, options))

    if command == "check-digit":
        return _emit_values(values, lambda v: extract_check_digit(v, options))

    if command == "validate":
        return _emit_flags(values, lambda v: validate_rut(v, options), ("valid", "invalid"))

    if command == "check":
        failed = 0
        for value in values:
            result = rutify_and_validate(value, options)
            print(result.to_json())
            if not result.is_valid:
                failed += 1
        return 1 if failed else 0

    raise ValueError(f"Unknown command: {command}")


def _add_option_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--separator",
        help="Thousands separator for the standard format (default: '.')"
    )
    parser.add_argument(
        "--format",
        choices=FORMAT_CHOICES,
        help="Output format (default: standard)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Use strict shape validation"
    )
    parser.add_argument(
        "--no-normalize",
        action="store_true",
        help="Only strip dots, spaces and hyphens instead of every foreign character"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="rutify",
        description="Format and validate Chilean RUTs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m rutify format 18927589-7
  python -m rutify format 18927589-7 --format compact
  python -m rutify validate 18.927.589-7 20.901.792-K
  python -m rutify check 18927589-7
  python -m rutify generate 18927589
  python -m rutify is-format 18.927.589-7 --target standard
        """
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override log level from configuration"
    )

    parser.add_argument(
        "--log-format",
        choices=["json", "text"],
        help="Override log format from configuration"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"rutify {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in [
        ("format", "Format RUTs"),
        ("validate", "Validate RUT check digits"),
        ("check", "Format and validate RUTs, printing a JSON result"),
        ("body", "Extract the body of RUTs"),
        ("check-digit", "Extract the check digit of RUTs"),
    ]:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("values", nargs="+", metavar="RUT")
        _add_option_flags(sub)

    generate = subparsers.add_parser("generate", help="Compute check digits for RUT bodies")
    generate.add_argument("values", nargs="+", metavar="BODY")

    norm = subparsers.add_parser("normalize", help="Strip all formatting from RUTs")
    norm.add_argument("values", nargs="+", metavar="RUT")

    fmt = subparsers.add_parser("is-format", help="Check whether RUTs are written in a format")
    fmt.add_argument("values", nargs="+", metavar="RUT")
    fmt.add_argument(
        "--target",
        choices=FORMAT_CHOICES,
        default=RutFormat.STANDARD.value,
        help="Format to check against (default: standard)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI application.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level, args.log_format)

    logger.debug("Running command", command=args.command, inputs=len(args.values))

    try:
        return run_command(args)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 1
    except Exception as e:
        logger.error(
            "Command failed with unexpected error",
            command=args.command,
            error=str(e),
            error_type=type(e).__name__
        )
        return 1


def cli_main():
    """Synchronous entry point for setuptools console scripts."""
    return main()


if __name__ == "__main__":
    sys.exit(main())
