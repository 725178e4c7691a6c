"""
Command line interface for fieldspec.

Usage:
    # Parse specifications given as arguments
    fieldspec "text default('English') required" "checkbox default('true')"

    # One specification per stdin line
    cat fields.txt | fieldspec

    # Build a form config from name=spec pairs
    fieldspec --schema --title "Profile" "language=text default('English')"
"""

import argparse
import json
import logging
import sys

from fieldspec.config import get_config
from fieldspec.models.schema_output import FormSchema
from fieldspec.parser import FieldSpecParser, parse_form

logger = logging.getLogger("fieldspec")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _split_pair(item: str) -> tuple[str, str]:
    name, sep, spec = item.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"Expected name=spec, got {item!r}")
    return name.strip(), spec


def _describe(spec: str, verbose: bool) -> dict:
    """Parse one specification for output, with its tokens when verbose."""
    parser = FieldSpecParser(spec)
    data = parser.parse().to_dict()
    if verbose:
        data["tokens"] = [
            {"name": t.name, "args": list(t.args) if t.args is not None else None}
            for t in parser.tokens
        ]
    return data


def build_parser() -> argparse.ArgumentParser:
    config = get_config()

    parser = argparse.ArgumentParser(
        prog="fieldspec",
        description="Parse field specifications into form field metadata",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fieldspec "text default('English') required"
  fieldspec --schema "agree=checkbox default('true')" "country=select('TR', 'US')"

Environment Variables:
  FIELDSPEC_LOG_LEVEL        Logging level (default: INFO)
  FIELDSPEC_INDENT_JSON      JSON indentation (default: 2)
  FIELDSPEC_VERBOSE_OUTPUT   Include tokens in the output (default: false)
        """,
    )
    parser.add_argument(
        "specs",
        nargs="*",
        help="Field specifications; read from stdin when omitted",
    )
    parser.add_argument(
        "--schema",
        action="store_true",
        help="Treat specs as name=spec pairs and print a form config",
    )
    parser.add_argument("--form-id", default="form", help="Form id for --schema (default: form)")
    parser.add_argument("--title", default="Form", help="Form title for --schema (default: Form)")
    parser.add_argument(
        "--indent",
        type=int,
        default=config.indent_json_output,
        help=f"JSON indentation (default: {config.indent_json_output})",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.log_level,
        help=f"Logging level (default: {config.log_level})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=config.verbose_output,
        help="Include the scanned tokens of each specification",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, stream=sys.stderr)

    specs = args.specs or [line.rstrip("\n") for line in sys.stdin if line.strip()]

    if args.schema:
        try:
            fields = dict(_split_pair(item) for item in specs)
        except argparse.ArgumentTypeError as e:
            parser.error(str(e))
        schema = FormSchema.from_results(args.form_id, args.title, parse_form(fields))
        output = schema.to_form_config()
    else:
        output = [_describe(spec, args.verbose) for spec in specs]

    print(json.dumps(output, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
