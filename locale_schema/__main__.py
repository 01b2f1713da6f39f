"""
Print the schema of a locale file.

Usage:
    python -m locale_schema locales/en.json
    python -m locale_schema locales/en.json locales/fr.json --locale fr --format text --verbose
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from locale_schema.errors import LocaleSchemaError
from locale_schema.flatten import DEFAULT_MAX_DEPTH
from locale_schema.loader import load_many, representative_locale
from locale_schema.schema import AnalysisOptions, LocaleSchema, analyze


def format_text(schema: LocaleSchema) -> str:
    lines = []
    for key in schema.keys:
        key_schema = schema.schemas[key]
        fields = ", ".join(key_schema.fields) or "-"
        kind = "plural" if key_schema.is_plural else "plain"
        lines.append(f"{key:<40} {kind:<7} {fields}")
    lines.append("")
    lines.append(f"{len(schema.keys)} keys, {len(schema.scopes)} scopes, {len(schema.groups)} plural groups")
    for item in schema.diagnostics:
        lines.append(f"  [{item.kind.value}] {item.path}: {item.message}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="locale_schema",
        description="Analyze a locale dictionary and print its key and parameter schema",
    )
    parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="Locale files (.json, .yaml, .yml, .toml); the file stem is the locale code",
    )
    parser.add_argument(
        "--locale",
        type=str,
        default=None,
        help="Locale to analyze (default: the first file)",
    )
    parser.add_argument(
        "--format",
        choices=("json", "text"),
        default="json",
        help="Output format",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help="Maximum nesting depth of the locale dictionary",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log lenient parsing findings as warnings",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        locales = load_many((path, path.stem) for path in args.files)
        locale = representative_locale(locales, args.locale)
        schema = analyze(locale, options=AnalysisOptions(max_depth=args.max_depth, verbose=args.verbose))
    except (OSError, KeyError, ValueError, ImportError, LocaleSchemaError) as error:
        logging.error("%s", error)
        return 1

    if args.format == "json":
        print(json.dumps(schema.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(format_text(schema))
    return 0


if __name__ == "__main__":
    sys.exit(main())
