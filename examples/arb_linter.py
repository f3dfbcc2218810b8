"""ARB Linter Example - Batch validation of ARB files.

Loads the given ARB files, merges them per module and reports every
document, schema and ICU issue in one pass. Exits non-zero if any error
was found.

Usage:
    python examples/arb_linter.py lib/auth/l10n/*.arb lib/home/l10n/*.arb
    python examples/arb_linter.py --default-locale en --locale en --locale de lib/**/l10n/*.arb

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys

from arblexengine import AggregatorConfig, ArbFileLoader, KeyAggregator, validate_module


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(description="Lint ARB localization files.")
    parser.add_argument("paths", nargs="+", help="ARB files to check")
    parser.add_argument("--default-locale", help="Locale whose metadata owns each key")
    parser.add_argument(
        "--locale",
        action="append",
        dest="locales",
        help="Locale every key must cover (repeatable; default: all loaded locales)",
    )
    parser.add_argument("--sanitize", action="store_true", help="Truncate message content")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the linter and return the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    summary = ArbFileLoader().load_all(args.paths)
    aggregator = KeyAggregator(AggregatorConfig(default_locale=args.default_locale))
    result = aggregator.aggregate_summary(summary)
    locales = args.locales or list(summary.locales)

    failed = result.has_issues
    for issue in result.issues:
        print(issue.format())

    for module in result.modules:
        validation = validate_module(module, locales=locales)
        print(f"\n== {module.name} ({len(module.keys)} keys) ==")
        print(validation.format(sanitize=args.sanitize))
        failed = failed or not validation.is_valid

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
