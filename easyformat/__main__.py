"""Main module for the easyformat package."""
import os
import sys
import logging
import argparse
from datetime import datetime, timezone
from typing import List, Optional

from tabulate import tabulate

from .api.entry import LocaleBuilder
from .errors import EasyFormatError
from .formatting.formatter import Formatter
from .formatting.skeletons import SKELETONS
from .reports.showcase import ShowcaseGenerator, CATALOG_HEADERS
from .utils.config import load_environment, get_default_locale, TIMEZONE_VAR
from .utils.date_utils import parse_iso_datetime
from .utils.file_utils import write_markdown
from .utils.locale_utils import SAMPLE_LOCALES, locale_tag


# --- CLI Logic ---
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Format dates and times from CLDR skeletons for any locale.",
        epilog="""
Examples:
    # Show every sample format for Korean, right now
  easyformat --locale ko-KR
    ---
    # Format a fixed instant with a chained skeleton
  easyformat --locale en-US --at 2025-07-30T15:30:45Z --timezone UTC -s yMMMd -s Hms
    ---
    # Export the showcase tables to CSV files with prefix 'ja' and to Markdown
  easyformat --locale ja-JP --csv ja --md showcase.md

""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        prog="easyformat"
    )
    parser.add_argument('--locale', help='Locale identifier, e.g. en-US or ko_KR (default: EASYFORMAT_LOCALE or the system locale)')
    parser.add_argument('--at', help='ISO 8601 date-time to format; without an offset it is read in the default zone (default: now)')
    parser.add_argument('--timezone', help=f'Zone for civil date-times and output (overrides {TIMEZONE_VAR})')
    parser.add_argument('-s', '--skeleton', action='append', metavar='MNEMONIC', help='Mnemonic or raw skeleton; repeat to chain')
    parser.add_argument('-l', '--list', action='store_true', help='List the mnemonic catalog rendered for the locale')
    parser.add_argument('--locales', action='store_true', help='List sample locales')
    parser.add_argument('--csv', help='Export showcase tables to CSV (provide filename prefix)')
    parser.add_argument('--md', help='Export output as markdown to the given file path')
    parser.add_argument('--overwrite', action='store_true', help='Explicitly overwrite the markdown file if it exists')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log pattern resolution')
    return parser.parse_args(argv)


def build_formatter(skeletons: List[str], locale) -> Formatter:
    """Chain mnemonics and raw skeletons into one Formatter.

    Args:
        skeletons: Catalog mnemonics or raw skeleton strings, in order
        locale: Locale identifier

    Returns:
        Formatter for the combined skeleton
    """
    builder = LocaleBuilder(locale)
    first, rest = skeletons[0], skeletons[1:]
    formatter = builder.chain(first) if first in SKELETONS else builder.custom(first)
    for skeleton in rest:
        formatter = formatter.chain(skeleton) if skeleton in SKELETONS else formatter.custom(skeleton)
    return formatter


def list_locales() -> None:
    """List the sample locales."""
    rows = [[tag, name] for tag, name in SAMPLE_LOCALES]
    print(tabulate(rows, headers=["Locale", "Name"], tablefmt="github"))


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    load_environment()
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.locales:
        list_locales()
        return

    if args.timezone:
        os.environ[TIMEZONE_VAR] = args.timezone

    locale = args.locale or get_default_locale()
    try:
        value = parse_iso_datetime(args.at) if args.at else datetime.now(timezone.utc)
    except ValueError as e:
        print(f"[ERROR] Invalid --at value '{args.at}': {e}")
        sys.exit(2)

    try:
        if args.skeleton:
            formatter = build_formatter(args.skeleton, locale)
            print(formatter.format(value))
            return

        header = f"({locale_tag(locale)}, {value.isoformat()})"
        generator = ShowcaseGenerator(locale, value, header)
        if args.list:
            report = "\n" + tabulate(generator.catalog_rows(), headers=CATALOG_HEADERS, tablefmt="github") + "\n"
        else:
            report = generator.generate_report(args.csv)
    except (EasyFormatError, LookupError) as e:
        print(f"[ERROR] {e}")
        sys.exit(2)

    if args.md:
        write_markdown(args.md, f"\n{report}\n", f"easyformat showcase {header}", args.overwrite)
        print(f"[SUCCESS] Markdown output written to '{args.md}'")
        sys.exit(0)

    print(report)


if __name__ == "__main__":
    main()
