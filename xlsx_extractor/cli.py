from __future__ import annotations

__all__ = ["build_parser", "main"]

import argparse
import asyncio
import json
import logging
import sys
from typing import TYPE_CHECKING

from . import __version__
from .cell import Range
from .core import LOG_LEVEL
from .errors import ExtractorError
from .extractor import Sheet, XlsxExtractor

if TYPE_CHECKING:
    from typing import Sequence

logger = logging.getLogger("xlsx_extractor")


def _range(text: str) -> Range:
    try:
        return Range.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xlsx-extractor",
        description="Extract the columns/rows from XLSX file.",
        epilog=(
            "examples:\n"
            "  xlsx-extractor -i sample.xlsx\n"
            "  xlsx-extractor -i sample.xlsx -c\n"
            "  xlsx-extractor -i sample.xlsx -r 3\n"
            "  xlsx-extractor -i sample.xlsx -r 1-5"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--version", action="version", version=f"v{__version__}")
    parser.add_argument("-i", "--input", required=True, help="Path of the XLSX file.")
    parser.add_argument(
        "-r",
        "--range",
        type=_range,
        default=Range(0, 0),
        help='Range of sheets to be output, "N" or "N-M". All sheets when omitted.',
    )
    parser.add_argument(
        "-c",
        "--count",
        action="store_true",
        help="Output the number of sheets. Overrides --range.",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        with XlsxExtractor(args.input) as book:
            if args.count:
                print(book.count)
                return 0

            results = asyncio.run(book.extract_all(args.range, return_exceptions=True))
    except ExtractorError as e:
        logger.error("%s", e)
        return 1

    sheets = [x for x in results if isinstance(x, Sheet)]
    failed = [x for x in results if not isinstance(x, Sheet)]
    for err in failed:
        logger.error("%s", err)

    json.dump([x.to_dict() for x in sheets], sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")

    return 1 if failed else 0
