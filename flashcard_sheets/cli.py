import argparse
import logging

from .config import LayoutConfig
from .constants import DEFAULT_COLUMNS, DEFAULT_FONT_SIZE, DEFAULT_ROWS
from .deck import FILE_TYPES
from .errors import FlashcardSheetsError
from .generator import OUTPUT_TYPES, PAGE_SIZES, main

LOG_LEVELS = ("debug", "info", "warning", "error")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a deck of study cards into printable front/back PDF sheets")
    parser.add_argument("deck_file", help="Path to the deck file (CSV, JSON, YAML or DOCX)")
    parser.add_argument("output", nargs="?", help="Path to the output file (default: output/<deck name>.<pdf|json|yml>)")
    parser.add_argument("-o", "--output-type", choices=OUTPUT_TYPES, default="pdf", help="pdf renders card sheets; json/yaml write the cleaned deck as [front, back] pairs")
    parser.add_argument("-r", "--rows", type=int, default=DEFAULT_ROWS, help="Number of card rows per page")
    parser.add_argument("-c", "--columns", type=int, default=DEFAULT_COLUMNS, help="Number of card columns per page")
    parser.add_argument("-f", "--font-size", default=DEFAULT_FONT_SIZE, help="Card font size as a length, e.g. 14pt, 5mm, 0.5cm (bare numbers are points)")
    parser.add_argument("-t", "--type", dest="file_type", choices=FILE_TYPES, help="Deck file type; inferred from the extension when omitted")
    parser.add_argument("--page-size", choices=sorted(PAGE_SIZES), default="a4", help="Paper size")
    parser.add_argument("--mirror-backside", action="store_true", help="Mirror back page columns so answers line up behind prompts on long-edge duplex printing")
    parser.add_argument("--markup", action="store_true", help="Treat card text as inline paragraph markup (<b>, <i>, <br/>) instead of literal text")
    parser.add_argument("--keep-duplicates", action="store_true", help="Do not remove duplicate front/back pairs")
    parser.add_argument("-l", "--log-level", choices=LOG_LEVELS, default="info", help="Console log level")
    return parser


def run(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Validate layout values up front so mistakes surface as usage errors
    try:
        LayoutConfig.from_values(args.rows, args.columns, args.font_size)
    except FlashcardSheetsError as exc:
        parser.error(str(exc))

    # configure basic logging to console so users are kept up-to-date
    logging.basicConfig(level=getattr(logging, args.log_level.upper()), format="%(message)s")
    return main(
        args.deck_file,
        args.output,
        rows=args.rows,
        columns=args.columns,
        font_size=args.font_size,
        file_type=args.file_type,
        page_size=args.page_size,
        mirror_backside=args.mirror_backside,
        markup=args.markup,
        keep_duplicates=args.keep_duplicates,
        output_type=args.output_type,
    )
