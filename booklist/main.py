# booklist/main.py

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from booklist.core.config.settings import settings
from booklist.core.logging_config import configure_logging
from booklist.logic.directive_store import DirectiveStore
from booklist.services.book_list_service import create_book_list_service

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="booklist",
        description="Print a JSON list of books ordered by toggled sort columns."
    )
    parser.add_argument("books_file", type=Path, help="JSON file holding a list of book records")
    parser.add_argument(
        "-t", "--toggle", action="append", default=[], metavar="ATTRIBUTE",
        help="Toggle a column (title, author, shelf, genre, rating); repeat to click again"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logger = configure_logging()
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")

    raw_books = json.loads(args.books_file.read_text(encoding="utf-8"))

    store = DirectiveStore()
    for attribute_name in args.toggle:
        store.toggle(attribute_name)

    view = create_book_list_service().render(raw_books, store.directives)
    print(view.model_dump_json(by_alias=True, indent=2))
    return 1 if view.errored_books else 0


if __name__ == "__main__":
    sys.exit(main())
