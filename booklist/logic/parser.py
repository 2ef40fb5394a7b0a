# booklist/logic/parser.py

import logging
from typing import Any
from pydantic import ValidationError, TypeAdapter

from booklist.core.models.book import Book
from booklist.logic.error_reporter import ErrorReporter

logger = logging.getLogger(__name__)

class BookParser:
    """
    Parses raw book dictionaries into validated Book objects.
    Records that fail validation are left out and reported to the shared ErrorReporter.
    """
    def __init__(self, error_reporter: ErrorReporter):
        self._single_book_adapter = TypeAdapter(Book)
        self._error_reporter = error_reporter

    @staticmethod
    def _record_key(raw_book: Any, index: int) -> str:
        if isinstance(raw_book, dict):
            for field in ("id", "book_id", "title"):
                value = raw_book.get(field)
                if value not in (None, ""):
                    return str(value)
        return f"index:{index}"

    def parse_books(self, raw_books_data: list[Any]) -> list[Book]:
        """
        Parses a list of raw book dictionaries, keeping input order.
        """
        parsed_books: list[Book] = []

        for index, raw_book in enumerate(raw_books_data):
            try:
                parsed_books.append(self._single_book_adapter.validate_python(raw_book))
            except ValidationError as e:
                error_messages = "; ".join(
                    f"{'.'.join(str(part) for part in err['loc']) or 'book'}: {err['msg']}" for err in e.errors()
                )
                error_reason = f"Validation error: {error_messages}"
                book_key = self._record_key(raw_book, index)
                logger.warning(f"BookParser: rejected record {book_key}: {error_reason}")
                self._error_reporter.add_error(book_key, error_reason)

        logger.debug(f"BookParser: parsed {len(parsed_books)} of {len(raw_books_data)} records.")
        return parsed_books
