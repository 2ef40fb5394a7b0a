# booklist/services/book_list_service.py

import logging
from typing import Any, Iterable
from booklist.core.models.book import Book
from booklist.core.models.response import BookListView
from booklist.core.models.sorting import SortDirective
from booklist.logic.directive_store import direction_of, indicators
from booklist.logic.error_reporter import ErrorReporter
from booklist.logic.parser import BookParser
from booklist.logic.sorter import BookSorter

logger = logging.getLogger(__name__)

class BookListService:
    """
    Produces everything a book list view renders: ordered books,
    per-attribute directions and header indicators.
    """
    def __init__(
        self,
        parser: BookParser,
        sorter: BookSorter,
        error_reporter: ErrorReporter
    ):
        self._parser = parser # shares error_reporter with this service
        self._sorter = sorter
        self._error_reporter = error_reporter

    def render(
        self,
        raw_books: list[dict[str, Any]],
        directives: Iterable[SortDirective]
    ) -> BookListView:
        """
        Validates raw book records, then orders them by the directives.
        Invalid records are reported in `errored_books` instead of raising.
        """
        logger.info(f"Rendering book list. Records: {len(raw_books)}")

        books = self._parser.parse_books(raw_books)
        view = self.render_books(books, directives)
        view.errored_books = self._error_reporter.get_errors()

        if view.errored_books:
            logger.info(f"Finished rendering. {len(view.books)} books, {len(view.errored_books)} rejected records.")

        # The reporter is shared across calls
        self._error_reporter.clear()
        return view

    def render_books(
        self,
        books: Iterable[Book],
        directives: Iterable[SortDirective]
    ) -> BookListView:
        """
        Orders already validated books by the directives.
        """
        directives = tuple(directives)
        directions = direction_of(directives)
        return BookListView(
            books=self._sorter.sort_books(books, directives),
            directions=directions,
            indicators=indicators(directions)
        )


def create_book_list_service() -> BookListService:
    """
    Provides a BookListService wired with its dependencies and the configured sorter.
    """
    error_reporter = ErrorReporter()
    return BookListService(
        parser=BookParser(error_reporter=error_reporter),
        sorter=BookSorter(),
        error_reporter=error_reporter
    )
