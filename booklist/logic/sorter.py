# booklist/logic/sorter.py

import logging
from functools import cmp_to_key
from typing import Iterable, List, Optional

from booklist.core.config.settings import settings
from booklist.core.enums.rating_comparison import RatingComparison
from booklist.core.models.book import Book
from booklist.core.models.sorting import SortDirective
from booklist.logic.comparators import comparator_for

logger = logging.getLogger(__name__)

class BookSorter:
    """
    Applies a sequence of sort directives to a list of books.
    """
    def __init__(
        self,
        rating_comparison: Optional[RatingComparison] = None,
        last_directive_dominates: Optional[bool] = None
    ):
        self._rating_comparison = rating_comparison or settings.RATING_COMPARISON
        self._last_directive_dominates = (
            settings.LAST_DIRECTIVE_DOMINATES if last_directive_dominates is None else last_directive_dominates
        )

    def sort_books(
        self,
        books: Iterable[Book],
        directives: Iterable[SortDirective]
    ) -> List[Book]:
        """
        Returns a new list of books ordered by the directives.

        Each directive is one stable full re-sort of the working copy, applied
        in sequence order. The last pass decides the primary order and earlier
        directives only break its ties, so the most recently toggled attribute
        dominates. Books that compare equal under every directive keep their
        input order. With `last_directive_dominates=False` the passes run in
        reverse and the first directive dominates instead.

        Args:
            books: Books to order. The input is never modified.
            directives: Active directives, in the order they were toggled on.

        Returns:
            A new list containing the same Book objects in display order.
        """
        sorted_books = list(books)
        passes = list(directives)
        if not self._last_directive_dominates:
            passes.reverse()

        for directive in passes:
            comparator = comparator_for(directive, self._rating_comparison)
            # list.sort is stable, so ties keep the order of the previous pass
            sorted_books.sort(key=cmp_to_key(comparator))

        logger.debug(f"Sorted {len(sorted_books)} books with {len(passes)} directive pass(es).")
        return sorted_books


def sort_books(books: Iterable[Book], directives: Iterable[SortDirective]) -> List[Book]:
    """Sorts with text rating comparison and last-directive dominance, ignoring settings."""
    return BookSorter(
        rating_comparison=RatingComparison.TEXT,
        last_directive_dominates=True
    ).sort_books(books, directives)
