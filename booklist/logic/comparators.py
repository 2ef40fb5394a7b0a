# booklist/logic/comparators.py

import logging
import math
import unicodedata
from enum import Enum
from typing import Any, Callable, Optional

from booklist.core.enums.rating_comparison import RatingComparison
from booklist.core.enums.sort_attribute import SortAttribute
from booklist.core.models.book import Book
from booklist.core.models.sorting import SortDirective

logger = logging.getLogger(__name__)

BookComparator = Callable[[Book, Book], int]

# Primary character classes: whitespace and punctuation, digits, letters
_PUNCTUATION_RANK = 0
_DIGIT_RANK = 1
_LETTER_RANK = 2


def _primary_rank(ch: str) -> int:
    category = unicodedata.category(ch)
    if category == "Nd":
        return _DIGIT_RANK
    if category[0] in ("Z", "P", "S", "C"):
        return _PUNCTUATION_RANK
    return _LETTER_RANK


def _collation_key(text: str) -> tuple:
    """
    Default-locale collation key. The first level orders whitespace and
    punctuation before digits before letters, ignoring case and accents;
    then accents, then lowercase before uppercase, then code points.
    """
    decomposed = unicodedata.normalize("NFD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    primary = tuple((_primary_rank(ch), ch) for ch in base)
    return (primary, decomposed.casefold(), decomposed.swapcase(), text)


def locale_compare(left: str, right: str) -> int:
    """
    Compares two strings the way a default-locale collator does.
    Returns -1, 0 or 1.
    """
    left_key = _collation_key(left)
    right_key = _collation_key(right)
    return (left_key > right_key) - (left_key < right_key)


def _number_text(value: float) -> str:
    # Number-to-text as a browser renders it: 5.0 -> "5"
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _as_text(value: Any) -> str:
    # Missing values read as empty strings; enums by their value
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _number_text(value)
    return str(value)


def title_text(book: Book) -> str:
    return _as_text(book.title)


def author_text(book: Book) -> str:
    return _as_text(book.author.full_name if book.author else None)


def shelf_text(book: Book) -> str:
    return _as_text(book.predefined_shelf.shelf_name if book.predefined_shelf else None)


def genre_text(book: Book) -> str:
    return _as_text(book.genre)


def rating_text(book: Book) -> str:
    return _as_text(book.rating)


ATTRIBUTE_TEXT: dict[SortAttribute, Callable[[Book], str]] = {
    SortAttribute.TITLE: title_text,
    SortAttribute.AUTHOR: author_text,
    SortAttribute.SHELF: shelf_text,
    SortAttribute.GENRE: genre_text,
    SortAttribute.RATING: rating_text,
}
DEFAULT_ATTRIBUTE = SortAttribute.TITLE


def resolve_attribute(attribute_name: str) -> SortAttribute:
    """
    Maps an attribute name to its SortAttribute, falling back to title.
    """
    if SortAttribute.is_valid(attribute_name):
        return SortAttribute(attribute_name)
    logger.debug(f"No comparator for attribute '{attribute_name}', falling back to '{DEFAULT_ATTRIBUTE.value}'.")
    return DEFAULT_ATTRIBUTE


def _numeric_rating_key(book: Book) -> tuple[int, float, str]:
    text = rating_text(book)
    try:
        value = float(text)
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        # Non-numeric, missing, NaN and infinite ratings sort after numbers
        return (1, 0.0, text)
    return (0, value, "")


def compare_ratings_numerically(left: Book, right: Book) -> int:
    left_rank, left_value, left_text = _numeric_rating_key(left)
    right_rank, right_value, right_text = _numeric_rating_key(right)
    if left_rank != right_rank:
        return -1 if left_rank < right_rank else 1
    if left_value != right_value:
        return -1 if left_value < right_value else 1
    return locale_compare(left_text, right_text)


def comparator_for(
    directive: SortDirective,
    rating_comparison: Optional[RatingComparison] = None
) -> BookComparator:
    """
    Returns a comparator for the directive's attribute and direction.

    Every attribute compares its text form with `locale_compare`. Ratings
    are compared as text unless `rating_comparison` is NUMERIC, so by
    default "10" sorts before "2". Unknown attribute names use the title
    comparator. The result is multiplied by the direction's sign.
    """
    attribute = resolve_attribute(directive.attribute_name)
    sign = directive.order.sign

    if attribute == SortAttribute.RATING and rating_comparison == RatingComparison.NUMERIC:
        return lambda left, right: sign * compare_ratings_numerically(left, right)

    extract = ATTRIBUTE_TEXT[attribute]
    return lambda left, right: sign * locale_compare(extract(left), extract(right))
