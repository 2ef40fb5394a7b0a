# booklist/core/enums/book_genre.py

from enum import Enum

class BookGenre(str, Enum):
    """
    Known book genres. Books may still carry a free-form genre string;
    both are compared by their text value.
    """
    FICTION = "FICTION"
    NON_FICTION = "NON_FICTION"
    FANTASY = "FANTASY"
    SCIENCE_FICTION = "SCIENCE_FICTION"
    MYSTERY = "MYSTERY"
    THRILLER = "THRILLER"
    ROMANCE = "ROMANCE"
    HORROR = "HORROR"
    BIOGRAPHY = "BIOGRAPHY"
    HISTORY = "HISTORY"
    SELF_HELP = "SELF_HELP"
    POETRY = "POETRY"
    OTHER = "OTHER"
