# booklist/tests/unit/test_parser.py

import pytest

from booklist.core.enums.book_genre import BookGenre
from booklist.logic.parser import BookParser
from booklist.logic.error_reporter import ErrorReporter

@pytest.fixture
def error_reporter():
    """Provides a fresh ErrorReporter instance for tests."""
    return ErrorReporter()

@pytest.fixture
def parser(error_reporter):
    """Provides a BookParser instance with an injected ErrorReporter."""
    return BookParser(error_reporter=error_reporter)

def get_base_valid_book_data():
    """Returns a dictionary for a valid book in the camelCase shape of the book API."""
    return {
        "id": "book_001",
        "title": "Dune",
        "author": {"fullName": "Frank Herbert"},
        "predefinedShelf": {"shelfName": "Read"},
        "bookGenre": "SCIENCE_FICTION",
        "rating": 5
    }

def test_parse_books_valid_single(parser, error_reporter):
    """Test successful parsing of a single valid book."""
    parsed_books = parser.parse_books([get_base_valid_book_data()])

    assert len(parsed_books) == 1
    book = parsed_books[0]
    assert book.book_id == "book_001"
    assert book.author.full_name == "Frank Herbert"
    assert book.predefined_shelf.shelf_name == "Read"
    assert book.genre == BookGenre.SCIENCE_FICTION
    assert book.rating == 5
    assert error_reporter.has_errors() is False

def test_parse_books_accepts_snake_case_and_free_form_genre(parser):
    """Field names may also be given in snake_case; unknown genres stay as strings."""
    parsed_books = parser.parse_books([{
        "title": "Zine",
        "predefined_shelf": {"shelf_name": "Reading"},
        "genre": "Zines",
        "rating": "n/a"
    }])

    book = parsed_books[0]
    assert book.predefined_shelf.shelf_name == "Reading"
    assert book.genre == "Zines"
    assert not isinstance(book.genre, BookGenre)
    assert book.rating == "n/a"
    assert book.author is None

def test_parse_books_missing_title_is_reported(parser, error_reporter):
    """A record without a title is left out and reported under its id."""
    invalid = get_base_valid_book_data()
    del invalid["title"]
    valid = dict(get_base_valid_book_data(), id="book_002", title="Emma")

    parsed_books = parser.parse_books([invalid, valid])

    assert [b.title for b in parsed_books] == ["Emma"]
    assert error_reporter.has_errors_for("book_001") is True
    reason = error_reporter.get_errors()[0].error_reason
    assert reason.startswith("Validation error: ")
    assert "title" in reason

def test_parse_books_non_dict_record_keyed_by_index(parser, error_reporter):
    """Records that are not objects are keyed by their position."""
    parsed_books = parser.parse_books([get_base_valid_book_data(), "not a book"])

    assert len(parsed_books) == 1
    assert error_reporter.has_errors_for("index:1") is True

def test_parse_books_empty_list(parser, error_reporter):
    assert parser.parse_books([]) == []
    assert error_reporter.has_errors() is False
