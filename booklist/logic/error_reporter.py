# booklist/logic/error_reporter.py

from booklist.core.models.response import ErroredBook

class ErrorReporter:
    """
    Manages the collection and reporting of rejected book records.
    """
    def __init__(self):
        self._errored_books: dict[str, ErroredBook] = {}

    def add_error(self, book_key: str, error_reason: str):
        """
        Adds an error for a specific record. If the record already has an
        error, the new reason is appended unless the exact same reason was
        already recorded.
        """
        if book_key in self._errored_books:
            existing_reasons = self._errored_books[book_key].error_reason.split("; ")
            if error_reason not in existing_reasons:
                self._errored_books[book_key].error_reason += f"; {error_reason}"
        else:
            self._errored_books[book_key] = ErroredBook(
                book_key=book_key,
                error_reason=error_reason
            )

    def add_errored_book(self, errored_book: ErroredBook):
        """
        Adds an existing ErroredBook object to the collection.
        """
        self.add_error(errored_book.book_key, errored_book.error_reason)

    def get_errors(self) -> list[ErroredBook]:
        """
        Returns a list of all collected errored books.
        """
        return list(self._errored_books.values())

    def has_errors(self) -> bool:
        return bool(self._errored_books)

    def has_errors_for(self, book_key: str) -> bool:
        return book_key in self._errored_books

    def clear(self):
        """
        Clears all collected errors.
        """
        self._errored_books = {}
