# booklist/core/models/response.py

from typing import List, Dict
from pydantic import BaseModel, Field

from booklist.core.enums.sort_indicator import SortIndicator
from booklist.core.enums.sort_order import SortOrder
from booklist.core.models.book import Book

class ErroredBook(BaseModel):
    """
    Represents a raw book record that could not be validated, along with the reason.
    """
    book_key: str = Field(..., description="The id or title of the record, or its position in the input.")
    error_reason: str = Field(..., description="The reason why the record was rejected.")

class BookListView(BaseModel):
    """
    Everything a presentation layer needs to draw a sorted book list.
    """
    books: List[Book] = Field(
        default_factory=list,
        description="Books in display order."
    )
    directions: Dict[str, SortOrder] = Field(
        default_factory=dict,
        description="Active sort direction per attribute; absent attributes are not sorted."
    )
    indicators: Dict[str, SortIndicator] = Field(
        default_factory=dict,
        description="Header indicator for each of the fixed sortable attributes."
    )
    errored_books: List[ErroredBook] = Field(
        default_factory=list,
        description="Input records that failed validation and were left out of the list."
    )
