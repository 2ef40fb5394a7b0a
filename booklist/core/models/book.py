# booklist/core/models/book.py

from typing import Optional, Union
from pydantic import BaseModel, Field, ConfigDict

from booklist.core.enums.book_genre import BookGenre

class Author(BaseModel):
    """
    Author of a book. Only the full name takes part in sorting.
    """
    full_name: str = Field(..., alias="fullName", description="Author's full display name")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True, frozen=True)


class Shelf(BaseModel):
    """
    One of the predefined shelves a book can sit on (e.g. "To Be Read").
    """
    shelf_name: str = Field(..., alias="shelfName", description="Display name of the shelf")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True, frozen=True)


class Book(BaseModel):
    """
    A single book record as supplied by the caller's data source.
    Books are read-only inputs: sorting always produces a new list and
    never modifies a Book.
    """
    book_id: Optional[str] = Field(None, alias="id", description="Identifier used when reporting errors")
    title: str = Field(..., description="Title of the book")
    author: Optional[Author] = Field(None, description="Author of the book")
    predefined_shelf: Optional[Shelf] = Field(None, alias="predefinedShelf", description="Shelf the book is on")
    # Known genres become BookGenre, anything else stays a plain string
    genre: Optional[Union[BookGenre, str]] = Field(
        None, alias="bookGenre", union_mode="left_to_right", description="Genre of the book"
    )
    rating: Optional[Union[int, float, str]] = Field(None, description="User rating, numeric or free text")

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
        extra='ignore'
    )
