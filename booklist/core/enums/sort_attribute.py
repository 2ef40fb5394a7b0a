# booklist/core/enums/sort_attribute.py

from enum import Enum

class SortAttribute(str, Enum):
    """
    The fixed set of book attributes a list can be sorted by.
    Values match the column names a presentation layer toggles.
    """
    TITLE = "title"
    AUTHOR = "author"
    SHELF = "shelf"
    GENRE = "genre"
    RATING = "rating"

    @classmethod
    def list(cls):
        """Returns a list of all attribute names."""
        return list(map(lambda c: c.value, cls))

    @classmethod
    def is_valid(cls, attribute_name: str) -> bool:
        """Checks if a given string names one of the sortable attributes."""
        return attribute_name in cls.list()
