# booklist/core/enums/rating_comparison.py

from enum import Enum

class RatingComparison(str, Enum):
    """
    How the rating column is compared.
    TEXT compares the string form of the rating, so "10" sorts before "2".
    NUMERIC compares ratings that parse as numbers by value.
    """
    TEXT = "TEXT"
    NUMERIC = "NUMERIC"
