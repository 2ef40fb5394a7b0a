# booklist/core/enums/sort_indicator.py

from enum import Enum

class SortIndicator(str, Enum):
    """
    Glyph a column header should show for its current sort state.
    """
    NONE = "NONE"
    UP = "UP"      # ascending
    DOWN = "DOWN"  # descending
