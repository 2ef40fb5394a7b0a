# booklist/core/enums/sort_order.py

from enum import Enum

class SortOrder(str, Enum):
    """
    Direction of a single sort directive.
    """
    ASCENDING = "ASCENDING"
    DESCENDING = "DESCENDING"

    @property
    def sign(self) -> int:
        """Multiplier applied to a base comparison result."""
        return 1 if self is SortOrder.ASCENDING else -1
