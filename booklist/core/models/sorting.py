# booklist/core/models/sorting.py

from enum import Enum
from pydantic import BaseModel, Field, ConfigDict, field_validator

from booklist.core.enums.sort_order import SortOrder

class SortDirective(BaseModel):
    """
    One active sort directive: an attribute name and its direction.
    A directive sequence holds at most one directive per attribute name.
    """
    attribute_name: str = Field(..., description="Attribute to sort by (title, author, shelf, genre, rating)")
    order: SortOrder = Field(SortOrder.ASCENDING, description="Sort direction")

    model_config = ConfigDict(frozen=True)

    @field_validator("attribute_name", mode="before")
    @classmethod
    def _plain_attribute_name(cls, value):
        # SortAttribute members are stored as their plain string value
        if isinstance(value, Enum):
            return value.value
        return value
