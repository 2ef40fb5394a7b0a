# booklist/logic/directive_store.py

import logging
from enum import Enum
from typing import Iterable, Optional, Union

from booklist.core.enums.sort_attribute import SortAttribute
from booklist.core.enums.sort_indicator import SortIndicator
from booklist.core.enums.sort_order import SortOrder
from booklist.core.models.sorting import SortDirective

logger = logging.getLogger(__name__)

DirectiveSequence = tuple[SortDirective, ...]


def _attribute_key(attribute_name: Union[str, SortAttribute]) -> str:
    if isinstance(attribute_name, Enum):
        return attribute_name.value
    return str(attribute_name)


def toggle(sequence: Iterable[SortDirective], attribute_name: Union[str, SortAttribute]) -> DirectiveSequence:
    """
    Computes the directive sequence after a click on `attribute_name`.

    Cycle per attribute: absent -> ASCENDING (appended at the end),
    ASCENDING -> DESCENDING (replaced in place), DESCENDING -> removed.
    Every other directive keeps its position and direction. The input is
    never modified; unknown attribute names are accepted like any other.
    """
    name = _attribute_key(attribute_name)
    pending_change = list(sequence)

    index = next(
        (i for i, directive in enumerate(pending_change) if directive.attribute_name == name),
        None
    )
    if index is None:
        pending_change.append(SortDirective(attribute_name=name, order=SortOrder.ASCENDING))
    elif pending_change[index].order == SortOrder.ASCENDING:
        pending_change[index] = SortDirective(attribute_name=name, order=SortOrder.DESCENDING)
    else:
        del pending_change[index]

    return tuple(pending_change)


def direction_of(sequence: Iterable[SortDirective]) -> dict[str, SortOrder]:
    """
    Maps attribute name to its active direction. If a sequence ever holds
    two directives for one attribute, the later one wins.
    """
    name_to_order: dict[str, SortOrder] = {}
    for directive in sequence:
        name_to_order[directive.attribute_name] = directive.order
    return name_to_order


def indicator_for(attribute_name: Union[str, SortAttribute], directions: dict[str, SortOrder]) -> SortIndicator:
    order = directions.get(_attribute_key(attribute_name))
    if order is None:
        return SortIndicator.NONE
    if order == SortOrder.ASCENDING:
        return SortIndicator.UP
    return SortIndicator.DOWN


def indicators(directions: dict[str, SortOrder]) -> dict[str, SortIndicator]:
    """Header indicator for every fixed sortable attribute."""
    return {name: indicator_for(name, directions) for name in SortAttribute.list()}


class DirectiveStore:
    """
    Holds the directive sequence for one book list view.
    The store only ever replaces its sequence with the result of `toggle`.
    """
    def __init__(self, directives: Optional[Iterable[SortDirective]] = None):
        self._directives: DirectiveSequence = tuple(directives or ())

    @property
    def directives(self) -> DirectiveSequence:
        return self._directives

    def toggle(self, attribute_name: Union[str, SortAttribute]) -> DirectiveSequence:
        """
        Applies one click on `attribute_name` and returns the new sequence.
        """
        self._directives = toggle(self._directives, attribute_name)
        logger.debug(f"Toggled '{_attribute_key(attribute_name)}'; active directives: "
                     f"{[(d.attribute_name, d.order.value) for d in self._directives]}")
        return self._directives

    def direction_of(self) -> dict[str, SortOrder]:
        return direction_of(self._directives)

    def order_for(self, attribute_name: Union[str, SortAttribute]) -> Optional[SortOrder]:
        """Returns the active direction for an attribute, or None."""
        return self.direction_of().get(_attribute_key(attribute_name))

    def clear(self):
        """
        Drops all directives.
        """
        self._directives = ()

    def __len__(self) -> int:
        return len(self._directives)
