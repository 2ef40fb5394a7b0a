# booklist/tests/unit/test_directive_store.py

import pytest

from booklist.core.enums.sort_attribute import SortAttribute
from booklist.core.enums.sort_indicator import SortIndicator
from booklist.core.enums.sort_order import SortOrder
from booklist.core.models.sorting import SortDirective
from booklist.logic.directive_store import (
    DirectiveStore, direction_of, indicator_for, indicators, toggle
)

ASC = SortOrder.ASCENDING
DESC = SortOrder.DESCENDING

def as_pairs(sequence):
    return [(d.attribute_name, d.order) for d in sequence]

@pytest.fixture
def store():
    """Provides an empty DirectiveStore for tests."""
    return DirectiveStore()

def test_toggle_cycles_ascending_descending_removed():
    """Three clicks on one column go ascending, descending, then off."""
    first = toggle((), "title")
    second = toggle(first, "title")
    third = toggle(second, "title")

    assert as_pairs(first) == [("title", ASC)]
    assert as_pairs(second) == [("title", DESC)]
    assert third == ()

def test_toggle_appends_new_attributes_at_end():
    sequence = toggle(toggle((), "title"), "author")
    assert as_pairs(sequence) == [("title", ASC), ("author", ASC)]

def test_toggle_flips_in_place_without_touching_others():
    """Flipping the first directive keeps its position and leaves the second alone."""
    sequence = toggle(toggle((), "title"), "author")
    flipped = toggle(sequence, "title")

    assert as_pairs(flipped) == [("title", DESC), ("author", ASC)]

def test_toggle_removal_keeps_remaining_order():
    sequence = ()
    for name in ("title", "author", "shelf"):
        sequence = toggle(sequence, name)
    sequence = toggle(toggle(sequence, "author"), "author")

    assert as_pairs(sequence) == [("title", ASC), ("shelf", ASC)]

def test_toggle_does_not_mutate_input():
    original = [SortDirective(attribute_name="title", order=ASC)]
    snapshot = list(original)

    result = toggle(original, "title")
    toggle(original, "author")

    assert original == snapshot
    assert as_pairs(result) == [("title", DESC)]

def test_toggle_accepts_enum_members_and_unknown_names():
    sequence = toggle((), SortAttribute.RATING)
    sequence = toggle(sequence, "page_count")

    assert as_pairs(sequence) == [("rating", ASC), ("page_count", ASC)]
    assert type(sequence[0].attribute_name) is str

def test_direction_of_has_one_entry_per_present_attribute():
    sequence = toggle(toggle(toggle((), "genre"), "rating"), "genre")

    assert direction_of(sequence) == {"genre": DESC, "rating": ASC}
    assert "title" not in direction_of(sequence)
    assert direction_of(()) == {}

def test_direction_of_later_duplicate_wins():
    """A sequence built outside toggle may repeat an attribute; the last entry is used."""
    sequence = [
        SortDirective(attribute_name="title", order=ASC),
        SortDirective(attribute_name="title", order=DESC),
    ]
    assert direction_of(sequence) == {"title": DESC}

def test_indicator_for_each_state():
    directions = {"title": ASC, "author": DESC}
    assert indicator_for("title", directions) == SortIndicator.UP
    assert indicator_for(SortAttribute.AUTHOR, directions) == SortIndicator.DOWN
    assert indicator_for("shelf", directions) == SortIndicator.NONE

def test_indicators_cover_all_fixed_attributes():
    result = indicators({"rating": DESC, "page_count": ASC})

    assert set(result) == set(SortAttribute.list())
    assert result["rating"] == SortIndicator.DOWN
    assert result["title"] == SortIndicator.NONE

def test_store_toggle_replaces_sequence(store):
    store.toggle("title")
    store.toggle("author")
    before = store.directives
    store.toggle("title")

    assert as_pairs(before) == [("title", ASC), ("author", ASC)]
    assert as_pairs(store.directives) == [("title", DESC), ("author", ASC)]
    assert store.order_for("title") == DESC
    assert store.order_for("genre") is None
    assert len(store) == 2

def test_store_clear(store):
    store.toggle("title")
    store.clear()

    assert store.directives == ()
    assert store.direction_of() == {}
