"""Tests for parent/child inference over a flat heading list."""

from rmd_outline.models import Heading
from rmd_outline.services.outline_hierarchy import (
    child_position,
    direct_parent,
    has_children,
    has_direct_parent,
    is_first_child,
    is_last_child,
    is_middle_child,
)


SIMPLE = [Heading(1, "A", 1), Heading(2, "B", 2), Heading(1, "C", 3)]

# 1 A / 2 B / 2 C / 2 D / 3 E / 1 F
FAMILY = [
    Heading(1, "A", 1),
    Heading(2, "B", 3),
    Heading(2, "C", 5),
    Heading(2, "D", 7),
    Heading(3, "E", 9),
    Heading(1, "F", 11),
]


def test_has_children():
    assert has_children(SIMPLE, 0) is True
    assert has_children(SIMPLE, 1) is False
    assert has_children(SIMPLE, 2) is False


def test_has_children_with_skipped_level():
    headings = [Heading(1, "A", 1), Heading(3, "Deep", 2)]
    assert has_children(headings, 0) is True


def test_direct_parent():
    assert direct_parent(SIMPLE, 1) == 0
    assert direct_parent(SIMPLE, 2) is None
    assert direct_parent(SIMPLE, 0) is None


def test_direct_parent_skips_siblings():
    assert direct_parent(FAMILY, 3) == 0
    assert direct_parent(FAMILY, 4) == 3


def test_direct_parent_aborts_on_shallower_heading():
    headings = [Heading(2, "Two", 1), Heading(1, "One", 2), Heading(3, "Three", 3)]
    # Level 1 is hit before any level 2 heading
    assert direct_parent(headings, 2) is None
    assert has_direct_parent(headings, 2) is False


def test_first_and_last_child():
    assert is_first_child(FAMILY, 1) is True
    assert is_first_child(FAMILY, 2) is False
    assert is_last_child(FAMILY, 1) is True  # next heading is a sibling
    assert is_last_child(FAMILY, 3) is False  # followed by its own child
    assert is_last_child(FAMILY, 5) is True  # last index


def test_middle_child():
    headings = [
        Heading(1, "A", 1),
        Heading(2, "B", 2),
        Heading(2, "C", 3),
        Heading(3, "D", 4),
    ]
    assert is_middle_child(headings, 2) is True
    assert is_middle_child(headings, 1) is False
    assert is_middle_child(headings, 0) is False


def test_child_position_without_parent():
    assert child_position(SIMPLE, 0) == (False, False, False)
    assert child_position(SIMPLE, 2) == (False, False, False)


def test_child_position_lone_child_is_first_and_last():
    assert child_position(SIMPLE, 1) == (True, True, False)
