"""Tests for the visible subset computation and search filtering."""

from rmd_outline.models import Heading, HeadingIdentity
from rmd_outline.services.collapse_state import CollapseState
from rmd_outline.services.outline_visibility import (
    compute_visible_headings,
    filter_headings,
    is_hidden,
)


SIMPLE = [Heading(1, "A", 1), Heading(2, "B", 2), Heading(1, "C", 3)]

DOCUMENT = [
    Heading(1, "Introduction", 1),
    Heading(2, "Background", 5),
    Heading(3, "Prior methods", 9),
    Heading(2, "Goals", 14),
    Heading(1, "Methods", 20),
    Heading(2, "Data", 22),
    Heading(3, "Cleaning steps", 25),
]


def _lines(rows):
    return [row.line for row in rows]


def test_everything_visible_by_default():
    rows = compute_visible_headings(DOCUMENT, CollapseState())
    assert [row.heading for row in rows] == DOCUMENT


def test_collapsing_parent_hides_child_only():
    state = CollapseState()
    state.toggle(SIMPLE[0].identity, SIMPLE)
    rows = compute_visible_headings(SIMPLE, state)
    assert _lines(rows) == [1, 3]
    assert rows[0].is_collapsed is True
    assert rows[0].has_children is True


def test_only_direct_parent_is_consulted():
    state = CollapseState()
    # Collapse "Introduction" but leave "Background" expanded
    state.toggle(HeadingIdentity(1, 1))
    rows = compute_visible_headings(DOCUMENT, state)
    # Level-2 children hidden; "Prior methods" stays because its direct
    # parent "Background" is not collapsed
    assert _lines(rows) == [1, 9, 20, 22, 25]


def test_collapse_chain_hides_deep_descendants():
    state = CollapseState()
    state.collapse_all(DOCUMENT)
    rows = compute_visible_headings(DOCUMENT, state)
    assert _lines(rows) == [1, 20]


def test_collapse_all_then_expand_all_restores_order():
    state = CollapseState()
    state.collapse_all(DOCUMENT)
    state.expand_all()
    rows = compute_visible_headings(DOCUMENT, state)
    assert [row.heading for row in rows] == DOCUMENT
    assert not any(row.is_collapsed for row in rows)


def test_is_hidden():
    state = CollapseState()
    state.toggle(SIMPLE[0].identity)
    assert is_hidden(SIMPLE, 1, state) is True
    assert is_hidden(SIMPLE, 2, state) is False
    assert is_hidden(SIMPLE, 0, state) is False


def test_filter_is_case_insensitive():
    assert filter_headings(DOCUMENT, "METHODS") == [DOCUMENT[2], DOCUMENT[4]]
    assert filter_headings(DOCUMENT, "") == DOCUMENT


def test_search_returns_nested_match_without_ancestors():
    rows = compute_visible_headings(DOCUMENT, CollapseState(), search_term="cleaning")
    assert [row.heading for row in rows] == [DOCUMENT[6]]
    row = rows[0]
    assert row.has_children is False
    assert row.is_child is False


def test_search_recomputes_hierarchy_on_filtered_list():
    # "Methods" (level 1) then "Prior methods" is not next to it; filtered
    # list is [Prior methods (3), Methods (1)]
    rows = compute_visible_headings(DOCUMENT, CollapseState(), search_term="methods")
    assert _lines(rows) == [9, 20]
    assert rows[0].has_children is False
    assert rows[1].has_children is False


def test_search_with_collapsed_parent_in_filtered_list():
    state = CollapseState()
    state.toggle(HeadingIdentity(2, 5))  # "Background"
    rows = compute_visible_headings(DOCUMENT, state, search_term="o")
    # Filtered: Introduction, Background, Prior methods, Goals, Methods
    # "Prior methods" is hidden under the collapsed "Background"
    assert _lines(rows) == [1, 5, 14, 20]


def test_active_flag():
    rows = compute_visible_headings(
        DOCUMENT, CollapseState(), active_identity=HeadingIdentity(2, 22)
    )
    assert [row.line for row in rows if row.is_active] == [22]


def test_child_position_annotations():
    rows = compute_visible_headings(DOCUMENT, CollapseState())
    by_line = {row.line: row for row in rows}
    assert by_line[5].is_first_child is True
    assert by_line[5].is_last_child is False
    assert by_line[14].is_last_child is True
    assert by_line[14].is_first_child is False
    assert by_line[1].is_child is False
