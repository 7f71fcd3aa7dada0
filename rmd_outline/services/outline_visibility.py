"""Visible subset of the outline for the current collapse state and search."""

from collections.abc import Sequence

from ..models.heading import Heading, HeadingIdentity, VisibleHeading
from .collapse_state import CollapseState
from .outline_hierarchy import child_position, direct_parent, has_children


def filter_headings(headings: Sequence[Heading], search_term: str) -> list[Heading]:
    """Return headings whose text contains the term, case-insensitive.

    The result is a plain subsequence: ancestors of a match are not added,
    so a nested match may show up without its parent.
    """
    if not search_term:
        return list(headings)
    needle = search_term.lower()
    return [heading for heading in headings if needle in heading.text.lower()]


def is_hidden(headings: Sequence[Heading], index: int, collapse_state: CollapseState) -> bool:
    """Check if the direct parent of the heading is collapsed.

    Only the direct parent is consulted. Deeper descendants disappear
    because each level in between is collapsed too, not because of a
    check against older ancestors.
    """
    parent_index = direct_parent(headings, index)
    if parent_index is None:
        return False
    return collapse_state.is_collapsed(headings[parent_index].identity)


def compute_visible_headings(
    headings: Sequence[Heading],
    collapse_state: CollapseState,
    search_term: str = "",
    active_identity: HeadingIdentity | None = None,
) -> list[VisibleHeading]:
    """Build the ordered list of headings to display.

    With a search term, hierarchy is derived from the filtered list, not
    the full document.
    """
    candidates = filter_headings(headings, search_term)
    visible = []

    for index, heading in enumerate(candidates):
        if is_hidden(candidates, index, collapse_state):
            continue

        first, last, middle = child_position(candidates, index)
        visible.append(VisibleHeading(
            heading=heading,
            has_children=has_children(candidates, index),
            is_collapsed=collapse_state.is_collapsed(heading.identity),
            is_active=heading.identity == active_identity,
            is_first_child=first,
            is_last_child=last,
            is_middle_child=middle,
        ))

    return visible
