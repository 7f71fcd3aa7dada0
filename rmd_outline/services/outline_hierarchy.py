"""Parent/child relationships derived from a flat heading list.

Nothing here stores a tree. Every query looks at list order and heading
levels, so the answers stay correct after any re-parse without having to
keep links in sync.
"""

from collections.abc import Sequence

from ..models.heading import Heading


def has_children(headings: Sequence[Heading], index: int) -> bool:
    """Check if the heading at index is followed by a deeper heading.

    Only the next heading is inspected, so a jump of two levels still
    counts as having children.
    """
    if index >= len(headings) - 1:
        return False
    return headings[index + 1].level > headings[index].level


def direct_parent(headings: Sequence[Heading], index: int) -> int | None:
    """Return the index of the direct parent, or None.

    Scans backward for the nearest heading exactly one level shallower.
    Hitting anything shallower than that first means the expected parent
    level was skipped, and there is no direct parent.
    """
    level = headings[index].level
    for i in range(index - 1, -1, -1):
        prev_level = headings[i].level
        if prev_level == level - 1:
            return i
        if prev_level < level - 1:
            break
    return None


def has_direct_parent(headings: Sequence[Heading], index: int) -> bool:
    return direct_parent(headings, index) is not None


def is_first_child(headings: Sequence[Heading], index: int) -> bool:
    """Check if the previous heading is exactly one level shallower."""
    if index <= 0:
        return False
    return headings[index - 1].level == headings[index].level - 1


def is_last_child(headings: Sequence[Heading], index: int) -> bool:
    """Check if no sibling or descendant follows the heading."""
    if index >= len(headings) - 1:
        return True
    return headings[index + 1].level <= headings[index].level


def is_middle_child(headings: Sequence[Heading], index: int) -> bool:
    """Check if the heading has a direct parent but is neither first nor last."""
    return (
        has_direct_parent(headings, index)
        and not is_first_child(headings, index)
        and not is_last_child(headings, index)
    )


def child_position(headings: Sequence[Heading], index: int) -> tuple[bool, bool, bool]:
    """Return (first, last, middle) flags used for grouped rendering.

    All three are False for a heading without a direct parent. A lone
    child is both first and last.
    """
    if not has_direct_parent(headings, index):
        return False, False, False
    first = is_first_child(headings, index)
    last = is_last_child(headings, index)
    return first, last, not first and not last
