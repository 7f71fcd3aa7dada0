"""Collapse state for outline headings."""

from collections.abc import Sequence

from ..models.heading import Heading, HeadingIdentity
from .outline_hierarchy import has_children


class CollapseState:
    """Per-heading collapsed flags plus the global "all collapsed" flag.

    Keys are (level, line) identities. A missing key means expanded.
    Since identities are positional, an edit that shifts lines leaves old
    entries pointing at the wrong (or no) heading.

    Usage:
        state = CollapseState()
        state.toggle(heading.identity, headings)
        if state.is_collapsed(heading.identity):
            ...
        state.collapse_all(headings)
        state.expand_all()
    """

    def __init__(self):
        self._collapsed: dict[HeadingIdentity, bool] = {}
        self._all_collapsed = False

    @property
    def all_collapsed(self) -> bool:
        """Whether the last bulk action was "collapse all"."""
        return self._all_collapsed

    def is_collapsed(self, identity: HeadingIdentity) -> bool:
        return self._collapsed.get(identity, False)

    def toggle(
        self,
        identity: HeadingIdentity,
        headings: Sequence[Heading] | None = None,
    ) -> bool:
        """Flip the collapsed flag for a heading.

        When headings are given, the toggle only applies if the identity
        belongs to a heading with children; stale UI events for childless
        or vanished headings are ignored.

        Returns:
            True if the state changed
        """
        if headings is not None and not self._can_collapse(identity, headings):
            return False
        self._collapsed[identity] = not self._collapsed.get(identity, False)
        return True

    def collapse_all(self, headings: Sequence[Heading]) -> None:
        """Collapse every heading that has children."""
        self._all_collapsed = True
        for index, heading in enumerate(headings):
            if has_children(headings, index):
                self._collapsed[heading.identity] = True

    def expand_all(self) -> None:
        """Expand everything and forget all individual states."""
        self._all_collapsed = False
        self._collapsed.clear()

    def toggle_all(self, headings: Sequence[Heading]) -> bool:
        """Collapse all, or expand all if already collapsed.

        Returns:
            The new value of the "all collapsed" flag
        """
        if self._all_collapsed:
            self.expand_all()
        else:
            self.collapse_all(headings)
        return self._all_collapsed

    def collapsed_identities(self) -> set[HeadingIdentity]:
        """Return identities currently marked collapsed."""
        return {identity for identity, value in self._collapsed.items() if value}

    def __len__(self) -> int:
        return len(self._collapsed)

    def _can_collapse(self, identity: HeadingIdentity, headings: Sequence[Heading]) -> bool:
        for index, heading in enumerate(headings):
            if heading.identity == identity:
                return has_children(headings, index)
        return False
