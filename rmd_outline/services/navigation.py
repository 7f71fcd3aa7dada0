"""Bridge from outline selection to the text editing surface."""

from typing import Protocol

from ..models.heading import Heading, HeadingIdentity


class CursorMover(Protocol):
    """Editor surface that can place the cursor and take focus.

    Both calls are best-effort; return values are ignored.
    """

    def move_to(self, line: int, column: int) -> None:
        """Move cursor and viewport to a 0-based line and column."""
        ...

    def focus_editor(self) -> None:
        ...


class NavigationBridge:
    """Translates a selected heading into cursor move requests."""

    def __init__(self, mover: CursorMover | None = None):
        self.mover = mover

    def navigate(self, heading: Heading) -> HeadingIdentity:
        """Jump to the heading's source line.

        Source lines are 1-based, editor lines 0-based. Without a mover
        attached the request is dropped.

        Returns:
            The identity to record as active
        """
        if self.mover is not None:
            self.mover.move_to(heading.line - 1, 0)
            self.mover.focus_editor()
        return heading.identity
