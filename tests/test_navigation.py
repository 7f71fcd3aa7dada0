"""Tests for the navigation bridge."""

from rmd_outline.models import Heading, HeadingIdentity
from rmd_outline.services.navigation import NavigationBridge


class RecordingMover:
    def __init__(self):
        self.calls = []

    def move_to(self, line, column):
        self.calls.append(("move_to", line, column))

    def focus_editor(self):
        self.calls.append(("focus_editor",))


def test_navigate_converts_to_zero_based_line():
    mover = RecordingMover()
    bridge = NavigationBridge(mover)
    identity = bridge.navigate(Heading(2, "Data", 12))
    assert identity == HeadingIdentity(2, 12)
    assert mover.calls == [("move_to", 11, 0), ("focus_editor",)]


def test_navigate_without_mover_still_returns_identity():
    bridge = NavigationBridge()
    assert bridge.navigate(Heading(1, "Top", 1)) == HeadingIdentity(1, 1)
