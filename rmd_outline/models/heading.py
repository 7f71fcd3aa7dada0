"""Heading models for the document outline."""

from dataclasses import dataclass
from typing import NamedTuple


class HeadingIdentity(NamedTuple):
    """Key for per-heading collapse state.

    Text is not part of the identity: two headings may share text.
    """

    level: int
    line: int


@dataclass(frozen=True)
class Heading:
    """A heading detected in the document source."""

    level: int  # count of leading '#'
    text: str
    line: int  # 1-based source line

    @property
    def identity(self) -> HeadingIdentity:
        """Return the (level, line) key for this heading."""
        return HeadingIdentity(self.level, self.line)

    @property
    def display_name(self) -> str:
        return self.text


@dataclass(frozen=True)
class VisibleHeading:
    """A heading annotated for rendering in the outline list."""

    heading: Heading
    has_children: bool = False
    is_collapsed: bool = False
    is_active: bool = False
    is_first_child: bool = False
    is_last_child: bool = False
    is_middle_child: bool = False

    @property
    def level(self) -> int:
        return self.heading.level

    @property
    def text(self) -> str:
        return self.heading.text

    @property
    def line(self) -> int:
        return self.heading.line

    @property
    def identity(self) -> HeadingIdentity:
        return self.heading.identity

    @property
    def is_child(self) -> bool:
        """Check if the heading renders grouped under a direct parent."""
        return self.is_first_child or self.is_middle_child or self.is_last_child
