"""Outline session: headings, collapse state, search and selection for one view."""

from collections.abc import Iterable
from enum import Enum

from ..models.heading import Heading, HeadingIdentity, VisibleHeading
from .collapse_state import CollapseState
from .document_source import DEFAULT_EXTENSIONS, DocumentReadError, DocumentSource, is_outline_document
from .markdown_outline import parse_markdown_outline
from .navigation import CursorMover, NavigationBridge
from .outline_visibility import compute_visible_headings, filter_headings


class OutlineStatus(Enum):
    """Result of the last extraction."""
    NO_DOCUMENT = "no_document"
    UNSUPPORTED = "unsupported"  # extension not handled by the outline
    READY = "ready"
    NO_HEADINGS = "no_headings"  # valid, just empty
    READ_FAILED = "read_failed"  # source raised; headings are empty


class OutlineSession:
    """State behind one outline view.

    Every method runs to completion synchronously; callers debounce
    change notifications and call refresh() as often as they like.

    Usage:
        session = OutlineSession(FileDocumentSource(), mover=editor)
        session.open_document("/path/report.Rmd")
        for row in session.visible_headings():
            ...
        session.toggle(row.identity)
        session.set_search_term("method")
        session.select(row.heading)
    """

    def __init__(
        self,
        source: DocumentSource,
        mover: CursorMover | None = None,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    ):
        self.source = source
        self.navigation = NavigationBridge(mover)
        self.extensions = tuple(extensions)

        self.document: str | None = None
        self.headings: list[Heading] = []
        self.collapse_state = CollapseState()
        self.active_identity: HeadingIdentity | None = None
        self.search_term = ""
        self.status = OutlineStatus.NO_DOCUMENT
        self.error: str | None = None

    # --- Document lifecycle ---

    def open_document(self, handle: str | None) -> OutlineStatus:
        """Switch to a document and extract its headings.

        Collapse state, selection and search start fresh for each document.
        """
        self.document = str(handle) if handle else None
        self.collapse_state = CollapseState()
        self.active_identity = None
        self.search_term = ""
        return self.refresh()

    def refresh(self) -> OutlineStatus:
        """Re-read the current document and re-extract headings."""
        self.error = None

        if self.document is None:
            self.headings = []
            self.status = OutlineStatus.NO_DOCUMENT
            return self.status

        if not self.is_supported(self.document):
            self.headings = []
            self.status = OutlineStatus.UNSUPPORTED
            return self.status

        try:
            text = self.source.read_text(self.document)
        except DocumentReadError as e:
            self.headings = []
            self.error = e.reason
            self.status = OutlineStatus.READ_FAILED
            return self.status

        return self.load_text(text)

    def load_text(self, text: str) -> OutlineStatus:
        """Extract headings from text already in hand (e.g. an editor buffer)."""
        self.error = None
        self.headings = parse_markdown_outline(text)
        self.status = OutlineStatus.READY if self.headings else OutlineStatus.NO_HEADINGS
        return self.status

    def is_supported(self, handle: str | None) -> bool:
        return is_outline_document(handle, self.extensions)

    # --- Change notifications ---

    def on_document_opened(self, handle: str) -> bool:
        """Handle a document being opened in the editor.

        Returns:
            True if the outline was rebuilt
        """
        if str(handle) == self.document:
            self.refresh()
        else:
            self.open_document(handle)
        return True

    def on_document_modified(self, handle: str) -> bool:
        """Handle a change to a document.

        Notifications for any document other than the current one are
        ignored.

        Returns:
            True if the outline was rebuilt
        """
        if self.document is None or str(handle) != self.document:
            return False
        self.refresh()
        return True

    # --- Collapse state ---

    def toggle(self, identity: HeadingIdentity) -> bool:
        """Toggle a heading shown in the current (possibly filtered) outline."""
        shown = filter_headings(self.headings, self.search_term)
        return self.collapse_state.toggle(identity, shown)

    def is_collapsed(self, identity: HeadingIdentity) -> bool:
        return self.collapse_state.is_collapsed(identity)

    def collapse_all(self) -> None:
        self.collapse_state.collapse_all(self.headings)

    def expand_all(self) -> None:
        self.collapse_state.expand_all()

    def toggle_all(self) -> bool:
        """Flip between collapse all and expand all.

        Returns:
            True if everything is now collapsed
        """
        return self.collapse_state.toggle_all(self.headings)

    @property
    def all_collapsed(self) -> bool:
        return self.collapse_state.all_collapsed

    # --- Search and selection ---

    def set_search_term(self, term: str | None) -> None:
        self.search_term = term or ""

    def visible_headings(self) -> list[VisibleHeading]:
        """Return the headings to display for the current state."""
        return compute_visible_headings(
            self.headings,
            self.collapse_state,
            search_term=self.search_term,
            active_identity=self.active_identity,
        )

    def select(self, heading: Heading) -> HeadingIdentity:
        """Mark the heading active and move the editor cursor to it."""
        self.active_identity = self.navigation.navigate(heading)
        return self.active_identity
