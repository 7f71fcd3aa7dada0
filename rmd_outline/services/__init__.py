from .markdown_outline import parse_markdown_outline, HEADING_PATTERN, FENCE_MARKER
from .outline_hierarchy import (
    has_children,
    direct_parent,
    has_direct_parent,
    is_first_child,
    is_last_child,
    is_middle_child,
    child_position,
)
from .collapse_state import CollapseState
from .outline_visibility import filter_headings, is_hidden, compute_visible_headings
from .navigation import CursorMover, NavigationBridge
from .document_source import (
    DEFAULT_EXTENSIONS,
    DocumentReadError,
    DocumentSource,
    FileDocumentSource,
    is_outline_document,
)
from .outline_session import OutlineSession, OutlineStatus
from .outline_format import format_heading_structure, describe_detection

__all__ = [
    "parse_markdown_outline",
    "HEADING_PATTERN",
    "FENCE_MARKER",
    "has_children",
    "direct_parent",
    "has_direct_parent",
    "is_first_child",
    "is_last_child",
    "is_middle_child",
    "child_position",
    "CollapseState",
    "filter_headings",
    "is_hidden",
    "compute_visible_headings",
    "CursorMover",
    "NavigationBridge",
    "DEFAULT_EXTENSIONS",
    "DocumentReadError",
    "DocumentSource",
    "FileDocumentSource",
    "is_outline_document",
    "OutlineSession",
    "OutlineStatus",
    "format_heading_structure",
    "describe_detection",
]
