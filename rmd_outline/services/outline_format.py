"""Plain-text rendering of detected headings."""

from collections.abc import Sequence

from ..models.heading import Heading
from .outline_session import OutlineStatus


def format_heading_structure(
    headings: Sequence[Heading],
    title: str,
    show_line_numbers: bool = True,
) -> str:
    """Render headings as an indented tree of Markdown markers.

    Example:
        File: report.Rmd
        Heading structure:

        # Introduction (line 3)
          ## Data (line 10)
    """
    lines = [f"File: {title}", "Heading structure:", ""]
    for heading in headings:
        indent = "  " * (heading.level - 1)
        line_info = f" (line {heading.line})" if show_line_numbers else ""
        lines.append(f"{indent}{'#' * heading.level} {heading.text}{line_info}")
    return "\n".join(lines) + "\n"


def describe_detection(status: OutlineStatus, count: int, error: str | None = None) -> str:
    """Return a one-line summary for an outline status.

    Args:
        status: Status of the last extraction
        count: Number of headings found
        error: Read error message, if any
    """
    if status == OutlineStatus.READ_FAILED:
        return f"Failed to read file: {error}" if error else "Failed to read file"
    if status in (OutlineStatus.NO_DOCUMENT, OutlineStatus.UNSUPPORTED):
        return "Open an R Markdown file"
    if count == 0:
        return "No headings found"
    noun = "heading" if count == 1 else "headings"
    return f"Detected {count} {noun}"
