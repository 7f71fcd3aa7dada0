"""Reading raw document text for outline extraction."""

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol


# R Markdown first; plain Markdown shares the same heading syntax
DEFAULT_EXTENSIONS = (".rmd", ".md")


class DocumentReadError(OSError):
    """Raised when a document's text cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class DocumentSource(Protocol):
    """Anything that can return the raw text of a document handle."""

    def read_text(self, handle: str) -> str:
        """Return the document text or raise DocumentReadError."""
        ...


class FileDocumentSource:
    """Reads documents from the local file system as UTF-8."""

    def read_text(self, handle: str) -> str:
        try:
            with open(handle, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentReadError(str(handle), str(e)) from e


def is_outline_document(
    path: str | Path | None,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> bool:
    """Check if the file extension is one the outline handles.

    Comparison is case-insensitive, so ".Rmd" and ".RMD" both match ".rmd".
    """
    if not path:
        return False
    suffix = Path(path).suffix.lower()
    return suffix in {ext.lower() for ext in extensions}
