"""Tests for the file document source."""

import pytest

from rmd_outline.services.document_source import (
    DocumentReadError,
    FileDocumentSource,
    is_outline_document,
)


def test_reads_utf8_text(tmp_path):
    path = tmp_path / "report.Rmd"
    path.write_text("# Résumé\n", encoding="utf-8")
    assert FileDocumentSource().read_text(str(path)) == "# Résumé\n"


def test_missing_file_raises_read_error(tmp_path):
    path = tmp_path / "missing.Rmd"
    with pytest.raises(DocumentReadError) as excinfo:
        FileDocumentSource().read_text(str(path))
    assert excinfo.value.path == str(path)


def test_invalid_utf8_raises_read_error(tmp_path):
    path = tmp_path / "binary.Rmd"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(DocumentReadError):
        FileDocumentSource().read_text(str(path))


@pytest.mark.parametrize("name, expected", [
    ("analysis.Rmd", True),
    ("analysis.rmd", True),
    ("ANALYSIS.RMD", True),
    ("notes.md", True),
    ("script.R", False),
    ("README", False),
])
def test_is_outline_document(name, expected):
    assert is_outline_document(name) is expected


def test_is_outline_document_custom_extensions():
    assert is_outline_document("paper.qmd", [".qmd"]) is True
    assert is_outline_document("notes.md", [".qmd"]) is False
    assert is_outline_document(None) is False
