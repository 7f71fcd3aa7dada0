"""Tests for heading extraction."""

import pytest

from rmd_outline.models import Heading
from rmd_outline.services.markdown_outline import parse_markdown_outline


def test_levels_text_and_lines():
    source = "# Title\n\nSome text\n## Section\n### Sub section  \n"
    assert parse_markdown_outline(source) == [
        Heading(level=1, text="Title", line=1),
        Heading(level=2, text="Section", line=4),
        Heading(level=3, text="Sub section", line=5),
    ]


def test_no_hash_characters_gives_empty_outline():
    assert parse_markdown_outline("plain text\nmore text\n") == []
    assert parse_markdown_outline("") == []


@pytest.mark.parametrize("line", [
    "#foo",
    "# ",
    "#",
    "#   ",
    "  # Title",
    "\t# Title",
    "> # Quoted",
    "- # In a list",
])
def test_lines_that_are_not_headings(line):
    assert parse_markdown_outline(line) == []


def test_headings_inside_fence_are_skipped():
    source = (
        "# Before\n"
        "```{r}\n"
        "# a comment in R\n"
        "x <- 1\n"
        "```\n"
        "# After\n"
    )
    headings = parse_markdown_outline(source)
    assert [h.text for h in headings] == ["Before", "After"]
    assert [h.line for h in headings] == [1, 6]


def test_fence_marker_line_is_never_a_heading():
    # Trimmed content starts with ``` so the line only toggles the fence
    source = "```\n```\n# Real\n"
    assert parse_markdown_outline(source) == [Heading(1, "Real", 3)]


def test_indented_fence_marker_still_toggles():
    source = "  ```python\n# hidden\n  ```\n# shown\n"
    assert [h.text for h in parse_markdown_outline(source)] == ["shown"]


def test_unterminated_fence_hides_rest_of_document():
    source = "# One\n```\n# Two\n\n# Three\n"
    assert parse_markdown_outline(source) == [Heading(1, "One", 1)]


def test_odd_number_of_fences_hides_following_headings():
    source = "```\n```\n```\n# Inside\n"
    assert parse_markdown_outline(source) == []


def test_duplicate_text_on_different_lines():
    headings = parse_markdown_outline("# Notes\n# Notes\n")
    assert len(headings) == 2
    assert headings[0].identity != headings[1].identity


def test_deep_levels_are_not_capped():
    headings = parse_markdown_outline("####### Seven\n")
    assert headings == [Heading(7, "Seven", 1)]


def test_lines_strictly_increase():
    source = "\n".join(
        f"{'#' * (i % 4 + 1)} Heading {i}" if i % 3 else "text"
        for i in range(40)
    )
    lines = [h.line for h in parse_markdown_outline(source)]
    assert lines == sorted(set(lines))


def test_crlf_line_endings():
    headings = parse_markdown_outline("# Title\r\n## Next\r\n")
    assert [h.text for h in headings] == ["Title", "Next"]


def test_inline_code_after_marker_is_kept_in_text():
    headings = parse_markdown_outline("## Using `dplyr::filter`\n")
    assert headings == [Heading(2, "Using `dplyr::filter`", 1)]
