"""Markdown outline parser for extracting headings."""

import re

from ..models.heading import Heading


# ATX-style heading: optional indent, run of '#', at least one space, text.
# The indent group is captured so indented matches can be rejected.
HEADING_PATTERN = re.compile(r"^(\s*)(#+)\s+(.+)$")

# Fenced code block marker (``` with or without a language tag like {r})
FENCE_MARKER = "```"


def _is_inline_code_hash(line: str) -> bool:
    """Check if the first '#' on the line sits inside an inline code span.

    An odd number of backticks before the marker means a span is still open.
    """
    before_hash = line[:line.index("#")]
    return before_hash.count("`") % 2 == 1


def parse_markdown_outline(source: str) -> list[Heading]:
    """Parse Markdown (or R Markdown) source and extract headings.

    Only unindented ATX headings count: headings nested in block quotes or
    list items are ignored. Lines inside ``` fences are skipped, and an
    unterminated fence hides every heading after it.

    Returns a list of Heading objects ordered by line number.
    """
    items = []
    in_code_block = False

    for line_num, line in enumerate(source.split("\n"), start=1):
        # Fence markers toggle state and are never headings themselves
        if line.strip().startswith(FENCE_MARKER):
            in_code_block = not in_code_block
            continue

        if in_code_block:
            continue

        match = HEADING_PATTERN.match(line)
        if not match:
            continue

        indent, hashes, text = match.groups()
        if indent:
            continue
        if _is_inline_code_hash(line):
            continue

        text = text.strip()
        if not text:
            # "#   " or "# \r": whitespace only after the marker
            continue

        items.append(Heading(
            level=len(hashes),
            text=text,
            line=line_num,
        ))

    return items
