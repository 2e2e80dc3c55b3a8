"""Ruler (horizontal rule) classifier."""

from __future__ import annotations

from linemark.lexer.line_types import LineType
from linemark.lines import Line
from linemark.parsing.charsets import RULER_CHARS


def try_classify_ruler(line: Line) -> LineType | None:
    """Classify ``line`` as a ruler.

    Rulers are 3+ of the same character (``*``, ``-``, ``_``) with optional
    spaces between them and nothing else.

    Returns:
        LineType.RULER if the line is a ruler, None otherwise.
    """
    content = line.content
    if not content or content[0] not in RULER_CHARS:
        return None

    char = content[0]
    count = 0
    for c in content:
        if c == char:
            count += 1
        elif c != " ":
            return None

    return LineType.RULER if count >= 3 else None
