"""Headline classifiers (ATX and setext)."""

from __future__ import annotations

from linemark.lexer.line_types import LineType
from linemark.lines import Line
from linemark.parsing.charsets import HEADLINE_MARKER, SETEXT_UNDERLINES

_SETEXT_TYPES: dict[int, LineType] = {1: LineType.HEADLINE1, 2: LineType.HEADLINE2}


def atx_level(content: str) -> int:
    """Count the leading ``#`` of an ATX headline, or 0 if it is not one.

    A headline has 1-6 ``#`` followed by a space or the end of the line.

    Example:
        >>> atx_level("## Title")
        2
        >>> atx_level("#hashtag")
        0
    """
    level = 0
    while level < len(content) and content[level] == HEADLINE_MARKER:
        level += 1
    if level == 0 or level > 6:
        return 0
    if level < len(content) and content[level] != " ":
        return 0
    return level


def try_classify_atx_heading(line: Line) -> LineType | None:
    """Classify ``line`` as an ATX headline (``# Title``)."""
    if atx_level(line.content):
        return LineType.HEADLINE
    return None


def setext_depth(underline: Line) -> int:
    """Depth of a setext underline: 1 for ``===``, 2 for ``---``, 0 otherwise.

    The underline must start in the first column and contain only one
    underline character, apart from trailing spaces.
    """
    if underline.is_empty or underline.leading:
        return 0
    char = underline.value[0]
    depth = SETEXT_UNDERLINES.get(char, 0)
    if depth and underline.content.strip(char):
        return 0
    return depth


def try_classify_setext_heading(line: Line, next_line: Line | None) -> LineType | None:
    """Classify ``line`` as the text line of a setext headline.

    Only consulted once every other role has been ruled out for ``line``.
    """
    if next_line is None:
        return None
    depth = setext_depth(next_line)
    return _SETEXT_TYPES.get(depth)
