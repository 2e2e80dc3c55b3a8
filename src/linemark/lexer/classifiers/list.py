"""List marker classifiers."""

from __future__ import annotations

from linemark.lexer.line_types import LineType
from linemark.lines import Line
from linemark.parsing.charsets import UNORDERED_LIST_MARKERS


def try_classify_list_marker(line: Line) -> LineType | None:
    """Classify ``line`` as an ordered (``1. ``) or unordered (``- ``) item."""
    value = line.value
    pos = line.leading
    if pos >= len(value):
        return None

    # Unordered: marker followed by a space
    if value[pos] in UNORDERED_LIST_MARKERS:
        if pos + 1 < len(value) and value[pos + 1] == " ":
            return LineType.ULIST
        return None

    # Ordered: digits, '.', space
    if value[pos].isdigit():
        while pos < len(value) and value[pos].isdigit():
            pos += 1
        if pos + 1 < len(value) and value[pos] == "." and value[pos + 1] == " ":
            return LineType.OLIST
    return None


def marker_length(line: Line, line_type: LineType) -> int:
    """Number of columns the list marker of ``line`` occupies.

    Covers the indentation, the marker itself and one following space.

    Example:
        >>> marker_length(Line("- text"), LineType.ULIST)
        2
        >>> marker_length(Line("10. text"), LineType.OLIST)
        4
    """
    if line_type is LineType.ULIST:
        return line.leading + 2
    if line_type is LineType.OLIST:
        return line.value.index(".", line.leading) + 2
    return 0
