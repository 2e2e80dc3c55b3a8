"""Line classifiers for the linemark lexer and block engine.

Each module provides pure functions that decide whether a line matches one
syntactic role. ``classify`` combines them in precedence order; the first
match wins.
"""

from __future__ import annotations

from collections.abc import Sequence

from linemark.lexer.classifiers.heading import (
    atx_level,
    setext_depth,
    try_classify_atx_heading,
    try_classify_setext_heading,
)
from linemark.lexer.classifiers.link_ref import (
    LinkRefDef,
    try_parse_link_ref_def,
    try_parse_title_line,
)
from linemark.lexer.classifiers.list import marker_length, try_classify_list_marker
from linemark.lexer.classifiers.quote import quote_prefix_length, try_classify_block_quote
from linemark.lexer.classifiers.thematic import try_classify_ruler
from linemark.lexer.line_types import LineType
from linemark.lines import Line


def classify(line: Line, next_line: Line | None = None) -> LineType:
    """Assign a syntactic role to ``line``.

    Precedence: blank, indented code, ruler, ATX headline, block quote,
    ordered/unordered list item, setext headline text, other. ``next_line``
    is only consulted for the setext underline.

    Example:
        >>> classify(Line("* * *"))
        <LineType.RULER: 4>
        >>> classify(Line("Title"), Line("====="))
        <LineType.HEADLINE1: 6>
    """
    if line.is_empty:
        return LineType.EMPTY
    if line.leading > 3:
        return LineType.CODE
    return (
        try_classify_ruler(line)
        or try_classify_atx_heading(line)
        or try_classify_block_quote(line)
        or try_classify_list_marker(line)
        or try_classify_setext_heading(line, next_line)
        or LineType.OTHER
    )


def classify_at(lines: Sequence[Line], index: int) -> LineType:
    """Classify ``lines[index]`` using its successor in ``lines``."""
    next_line = lines[index + 1] if index + 1 < len(lines) else None
    return classify(lines[index], next_line)


__all__ = [
    "LinkRefDef",
    "atx_level",
    "classify",
    "classify_at",
    "marker_length",
    "quote_prefix_length",
    "setext_depth",
    "try_classify_atx_heading",
    "try_classify_block_quote",
    "try_classify_list_marker",
    "try_classify_ruler",
    "try_classify_setext_heading",
    "try_parse_link_ref_def",
    "try_parse_title_line",
]
