"""Block quote classifier."""

from __future__ import annotations

from linemark.lexer.line_types import LineType
from linemark.lines import Line
from linemark.parsing.charsets import BLOCK_QUOTE_MARKER


def try_classify_block_quote(line: Line) -> LineType | None:
    """Classify ``line`` as a block quote line (first non-space is ``>``)."""
    if line.char_at_leading() == BLOCK_QUOTE_MARKER:
        return LineType.BQUOTE
    return None


def quote_prefix_length(line: Line) -> int:
    """Length of the ``>`` prefix (with one following space) of ``line``.

    Returns 0 if the line does not start with a quote marker.

    Example:
        >>> quote_prefix_length(Line("> text"))
        2
        >>> quote_prefix_length(Line("  >text"))
        3
    """
    if line.char_at_leading() != BLOCK_QUOTE_MARKER:
        return 0
    end = line.leading + 1
    if end < len(line.value) and line.value[end] == " ":
        end += 1
    return end
