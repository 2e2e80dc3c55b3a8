"""Headline decomposition (ATX and setext)."""

from __future__ import annotations

from linemark.blocks import Block, BlockType
from linemark.lexer.classifiers import atx_level
from linemark.lexer.line_types import LineType
from linemark.lines import Line
from linemark.parsing.charsets import HEADLINE_MARKER

_SETEXT_DEPTHS: dict[LineType, int] = {LineType.HEADLINE1: 1, LineType.HEADLINE2: 2}


class HeadlineParsingMixin:
    """Headline blocks."""

    def _parse_headline(self, root: Block, line_type: LineType) -> None:
        """Split off a one-line HEADLINE block.

        For setext headlines the underline is blanked; the dispatch loop then
        drops it with the other leading blank lines.
        """
        setext_depth = _SETEXT_DEPTHS.get(line_type)
        if setext_depth is not None:
            root.blank_line(1)

        block = root.split(1)
        block.type = BlockType.HEADLINE
        if setext_depth is not None:
            block.depth = setext_depth
        else:
            block.depth = self._strip_atx_markers(block.lines[0])

    def _strip_atx_markers(self, line: Line) -> int:
        """Remove the ``#`` markers around an ATX headline's text.

        Returns:
            Headline depth (number of leading ``#``).
        """
        content = line.content
        level = atx_level(content)
        text = content[level:].strip(" ").rstrip(HEADLINE_MARKER).rstrip(" ")
        line.set_value(text)
        return level
