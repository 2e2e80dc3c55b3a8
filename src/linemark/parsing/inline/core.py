"""Core inline parsing.

Scans a block's text left to right. Plain characters accumulate into Text
nodes; at each special character a span parser is tried, and if it does not
match the character is kept as literal text. Unmatched syntax never raises.

Thread Safety:
InlineParser holds only the (read-only) link reference table and may be
reused for every block of one document.

"""

from __future__ import annotations

from linemark.nodes import CodeSpan, Emphasis, Inline, LineBreak, Strong, Text
from linemark.parsing.charsets import (
    EMPHASIS_DELIMITERS,
    ESCAPABLE,
    INLINE_SPECIAL,
    WHITESPACE,
)
from linemark.parsing.inline.links import LinkParsingMixin
from linemark.references import LinkRefTable

# Marker the renderer places before a newline to request a hard break
HARD_BREAK = "  \n"


def _run_length(text: str, pos: int, char: str) -> int:
    end = pos
    while end < len(text) and text[end] == char:
        end += 1
    return end - pos


def _code_span_close(text: str, pos: int) -> int:
    """Find the end of the backtick run opening at ``pos``.

    Returns:
        Index of the closing run of the same length, or -1.
    """
    count = _run_length(text, pos, "`")
    fence = "`" * count
    close = text.find(fence, pos + count)
    while close != -1:
        run = _run_length(text, close, "`")
        if run == count:
            return close
        close = text.find(fence, close + run)
    return -1


class InlineParser(LinkParsingMixin):
    """Parse span-level markup into Inline nodes.

    Usage:
        >>> InlineParser().parse("a *b* `c`")
        (Text(content='a '), Emphasis(children=(Text(content='b'),)), Text(content=' '), CodeSpan(code='c'))

    """

    __slots__ = ("_link_refs",)

    def __init__(self, link_refs: LinkRefTable | None = None) -> None:
        self._link_refs = link_refs if link_refs is not None else LinkRefTable()

    def parse(self, text: str) -> tuple[Inline, ...]:
        """Parse ``text`` into inline nodes; adjacent text is merged."""
        nodes: list[Inline] = []
        buf: list[str] = []
        pos = 0
        text_len = len(text)

        while pos < text_len:
            char = text[pos]
            result = self._try_span(text, pos) if char in INLINE_SPECIAL else None
            if result is None:
                buf.append(char)
                pos += 1
                continue

            node, pos = result
            if isinstance(node, Text):
                buf.append(node.content)
                continue
            if buf:
                nodes.append(Text("".join(buf)))
                buf.clear()
            nodes.append(node)

        if buf:
            nodes.append(Text("".join(buf)))
        return tuple(nodes)

    def _try_span(self, text: str, pos: int) -> tuple[Inline, int] | None:
        char = text[pos]
        if char == "\\":
            return self._try_escape(text, pos)
        if char == "`":
            return self._try_code_span(text, pos)
        if char in EMPHASIS_DELIMITERS:
            return self._try_emphasis(text, pos)
        if char == "!":
            return self._try_image(text, pos)
        if char == "[":
            return self._try_link(text, pos)
        if char == "<":
            return self._try_autolink(text, pos)
        if char == " " and text.startswith(HARD_BREAK, pos):
            return LineBreak(), pos + 2
        return None

    def _try_escape(self, text: str, pos: int) -> tuple[Inline, int] | None:
        if pos + 1 < len(text) and text[pos + 1] in ESCAPABLE:
            return Text(text[pos + 1]), pos + 2
        return None

    def _try_code_span(self, text: str, pos: int) -> tuple[Inline, int]:
        count = _run_length(text, pos, "`")
        close = _code_span_close(text, pos)
        if close == -1:
            # Unmatched run stays literal as a whole
            return Text("`" * count), pos + count
        code = text[pos + count : close].strip(" ")
        return CodeSpan(code), close + count

    def _try_emphasis(self, text: str, pos: int) -> tuple[Inline, int]:
        """Parse emphasis (one delimiter), strong (two) or both (three)."""
        char = text[pos]
        run = _run_length(text, pos, char)
        # Underscores inside words are literal
        if char == "_" and pos > 0 and text[pos - 1].isalnum():
            return Text(char * run), pos + run

        if run >= 3:
            matched = self._match_delimited(text, pos, char * 3)
            if matched is not None:
                children, end = matched
                return Strong((Emphasis(children),)), end
        if run >= 2:
            matched = self._match_delimited(text, pos, char * 2)
            if matched is not None:
                children, end = matched
                return Strong(children), end
        matched = self._match_delimited(text, pos, char)
        if matched is not None:
            children, end = matched
            return Emphasis(children), end
        return Text(char * run), pos + run

    def _match_delimited(
        self, text: str, pos: int, delim: str
    ) -> tuple[tuple[Inline, ...], int] | None:
        start = pos + len(delim)
        if start >= len(text) or text[start] in WHITESPACE:
            return None
        close = self._find_closer(text, start, delim)
        if close == -1:
            return None
        return self.parse(text[start:close]), close + len(delim)

    def _find_closer(self, text: str, start: int, delim: str) -> int:
        """Find the closing ``delim`` for content starting at ``start``.

        Skips escapes, code spans and nested double delimiters. A closer
        must follow non-whitespace; an underscore closer must not be followed
        by a word character.
        """
        size = len(delim)
        text_len = len(text)
        j = start
        while j < text_len:
            char = text[j]
            if char == "\\":
                j += 2
                continue
            if char == "`":
                close = _code_span_close(text, j)
                j = close + _run_length(text, close, "`") if close != -1 else j + 1
                continue
            if text.startswith(delim, j):
                if size == 1 and text.startswith(delim * 2, j):
                    nested = self._find_closer(text, j + 2, delim * 2)
                    if nested != -1:
                        j = nested + 2
                        continue
                after = j + size
                word_follows = delim[0] == "_" and after < text_len and text[after].isalnum()
                if j > start and text[j - 1] not in WHITESPACE and not word_follows:
                    return j
                j += size
                continue
            j += 1
        return -1
