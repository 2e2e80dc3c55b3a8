"""Link reference definition classifier.

Recognizes ``[id]: url "title"`` lines and the bare title line that may
follow a definition written without one::

    [id]: http://example.com/
    "Optional Title"

All scanning uses a transient _Cursor local to each call; Line objects are
never mutated here.
"""

from __future__ import annotations

from dataclasses import dataclass

from linemark.lines import Line
from linemark.parsing.charsets import ESCAPABLE, TITLE_DELIMITERS

_END_OF_LINE = ""


class _Cursor:
    """Read position into a line's text."""

    __slots__ = ("_text", "pos")

    def __init__(self, text: str, pos: int = 0) -> None:
        self._text = text
        self.pos = pos

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self._text)

    def peek(self) -> str:
        return "" if self.at_end else self._text[self.pos]

    def skip_spaces(self) -> bool:
        """Advance past spaces. Returns True if characters remain."""
        text = self._text
        while self.pos < len(text) and text[self.pos] == " ":
            self.pos += 1
        return self.pos < len(text)

    def read_until(self, *ends: str) -> str | None:
        """Read up to the first unescaped character in ``ends``.

        ``_END_OF_LINE`` in ``ends`` accepts the end of the text as a
        terminator. On success the cursor rests on the terminator and the
        text read (with escapes resolved) is returned; otherwise the cursor is
        left untouched and None is returned.
        """
        text = self._text
        parts: list[str] = []
        p = self.pos
        while p < len(text):
            ch = text[p]
            if ch == "\\" and p + 1 < len(text) and text[p + 1] in ESCAPABLE:
                parts.append(text[p + 1])
                p += 2
                continue
            if ch in ends:
                self.pos = p
                return "".join(parts)
            parts.append(ch)
            p += 1
        if _END_OF_LINE in ends:
            self.pos = p
            return "".join(parts)
        return None


@dataclass(frozen=True, slots=True)
class LinkRefDef:
    """A recognized definition line.

    Attributes:
        label: Identifier as written (lookup is case-insensitive)
        link: Target URL
        title: Title, or None when the line carried none

    """

    label: str
    link: str
    title: str | None


def _read_title(cursor: _Cursor) -> str | None:
    """Read a delimited title at the cursor; it must end the line."""
    opener = cursor.peek()
    closer = TITLE_DELIMITERS.get(opener)
    if closer is None:
        return None
    cursor.pos += 1
    title = cursor.read_until(closer)
    if title is None:
        return None
    cursor.pos += 1
    if cursor.skip_spaces():
        return None
    return title


def try_parse_link_ref_def(line: Line) -> LinkRefDef | None:
    """Try to read ``line`` as a link reference definition.

    Args:
        line: Tab-expanded source line

    Returns:
        LinkRefDef if the whole line is a definition, None otherwise.

    Example:
        >>> try_parse_link_ref_def(Line('[foo]: /url "title"'))
        LinkRefDef(label='foo', link='/url', title='title')
        >>> try_parse_link_ref_def(Line("[foo] bar")) is None
        True
    """
    if line.is_empty or line.leading > 3 or line.value[line.leading] != "[":
        return None

    cursor = _Cursor(line.value, line.leading + 1)
    label = cursor.read_until("]")
    if not label:
        return None
    cursor.pos += 1
    if cursor.peek() != ":":
        return None
    cursor.pos += 1
    if not cursor.skip_spaces():
        return None

    if cursor.peek() == "<":
        cursor.pos += 1
        link = cursor.read_until(">")
        if link is None:
            return None
        cursor.pos += 1
    else:
        link = cursor.read_until(" ", _END_OF_LINE)
    if not link:
        return None

    if not cursor.skip_spaces():
        return LinkRefDef(label, link, None)

    title = _read_title(cursor)
    if title is None:
        return None
    return LinkRefDef(label, link, title)


def try_parse_title_line(line: Line) -> str | None:
    """Read ``line`` as a lone title continuing a previous definition.

    Example:
        >>> try_parse_title_line(Line('    "Optional Title"'))
        'Optional Title'
        >>> try_parse_title_line(Line('"Title" and more')) is None
        True
    """
    if line.is_empty:
        return None
    return _read_title(_Cursor(line.value, line.leading))
