"""Line tokenizer with link reference extraction.

Reads a character source once, front to back, and produces the Line
sequence consumed by the block engine:

1. Split on LF, CR and CRLF (LF CR also counts as one terminator)
2. Expand tabs to the next multiple of 4 columns
3. Pull link reference definitions (and their optional title line) out of
   the sequence into a LinkRefTable

Thread Safety:
Lexer instances are single-use. Create one per source.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TextIO

from linemark.lexer.classifiers import try_parse_link_ref_def, try_parse_title_line
from linemark.lines import Line
from linemark.references import LinkRef, LinkRefTable
from linemark.utils.logger import get_logger

logger = get_logger(__name__)

TAB_WIDTH = 4

# Characters read per call from text streams
_CHUNK_SIZE = 8192


def _iter_chars(source: str | TextIO) -> Iterator[str]:
    """Yield the characters of ``source`` one at a time."""
    if isinstance(source, str):
        yield from source
        return
    while True:
        chunk = source.read(_CHUNK_SIZE)
        if not chunk:
            return
        yield from chunk


def expand_tabs(text: str) -> str:
    """Expand tabs to spaces, reaching the next multiple of ``TAB_WIDTH``.

    Example:
        >>> expand_tabs("a\\tb")
        'a   b'
        >>> expand_tabs("\\tcode")
        '    code'
    """
    if "\t" not in text:
        return text
    result: list[str] = []
    col = 0
    for char in text:
        if char == "\t":
            expansion = TAB_WIDTH - (col % TAB_WIDTH)
            result.append(" " * expansion)
            col += expansion
        else:
            result.append(char)
            col += 1
    return "".join(result)


def split_lines(chars: Iterable[str]) -> Iterator[str]:
    """Split a character stream into raw lines with terminators removed.

    Uses a single character of lookahead to pair CR/LF. A terminator at the
    very end of input does not produce a trailing empty line.

    Example:
        >>> list(split_lines("a\\r\\nb\\rc\\n"))
        ['a', 'b', 'c']
    """
    buf: list[str] = []
    # Second half of a two-character terminator still to be swallowed
    pending_pair = ""
    started = False
    for char in chars:
        if pending_pair:
            expected, pending_pair = pending_pair, ""
            if char == expected:
                continue
        started = True
        if char == "\n" or char == "\r":
            yield "".join(buf)
            buf.clear()
            started = False
            pending_pair = "\r" if char == "\n" else "\n"
        else:
            buf.append(char)
    if started:
        yield "".join(buf)


class Lexer:
    """Turn a character source into Lines and a LinkRefTable.

    Usage:
        >>> lexer = Lexer("[id]: /url\\n\\nSee [it][id].\\n")
        >>> [line.value for line in lexer.tokenize()]
        ['', 'See [it][id].']
        >>> lexer.link_refs.get("ID").link
        '/url'

    Thread Safety:
        Lexer instances are single-use. Create one per source.

    """

    __slots__ = ("_source", "_source_file", "_link_refs", "_consumed")

    def __init__(self, source: str | TextIO, source_file: str | None = None) -> None:
        """Initialize lexer.

        Args:
            source: Decoded text, or a text stream read to its end
            source_file: Optional source file path for log messages
        """
        self._source = source
        self._source_file = source_file
        self._link_refs = LinkRefTable()
        self._consumed = False

    @property
    def link_refs(self) -> LinkRefTable:
        """Link reference definitions found by ``tokenize``."""
        return self._link_refs

    def tokenize(self) -> list[Line]:
        """Read the whole source and return its lines.

        Definition lines are dropped from the result and recorded in
        ``link_refs``. Each returned line has ``prev_empty``/``next_empty``
        set from its neighbours in the returned sequence.

        Raises:
            RuntimeError: if called twice on the same instance
        """
        if self._consumed:
            raise RuntimeError("Lexer instances are single-use")
        self._consumed = True

        lines: list[Line] = []
        for line in self._scan():
            if lines:
                prev = lines[-1]
                line.prev_empty = prev.is_empty
                prev.next_empty = line.is_empty
            lines.append(line)

        logger.debug(
            "%s: %d lines, %d link references",
            self._source_file or "<string>",
            len(lines),
            len(self._link_refs),
        )
        return lines

    def _scan(self) -> Iterator[Line]:
        """Yield the lines that are not link reference definitions."""
        # Definition written without a title; the next line may supply it
        pending: LinkRef | None = None
        lineno = 0
        for raw in split_lines(_iter_chars(self._source)):
            lineno += 1
            line = Line(expand_tabs(raw), lineno)

            if pending is not None:
                ref, pending = pending, None
                title = try_parse_title_line(line)
                if title is not None:
                    ref.title = title
                    continue

            definition = try_parse_link_ref_def(line)
            if definition is not None:
                ref = LinkRef(definition.link, definition.title)
                self._link_refs.add(definition.label, ref)
                logger.debug("line %d: link reference %r -> %s", lineno, definition.label, ref.link)
                if definition.title is None:
                    pending = ref
                continue

            yield line
