"""Link, image and autolink parsing.

Handles:
- Inline links: [text](url "title"), [text](<url>)
- Reference links: [text][id], [text] [id], [text][] and [id]
- Images: ![alt](url "title") and ![alt][id]
- Autolinks: <http://example.com>, <user@example.com>

Reference links resolve against the LinkRefTable harvested by the lexer. A
bracket pair that does not resolve is left as literal text.
"""

from __future__ import annotations

import re

from linemark.nodes import Image, Inline, Link, Text
from linemark.parsing.charsets import AUTOLINK_SCHEMES, WHITESPACE
from linemark.references import LinkRefTable

_ESCAPE_PATTERN = re.compile(r"\\([\\`*_{}\[\]()#+\-.!>\"'])")

# Title delimiters inside an inline destination
_INLINE_TITLE_DELIMITERS = frozenset("\"'")


def _process_escapes(text: str) -> str:
    """Replace backslash escapes in URLs and titles with the literal char."""
    return _ESCAPE_PATTERN.sub(r"\1", text)


def _find_bracket_close(text: str, pos: int) -> int:
    """Index of the ``]`` matching the ``[`` at ``pos``, or -1."""
    depth = 0
    j = pos
    text_len = len(text)
    while j < text_len:
        char = text[j]
        if char == "\\":
            j += 2
            continue
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth == 0:
                return j
        j += 1
    return -1


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in WHITESPACE:
        pos += 1
    return pos


def _parse_destination(text: str, pos: int) -> tuple[str, str | None, int] | None:
    """Parse ``(url "title")`` starting at the ``(`` at ``pos``.

    Returns:
        (url, title, end) where ``end`` is just past the ``)``, or None.
    """
    text_len = len(text)
    j = _skip_whitespace(text, pos + 1)

    if j < text_len and text[j] == "<":
        close = text.find(">", j + 1)
        if close == -1:
            return None
        url = text[j + 1 : close]
        j = close + 1
    else:
        start = j
        depth = 0
        while j < text_len:
            char = text[j]
            if char == "\\":
                j += 2
                continue
            if char == "(":
                depth += 1
            elif char == ")":
                if depth == 0:
                    break
                depth -= 1
            elif char in WHITESPACE:
                break
            j += 1
        url = text[start:j]

    j = _skip_whitespace(text, j)
    title = None
    if j < text_len and text[j] in _INLINE_TITLE_DELIMITERS:
        close = text.find(text[j], j + 1)
        if close == -1:
            return None
        title = _process_escapes(text[j + 1 : close])
        j = _skip_whitespace(text, close + 1)

    if j < text_len and text[j] == ")":
        return _process_escapes(url), title, j + 1
    return None


class LinkParsingMixin:
    """Link and image parsing.

    Required Host Attributes:
        - _link_refs: LinkRefTable

    Required Host Methods:
        - parse(text) -> tuple[Inline, ...]

    """

    _link_refs: LinkRefTable

    def _try_link(self, text: str, pos: int) -> tuple[Inline, int] | None:
        """Try to parse a link at the ``[`` at ``pos``."""
        parts = self._parse_link_parts(text, pos)
        if parts is None:
            return None
        label, url, title, end = parts
        return Link(url=url, title=title, children=self.parse(label)), end

    def _try_image(self, text: str, pos: int) -> tuple[Inline, int] | None:
        """Try to parse an image at the ``!`` at ``pos``."""
        if not text.startswith("![", pos):
            return None
        parts = self._parse_link_parts(text, pos + 1)
        if parts is None:
            return None
        alt, url, title, end = parts
        return Image(url=url, alt=_process_escapes(alt), title=title), end

    def _try_autolink(self, text: str, pos: int) -> tuple[Inline, int] | None:
        """Try to parse ``<scheme://...>`` or ``<user@host>`` at ``pos``."""
        close = text.find(">", pos + 1)
        if close == -1:
            return None
        target = text[pos + 1 : close]
        if not target or any(c in WHITESPACE or c == "<" for c in target):
            return None

        if target.startswith(AUTOLINK_SCHEMES):
            url = target
            shown = target.removeprefix("mailto:")
        elif "@" in target.strip("@"):
            url = f"mailto:{target}"
            shown = target
        else:
            return None
        return Link(url=url, title=None, children=(Text(shown),)), close + 1

    def _parse_link_parts(self, text: str, pos: int) -> tuple[str, str, str | None, int] | None:
        """Parse the bracketed part at ``pos`` and what follows it.

        Returns:
            (label, url, title, end) or None if nothing resolves.
        """
        close = _find_bracket_close(text, pos)
        if close == -1:
            return None
        label = text[pos + 1 : close]
        after = close + 1

        if after < len(text) and text[after] == "(":
            destination = _parse_destination(text, after)
            if destination is None:
                return None
            url, title, end = destination
            return label, url, title, end

        ref_start = after + 1 if text.startswith(" [", after) else after
        if ref_start < len(text) and text[ref_start] == "[":
            ref_close = text.find("]", ref_start + 1)
            if ref_close != -1:
                ref_id = text[ref_start + 1 : ref_close] or label
                ref = self._link_refs.get(ref_id)
                if ref is None:
                    return None
                return label, ref.link, ref.title, ref_close + 1

        ref = self._link_refs.get(label)
        if ref is None:
            return None
        return label, ref.link, ref.title, after

    def parse(self, text: str) -> tuple[Inline, ...]:
        """Parse inline content. Implemented by InlineParser."""
        raise NotImplementedError
