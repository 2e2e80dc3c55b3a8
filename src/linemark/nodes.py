"""Inline nodes produced by the inline parser.

All nodes are frozen dataclasses with slots. The block structure lives in
``linemark.blocks``; these nodes only describe the spans inside a block's
text.

Node Hierarchy:
Inline
├── Text
├── Emphasis
├── Strong
├── CodeSpan
├── Link
├── Image
└── LineBreak

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Inline:
    """Base class for inline nodes."""


@dataclass(frozen=True, slots=True)
class Text(Inline):
    """Literal text (escaped at render time)."""

    content: str


@dataclass(frozen=True, slots=True)
class Emphasis(Inline):
    """Markdown: *text* or _text_ -> <em>text</em>"""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Strong(Inline):
    """Markdown: **text** or __text__ -> <strong>text</strong>"""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class CodeSpan(Inline):
    """Markdown: `code` -> <code>code</code>"""

    code: str


@dataclass(frozen=True, slots=True)
class Link(Inline):
    """Hyperlink.

    Markdown: [text](url "title"), [text][id], [id] or <http://url>
    HTML: <a href="url" title="title">text</a>

    """

    url: str
    title: str | None
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Image(Inline):
    """Markdown: ![alt](url "title") -> <img src="url" alt="alt" title="title" />"""

    url: str
    alt: str
    title: str | None = None


@dataclass(frozen=True, slots=True)
class LineBreak(Inline):
    """Hard line break (two or more trailing spaces) -> <br />"""
