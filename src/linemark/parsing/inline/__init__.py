"""Inline (span-level) parsing used by the renderer.

Modules:
- core: InlineParser (escapes, code spans, emphasis, strong, hard breaks)
- links: LinkParsingMixin (inline/reference links, images, autolinks)

"""

from linemark.parsing.inline.core import HARD_BREAK, InlineParser
from linemark.parsing.inline.links import LinkParsingMixin

__all__ = ["HARD_BREAK", "InlineParser", "LinkParsingMixin"]
