"""Block decomposition mixins for the linemark parser.

Modules:
- core: worklist-driven dispatch, paragraphs, code, rulers, loose-item promotion
- quote: block quotes with lazy continuation
- headline: ATX and setext headlines
- list: list runs, item splitting, marker removal

"""

from linemark.parsing.blocks.core import BlockParsingCoreMixin
from linemark.parsing.blocks.headline import HeadlineParsingMixin
from linemark.parsing.blocks.list import ListParsingMixin
from linemark.parsing.blocks.quote import BlockQuoteParsingMixin


class BlockParsingMixin(
    BlockParsingCoreMixin,
    BlockQuoteParsingMixin,
    HeadlineParsingMixin,
    ListParsingMixin,
):
    """Combined block decomposition mixin."""

    pass


__all__ = [
    "BlockParsingCoreMixin",
    "BlockParsingMixin",
    "BlockQuoteParsingMixin",
    "HeadlineParsingMixin",
    "ListParsingMixin",
]
