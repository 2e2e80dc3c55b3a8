"""Syntactic roles assigned to source lines by the classifier.

Thread Safety:
LineType is an enum (inherently immutable).

"""

from enum import Enum, auto


class LineType(Enum):
    """Line roles, one per source line.

    HEADLINE1 and HEADLINE2 mark the text line of a setext headline whose
    underline (``===`` or ``---``) is the following line.

    """

    EMPTY = auto()
    OTHER = auto()
    CODE = auto()
    RULER = auto()
    HEADLINE = auto()  # # Headline
    HEADLINE1 = auto()  # Headline\n===
    HEADLINE2 = auto()  # Headline\n---
    BQUOTE = auto()  # >
    OLIST = auto()  # 1.
    ULIST = auto()  # -, *, +


LIST_TYPES: frozenset[LineType] = frozenset({LineType.OLIST, LineType.ULIST})

HEADLINE_TYPES: frozenset[LineType] = frozenset(
    {LineType.HEADLINE, LineType.HEADLINE1, LineType.HEADLINE2}
)

# Roles that end a paragraph run
BLOCK_START_TYPES: frozenset[LineType] = HEADLINE_TYPES | {LineType.RULER, LineType.BQUOTE}
