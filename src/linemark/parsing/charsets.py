"""Character sets for O(1) classification.

All sets are frozensets: immutable, cached at module level, O(1) membership.

Usage:
    from linemark.parsing.charsets import ESCAPABLE

    if char in ESCAPABLE:
        ...
"""

# Characters that may be backslash-escaped in text, link labels and URLs
ESCAPABLE: frozenset[str] = frozenset("\\`*_{}[]()#+-.!>\"'")

# Ruler (horizontal rule) characters
RULER_CHARS: frozenset[str] = frozenset("*-_")

# Unordered list markers
UNORDERED_LIST_MARKERS: frozenset[str] = frozenset("*-+")

# Block quote marker
BLOCK_QUOTE_MARKER = ">"

# ATX headline marker
HEADLINE_MARKER = "#"

# Setext underline characters mapped to headline depth
SETEXT_UNDERLINES: dict[str, int] = {"=": 1, "-": 2}

# Openers of link reference titles mapped to their closers
TITLE_DELIMITERS: dict[str, str] = {'"': '"', "'": "'", "(": ")"}

# Emphasis delimiter characters
EMPHASIS_DELIMITERS: frozenset[str] = frozenset("*_")

# Inline characters that may start a span
INLINE_SPECIAL: frozenset[str] = frozenset("\\`*_[!< ")

# Autolink schemes recognized inside <...>
AUTOLINK_SCHEMES: tuple[str, ...] = ("http://", "https://", "ftp://", "mailto:")

# ASCII whitespace
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")
