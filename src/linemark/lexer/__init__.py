"""Line tokenizer for the linemark parser.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LineType
├── core.py              # Lexer (line splitting, tabs, link references)
├── line_types.py        # LineType enum and role groups
└── classifiers/         # Pure per-line role classifiers
    ├── thematic.py      # Rulers
    ├── heading.py       # ATX and setext headlines
    ├── quote.py         # Block quotes
    ├── list.py          # List markers
    └── link_ref.py      # Link reference definitions

Usage:
    >>> from linemark.lexer import Lexer
    >>> [line.value for line in Lexer("# Hello\\n\\nWorld").tokenize()]
    ['# Hello', '', 'World']

"""

from linemark.lexer.core import Lexer, expand_tabs, split_lines
from linemark.lexer.line_types import LineType

__all__ = ["Lexer", "LineType", "expand_tabs", "split_lines"]
