"""Source line records produced by the lexer.

A Line is one logical input line after tab expansion, with its terminator
removed. Lines are owned by exactly one Block at a time; the decomposition
engine moves them between blocks but never copies them.

Thread Safety:
Lines are mutable and belong to a single parse. Never share them between
threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, eq=False)
class Line:
    """One tab-expanded source line.

    Derived fields (``leading``, ``trailing``, ``is_empty``) are computed from
    ``value`` on creation and recomputed by ``strip_prefix`` and
    ``set_value``. A line made only of spaces is normalized to ``""``.

    Attributes:
        value: Line text without terminator, tabs already expanded
        lineno: 1-based line number in the original source (0 if synthetic)
        leading: Number of leading space columns
        trailing: Number of trailing spaces
        is_empty: True for blank lines
        prev_empty: True if the previous line in sequence order is blank
        next_empty: True if the next line in sequence order is blank

    Example:
        >>> line = Line("  - item  ")
        >>> (line.leading, line.trailing, line.is_empty)
        (2, 2, False)
        >>> line.content
        '- item'

    """

    value: str
    lineno: int = 0
    leading: int = 0
    trailing: int = 0
    is_empty: bool = True
    prev_empty: bool = False
    next_empty: bool = False

    def __post_init__(self) -> None:
        self._measure()

    def _measure(self) -> None:
        value = self.value
        stripped = value.lstrip(" ")
        if not stripped:
            self.value = ""
            self.leading = 0
            self.trailing = 0
            self.is_empty = True
            return
        self.leading = len(value) - len(stripped)
        self.trailing = len(stripped) - len(stripped.rstrip(" "))
        self.is_empty = False

    @property
    def content(self) -> str:
        """Line text without leading and trailing spaces."""
        return self.value[self.leading : len(self.value) - self.trailing]

    def char_at_leading(self) -> str:
        """First non-space character, or "" for blank lines."""
        return "" if self.is_empty else self.value[self.leading]

    def set_value(self, value: str) -> None:
        """Replace the text and recompute derived fields."""
        self.value = value
        self._measure()

    def strip_prefix(self, count: int) -> None:
        """Remove the first ``count`` characters and recompute derived fields."""
        if count > 0:
            self.set_value(self.value[count:])

    def __repr__(self) -> str:
        return f"Line({self.lineno}: {self.value!r})"
