"""Document block tree.

The decomposition engine starts from a single ROOT block that owns every
source line, then carves leading runs of lines off into typed child blocks
until every line sits in a leaf.

Block Hierarchy:
Block (ROOT)
├── PARAGRAPH / CODE / HEADLINE / RULER / NONE   (leaves, own lines)
├── BLOCKQUOTE                                    (owns child blocks)
└── ORDERED_LIST / UNORDERED_LIST                 (own LIST_ITEM blocks)
    └── LIST_ITEM                                 (owns child blocks)

A NONE leaf is a "bare" run of text inside a tight list item; it is rendered
without paragraph wrapping.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto

from linemark.lines import Line
from linemark.references import LinkRefTable


class BlockType(Enum):
    """Kind tag of a Block."""

    NONE = auto()
    PARAGRAPH = auto()
    CODE = auto()
    BLOCKQUOTE = auto()
    RULER = auto()
    HEADLINE = auto()
    ORDERED_LIST = auto()
    UNORDERED_LIST = auto()
    LIST_ITEM = auto()
    ROOT = auto()


LIST_BLOCK_TYPES: frozenset[BlockType] = frozenset(
    {BlockType.ORDERED_LIST, BlockType.UNORDERED_LIST}
)


@dataclass(slots=True, eq=False)
class Block:
    """A node of the document tree.

    A block holds either ``lines`` (leaf) or ``children`` (internal node),
    never both once decomposition has finished.

    Attributes:
        type: Block kind
        lines: Owned source lines (leaf blocks)
        children: Owned child blocks in document order (internal blocks)
        depth: Headline depth 1-6 (HEADLINE only)

    """

    type: BlockType = BlockType.NONE
    lines: list[Line] = field(default_factory=list)
    children: list[Block] = field(default_factory=list)
    depth: int = 0

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def split(self, count: int) -> Block:
        """Move the first ``count`` lines into a new child block.

        The child is appended to ``children`` and returned untyped (NONE);
        callers set the type.
        """
        block = Block(lines=self.lines[:count])
        del self.lines[:count]
        self.children.append(block)
        return block

    def remove_leading_empty_lines(self) -> bool:
        """Drop blank lines at the head. Returns True if any were dropped."""
        count = 0
        for line in self.lines:
            if not line.is_empty:
                break
            count += 1
        if count:
            del self.lines[:count]
        return count > 0

    def remove_trailing_empty_lines(self) -> None:
        while self.lines and self.lines[-1].is_empty:
            self.lines.pop()

    def remove_surrounding_empty_lines(self) -> None:
        self.remove_leading_empty_lines()
        self.remove_trailing_empty_lines()

    def blank_line(self, index: int) -> None:
        """Make the line at ``index`` blank and update its neighbours' flags."""
        self.lines[index].set_value("")
        self._mark_neighbours(index)

    def refresh_line(self, index: int) -> None:
        """Propagate a line that became blank after stripping to its neighbours."""
        if self.lines[index].is_empty:
            self._mark_neighbours(index)

    def _mark_neighbours(self, index: int) -> None:
        if index > 0:
            self.lines[index - 1].next_empty = True
        if index + 1 < len(self.lines):
            self.lines[index + 1].prev_empty = True

    def walk(self) -> Iterator[Block]:
        """Yield this block and all descendants, depth first, in document order."""
        stack = [self]
        while stack:
            block = stack.pop()
            yield block
            stack.extend(reversed(block.children))

    def leaves(self) -> Iterator[Block]:
        """Yield the leaf blocks below (and including) this block."""
        for block in self.walk():
            if block.is_leaf and block.type is not BlockType.ROOT:
                yield block

    def __repr__(self) -> str:
        if self.type is BlockType.HEADLINE:
            kind = f"HEADLINE{self.depth}"
        else:
            kind = self.type.name
        if self.children:
            return f"Block({kind}, children={len(self.children)})"
        return f"Block({kind}, lines={len(self.lines)})"


@dataclass(slots=True)
class Document:
    """Result of parsing one source.

    Attributes:
        root: ROOT block whose children are the top-level blocks
        link_refs: Link reference definitions harvested by the lexer
        source_file: Source file path, when parsed from a file

    """

    root: Block
    link_refs: LinkRefTable
    source_file: str | None = None

    @property
    def children(self) -> list[Block]:
        return self.root.children
