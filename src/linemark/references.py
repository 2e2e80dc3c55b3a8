"""Link reference definitions.

``[id]: url "title"`` lines are harvested by the lexer into a LinkRefTable,
which travels with the parsed Document to the renderer. Identifiers match
case-insensitively.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


def normalize_label(label: str) -> str:
    """Normalize a reference identifier for lookup.

    Runs of whitespace collapse to a single space and the result is
    case-folded.

    Example:
        >>> normalize_label("  Foo   Bar ")
        'foo bar'

    """
    return " ".join(label.split()).casefold()


@dataclass(slots=True)
class LinkRef:
    """Target of a link reference definition.

    ``title`` is filled in at most once, by the lexer, when the definition
    line carries no title and the next line is a bare title.
    """

    link: str
    title: str | None = None


class LinkRefTable:
    """Case-insensitive mapping of identifiers to LinkRef.

    A later definition of the same identifier replaces an earlier one.

    Example:
        >>> table = LinkRefTable()
        >>> table.add("Foo", LinkRef("/url"))
        >>> table.get("FOO").link
        '/url'

    """

    __slots__ = ("_refs",)

    def __init__(self) -> None:
        self._refs: dict[str, LinkRef] = {}

    def add(self, label: str, ref: LinkRef) -> None:
        self._refs[normalize_label(label)] = ref

    def get(self, label: str) -> LinkRef | None:
        return self._refs.get(normalize_label(label))

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and normalize_label(label) in self._refs

    def __len__(self) -> int:
        return len(self._refs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._refs)

    def items(self) -> Iterator[tuple[str, LinkRef]]:
        return iter(self._refs.items())

    def __repr__(self) -> str:
        return f"LinkRefTable({self._refs!r})"
