"""Selector part kinds: canonical CSS order, sigils, and cardinality."""

from __future__ import annotations

from enum import Enum

DUPLICATE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time inside the selector"
)
PART_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class PartKind(Enum):
    """The six kinds of fragment a compound selector is built from.

    Member order is the canonical CSS order; ``rank`` exposes it as an int.
    """

    TYPE = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def label(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def sigil(self) -> str:
        return _SIGILS[self]

    @property
    def singular(self) -> bool:
        """True if the kind may occur at most once per selector."""
        return self in _SINGULAR


_RANKS: dict[PartKind, int] = {kind: index for index, kind in enumerate(PartKind)}

_SIGILS: dict[PartKind, str] = {
    PartKind.TYPE: "",
    PartKind.ID: "#",
    PartKind.CLASS: ".",
    PartKind.ATTRIBUTE: "[",
    PartKind.PSEUDO_CLASS: ":",
    PartKind.PSEUDO_ELEMENT: "::",
}

_SINGULAR = frozenset({PartKind.TYPE, PartKind.ID, PartKind.PSEUDO_ELEMENT})
