"""Combinator nodes: join two serializable operands into a complex selector."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from selector_builder.errors import InvalidCombinatorError

__all__ = ["Combinator", "CombinatorNode", "Serializable", "join"]

logger = logging.getLogger(__name__)


class Combinator(Enum):
    """The four literal combinator tokens."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


@runtime_checkable
class Serializable(Protocol):
    """Anything that renders itself to selector text."""

    def serialize(self) -> str: ...


@dataclass(frozen=True)
class CombinatorNode:
    """``left <combinator> right``, rendered on demand.

    The combinator is always padded with one space on each side, so the
    descendant token renders as three consecutive spaces.
    """

    left: Serializable
    combinator: Combinator
    right: Serializable

    def serialize(self) -> str:
        return f"{self.left.serialize()} {self.combinator.value} {self.right.serialize()}"

    def stringify(self) -> str:
        return self.serialize()

    def __str__(self) -> str:
        return self.serialize()


def join(
    left: Serializable,
    combinator: str | Combinator,
    right: Serializable,
) -> CombinatorNode:
    """Join *left* and *right* with *combinator* (``' '``, ``'+'``, ``'~'`` or ``'>'``).

    Operands are held by reference and never modified.
    """
    try:
        token = Combinator(combinator)
    except ValueError:
        logger.debug("Rejected combinator %r", combinator)
        raise InvalidCombinatorError(combinator) from None
    return CombinatorNode(left, token, right)
