"""Selector accumulator: chains fragment appends into one compound selector.

Example::

    new_builder().add_type("a").add_attribute('href$=".png"').add_pseudo_class("focus")
    # -> a[href$=".png"]:focus
"""

from __future__ import annotations

import logging

from selector_builder.errors import DuplicateSingularPartError, OutOfOrderPartError
from selector_builder.model import PartKind

__all__ = ["Selector", "new_builder"]

logger = logging.getLogger(__name__)


def _render(kind: PartKind, value: str) -> str:
    """Format a raw payload as the fragment text stored for *kind*."""
    if kind is PartKind.ATTRIBUTE:
        # Comparison operators ($=, ^=, ...) stay on the key side.
        key, sep, rest = value.partition("=")
        return f"{key}={rest}" if sep else key
    return f"{kind.sigil}{value}"


class Selector:
    """A compound selector under construction.

    A fresh builder is a template: the first append returns a new instance
    seeded from it, leaving the template untouched.  Every later append on
    that instance mutates it in place and returns ``self``.
    """

    def __init__(self) -> None:
        self._fragments: dict[PartKind, list[str]] = {kind: [] for kind in PartKind}
        self._kinds: list[PartKind] = []
        self._specialized = False

    # --- appends ---------------------------------------------------------------

    def add_type(self, name: str) -> Selector:
        """Set the element type, e.g. ``div``."""
        return self._append(PartKind.TYPE, name)

    def add_id(self, name: str) -> Selector:
        """Set the id, rendered as ``#name``."""
        return self._append(PartKind.ID, name)

    def add_class(self, name: str) -> Selector:
        """Append a class, rendered as ``.name``."""
        return self._append(PartKind.CLASS, name)

    def add_attribute(self, descriptor: str) -> Selector:
        """Append an attribute descriptor such as ``href$=".png"``.

        All attributes of one selector share a single bracket pair and are
        separated by a space: ``[k1=v1 k2=v2]``.
        """
        return self._append(PartKind.ATTRIBUTE, descriptor)

    def add_pseudo_class(self, name: str) -> Selector:
        """Append a pseudo-class, rendered as ``:name``."""
        return self._append(PartKind.PSEUDO_CLASS, name)

    def add_pseudo_element(self, name: str) -> Selector:
        """Set the pseudo-element, rendered as ``::name``."""
        return self._append(PartKind.PSEUDO_ELEMENT, name)

    def _append(self, kind: PartKind, value: str) -> Selector:
        self._check(kind)
        target = self if self._specialized else self._copy()
        target._fragments[kind].append(_render(kind, value))
        target._kinds.append(kind)
        return target

    def _check(self, kind: PartKind) -> None:
        """Raise if appending *kind* would break cardinality or ordering."""
        if kind.singular and self._fragments[kind]:
            logger.debug("Rejected duplicate %s part on %r", kind.label, self)
            raise DuplicateSingularPartError(kind)
        for previous in self._kinds:
            if previous.rank > kind.rank:
                logger.debug(
                    "Rejected %s part after %s on %r", kind.label, previous.label, self
                )
                raise OutOfOrderPartError(kind, previous)

    def _copy(self) -> Selector:
        clone = Selector.__new__(Selector)
        clone._fragments = {kind: list(parts) for kind, parts in self._fragments.items()}
        clone._kinds = list(self._kinds)
        clone._specialized = True
        return clone

    # --- inspection ------------------------------------------------------------

    @property
    def kinds(self) -> tuple[PartKind, ...]:
        """Kinds in the order they were appended."""
        return tuple(self._kinds)

    @property
    def is_empty(self) -> bool:
        return not self._kinds

    def serialize(self) -> str:
        """Render the selector, parts in canonical order, no separators."""
        out: list[str] = []
        for kind in PartKind:
            parts = self._fragments[kind]
            if not parts:
                continue
            if kind is PartKind.ATTRIBUTE:
                out.append("[" + " ".join(parts) + "]")
            else:
                out.append("".join(parts))
        return "".join(out)

    stringify = serialize

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"Selector({self.serialize()!r})"


def new_builder() -> Selector:
    """Return a fresh, empty, independently owned selector builder."""
    return Selector()
