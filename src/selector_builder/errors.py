"""Error hierarchy for the selector builder."""

from __future__ import annotations

from selector_builder.model import (
    DUPLICATE_PART_MESSAGE,
    PART_ORDER_MESSAGE,
    PartKind,
)


class SelectorError(Exception):
    """Base error for all selector building failures."""

    def __init__(self, message: str, *, kind: PartKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class DuplicateSingularPartError(SelectorError):
    """Raised when an element, id or pseudo-element is set a second time."""

    def __init__(self, kind: PartKind) -> None:
        super().__init__(DUPLICATE_PART_MESSAGE, kind=kind)


class OutOfOrderPartError(SelectorError):
    """Raised when a part is appended behind a later-ordered part."""

    def __init__(self, kind: PartKind, previous: PartKind) -> None:
        super().__init__(PART_ORDER_MESSAGE, kind=kind)
        self.previous = previous


class InvalidCombinatorError(SelectorError, ValueError):
    """Raised when joining with a token other than ' ', '+', '~' or '>'."""

    def __init__(self, token: object) -> None:
        super().__init__(
            f"Invalid combinator {token!r}: expected one of ' ', '+', '~', '>'"
        )
        self.token = token
