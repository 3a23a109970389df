"""Selector builder: compose CSS complex selectors from typed parts."""

from __future__ import annotations

from selector_builder.combinator import Combinator, CombinatorNode, Serializable, join
from selector_builder.errors import (
    DuplicateSingularPartError,
    InvalidCombinatorError,
    OutOfOrderPartError,
    SelectorError,
)
from selector_builder.facade import CssSelectorBuilder, css_selector_builder
from selector_builder.model import PartKind
from selector_builder.selector import Selector, new_builder

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # selector
    "PartKind",
    "Selector",
    "new_builder",
    # combinator
    "Combinator",
    "CombinatorNode",
    "Serializable",
    "join",
    # facade
    "CssSelectorBuilder",
    "css_selector_builder",
    # errors
    "SelectorError",
    "DuplicateSingularPartError",
    "OutOfOrderPartError",
    "InvalidCombinatorError",
]
