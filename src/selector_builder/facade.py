"""Builder facade with the element/id/class/attr/pseudo vocabulary.

Each method starts a new chain from :func:`new_builder`, so a single
instance can be shared freely::

    b = css_selector_builder
    b.combine(b.element("div").add_id("main"), "+", b.element("table"))
"""

from __future__ import annotations

from selector_builder.combinator import Combinator, CombinatorNode, Serializable, join
from selector_builder.selector import Selector, new_builder

__all__ = ["CssSelectorBuilder", "css_selector_builder"]


class CssSelectorBuilder:
    """Stateless entry point returning fresh selectors."""

    def element(self, value: str) -> Selector:
        return new_builder().add_type(value)

    def id(self, value: str) -> Selector:
        return new_builder().add_id(value)

    def class_(self, value: str) -> Selector:
        return new_builder().add_class(value)

    def attr(self, value: str) -> Selector:
        return new_builder().add_attribute(value)

    def pseudo_class(self, value: str) -> Selector:
        return new_builder().add_pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return new_builder().add_pseudo_element(value)

    def combine(
        self,
        left: Serializable,
        combinator: str | Combinator,
        right: Serializable,
    ) -> CombinatorNode:
        return join(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
