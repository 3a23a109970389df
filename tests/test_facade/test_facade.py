"""Tests for the CssSelectorBuilder facade."""

import pytest

from selector_builder import (
    CssSelectorBuilder,
    DuplicateSingularPartError,
    OutOfOrderPartError,
    css_selector_builder,
)


@pytest.fixture()
def builder() -> CssSelectorBuilder:
    return css_selector_builder


class TestEntryPoints:
    def test_element(self, builder) -> None:
        assert builder.element("a").serialize() == "a"

    def test_id(self, builder) -> None:
        s = builder.id("main").add_class("container").add_class("editable")
        assert s.serialize() == "#main.container.editable"

    def test_class(self, builder) -> None:
        assert builder.class_("x").serialize() == ".x"

    def test_attr(self, builder) -> None:
        assert builder.attr("type=text").serialize() == "[type=text]"

    def test_pseudo_class(self, builder) -> None:
        assert builder.pseudo_class("root").serialize() == ":root"

    def test_pseudo_element(self, builder) -> None:
        assert builder.pseudo_element("selection").serialize() == "::selection"

    def test_element_attr_pseudo_class(self, builder) -> None:
        s = builder.element("a").add_attribute('href$=".png"').add_pseudo_class("focus")
        assert s.serialize() == 'a[href$=".png"]:focus'


class TestSharedFacade:
    def test_calls_do_not_share_state(self, builder) -> None:
        first = builder.element("div")
        second = builder.element("span")
        assert first is not second
        assert first.serialize() == "div"
        assert second.serialize() == "span"

    def test_errors_propagate(self, builder) -> None:
        with pytest.raises(DuplicateSingularPartError):
            builder.element("div").add_type("span")
        with pytest.raises(OutOfOrderPartError):
            builder.pseudo_element("after").add_class("x")

    def test_new_instance_behaves_the_same(self) -> None:
        assert CssSelectorBuilder().id("x").serialize() == "#x"


class TestCombine:
    def test_nested_combination(self, builder) -> None:
        node = builder.combine(
            builder.element("div").add_id("main").add_class("container").add_class("draggable"),
            "+",
            builder.combine(
                builder.element("table").add_id("data"),
                "~",
                builder.combine(
                    builder.element("tr").add_pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").add_pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert node.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )
