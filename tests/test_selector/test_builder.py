"""Tests for the fluent CSS selector builder."""
from __future__ import annotations

import pytest

from objtasks.selector import (
    Combinator,
    DuplicateSelectorError,
    OrderError,
    SelectorBuilder,
    SelectorError,
    Stage,
)


# ---------------------------------------------------------------------------
# Stage model
# ---------------------------------------------------------------------------


class TestStage:
    def test_fixed_order(self) -> None:
        assert sorted(Stage) == [
            Stage.ELEMENT,
            Stage.ID,
            Stage.CLASS,
            Stage.ATTRIBUTE,
            Stage.PSEUDO_CLASS,
            Stage.PSEUDO_ELEMENT,
        ]

    def test_label(self) -> None:
        assert Stage.PSEUDO_CLASS.label == "pseudo-class"
        assert Stage.ID.label == "id"

    def test_combinator_values(self) -> None:
        assert {c.value for c in Combinator} == {" ", "+", "~", ">"}
        assert Combinator.CHILD == ">"


# ---------------------------------------------------------------------------
# Fragment output
# ---------------------------------------------------------------------------


class TestStringify:
    def test_empty_builder(self) -> None:
        assert SelectorBuilder().stringify() == ""

    def test_element_id_class(self) -> None:
        assert SelectorBuilder().element("a").id("b").class_("c").stringify() == "a#b.c"

    def test_all_parts(self) -> None:
        sel = (
            SelectorBuilder()
            .element("a")
            .id("main")
            .class_("x")
            .class_("y")
            .attr("href")
            .pseudo_class("hover")
            .pseudo_class("focus")
            .pseudo_element("before")
        )
        assert sel.stringify() == "a#main.x.y[href]:hover:focus::before"

    def test_chaining_returns_same_instance(self) -> None:
        b = SelectorBuilder()
        assert b.element("a") is b
        assert b.id("x") is b

    def test_str_matches_stringify(self) -> None:
        b = SelectorBuilder().id("main").class_("container")
        assert str(b) == "#main.container"
        assert repr(b) == "SelectorBuilder('#main.container')"

    def test_classes_accumulate(self) -> None:
        b = SelectorBuilder().id("main").class_("container").class_("editable")
        assert b.stringify() == "#main.container.editable"

    def test_attribute_does_not_accumulate(self) -> None:
        b = SelectorBuilder().attr('href$=".png"').attr("title")
        assert b.stringify() == "[title]"

    def test_attribute_with_pseudo_class(self) -> None:
        b = SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")
        assert b.stringify() == 'a[href$=".png"]:focus'

    def test_stages_recorded_in_call_order(self) -> None:
        b = SelectorBuilder().element("a").class_("x").class_("y").pseudo_element("after")
        assert b.stages == (Stage.ELEMENT, Stage.CLASS, Stage.CLASS, Stage.PSEUDO_ELEMENT)


# ---------------------------------------------------------------------------
# Duplicate detection
# ---------------------------------------------------------------------------


class TestDuplicates:
    def test_element_twice(self) -> None:
        with pytest.raises(DuplicateSelectorError) as exc_info:
            SelectorBuilder().element("div").element("span")
        assert exc_info.value.stage is Stage.ELEMENT

    def test_id_twice(self) -> None:
        with pytest.raises(DuplicateSelectorError):
            SelectorBuilder().id("a").id("b")

    def test_pseudo_element_twice(self) -> None:
        with pytest.raises(DuplicateSelectorError):
            SelectorBuilder().pseudo_element("before").pseudo_element("after")

    def test_duplicate_checked_before_order(self) -> None:
        with pytest.raises(DuplicateSelectorError):
            SelectorBuilder().element("a").class_("x").element("b")

    def test_message(self) -> None:
        with pytest.raises(SelectorError, match="should not occur more then one time"):
            SelectorBuilder().id("a").id("b")


# ---------------------------------------------------------------------------
# Order validation
# ---------------------------------------------------------------------------


class TestOrder:
    def test_element_after_id(self) -> None:
        with pytest.raises(OrderError) as exc_info:
            SelectorBuilder().id("x").element("y")
        assert exc_info.value.stage is Stage.ELEMENT
        assert exc_info.value.after is Stage.ID

    @pytest.mark.parametrize(
        "earlier",
        [Stage.CLASS, Stage.ATTRIBUTE, Stage.PSEUDO_CLASS, Stage.PSEUDO_ELEMENT],
    )
    def test_element_must_come_first(self, earlier: Stage) -> None:
        b = _touch(SelectorBuilder(), earlier)
        with pytest.raises(OrderError):
            b.element("div")

    def test_id_after_class(self) -> None:
        with pytest.raises(OrderError):
            SelectorBuilder().class_("x").id("y")

    def test_class_after_attribute(self) -> None:
        with pytest.raises(OrderError):
            SelectorBuilder().attr("href").class_("x")

    def test_attribute_after_pseudo_class(self) -> None:
        with pytest.raises(OrderError):
            SelectorBuilder().pseudo_class("hover").attr("href")

    def test_attribute_after_pseudo_element(self) -> None:
        with pytest.raises(OrderError):
            SelectorBuilder().pseudo_element("before").attr("href")

    def test_pseudo_class_after_pseudo_element(self) -> None:
        with pytest.raises(OrderError):
            SelectorBuilder().pseudo_element("after").pseudo_class("hover")

    def test_message(self) -> None:
        with pytest.raises(SelectorError, match="element, id, class, attribute"):
            SelectorBuilder().class_("x").id("y")

    def test_failed_call_leaves_fragments_untouched(self) -> None:
        b = SelectorBuilder().id("x")
        with pytest.raises(OrderError):
            b.element("y")
        assert b.stringify() == "#x"
        assert b.stages == (Stage.ID,)

    def test_skipping_stages_is_allowed(self) -> None:
        assert SelectorBuilder().element("a").pseudo_element("after").stringify() == "a::after"


# ---------------------------------------------------------------------------
# Combination
# ---------------------------------------------------------------------------


class TestCombine:
    def test_simple(self) -> None:
        left = SelectorBuilder().element("div").id("a")
        right = SelectorBuilder().element("span")
        assert SelectorBuilder().combine(left, "+", right).stringify() == "div#a + span"

    def test_combinator_enum(self) -> None:
        left = SelectorBuilder().element("ul")
        right = SelectorBuilder().element("li")
        assert SelectorBuilder().combine(left, Combinator.CHILD, right).stringify() == "ul > li"

    def test_descendant_keeps_surrounding_spaces(self) -> None:
        left = SelectorBuilder().element("tr")
        right = SelectorBuilder().element("td")
        assert SelectorBuilder().combine(left, " ", right).stringify() == "tr   td"

    def test_combine_returns_same_instance(self) -> None:
        b = SelectorBuilder()
        assert b.combine(SelectorBuilder(), "~", SelectorBuilder()) is b


def _touch(builder: SelectorBuilder, stage: Stage) -> SelectorBuilder:
    steps = {
        Stage.ELEMENT: builder.element,
        Stage.ID: builder.id,
        Stage.CLASS: builder.class_,
        Stage.ATTRIBUTE: builder.attr,
        Stage.PSEUDO_CLASS: builder.pseudo_class,
        Stage.PSEUDO_ELEMENT: builder.pseudo_element,
    }
    return steps[stage]("x")
