"""Entry points that start a new builder with a single part applied."""

from __future__ import annotations

from objtasks.selector.builder import SelectorBuilder

__all__ = ["SelectorFacade", "selector_builder"]


class SelectorFacade:
    """Stateless front door: every call returns a fresh :class:`SelectorBuilder`."""

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        return SelectorBuilder().combine(left, combinator, right)


selector_builder = SelectorFacade()
