"""Stateless entry points that start new selector builders."""

from __future__ import annotations

from objectkit.selector.builder import SelectorBuilder
from objectkit.selector.kinds import FragmentKind

__all__ = ["COMBINATORS", "CssSelectorBuilder", "css_selector_builder"]

# descendant, next-sibling, subsequent-sibling, child
COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")


class CssSelectorBuilder:
    """Facade over :class:`SelectorBuilder`.

    Each fragment method returns a fresh builder seeded with that one
    fragment; the facade itself holds no state.
    """

    def start(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        return SelectorBuilder().append(kind, value)

    def element(self, value: str) -> SelectorBuilder:
        return self.start(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self.start(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.start(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self.start(FragmentKind.ATTRIBUTE, value)

    attribute = attr

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.start(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.start(FragmentKind.PSEUDO_ELEMENT, value)

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Join *right* onto *left* with *combinator*; returns the mutated *left*."""
        return left.combine_with(combinator, right)


css_selector_builder = CssSelectorBuilder()
