"""Fluent builder that accumulates a CSS selector string."""

from __future__ import annotations

import logging

from objectkit.errors import DuplicateFragmentError, OutOfOrderError
from objectkit.selector.kinds import FragmentKind

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Mutable accumulator for one selector expression.

    Every fragment method appends to the same instance and returns it, so
    calls chain::

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")

    Ordering and duplication are checked against this instance's own
    occurrence counts only. Text added through :meth:`combine_with` is
    not tracked.
    """

    def __init__(self) -> None:
        self._text = ""
        self._counts: dict[FragmentKind, int] = {kind: 0 for kind in FragmentKind}

    # --- fragments ------------------------------------------------------------

    def append(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        """Append a fragment of *kind*, enforcing order and occurrence rules."""
        for later in kind.later_kinds():
            if self._counts[later]:
                raise OutOfOrderError(kind, later)
        if not kind.repeatable and self._counts[kind]:
            raise DuplicateFragmentError(kind)

        self._counts[kind] += 1
        self._text += kind.render(value)
        logger.debug("Appended %s %r -> %r", kind.label, value, self._text)
        return self

    def element(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.ATTRIBUTE, value)

    attribute = attr

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    # --- combination ----------------------------------------------------------

    def combine_with(self, combinator: str, other: SelectorBuilder) -> SelectorBuilder:
        """Append ``" <combinator> <other>"`` to this selector.

        The combinator is passed through untouched, so a space combinator
        renders with a space on either side of it. *other* is only read.
        """
        self._text += f" {combinator} {other.stringify()}"
        logger.debug("Combined with %r -> %r", combinator, self._text)
        return self

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        """Return the selector text accumulated so far."""
        return self._text

    @property
    def counts(self) -> dict[FragmentKind, int]:
        """Return a copy of the per-kind occurrence counts."""
        return dict(self._counts)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SelectorBuilder({self._text!r})"
