"""Fragment kinds of a compound CSS selector, in their required order."""

from __future__ import annotations

from enum import IntEnum


class FragmentKind(IntEnum):
    """One piece of a compound selector.

    The integer values define the fixed order in which fragments must
    appear: ``element#id.class[attr]:pseudo-class::pseudo-element``.
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def repeatable(self) -> bool:
        """Whether the kind may occur more than once in one selector."""
        return self not in _SINGLE_OCCURRENCE

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    def render(self, value: str) -> str:
        """Wrap *value* in this kind's prefix and suffix, verbatim."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"

    def later_kinds(self) -> tuple[FragmentKind, ...]:
        """All kinds that must come after this one."""
        return tuple(kind for kind in FragmentKind if kind > self)


_SINGLE_OCCURRENCE = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

# (prefix, suffix)
_AFFIXES: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}
