"""Error hierarchy for objectkit."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from objectkit.selector.kinds import FragmentKind


class ObjectKitError(Exception):
    """Base error for all objectkit errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector builder errors
# ---------------------------------------------------------------------------


class SelectorError(ObjectKitError):
    """A selector builder was used in a way the fragment grammar forbids."""


class DuplicateFragmentError(SelectorError):
    """Element, id and pseudo-element may occur only once per selector."""

    def __init__(self, kind: FragmentKind) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            f"inside the selector (got a second {kind.label})"
        )
        self.kind = kind


class OutOfOrderError(SelectorError):
    """A fragment was appended after a fragment that must follow it."""

    def __init__(self, kind: FragmentKind, later_kind: FragmentKind) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: element, id, "
            "class, attribute, pseudo-class, pseudo-element "
            f"(cannot add {kind.label} after {later_kind.label})"
        )
        self.kind = kind
        self.later_kind = later_kind


# ---------------------------------------------------------------------------
# Serialization errors
# ---------------------------------------------------------------------------


class SerializationError(ObjectKitError):
    """Base error for JSON round-tripping."""


class ParseError(SerializationError):
    """Raised when JSON text cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column


class BindError(SerializationError):
    """Parsed data cannot be bound to the requested type."""

    def __init__(self, message: str, *, target: Any = None, cause: Exception | None = None) -> None:
        super().__init__(message, cause=cause)
        self.target = target
