"""objectkit: object construction, JSON round-tripping and a CSS selector builder."""

__version__ = "0.1.0"

from objectkit.errors import (  # noqa: E402
    BindError,
    DuplicateFragmentError,
    ObjectKitError,
    OutOfOrderError,
    ParseError,
    SelectorError,
    SerializationError,
)
from objectkit.selector import (  # noqa: E402
    COMBINATORS,
    CssSelectorBuilder,
    FragmentKind,
    SelectorBuilder,
    css_selector_builder,
)
from objectkit.serialization import bind, from_json, to_json  # noqa: E402
from objectkit.shapes import Rectangle  # noqa: E402

__all__ = [
    "__version__",
    # shapes
    "Rectangle",
    # serialization
    "to_json",
    "from_json",
    "bind",
    # selector
    "COMBINATORS",
    "CssSelectorBuilder",
    "FragmentKind",
    "SelectorBuilder",
    "css_selector_builder",
    # errors
    "ObjectKitError",
    "SelectorError",
    "DuplicateFragmentError",
    "OutOfOrderError",
    "SerializationError",
    "ParseError",
    "BindError",
]
