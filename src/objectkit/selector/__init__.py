from objectkit.selector.builder import SelectorBuilder
from objectkit.selector.facade import COMBINATORS, CssSelectorBuilder, css_selector_builder
from objectkit.selector.kinds import FragmentKind

__all__ = [
    "COMBINATORS",
    "CssSelectorBuilder",
    "FragmentKind",
    "SelectorBuilder",
    "css_selector_builder",
]
