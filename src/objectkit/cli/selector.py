"""CLI command: objectkit selector -- build a CSS selector from tokens."""

from __future__ import annotations

import sys

import click

from objectkit.errors import SelectorError
from objectkit.selector import COMBINATORS, FragmentKind, SelectorBuilder, css_selector_builder

KIND_NAMES: dict[str, FragmentKind] = {
    "element": FragmentKind.ELEMENT,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
    "attribute": FragmentKind.ATTRIBUTE,
    "pseudo-class": FragmentKind.PSEUDO_CLASS,
    "pseudo-element": FragmentKind.PSEUDO_ELEMENT,
}

# A bare space is awkward to pass on a command line.
COMBINATOR_ALIASES = {"descendant": " "}


def _combinator(token: str) -> str | None:
    token = COMBINATOR_ALIASES.get(token, token)
    return token if token in COMBINATORS else None


def build_from_tokens(tokens: tuple[str, ...] | list[str]) -> SelectorBuilder:
    """Build a selector from ``kind:value`` and combinator tokens.

    Example tokens: ``element:div id:main + element:table``.

    Raises click.BadParameter for malformed token sequences and lets
    SelectorError propagate for grammar violations.
    """
    compounds: list[SelectorBuilder] = []
    combinators: list[str] = []
    expect_start = True

    for token in tokens:
        combinator = _combinator(token)
        if combinator is not None:
            if expect_start:
                raise click.BadParameter(
                    f"combinator {token!r} must sit between two selectors"
                )
            combinators.append(combinator)
            expect_start = True
            continue

        name, sep, value = token.partition(":")
        kind = KIND_NAMES.get(name)
        if not sep or kind is None:
            raise click.BadParameter(
                f"expected kind:value or a combinator, got {token!r} "
                f"(kinds: {', '.join(KIND_NAMES)})"
            )

        if expect_start:
            compounds.append(css_selector_builder.start(kind, value))
            expect_start = False
        else:
            compounds[-1].append(kind, value)

    if not compounds or expect_start:
        raise click.BadParameter("selector must start and end with a kind:value token")

    # Each compound is complete before it is combined, since combine copies text.
    result = compounds[0]
    for combinator, right in zip(combinators, compounds[1:]):
        css_selector_builder.combine(result, combinator, right)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def selector(tokens: tuple[str, ...]) -> None:
    """Build and print a CSS selector.

    TOKENS are kind:value pairs (element, id, class, attr, pseudo-class,
    pseudo-element) in selector order, optionally separated by a
    combinator: +, ~, > or the word "descendant".
    """
    try:
        built = build_from_tokens(tokens)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(built.stringify())
