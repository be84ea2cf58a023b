"""CLI command: selectorkit build -- assemble a selector from tokens."""

from __future__ import annotations

import sys

import click

from selectorkit.builder import Combinator, SelectorBuilder, combine
from selectorkit.config import SelectorKitConfig
from selectorkit.errors import SelectorError
from selectorkit.model import Category, Stringifiable

# Token spellings accepted on the command line for each category
_CATEGORY_ALIASES: dict[str, Category] = {
    "element": Category.ELEMENT,
    "id": Category.ID,
    "class": Category.CLASS,
    "attr": Category.ATTRIBUTE,
    "attribute": Category.ATTRIBUTE,
    "pseudo-class": Category.PSEUDO_CLASS,
    "pseudo-element": Category.PSEUDO_ELEMENT,
}

_SYMBOLS = {Combinator.CHILD, Combinator.NEXT_SIBLING, Combinator.SUBSEQUENT_SIBLING}


def _combinator_for(token: str, config: SelectorKitConfig) -> str | None:
    if token == config.descendant_keyword:
        return Combinator.DESCENDANT
    if token in _SYMBOLS:
        return token
    return None


def _parse_fragment(token: str) -> tuple[Category, str]:
    name, sep, value = token.partition("=")
    if not sep:
        raise click.BadParameter(
            f"expected CATEGORY=VALUE or a combinator, got {token!r}",
            param_hint="TOKENS",
        )
    category = _CATEGORY_ALIASES.get(name.strip().lower())
    if category is None:
        raise click.BadParameter(
            f"unknown category {name!r} (choose from {', '.join(_CATEGORY_ALIASES)})",
            param_hint="TOKENS",
        )
    return category, value


def build_from_tokens(tokens: list[str], config: SelectorKitConfig) -> Stringifiable:
    """Fold ``category=value`` tokens and combinators into one selector.

    Compound selectors are closed by combinator tokens and combined
    left to right. Raises ``click.BadParameter`` for malformed input and
    ``SelectorError`` for rule violations.
    """
    result: Stringifiable | None = None
    pending: str | None = None
    current = SelectorBuilder()
    has_fragment = False

    for token in tokens:
        symbol = _combinator_for(token, config)
        if symbol is None:
            category, value = _parse_fragment(token)
            current.add(category, value)
            has_fragment = True
            continue
        if not has_fragment:
            raise click.BadParameter(
                f"combinator {token!r} needs a selector on its left",
                param_hint="TOKENS",
            )
        result = current if pending is None else combine(result, pending, current)
        pending = symbol
        current = SelectorBuilder()
        has_fragment = False

    if pending is not None and not has_fragment:
        raise click.BadParameter(
            "selector ends with a combinator", param_hint="TOKENS"
        )
    if pending is None:
        return current
    return combine(result, pending, current)


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.pass_obj
def build(config: SelectorKitConfig | None, tokens: tuple[str, ...]) -> None:
    """Build a selector from CATEGORY=VALUE tokens and combinators.

    Categories: element, id, class, attr, pseudo-class, pseudo-element.
    Combinators: '+', '~', '>' and 'descendant' for the space combinator.

    \b
    Example:
        selectorkit build element=div id=main + element=table class=data
    """
    config = config or SelectorKitConfig()
    try:
        selector = build_from_tokens(list(tokens), config)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())
