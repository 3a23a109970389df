"""CLI command: selector-builder build -- assemble a selector from parts."""

from __future__ import annotations

import sys
from typing import Callable

import click

from selector_builder.combinator import Combinator, Serializable, join
from selector_builder.errors import SelectorError
from selector_builder.selector import Selector, new_builder

_APPENDERS: dict[str, Callable[[Selector, str], Selector]] = {
    "element": Selector.add_type,
    "id": Selector.add_id,
    "class": Selector.add_class,
    "attr": Selector.add_attribute,
    "pseudo-class": Selector.add_pseudo_class,
    "pseudo-element": Selector.add_pseudo_element,
}

_COMBINATORS = {c.value for c in Combinator}


class PartsError(Exception):
    """Raised when the command line parts cannot form a selector."""


def assemble(parts: list[str]) -> Serializable:
    """Build a selector or combinator tree from CLI parts, left to right.

    ``kind=value`` parts append to the current compound selector; a bare
    combinator token closes it and joins it with the next one.
    """
    operands: list[Selector] = []
    tokens: list[str] = []
    current = new_builder()
    for part in parts:
        if part in _COMBINATORS:
            if current.is_empty:
                raise PartsError(f"combinator {part!r} must follow a selector")
            operands.append(current)
            tokens.append(part)
            current = new_builder()
            continue
        kind, sep, value = part.partition("=")
        appender = _APPENDERS.get(kind)
        if not sep or appender is None:
            raise PartsError(
                f"invalid part {part!r}: expected KIND=VALUE with KIND one of "
                + ", ".join(_APPENDERS)
            )
        current = appender(current, value)

    if current.is_empty:
        if tokens:
            raise PartsError(f"combinator {tokens[-1]!r} must be followed by a selector")
        raise PartsError("no selector parts given")
    operands.append(current)

    result: Serializable = operands[0]
    for token, right in zip(tokens, operands[1:]):
        result = join(result, token, right)
    return result


@click.command()
@click.argument("parts", nargs=-1, required=True)
def build(parts: tuple[str, ...]) -> None:
    """Build a selector from PARTS and print it.

    Each part is KIND=VALUE (element, id, class, attr, pseudo-class,
    pseudo-element) or one of the combinators ' ', '+', '~', '>'.

    \b
    Example:
        selector-builder build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    try:
        selector = assemble(list(parts))
    except (SelectorError, PartsError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.serialize())
