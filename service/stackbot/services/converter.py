"""
Item count -> LC/c/st/loose breakdown.

    convert(35000, 64) == "10LC+6st+56"

Each unit is taken greedily, largest first. Zero-magnitude terms are
dropped; an all-zero breakdown renders as "0".
"""

import re
from typing import NamedTuple

from .parser import ParseError, parse_int
from .units import DEFAULT_SCHEME, DEFAULT_STACK_SIZE, UnitScheme

TERM_SEPARATOR = "+"
ZERO = "0"

_TERM_RE = re.compile(r"([0-9]+)([A-Za-z]*)")


class UnitTerm(NamedTuple):
    magnitude: int
    label: str

    def __str__(self) -> str:
        return f"{self.magnitude}{self.label}"


def _check_args(item_count: int, stack_size: int) -> None:
    if item_count < 0:
        raise ValueError(f"item_count must be non-negative, got {item_count}")
    if stack_size < 1:
        raise ValueError(f"stack_size must be positive, got {stack_size}")


def breakdown(
    item_count: int,
    stack_size: int = DEFAULT_STACK_SIZE,
    scheme: UnitScheme = DEFAULT_SCHEME,
) -> list[UnitTerm]:
    """Split item_count into nonzero unit terms, largest unit first."""
    _check_args(item_count, stack_size)

    terms = []
    remaining = item_count
    for label, size in scheme.unit_sizes(stack_size):
        magnitude, remaining = divmod(remaining, size)
        if magnitude > 0:
            terms.append(UnitTerm(magnitude, label))
    return terms


def render(terms: list[UnitTerm]) -> str:
    if not terms:
        return ZERO
    return TERM_SEPARATOR.join(str(term) for term in terms)


def convert(
    item_count: int,
    stack_size: int = DEFAULT_STACK_SIZE,
    scheme: UnitScheme = DEFAULT_SCHEME,
) -> str:
    return render(breakdown(item_count, stack_size, scheme))


def parse_breakdown(
    text: str,
    stack_size: int = DEFAULT_STACK_SIZE,
    scheme: UnitScheme = DEFAULT_SCHEME,
) -> int:
    """
    Inverse of convert(): "10LC+6st+56" -> 35000 at stack size 64.

    Terms may come in any order and repeat; their values are summed.

    Raises:
        ParseError: on an empty term, an unknown label or a bad magnitude.
    """
    _check_args(0, stack_size)
    sizes = dict(scheme.unit_sizes(stack_size))

    total = 0
    for token in text.strip().split(TERM_SEPARATOR):
        match = _TERM_RE.fullmatch(token.strip())
        if not match:
            raise ParseError(token, "malformed term")
        magnitude, label = match.groups()
        if label not in sizes:
            raise ParseError(token, "unknown unit")
        total += parse_int(magnitude) * sizes[label]
    return total
