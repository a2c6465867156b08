"""
Quantity parser for trigger messages.

Accepted input:
- "35000"    -> 35000 items, default stack size
- "1234@32"  -> 1234 items, stack size 32
"""

import re
from dataclasses import dataclass

from .units import DEFAULT_STACK_SIZE

SEPARATOR = "@"

_INTEGER_RE = re.compile(r"[0-9]+")


class ParseError(ValueError):
    """Input does not match `COUNT` or `COUNT@STACK`."""

    def __init__(self, token: str, reason: str = "not an integer"):
        self.token = token
        self.reason = reason
        super().__init__(f"{reason}: {token!r}")


@dataclass(frozen=True)
class ParsedQuantity:
    stack_size: int
    item_count: int


def parse_int(token: str) -> int:
    """Parse a non-negative decimal integer made of ASCII digits only."""
    # int() also takes "+5", " 5" and "1_000"; only plain digits are valid here
    if not _INTEGER_RE.fullmatch(token):
        raise ParseError(token)
    try:
        return int(token)
    except ValueError:
        # Past sys.get_int_max_str_digits()
        raise ParseError(token, "too many digits")


def parse_quantity(text: str, default_stack_size: int = DEFAULT_STACK_SIZE) -> ParsedQuantity:
    """
    Parse `COUNT` or `COUNT@STACK` into a ParsedQuantity.

    Raises:
        ParseError: on any token that is not a non-negative integer, a zero
            stack size, or more than one separator.
    """
    text = text.strip()
    parts = text.split(SEPARATOR)

    if len(parts) == 1:
        return ParsedQuantity(stack_size=default_stack_size, item_count=parse_int(text))

    if len(parts) != 2:
        raise ParseError(text, "expected at most one '@'")

    count_token, size_token = parts

    stack_size = parse_int(size_token)
    if stack_size == 0:
        raise ParseError(size_token, "stack size must be positive")

    return ParsedQuantity(stack_size=stack_size, item_count=parse_int(count_token))
