from .units import UnitScheme, DEFAULT_SCHEME, DEFAULT_STACK_SIZE
from .parser import ParsedQuantity, ParseError, parse_quantity
from .converter import UnitTerm, breakdown, render, convert, parse_breakdown

__all__ = [
    "UnitScheme",
    "DEFAULT_SCHEME",
    "DEFAULT_STACK_SIZE",
    "ParsedQuantity",
    "ParseError",
    "parse_quantity",
    "UnitTerm",
    "breakdown",
    "render",
    "convert",
    "parse_breakdown",
]
