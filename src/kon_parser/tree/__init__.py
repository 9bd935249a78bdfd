"""Tree building engine for KON parsing.

Key Components:
    KonTreeBuilder: Recursive-descent parser over a token stream
    KonElement: Named node with attributes, children and a scalar value
    KonValue: Closed set of scalar variants (none, string, symbol, numbers)
    ParseResult: Root elements plus parse statistics
"""

from .builder import KonTreeBuilder, ParseResult, is_identifier
from .model import (
    KON_NONE,
    PURE,
    KonDecimal,
    KonElement,
    KonInteger,
    KonNone,
    KonNumber,
    KonString,
    KonSymbol,
    KonValue,
    NamedUnit,
    NumberUnit,
    PureUnit,
)

__all__ = [
    "KON_NONE",
    "KonDecimal",
    "KonElement",
    "KonInteger",
    "KonNone",
    "KonNumber",
    "KonString",
    "KonSymbol",
    "KonTreeBuilder",
    "KonValue",
    "NamedUnit",
    "NumberUnit",
    "PURE",
    "ParseResult",
    "PureUnit",
    "is_identifier",
]
