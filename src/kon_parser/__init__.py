"""KON parser.

Parses the KON configuration/markup notation into a tree of typed elements:
each element has a name, attributes, children and an optional scalar value
(string, symbol, or number with an optional unit such as ``10 px``).

Progressive API Disclosure:
- Level 1: Simple functions - parse(), parse_string(), parse_file()
- Level 2: Configured parser - KonParser class
"""

__version__ = "0.1.0"
__author__ = "KON Parser Team"

from .api import KonParser, parse, parse_file, parse_string, tokenize
from .shared.config import ParserConfig
from .shared.errors import (
    IllegalValueError,
    KonError,
    KonParseError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
    UnterminatedLiteralError,
)
from .tree import (
    KON_NONE,
    PURE,
    KonDecimal,
    KonElement,
    KonInteger,
    KonString,
    KonSymbol,
    NamedUnit,
    ParseResult,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple parsing functions
    "parse",
    "parse_string",
    "parse_file",
    "tokenize",

    # Level 2: Configured parser
    "KonParser",
    "ParserConfig",

    # Result objects and data structures
    "ParseResult",
    "KonElement",
    "KonString",
    "KonSymbol",
    "KonInteger",
    "KonDecimal",
    "NamedUnit",
    "PURE",
    "KON_NONE",

    # Errors
    "KonError",
    "KonParseError",
    "UnterminatedLiteralError",
    "UnexpectedTokenError",
    "IllegalValueError",
    "UnexpectedEndOfInputError",
]
