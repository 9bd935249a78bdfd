"""Public parsing API for KON documents."""

from .parser import KonParser, parse, parse_file, parse_string, tokenize

__all__ = [
    "KonParser",
    "parse",
    "parse_file",
    "parse_string",
    "tokenize",
]
