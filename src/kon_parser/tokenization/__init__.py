"""Tokenization engine for KON parsing.

Turns source text into the token stream consumed by the tree builder.

Key Components:
    RuleSet: Ordered table of character adjacency rules
    Tokenizer: Single-pass classifier producing raw tokens
    SpanCondenser: Re-merges marker-delimited runs (string literals)
    TokenStream: Immutable token tuple with a cursor
"""

from .condenser import STRING_CONDENSER, SpanCondenser
from .rules import KON_RULES, NEWLINE, CharRule, RuleSet
from .stream import TokenStream
from .tokenizer import Tokenizer, filter_blank, is_blank_token, kon_tokens

__all__ = [
    "CharRule",
    "KON_RULES",
    "NEWLINE",
    "RuleSet",
    "STRING_CONDENSER",
    "SpanCondenser",
    "TokenStream",
    "Tokenizer",
    "filter_blank",
    "is_blank_token",
    "kon_tokens",
]
