"""Rule-driven character tokenizer.

Converts a character sequence into maximal tokens in one left-to-right pass.
Token boundaries come entirely from a :class:`RuleSet`; the tokenizer itself
knows nothing about KON. Concatenating the produced tokens always yields the
input back unchanged.
"""

from typing import Iterable, List, Optional

from .condenser import STRING_CONDENSER, SpanCondenser
from .rules import KON_RULES, NEWLINE, RuleSet


class Tokenizer:
    """Groups characters into tokens using adjacency rules."""

    def __init__(self, rules: RuleSet = KON_RULES) -> None:
        self.rules = rules

    def tokenize(self, text: str) -> List[str]:
        """Split ``text`` into raw tokens.

        Args:
            text: Source characters

        Returns:
            Tokens covering the whole input with no gaps or overlaps
        """
        tokens: List[str] = []
        start = 0
        for index in range(1, len(text)):
            if not self.rules.accepts(text[index - 1], text[index]):
                tokens.append(text[start:index])
                start = index
        if text:
            tokens.append(text[start:])
        return tokens


def is_blank_token(token: str) -> bool:
    """Check whether a token is only non-newline whitespace."""
    return token.isspace() and token != NEWLINE


def filter_blank(tokens: Iterable[str]) -> List[str]:
    """Drop blank tokens, keeping newline tokens as separators."""
    return [token for token in tokens if not is_blank_token(token)]


def kon_tokens(
    text: str,
    tokenizer: Optional[Tokenizer] = None,
    condenser: SpanCondenser = STRING_CONDENSER,
) -> List[str]:
    """Run the full token pipeline: classify, condense string literals, filter blanks.

    Raises:
        UnterminatedLiteralError: If a string literal is never closed
    """
    raw = (tokenizer or Tokenizer()).tokenize(text)
    return filter_blank(condenser.group(raw))
