"""Immutable token stream with a cursor.

Parsing functions receive a :class:`TokenStream` and hand back a new one
positioned after whatever they consumed; a stream is never mutated.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from kon_parser.shared.errors import UnexpectedEndOfInputError, UnexpectedTokenError

from .rules import NEWLINE


@dataclass(frozen=True)
class TokenStream:
    """Token tuple plus the index of the next token to consume."""

    tokens: Tuple[str, ...]
    position: int = 0

    def __post_init__(self) -> None:
        """Validate cursor position."""
        if not (0 <= self.position <= len(self.tokens)):
            raise ValueError("Position must be within the token range")

    @classmethod
    def of(cls, tokens: Iterable[str]) -> "TokenStream":
        return cls(tuple(tokens))

    @property
    def is_exhausted(self) -> bool:
        return self.position >= len(self.tokens)

    @property
    def remaining(self) -> Tuple[str, ...]:
        return self.tokens[self.position:]

    def __len__(self) -> int:
        return len(self.tokens) - self.position

    def peek(self) -> Optional[str]:
        """Return the next token without consuming it, or None when exhausted."""
        if self.is_exhausted:
            return None
        return self.tokens[self.position]

    def advance(self, count: int = 1) -> "TokenStream":
        if self.position + count > len(self.tokens):
            raise UnexpectedEndOfInputError(index=len(self.tokens))
        return TokenStream(self.tokens, self.position + count)

    def pop(self, expected: Optional[str] = None) -> Tuple[str, "TokenStream"]:
        """Consume the next token.

        Args:
            expected: Description of what the caller needs, used in the error

        Raises:
            UnexpectedEndOfInputError: If the stream is exhausted
        """
        if self.is_exhausted:
            raise UnexpectedEndOfInputError(expected, self.position)
        return self.tokens[self.position], TokenStream(self.tokens, self.position + 1)

    def expect(self, literal: str) -> "TokenStream":
        """Consume ``literal`` or fail.

        Raises:
            UnexpectedTokenError: If the next token is something else
            UnexpectedEndOfInputError: If the stream is exhausted
        """
        token, rest = self.pop(literal)
        if token != literal:
            raise UnexpectedTokenError(literal, token, self.position)
        return rest

    def skip_newlines(self) -> "TokenStream":
        position = self.position
        while position < len(self.tokens) and self.tokens[position] == NEWLINE:
            position += 1
        if position == self.position:
            return self
        return TokenStream(self.tokens, position)

    def window(self, start: int, stop: Optional[int] = None) -> "TokenStream":
        """Return a fresh stream over a sub-range of this stream's tokens."""
        return TokenStream(self.tokens[start:stop])
