"""Exception hierarchy for KON parsing.

Every failure in the tokenizer, condenser and tree builder is raised as a
subclass of :class:`KonParseError`. Nothing is recovered: the first error
aborts the whole parse and no partial tree is returned.
"""

from typing import List, Optional


class KonError(Exception):
    """Base exception for all kon_parser errors."""


class KonParseError(KonError):
    """Base exception for parse-time failures.

    Attributes:
        message: Human readable description of the failure
        index: Position of the offending token in the token stream, if known
    """

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.index = index

    def __str__(self) -> str:
        if self.index is None:
            return self.message
        return f"{self.message} (token {self.index})"


class UnterminatedLiteralError(KonParseError):
    """A span was opened by its start marker but never closed."""

    def __init__(self, marker: str, fragment: str = "", index: Optional[int] = None) -> None:
        self.marker = marker
        self.fragment = fragment
        super().__init__(
            f"Unterminated literal: missing closing {marker!r}", index
        )


class UnexpectedTokenError(KonParseError):
    """A mandatory token was not found where the grammar requires it."""

    def __init__(self, expected: str, actual: str, index: Optional[int] = None) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected!r} instead got {actual!r}", index)


class IllegalValueError(KonParseError):
    """A token in value position matched none of the scalar grammars."""

    def __init__(self, token: str, index: Optional[int] = None) -> None:
        self.token = token
        super().__init__(f"Illegal value {token!r}", index)


class UnexpectedEndOfInputError(KonParseError):
    """The token stream ran out while a construct expected more tokens."""

    def __init__(self, expected: Optional[str] = None, index: Optional[int] = None) -> None:
        self.expected = expected
        message = "Unexpected end of input"
        if expected:
            message = f"{message}, expected {expected!r}"
        super().__init__(message, index)


class NestingDepthError(KonParseError):
    """Child blocks are nested deeper than the configured limit."""

    def __init__(self, limit: int, index: Optional[int] = None) -> None:
        self.limit = limit
        super().__init__(f"Maximum nesting depth of {limit} exceeded", index)


class InputTooLargeError(KonParseError):
    """The source text is longer than the configured limit."""

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"Input of {size} characters exceeds limit of {limit}")


class ConfigError(KonError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []
