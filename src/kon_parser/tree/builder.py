"""Recursive-descent tree builder for KON documents.

Consumes the filtered token stream and produces the element tree. Every
production takes a :class:`TokenStream` and returns its result together with
the stream positioned after it; one token of lookahead is enough everywhere.

Grammar::

    Document   := (Newlines Element Newlines)*
    Element    := Name Newlines Attributes? Children? Value?
    Attributes := '(' (Name '=' Scalar ','?)* ')'
    Children   := '{' (Newlines Element Newlines)* '}'
    Value      := '=' Scalar
    Scalar     := StringLit | Number | Symbol
    Number     := ('+'|'-')? Digits ('.' Digits)? Unit?
"""

import re
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from kon_parser.shared import (
    IllegalValueError,
    NestingDepthError,
    ParserConfig,
    ParseStatistics,
    UnexpectedTokenError,
    get_logger,
)
from kon_parser.tokenization import TokenStream

from .model import (
    KON_NONE,
    PURE,
    KonDecimal,
    KonElement,
    KonInteger,
    KonString,
    KonSymbol,
    KonValue,
    NamedUnit,
    NumberUnit,
)

QUOTE = '"'
OPEN_ATTRIBUTES = "("
CLOSE_ATTRIBUTES = ")"
OPEN_CHILDREN = "{"
CLOSE_CHILDREN = "}"
ASSIGN = "="
SEPARATOR = ","

DECIMAL_PATTERN = re.compile(r"[+-]?\d+\.\d+")
INTEGER_PATTERN = re.compile(r"[+-]?\d+")
UNIT_PATTERN = re.compile(r"\w+")
IDENTIFIER_PATTERN = re.compile(r"\w+(?:-\w+)*")


@dataclass
class ParseResult:
    """Parsed root elements together with statistics for the parse."""

    elements: List[KonElement] = field(default_factory=list)
    statistics: ParseStatistics = field(default_factory=ParseStatistics)
    correlation_id: Optional[str] = None

    @property
    def root_count(self) -> int:
        return len(self.elements)

    @property
    def element_count(self) -> int:
        """Total number of elements in the document, at every level."""
        return sum(1 for root in self.elements for _ in root.iter_elements())

    def find(self, name: str) -> Optional[KonElement]:
        """Find the first element with matching name, roots included."""
        for root in self.elements:
            if root.name == name:
                return root
            found = root.find(name)
            if found is not None:
                return found
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "elements": [element.to_dict() for element in self.elements],
            "statistics": self.statistics.to_dict(),
            "correlation_id": self.correlation_id,
        }


def is_identifier(token: Optional[str]) -> bool:
    return token is not None and IDENTIFIER_PATTERN.fullmatch(token) is not None


class KonTreeBuilder:
    """Builds KON element trees from token streams.

    The builder holds no per-parse state, so one instance may be shared
    between threads.
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        self.config = config or ParserConfig()
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "kon_tree_builder")

    def build(self, tokens: TokenStream) -> List[KonElement]:
        """Build every root element of a document.

        Args:
            tokens: Filtered token stream

        Returns:
            Root elements in source order; empty for a blank document

        Raises:
            KonParseError: On the first grammar violation
        """
        start_time = time.time()
        self.logger.debug("Starting tree building", extra={"token_count": len(tokens)})

        elements: List[KonElement] = []
        stream = tokens.skip_newlines()
        while not stream.is_exhausted:
            element, stream = self.parse_element(stream)
            elements.append(element)
            stream = stream.skip_newlines()

        self.logger.debug(
            "Tree building completed",
            extra={
                "root_count": len(elements),
                "processing_time_ms": (time.time() - start_time) * 1000,
            }
        )
        return elements

    def build_result(self, tokens: TokenStream) -> ParseResult:
        """Build the document and collect tree statistics."""
        elements = self.build(tokens)
        statistics = ParseStatistics(token_count=len(tokens))
        for root in elements:
            statistics.max_depth = max(statistics.max_depth, root.depth)
            for element in root.iter_elements():
                statistics.element_count += 1
                statistics.attribute_count += len(element.attributes)
        return ParseResult(elements, statistics, self.correlation_id)

    def parse_element(
        self, stream: TokenStream, depth: int = 1
    ) -> Tuple[KonElement, TokenStream]:
        """Parse ``Name Attributes? Children? Value?``."""
        if depth > self.config.max_depth:
            raise NestingDepthError(self.config.max_depth, stream.position)

        name, stream = self._parse_name(stream, "element name")
        stream = stream.skip_newlines()

        attributes: Dict[str, KonValue] = {}
        if stream.peek() == OPEN_ATTRIBUTES:
            attributes, stream = self.parse_attributes(stream)

        children: List[KonElement] = []
        if stream.peek() == OPEN_CHILDREN:
            children, stream = self.parse_children(stream, depth)

        value: KonValue = KON_NONE
        if stream.peek() == ASSIGN:
            value, stream = self.parse_value(stream.advance())

        return KonElement(name, attributes, tuple(children), value), stream

    def parse_attributes(
        self, stream: TokenStream
    ) -> Tuple[Dict[str, KonValue], TokenStream]:
        """Parse a parenthesised attribute list; later duplicates overwrite earlier ones."""
        stream = stream.expect(OPEN_ATTRIBUTES)
        attributes: Dict[str, KonValue] = {}

        while stream.peek() != CLOSE_ATTRIBUTES:
            name, stream = self._parse_name(stream, "attribute name")
            stream = stream.expect(ASSIGN)
            attributes[name], stream = self.parse_value(stream)
            if stream.peek() == SEPARATOR:
                stream = stream.advance()

        return attributes, stream.expect(CLOSE_ATTRIBUTES)

    def parse_children(
        self, stream: TokenStream, depth: int = 1
    ) -> Tuple[List[KonElement], TokenStream]:
        """Parse a brace-delimited child block, ignoring blank lines."""
        stream = stream.expect(OPEN_CHILDREN).skip_newlines()
        children: List[KonElement] = []

        while stream.peek() != CLOSE_CHILDREN:
            child, stream = self.parse_element(stream, depth + 1)
            children.append(child)
            stream = stream.skip_newlines()

        return children, stream.expect(CLOSE_CHILDREN)

    def parse_value(self, stream: TokenStream) -> Tuple[KonValue, TokenStream]:
        """Parse a scalar: string literal, number with optional unit, or symbol."""
        index = stream.position
        token, stream = stream.pop("value")

        if len(token) >= 2 and token.startswith(QUOTE) and token.endswith(QUOTE):
            return KonString(token[1:-1]), stream

        if DECIMAL_PATTERN.fullmatch(token):
            unit, stream = self._parse_unit(stream)
            return KonDecimal(float(token), unit), stream

        if INTEGER_PATTERN.fullmatch(token):
            unit, stream = self._parse_unit(stream)
            return KonInteger(int(token), unit), stream

        if is_identifier(token):
            return KonSymbol(token), stream

        raise IllegalValueError(token, index)

    def _parse_unit(self, stream: TokenStream) -> Tuple[NumberUnit, TokenStream]:
        token = stream.peek()
        if token is not None and UNIT_PATTERN.fullmatch(token):
            return NamedUnit(token), stream.advance()
        return PURE, stream

    def _parse_name(self, stream: TokenStream, expected: str) -> Tuple[str, TokenStream]:
        index = stream.position
        token, stream = stream.pop(expected)
        if not is_identifier(token):
            raise UnexpectedTokenError(expected, token, index)
        return token, stream
