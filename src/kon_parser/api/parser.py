"""Core parser API with progressive disclosure for KON parsing.

Level 1 is a set of module-level functions (``parse``, ``parse_string``,
``parse_file``, ``tokenize``); level 2 is the configurable :class:`KonParser`.
All of them fail fast: the first error is logged and re-raised as a
:class:`~kon_parser.shared.errors.KonParseError` subclass.
"""

import time
from pathlib import Path
from typing import List, Optional, Union

from kon_parser.shared import (
    InputTooLargeError,
    KonParseError,
    ParserConfig,
    get_logger,
)
from kon_parser.tokenization import (
    STRING_CONDENSER,
    TokenStream,
    Tokenizer,
    filter_blank,
)
from kon_parser.tree import KonElement, KonTreeBuilder, ParseResult

PathType = Union[str, Path]

# Constants for API operations
PREVIEW_LENGTH = 100  # Max length for content preview in logs
MS_PER_SECOND = 1000
BOM = "\ufeff"


class KonParser:
    """Configured KON parser.

    Holds only immutable configuration, so a single instance can parse many
    documents, including from several threads at once.

    Examples:
        >>> parser = KonParser(ParserConfig.untrusted_input())
        >>> [element.name for element in parser.parse('a\\nb = 1')]
        ['a', 'b']
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        self.config = config or ParserConfig()
        self.correlation_id = correlation_id
        self.tokenizer = Tokenizer()
        self.builder = KonTreeBuilder(self.config, correlation_id)
        self.logger = get_logger(__name__, correlation_id, "kon_parser")

    def tokenize(self, source: str) -> List[str]:
        """Return the filtered token stream for ``source``.

        Raises:
            UnterminatedLiteralError: If a string literal is never closed
        """
        self._check_size(source)
        return filter_blank(STRING_CONDENSER.group(self.tokenizer.tokenize(source)))

    def parse(self, source: str) -> List[KonElement]:
        """Parse ``source`` into its root elements.

        Raises:
            KonParseError: On the first tokenization or grammar error
        """
        return self.parse_with_statistics(source).elements

    def parse_with_statistics(self, source: str) -> ParseResult:
        """Parse ``source`` and report token, element and timing statistics."""
        start_time = time.time()
        self.logger.info(
            "Starting parse operation",
            extra={
                "content_length": len(source),
                "preview": (
                    source[:PREVIEW_LENGTH] + "..."
                    if len(source) > PREVIEW_LENGTH else source
                ),
            }
        )

        try:
            self._check_size(source)
            raw_tokens = self.tokenizer.tokenize(source)
            tokens = filter_blank(STRING_CONDENSER.group(raw_tokens))
            stream = TokenStream.of(tokens)
            if self.config.collect_statistics:
                result = self.builder.build_result(stream)
            else:
                result = ParseResult(
                    self.builder.build(stream), correlation_id=self.correlation_id
                )
        except KonParseError as e:
            self.logger.error(
                "Parse operation failed",
                extra={
                    "error_type": type(e).__name__,
                    "error": str(e),
                    "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
                }
            )
            raise

        if self.config.collect_statistics:
            result.statistics.characters_processed = len(source)
            result.statistics.raw_token_count = len(raw_tokens)
            result.statistics.processing_time_ms = (
                (time.time() - start_time) * MS_PER_SECOND
            )

        self.logger.info(
            "Parse operation completed",
            extra={
                "root_count": result.root_count,
                "processing_time_ms": result.statistics.processing_time_ms,
            }
        )
        return result

    def parse_file(self, file_path: PathType, encoding: Optional[str] = None) -> List[KonElement]:
        """Read a file and parse its contents.

        Args:
            file_path: Path to a KON document
            encoding: Optional override of the configured encoding

        Raises:
            OSError: If the file cannot be read
            KonParseError: On the first tokenization or grammar error
        """
        return self.parse(self.read_source(file_path, encoding))

    def read_source(self, file_path: PathType, encoding: Optional[str] = None) -> str:
        """Read a document as text, stripping a leading byte order mark."""
        path = Path(file_path)
        self.logger.debug("Reading source file", extra={"file_path": str(path)})
        text = path.read_text(encoding=encoding or self.config.encoding)
        if text.startswith(BOM):
            text = text[len(BOM):]
        return text

    def _check_size(self, source: str) -> None:
        limit = self.config.max_input_size
        if limit is not None and len(source) > limit:
            raise InputTooLargeError(len(source), limit)


def parse(
    source: str,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None
) -> List[KonElement]:
    """Parse KON text into its root elements.

    This is the primary entry point.

    Args:
        source: KON document text
        config: Optional parser configuration
        correlation_id: Optional correlation ID for request tracking

    Returns:
        Root elements in source order

    Raises:
        KonParseError: On the first tokenization or grammar error

    Examples:
        >>> root, = parse('a (x = 1) { b = "s" }')
        >>> root.find_child('b').value
        KonString(value='s')
    """
    return KonParser(config, correlation_id).parse(source)


def parse_string(
    kon_string: str,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None
) -> List[KonElement]:
    """Parse KON from a string, rejecting non-string input.

    Raises:
        TypeError: If ``kon_string`` is not a ``str``
        KonParseError: On the first tokenization or grammar error
    """
    if not isinstance(kon_string, str):
        raise TypeError(
            f"parse_string expects str, got {type(kon_string).__name__}"
        )
    return parse(kon_string, config, correlation_id)


def parse_file(
    file_path: PathType,
    encoding: Optional[str] = None,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None
) -> List[KonElement]:
    """Parse a KON file.

    Args:
        file_path: Path to the document (string or Path object)
        encoding: Optional encoding override (configured default otherwise)
        config: Optional parser configuration
        correlation_id: Optional correlation ID for request tracking
    """
    return KonParser(config, correlation_id).parse_file(file_path, encoding)


def tokenize(source: str, config: Optional[ParserConfig] = None) -> List[str]:
    """Return the filtered token stream the parser would consume."""
    return KonParser(config).tokenize(source)
