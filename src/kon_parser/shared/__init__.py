"""Shared utilities for KON parsing.

This module provides the configuration object, the exception hierarchy,
statistics and logging helpers used across all processing layers.
"""

from .config import ParserConfig
from .errors import (
    ConfigError,
    ConfigValidationError,
    IllegalValueError,
    InputTooLargeError,
    KonError,
    KonParseError,
    NestingDepthError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
    UnterminatedLiteralError,
)
from .logging import CorrelationLogger, configure_logging, get_logger
from .result import ParseStatistics

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "CorrelationLogger",
    "IllegalValueError",
    "InputTooLargeError",
    "KonError",
    "KonParseError",
    "NestingDepthError",
    "ParseStatistics",
    "ParserConfig",
    "UnexpectedEndOfInputError",
    "UnexpectedTokenError",
    "UnterminatedLiteralError",
    "configure_logging",
    "get_logger",
]
