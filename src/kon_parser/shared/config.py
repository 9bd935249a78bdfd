"""Configuration for KON parsing.

The surface grammar is fixed; configuration only bounds resource use and
controls the ambient behaviour around the core (file encoding, statistics).
"""

import json
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Optional

from .errors import ConfigValidationError

DEFAULT_MAX_DEPTH = 256
UNTRUSTED_MAX_DEPTH = 64
UNTRUSTED_MAX_INPUT_SIZE = 1024 * 1024


@dataclass(frozen=True)
class ParserConfig:
    """Immutable configuration shared by the API, tree builder and CLI.

    Thread-safe due to frozen dataclass implementation.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    max_input_size: Optional[int] = None
    encoding: str = "utf-8"
    collect_statistics: bool = True
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate parser configuration."""
        if not isinstance(self.max_depth, int) or self.max_depth <= 0:
            raise ConfigValidationError(
                "max_depth must be > 0",
                field_name="max_depth",
                suggestions=[f"Use the default of {DEFAULT_MAX_DEPTH}"],
            )
        if self.max_input_size is not None and (
            not isinstance(self.max_input_size, int) or self.max_input_size <= 0
        ):
            raise ConfigValidationError(
                "max_input_size must be > 0 or None",
                field_name="max_input_size",
            )
        if not self.encoding:
            raise ConfigValidationError(
                "encoding cannot be empty", field_name="encoding"
            )
        try:
            "".encode(self.encoding)
        except LookupError as e:
            raise ConfigValidationError(
                f"Unknown encoding: {self.encoding}", field_name="encoding"
            ) from e

    def override(self, **kwargs: Any) -> "ParserConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = ParserConfig().override(max_depth=32)
            >>> config.max_depth
            32
        """
        unknown = set(kwargs) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {sorted(unknown)}",
                field_name=sorted(unknown)[0],
            )
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserConfig":
        """Create configuration from dictionary.

        Raises:
            ConfigValidationError: If the dictionary holds unknown keys or
                invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {sorted(unknown)}",
                field_name=sorted(unknown)[0],
                suggestions=[f"Valid fields: {sorted(known)}"],
            )
        return cls(**data)

    @classmethod
    def from_json(cls, json_str: str) -> "ParserConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def default(cls) -> "ParserConfig":
        """Create the default configuration."""
        return cls(name="default")

    @classmethod
    def untrusted_input(cls) -> "ParserConfig":
        """Create configuration preset with tight limits for untrusted sources."""
        return cls(
            max_depth=UNTRUSTED_MAX_DEPTH,
            max_input_size=UNTRUSTED_MAX_INPUT_SIZE,
            name="untrusted_input",
        )
