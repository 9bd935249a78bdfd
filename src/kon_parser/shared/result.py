"""Statistics collected while parsing KON documents."""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class ParseStatistics:
    """Counters and timing for a single parse."""

    characters_processed: int = 0
    raw_token_count: int = 0
    token_count: int = 0
    element_count: int = 0
    attribute_count: int = 0
    max_depth: int = 0
    processing_time_ms: float = 0.0

    def __post_init__(self) -> None:
        """Validate statistics."""
        if self.processing_time_ms < 0:
            raise ValueError("processing_time_ms must be >= 0")

    @property
    def characters_per_second(self) -> float:
        """Calculate characters processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.characters_processed * 1000.0) / self.processing_time_ms

    @property
    def tokens_per_second(self) -> float:
        """Calculate tokens consumed by the parser per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.token_count * 1000.0) / self.processing_time_ms

    @property
    def condensed_token_count(self) -> int:
        """Number of raw tokens absorbed by string condensation and blank filtering."""
        return self.raw_token_count - self.token_count

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary format."""
        return asdict(self)
