"""Validation result types shared by every field validator."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from seoscore.seo_settings import SEOSettings

Record = Mapping[str, Any]


class ValidationStatus(str, Enum):
    """Outcome of a single field check."""

    GOOD = "good"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"  # Not applicable, always scores 0


@dataclass(frozen=True)
class ValidationResult:
    """Status, message and score produced by one validator."""

    status: ValidationStatus
    message: str
    score: float = 0

    @classmethod
    def good(cls, message: str, score: float) -> "ValidationResult":
        return cls(ValidationStatus.GOOD, message, score)

    @classmethod
    def warning(cls, message: str, score: float = 0) -> "ValidationResult":
        return cls(ValidationStatus.WARNING, message, score)

    @classmethod
    def error(cls, message: str, score: float = 0) -> "ValidationResult":
        return cls(ValidationStatus.ERROR, message, score)

    @classmethod
    def info(cls, message: str) -> "ValidationResult":
        return cls(ValidationStatus.INFO, message, 0)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "status": self.status.value,
            "message": self.message,
            "score": self.score,
        }


# (value, record, settings) -> ValidationResult
FieldValidator = Callable[[Any, Record, Optional[SEOSettings]], ValidationResult]
