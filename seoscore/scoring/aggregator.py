"""SEO health score aggregation.

Runs every field check of an entity config against a record and sums the
results into a bounded score and an integer percentage. Provides
transparency into how the score is derived via ``show_the_math``.
"""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import structlog

from seoscore.config import HEALTH_EXCELLENT_THRESHOLD, HEALTH_GOOD_THRESHOLD
from seoscore.entities.base import EntityConfig, FieldConfig
from seoscore.entities.registry import get_entity_config
from seoscore.seo_settings import SEOSettings
from seoscore.validation.results import Record, ValidationResult, ValidationStatus

logger = structlog.get_logger(__name__)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (12.5 -> 13)."""
    return int(math.floor(value + 0.5))


def to_percentage(score: float, max_score: float) -> int:
    """Score as a whole percentage clamped to 0-100."""
    if max_score <= 0:
        return 0
    percentage = round_half_up(score / max_score * 100)
    return min(100, max(0, percentage))


class HealthLevel(str, Enum):
    """Health bands for a single record's percentage."""

    EXCELLENT = "excellent"  # 80-100
    GOOD = "good"  # 60-79
    POOR = "poor"  # 0-59

    @classmethod
    def from_percentage(cls, percentage: float) -> "HealthLevel":
        if percentage >= HEALTH_EXCELLENT_THRESHOLD:
            return cls.EXCELLENT
        if percentage >= HEALTH_GOOD_THRESHOLD:
            return cls.GOOD
        return cls.POOR

    @property
    def label(self) -> str:
        return _HEALTH_LABELS[self]

    @property
    def description(self) -> str:
        return _HEALTH_DESCRIPTIONS[self]


_HEALTH_LABELS = {
    HealthLevel.EXCELLENT: "Excellent SEO health",
    HealthLevel.GOOD: "Good SEO health - room for improvement",
    HealthLevel.POOR: "Poor SEO health - needs attention",
}

_HEALTH_DESCRIPTIONS = {
    HealthLevel.EXCELLENT: "Your SEO optimization is excellent. Keep it up!",
    HealthLevel.GOOD: "Aim for 80%+ for optimal search engine visibility.",
    HealthLevel.POOR: "Fill in missing SEO fields to improve your search ranking.",
}


class OverallRating(str, Enum):
    """Rating bands for an averaged score across many records."""

    EXCELLENT = "excellent"  # 90-100
    GOOD = "good"  # 70-89
    FAIR = "fair"  # 50-69
    POOR = "poor"  # 0-49

    @classmethod
    def from_percentage(
        cls,
        percentage: float,
        excellent: float = 90,
        good: float = 70,
        fair: float = 50,
    ) -> "OverallRating":
        if percentage >= excellent:
            return cls.EXCELLENT
        if percentage >= good:
            return cls.GOOD
        if percentage >= fair:
            return cls.FAIR
        return cls.POOR


@dataclass
class FieldCheck:
    """Result of one config entry against a record."""

    name: str
    label: str
    status: ValidationStatus
    message: str
    score: float

    @classmethod
    def from_result(cls, config: FieldConfig, result: ValidationResult) -> "FieldCheck":
        return cls(
            name=config.name,
            label=config.label,
            status=result.status,
            message=result.message,
            score=result.score,
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "label": self.label,
            "status": self.status.value,
            "message": self.message,
            "score": self.score,
        }


@dataclass
class ScoreResult:
    """Aggregated SEO health score with per-check breakdown."""

    score: float
    max_score: float
    percentage: int
    entity_type: str = ""
    checks: list[FieldCheck] = field(default_factory=list)
    status_counts: dict[ValidationStatus, int] = field(default_factory=dict)

    @property
    def level(self) -> HealthLevel:
        return HealthLevel.from_percentage(self.percentage)

    def display_checks(self) -> list[FieldCheck]:
        """Checks with repeated field names collapsed to their first entry.

        For presentation only. ``score`` always counts every entry.
        """
        seen: set[str] = set()
        unique = []
        for check in self.checks:
            if check.name in seen:
                continue
            seen.add(check.name)
            unique.append(check)
        return unique

    def to_dict(self) -> dict:
        return {
            "entity_type": self.entity_type,
            "score": self.score,
            "max_score": self.max_score,
            "percentage": self.percentage,
            "level": self.level.value,
            "status_counts": {
                status.value: count for status, count in self.status_counts.items()
            },
            "checks": [c.to_dict() for c in self.checks],
        }

    def show_the_math(self) -> str:
        """Generate human-readable calculation breakdown."""
        title = "SEO HEALTH"
        if self.entity_type:
            title = f"{self.entity_type.upper()} {title}"
        lines = [
            "=" * 50,
            title,
            "=" * 50,
            "",
            f"Score: {self.score:g}/{self.max_score:g} = {self.percentage}% "
            f"({self.level.value.upper()})",
            self.level.label,
            "",
            "-" * 50,
            "CHECKS",
            "-" * 50,
        ]

        icons = {
            ValidationStatus.GOOD: "+",
            ValidationStatus.WARNING: "!",
            ValidationStatus.ERROR: "x",
            ValidationStatus.INFO: "i",
        }
        for check in self.checks:
            lines.append(f"[{icons[check.status]}] {check.label}: {check.score:g}")
            lines.append(f"    -> {check.message}")

        lines.extend(["", "-" * 50])
        lines.append(
            "  ".join(
                f"{status.value}: {self.status_counts.get(status, 0)}"
                for status in ValidationStatus
            )
        )
        lines.append("=" * 50)

        return "\n".join(lines)


def _run_check(
    config: FieldConfig, record: Record, settings: SEOSettings | None
) -> ValidationResult:
    value = record.get(config.name)
    try:
        return config.validator(value, record, settings)
    except Exception as e:
        # Recorded as a failed check; remaining fields are still scored
        logger.warning(
            "seo_validator_failed",
            field=config.name,
            label=config.label,
            error=str(e),
            exc_info=True,
        )
        return ValidationResult.error(f"Check failed: {e}")


def evaluate(
    record: Record | None,
    config: EntityConfig,
    settings: SEOSettings | None = None,
) -> ScoreResult:
    """
    Score a record against an entity config.

    Args:
        record: Entity data; anything that is not a mapping is scored as empty
        config: Ordered field checks and max score
        settings: Thresholds passed to validators not bound at build time

    Returns:
        ScoreResult with checks in config order, duplicates included
    """
    if not isinstance(record, Mapping):
        record = {}

    checks: list[FieldCheck] = []
    status_counts = {status: 0 for status in ValidationStatus}
    total = 0.0

    for field_config in config.fields:
        result = _run_check(field_config, record, settings)
        checks.append(FieldCheck.from_result(field_config, result))
        status_counts[result.status] += 1
        total += result.score

    score = min(max(total, 0), config.max_score)
    percentage = to_percentage(score, config.max_score)

    logger.info(
        "seo_score_calculated",
        entity_type=config.entity_type,
        score=score,
        max_score=config.max_score,
        percentage=percentage,
    )

    return ScoreResult(
        score=score,
        max_score=config.max_score,
        percentage=percentage,
        entity_type=config.entity_type,
        checks=checks,
        status_counts=status_counts,
    )


def average_percentage(
    records: Iterable[Record],
    config: EntityConfig,
    settings: SEOSettings | None = None,
) -> int:
    """Mean percentage across records, rounded; 0 when there are none."""
    percentages = [evaluate(record, config, settings).percentage for record in records]
    if not percentages:
        return 0
    return round_half_up(sum(percentages) / len(percentages))


def calculate_seo_score(
    record: Record,
    entity_type: str,
    settings: SEOSettings | None = None,
) -> ScoreResult:
    """
    Convenience function to score a record by entity type name.

    Builds a settings-aware config when settings are given.
    """
    config = get_entity_config(entity_type, settings)
    return evaluate(record, config, settings)


def summarize(results: Iterable[ScoreResult]) -> dict[str, Any]:
    """Dashboard summary over many score results."""
    results = list(results)
    if not results:
        return {"count": 0, "average_percentage": 0, "rating": OverallRating.POOR.value}
    average = round_half_up(sum(r.percentage for r in results) / len(results))
    return {
        "count": len(results),
        "average_percentage": average,
        "rating": OverallRating.from_percentage(average).value,
    }
