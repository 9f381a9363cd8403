"""SEO health score aggregation."""

from seoscore.scoring.aggregator import (
    FieldCheck,
    HealthLevel,
    OverallRating,
    ScoreResult,
    average_percentage,
    calculate_seo_score,
    evaluate,
    round_half_up,
    summarize,
    to_percentage,
)

__all__ = [
    "FieldCheck",
    "HealthLevel",
    "OverallRating",
    "ScoreResult",
    "average_percentage",
    "calculate_seo_score",
    "evaluate",
    "round_half_up",
    "summarize",
    "to_percentage",
]
