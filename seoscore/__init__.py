"""SEO scoring and structured-data generation for content records."""

from seoscore.entities import (
    ENTITY_TYPES,
    EntityConfig,
    FieldConfig,
    generate_structured_data,
    get_entity_config,
)
from seoscore.exceptions import SeoScoreError, SettingsError, UnknownEntityTypeError
from seoscore.scoring import ScoreResult, calculate_seo_score, evaluate
from seoscore.seo_settings import SEOSettings
from seoscore.structured_data import to_json_ld
from seoscore.validation import ValidationResult, ValidationStatus

__version__ = "0.1.0"

__all__ = [
    "ENTITY_TYPES",
    "EntityConfig",
    "FieldConfig",
    "SEOSettings",
    "ScoreResult",
    "SeoScoreError",
    "SettingsError",
    "UnknownEntityTypeError",
    "ValidationResult",
    "ValidationStatus",
    "calculate_seo_score",
    "evaluate",
    "generate_structured_data",
    "get_entity_config",
    "to_json_ld",
]
