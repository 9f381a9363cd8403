"""Threshold-tunable length validators.

Each ``create_*_validator`` factory closes over an optional SEOSettings.
Thresholds come from, in order: the settings passed to the factory, the
settings passed at call time, then the defaults. Called with no settings
anywhere, the factories reproduce the default bands exactly.

Default SEO title bands (30-60 chars):

    50-60   good     15
    30-49   warning  10
    61-70   warning  12
    >70     warning   8
    1-29    error     5
    empty   error     0

SEO descriptions use the same shape around 120-160 chars with a 20-char
slightly-long band (161-180).
"""

from dataclasses import dataclass
from typing import Any

from seoscore.seo_settings import SEOSettings, resolve_settings
from seoscore.validation.helpers import as_text, record_text
from seoscore.validation.results import FieldValidator, Record, ValidationResult

OPTIMAL_WINDOW = 10


@dataclass(frozen=True)
class LengthBands:
    """Tiered length scoring for one text field."""

    subject: str
    placement: str  # where the text shows up, for messages
    min_length: int
    max_length: int
    over_span: int  # width of the "slightly long" band
    restrict: bool
    optimal_score: float = 15
    under_score: float = 10
    slightly_over_score: float = 12
    far_over_score: float = 8
    too_short_score: float = 5

    @property
    def optimal_min(self) -> int:
        return max(self.min_length, self.max_length - OPTIMAL_WINDOW)

    def score(self, length: int) -> ValidationResult:
        target = f"{self.optimal_min}-{self.max_length} chars"

        if length > self.max_length and self.restrict:
            return ValidationResult.error(
                f"Too long ({length} chars) - {self.subject} is limited to "
                f"{self.max_length} chars"
            )
        if self.optimal_min <= length <= self.max_length:
            return ValidationResult.good(
                f"Perfect length ({length} chars) - optimal for {self.placement}",
                self.optimal_score,
            )
        if self.min_length <= length < self.optimal_min:
            return ValidationResult.warning(
                f"Could be longer ({length} chars) - aim for {target} "
                "for better visibility",
                self.under_score,
            )
        if self.max_length < length <= self.max_length + self.over_span:
            return ValidationResult.warning(
                f"Slightly long ({length} chars) - may be truncated in {self.placement}",
                self.slightly_over_score,
            )
        if length > self.max_length:
            return ValidationResult.warning(
                f"Too long ({length} chars) - will be truncated, aim for {target}",
                self.far_over_score,
            )
        return ValidationResult.error(
            f"Too short ({length} chars) - minimum {self.min_length} chars recommended",
            self.too_short_score,
        )


def title_bands(settings: SEOSettings | None = None) -> LengthBands:
    s = resolve_settings(settings)
    return LengthBands(
        subject="SEO title",
        placement="search results",
        min_length=s.seo_title_min,
        max_length=s.seo_title_max,
        over_span=10,
        restrict=s.seo_title_restrict,
    )


def description_bands(settings: SEOSettings | None = None) -> LengthBands:
    s = resolve_settings(settings)
    return LengthBands(
        subject="SEO description",
        placement="search snippets",
        min_length=s.seo_description_min,
        max_length=s.seo_description_max,
        over_span=20,
        restrict=s.seo_description_restrict,
        under_score=12,
        slightly_over_score=10,
    )


def create_seo_title_validator(settings: SEOSettings | None = None) -> FieldValidator:
    def validate(
        value: Any, record: Record, call_settings: SEOSettings | None = None
    ) -> ValidationResult:
        text = as_text(value)
        if text is None:
            return ValidationResult.error(
                "SEO title is missing - critical for search visibility"
            )
        bands = title_bands(resolve_settings(settings, call_settings))
        return bands.score(len(text))

    return validate


def create_seo_description_validator(
    settings: SEOSettings | None = None,
) -> FieldValidator:
    def validate(
        value: Any, record: Record, call_settings: SEOSettings | None = None
    ) -> ValidationResult:
        text = as_text(value)
        if text is None:
            return ValidationResult.error(
                "SEO description is missing - critical for click-through rate"
            )
        bands = description_bands(resolve_settings(settings, call_settings))
        return bands.score(len(text))

    return validate


def _score_social_text(
    value: Any,
    record: Record,
    subject: str,
    fallback_field: str,
    fallback_label: str,
    max_length: int,
    restrict: bool,
) -> ValidationResult:
    text = as_text(value)
    if text is None:
        if record_text(record, fallback_field) is not None:
            return ValidationResult.info(
                f"{subject} not set - the {fallback_label} will be used"
            )
        return ValidationResult.warning(
            f"{subject} recommended - or set the {fallback_label} so one can be derived"
        )

    length = len(text)
    if length <= max_length:
        return ValidationResult.good(
            f"{subject} length good ({length}/{max_length} chars)", 5
        )
    if restrict:
        return ValidationResult.error(
            f"{subject} too long ({length} chars) - maximum {max_length} chars allowed"
        )
    return ValidationResult.warning(
        f"{subject} too long ({length} chars) - will be truncated after "
        f"{max_length} chars",
        2,
    )


def create_twitter_title_validator(
    settings: SEOSettings | None = None,
) -> FieldValidator:
    def validate(
        value: Any, record: Record, call_settings: SEOSettings | None = None
    ) -> ValidationResult:
        s = resolve_settings(settings, call_settings)
        return _score_social_text(
            value,
            record,
            subject="Twitter title",
            fallback_field="seoTitle",
            fallback_label="SEO title",
            max_length=s.twitter_title_max,
            restrict=s.twitter_title_restrict,
        )

    return validate


def create_twitter_description_validator(
    settings: SEOSettings | None = None,
) -> FieldValidator:
    def validate(
        value: Any, record: Record, call_settings: SEOSettings | None = None
    ) -> ValidationResult:
        s = resolve_settings(settings, call_settings)
        return _score_social_text(
            value,
            record,
            subject="Twitter description",
            fallback_field="seoDescription",
            fallback_label="SEO description",
            max_length=s.twitter_description_max,
            restrict=s.twitter_description_restrict,
        )

    return validate
