"""SEO threshold settings snapshot.

A settings store hands the engine a flat mapping of length thresholds and
"restrict" flags. Every field has a default, so an absent snapshot is a
fully specified state.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from seoscore.exceptions import SettingsError


class SEOSettings(BaseModel):
    """Length thresholds for title and description validators."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    seo_title_min: int = Field(default=30, ge=0)
    seo_title_max: int = Field(default=60, ge=1)
    seo_title_restrict: bool = False

    seo_description_min: int = Field(default=120, ge=0)
    seo_description_max: int = Field(default=160, ge=1)
    seo_description_restrict: bool = False

    twitter_title_max: int = Field(default=70, ge=1)
    twitter_title_restrict: bool = True

    twitter_description_max: int = Field(default=200, ge=1)
    twitter_description_restrict: bool = True

    og_title_max: int = Field(default=60, ge=1)
    og_title_restrict: bool = False

    og_description_max: int = Field(default=200, ge=1)
    og_description_restrict: bool = False

    @model_validator(mode="after")
    def check_ranges(self) -> "SEOSettings":
        """Minimums must not exceed maximums."""
        if self.seo_title_min > self.seo_title_max:
            raise ValueError("seo_title_min must be <= seo_title_max")
        if self.seo_description_min > self.seo_description_max:
            raise ValueError("seo_description_min must be <= seo_description_max")
        return self

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "SEOSettings":
        """Build settings from a settings-store row.

        Accepts snake_case or camelCase keys. ``None`` values fall back to
        the defaults and unknown keys are ignored.
        """
        if not data:
            return cls()

        cleaned = {key: value for key, value in data.items() if value is not None}
        try:
            return cls.model_validate(cleaned)
        except ValidationError as e:
            errors = e.errors()
            field = None
            if errors and errors[0].get("loc"):
                field = str(errors[0]["loc"][0])
            raise SettingsError(f"Invalid SEO settings: {e}", field=field) from e


DEFAULT_SEO_SETTINGS = SEOSettings()


def resolve_settings(*candidates: SEOSettings | None) -> SEOSettings:
    """Return the first settings that are not None, else the defaults."""
    for settings in candidates:
        if settings is not None:
            return settings
    return DEFAULT_SEO_SETTINGS
