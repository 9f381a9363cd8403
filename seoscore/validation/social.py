"""Open Graph and Twitter Card derivability checks.

These are composite validators: they ignore their own field value and
look at whether the record holds enough data to synthesize complete
social metadata.
"""

from typing import Any

from seoscore.seo_settings import SEOSettings, resolve_settings
from seoscore.validation.helpers import TWITTER_IMAGE, ImageSource, record_text
from seoscore.validation.results import FieldValidator, Record, ValidationResult

# Partial credit per derivable tag when the set is incomplete
OG_PARTIAL_POINTS = {
    "og:title": 3,
    "og:description": 3,
    "og:url": 2,
    "og:image": 2,
    "og:image:alt": 2,
    "og:image:width": 1,
    "og:image:height": 1,
}


def _fits(text: str | None, max_length: int, restrict: bool) -> bool:
    if text is None:
        return False
    return not (restrict and len(text) > max_length)


def create_open_graph_validator(
    image_source: ImageSource,
    url_field: str | None = "url",
    settings: SEOSettings | None = None,
) -> FieldValidator:
    """Score how completely og:* tags can be derived from the record.

    ``url_field`` is None for entities whose page URL is not stored on
    the record. With restricted OG limits, an over-long title or
    description does not count as derivable.
    """

    def validate(
        value: Any, record: Record, call_settings: SEOSettings | None = None
    ) -> ValidationResult:
        s = resolve_settings(settings, call_settings)
        image = image_source.resolve(record)

        present = {
            "og:title": _fits(
                record_text(record, "seoTitle"), s.og_title_max, s.og_title_restrict
            ),
            "og:description": _fits(
                record_text(record, "seoDescription"),
                s.og_description_max,
                s.og_description_restrict,
            ),
            "og:image": image.exists,
            "og:image:alt": image.alt is not None,
            "og:image:width": image.width is not None,
            "og:image:height": image.height is not None,
        }
        essentials = ["og:title", "og:description", "og:image"]
        if url_field is not None:
            present["og:url"] = record_text(record, url_field) is not None
            essentials.insert(2, "og:url")

        if all(present[tag] for tag in essentials):
            message = "All essential OG tags can be generated"
            has_alt = present["og:image:alt"]
            has_size = present["og:image:width"] and present["og:image:height"]
            if has_alt and has_size:
                return ValidationResult.good(
                    f"{message} - Complete with alt text and dimensions", 15
                )
            if has_alt:
                return ValidationResult.good(
                    f"{message} - Add image dimensions (1200x630px recommended)", 12
                )
            if has_size:
                return ValidationResult.good(
                    f"{message} - Add image alt text for accessibility", 12
                )
            return ValidationResult.good(
                f"{message} - Add image alt text and dimensions for complete coverage",
                10,
            )

        missing = [tag for tag in essentials if not present[tag]]
        if image.exists:
            missing.extend(
                tag
                for tag in ("og:image:alt", "og:image:width", "og:image:height")
                if not present[tag]
            )
        message = (
            f"Missing OG tags: {', '.join(missing)} - "
            "add missing fields for complete social sharing"
        )

        # Without a title no card can be synthesized at all
        if not present["og:title"]:
            return ValidationResult.warning(message)

        score = sum(
            points for tag, points in OG_PARTIAL_POINTS.items() if present.get(tag)
        )
        return ValidationResult.warning(message, score)

    return validate


def make_twitter_cards_validator(og_image: ImageSource) -> FieldValidator:
    """Explicit Twitter Card fields, or enough data to derive them."""

    def validate(
        value: Any, record: Record, settings: SEOSettings | None = None
    ) -> ValidationResult:
        twitter_image = TWITTER_IMAGE.resolve(record)
        configured = (
            record_text(record, "twitterCard") is not None
            and record_text(record, "twitterTitle") is not None
            and record_text(record, "twitterDescription") is not None
            and twitter_image.exists
        )
        if configured:
            message = "Complete Twitter Cards configured - optimal for social SEO"
            if twitter_image.alt is not None:
                return ValidationResult.good(
                    f"{message} - Includes alt text for accessibility", 15
                )
            return ValidationResult.good(
                f"{message} - Add image alt text for accessibility and SEO", 10
            )

        derivable = (
            record_text(record, "seoTitle") is not None
            and record_text(record, "seoDescription") is not None
            and og_image.resolve(record).exists
        )
        if derivable:
            return ValidationResult.warning(
                "Twitter Cards can be auto-generated from existing fields - "
                "add for better social SEO",
                5,
            )
        return ValidationResult.warning(
            "Twitter Cards recommended for social SEO signals - "
            "improves engagement and CTR"
        )

    return validate
