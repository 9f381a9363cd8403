"""Person (author) SEO config."""

from seoscore.entities.base import EntityConfig, FieldConfig
from seoscore.seo_settings import SEOSettings
from seoscore.structured_data import generate_person_structured_data
from seoscore.validation import (
    create_seo_description_validator,
    create_seo_title_validator,
    make_image_alt_validator,
    make_image_presence_validator,
    make_long_text_validator,
    make_presence_validator,
    validate_author_social,
    validate_eeat_signals,
    validate_https,
    validate_slug,
    validate_url_format,
)
from seoscore.validation.helpers import PROFILE_IMAGE

PERSON_MAX_SCORE = 150


def create_person_config(settings: SEOSettings | None = None) -> EntityConfig:
    fields = (
        FieldConfig(
            "name",
            "Author Name",
            make_presence_validator("Author name is set", "Author name is required"),
        ),
        FieldConfig("slug", "Slug", validate_slug),
        FieldConfig(
            "bio",
            "Author Bio",
            make_long_text_validator(
                "Author bio",
                "for Schema.org Person",
                missing_message="Author bio required (minimum 100 chars) for Schema.org Person",
            ),
        ),
        FieldConfig(
            "image",
            "Profile Image",
            make_image_presence_validator(
                PROFILE_IMAGE,
                "Profile image set - builds author recognition",
                "Profile image recommended for Schema.org Person",
            ),
        ),
        FieldConfig(
            "imageAlt",
            "Profile Image Alt Text",
            make_image_alt_validator(PROFILE_IMAGE, "Profile image"),
        ),
        FieldConfig("jobTitle", "E-E-A-T Signals", validate_eeat_signals),
        FieldConfig("linkedIn", "Social Profiles", validate_author_social),
        FieldConfig("seoTitle", "SEO Title", create_seo_title_validator(settings)),
        FieldConfig(
            "seoDescription",
            "SEO Description",
            create_seo_description_validator(settings),
        ),
        FieldConfig("url", "Author URL", validate_url_format),
        FieldConfig("url", "HTTPS Protocol", validate_https),
    )

    return EntityConfig(
        entity_type="Person",
        max_score=PERSON_MAX_SCORE,
        fields=fields,
        generate_structured_data=generate_person_structured_data,
    )


PERSON_CONFIG = create_person_config()


def get_person_config() -> EntityConfig:
    """Get the default Person config."""
    return PERSON_CONFIG
