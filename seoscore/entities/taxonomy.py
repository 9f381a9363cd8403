"""Category, Tag and Industry SEO configs.

The three taxonomy types share one field layout. Tags and industries
also carry their own Open Graph image and Twitter text; categories do not.
"""

from seoscore.entities.base import EntityConfig, FieldConfig, StructuredDataGenerator
from seoscore.seo_settings import SEOSettings
from seoscore.structured_data import (
    generate_category_structured_data,
    generate_industry_structured_data,
    generate_tag_structured_data,
)
from seoscore.validation import (
    create_open_graph_validator,
    create_seo_description_validator,
    create_seo_title_validator,
    create_twitter_description_validator,
    create_twitter_title_validator,
    make_image_alt_validator,
    make_image_dimensions_validator,
    make_image_presence_validator,
    make_long_text_validator,
    make_presence_validator,
    make_twitter_cards_validator,
    validate_canonical_url,
    validate_slug,
)
from seoscore.validation.helpers import OG_IMAGE, TWITTER_IMAGE

TAXONOMY_MAX_SCORE = 100


def _og_image_fields() -> tuple[FieldConfig, ...]:
    return (
        FieldConfig(
            "ogImage",
            "OG Image",
            make_image_presence_validator(
                OG_IMAGE,
                "OG image set for social sharing",
                "OG image recommended (1200x630px) for social sharing",
            ),
        ),
        FieldConfig(
            "ogImageAlt",
            "OG Image Alt Text",
            make_image_alt_validator(OG_IMAGE, "OG image"),
        ),
        FieldConfig(
            "ogImageWidth",
            "OG Image Dimensions",
            make_image_dimensions_validator(OG_IMAGE, "OG image"),
        ),
    )


def _create_taxonomy_config(
    entity_type: str,
    generator: StructuredDataGenerator,
    settings: SEOSettings | None,
    with_og_image: bool,
) -> EntityConfig:
    """Shared layout for taxonomy terms.

    Taxonomy pages are addressed by their canonical URL, so that is the
    og:url source.
    """
    fields: list[FieldConfig] = [
        FieldConfig(
            "name",
            f"{entity_type} Name",
            make_presence_validator(
                f"{entity_type} name is set", f"{entity_type} name is required"
            ),
        ),
        FieldConfig("slug", "Slug", validate_slug),
        FieldConfig(
            "description",
            f"{entity_type} Description",
            make_long_text_validator(
                f"{entity_type} description",
                "for SEO",
                missing_message=(
                    f"{entity_type} description recommended (minimum 100 chars) for SEO"
                ),
            ),
        ),
        FieldConfig("seoTitle", "SEO Title", create_seo_title_validator(settings)),
        FieldConfig(
            "seoDescription",
            "SEO Description",
            create_seo_description_validator(settings),
        ),
    ]
    if with_og_image:
        fields.extend(_og_image_fields())

    fields.append(
        FieldConfig(
            "seoTitle",
            "Open Graph Tags",
            create_open_graph_validator(
                OG_IMAGE, url_field="canonicalUrl", settings=settings
            ),
        )
    )
    fields.append(
        FieldConfig("twitterCard", "Twitter Cards", make_twitter_cards_validator(OG_IMAGE))
    )
    if with_og_image:
        fields.extend(
            (
                FieldConfig(
                    "twitterTitle",
                    "Twitter Title",
                    create_twitter_title_validator(settings),
                ),
                FieldConfig(
                    "twitterDescription",
                    "Twitter Description",
                    create_twitter_description_validator(settings),
                ),
                FieldConfig(
                    "twitterImageAlt",
                    "Twitter Image Alt Text",
                    make_image_alt_validator(TWITTER_IMAGE, "Twitter image"),
                ),
            )
        )
    fields.append(FieldConfig("canonicalUrl", "Canonical URL", validate_canonical_url))

    return EntityConfig(
        entity_type=entity_type,
        max_score=TAXONOMY_MAX_SCORE,
        fields=tuple(fields),
        generate_structured_data=generator,
    )


def create_category_config(settings: SEOSettings | None = None) -> EntityConfig:
    return _create_taxonomy_config(
        "Category", generate_category_structured_data, settings, with_og_image=False
    )


def create_tag_config(settings: SEOSettings | None = None) -> EntityConfig:
    return _create_taxonomy_config(
        "Tag", generate_tag_structured_data, settings, with_og_image=True
    )


def create_industry_config(settings: SEOSettings | None = None) -> EntityConfig:
    return _create_taxonomy_config(
        "Industry", generate_industry_structured_data, settings, with_og_image=True
    )


CATEGORY_CONFIG = create_category_config()
TAG_CONFIG = create_tag_config()
INDUSTRY_CONFIG = create_industry_config()


def get_category_config() -> EntityConfig:
    return CATEGORY_CONFIG


def get_tag_config() -> EntityConfig:
    return TAG_CONFIG


def get_industry_config() -> EntityConfig:
    return INDUSTRY_CONFIG
