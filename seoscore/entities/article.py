"""Article SEO config."""

from seoscore.entities.base import EntityConfig, FieldConfig
from seoscore.seo_settings import SEOSettings
from seoscore.structured_data import generate_article_structured_data
from seoscore.validation import (
    ValidationStatus,
    create_open_graph_validator,
    create_seo_description_validator,
    create_seo_title_validator,
    make_date_presence_validator,
    make_featured_image_validator,
    make_image_alt_validator,
    make_image_dimensions_validator,
    make_image_presence_validator,
    make_presence_validator,
    make_twitter_cards_validator,
    validate_canonical_url,
    validate_content_length,
    validate_date_published,
    validate_slug,
)
from seoscore.validation.helpers import (
    ARTICLE_OG_IMAGE,
    FEATURED_IMAGE,
    TWITTER_IMAGE,
)

ARTICLE_MAX_SCORE = 200


def create_article_config(settings: SEOSettings | None = None) -> EntityConfig:
    # Article pages have no stored url, so og:url is not part of the check
    fields = (
        FieldConfig(
            "title",
            "Article Title",
            make_presence_validator("Article title is set", "Article title is required"),
        ),
        FieldConfig("slug", "Slug", validate_slug),
        FieldConfig("content", "Content (Word Count)", validate_content_length),
        FieldConfig("seoTitle", "SEO Title", create_seo_title_validator(settings)),
        FieldConfig(
            "seoDescription",
            "SEO Description",
            create_seo_description_validator(settings),
        ),
        FieldConfig(
            "featuredImageId",
            "Featured Image",
            make_featured_image_validator(FEATURED_IMAGE),
        ),
        FieldConfig(
            "featuredImageAlt",
            "Featured Image Alt Text",
            make_image_alt_validator(FEATURED_IMAGE, "Featured image"),
        ),
        FieldConfig(
            "ogImage",
            "OG Image",
            make_image_presence_validator(
                ARTICLE_OG_IMAGE,
                "OG image available for social sharing",
                "OG image recommended (1200x630px) - the featured image is used when set",
            ),
        ),
        FieldConfig(
            "ogImageAlt",
            "OG Image Alt Text",
            make_image_alt_validator(ARTICLE_OG_IMAGE, "OG image"),
        ),
        FieldConfig(
            "ogImageWidth",
            "OG Image Dimensions",
            make_image_dimensions_validator(ARTICLE_OG_IMAGE, "OG image"),
        ),
        FieldConfig("datePublished", "Date Published", validate_date_published),
        FieldConfig(
            "lastReviewed",
            "Last Reviewed",
            make_date_presence_validator(
                "Last reviewed date set - shows content freshness for SEO",
                "Last reviewed date recommended - update when content is "
                "reviewed/updated",
            ),
        ),
        FieldConfig(
            "categoryId",
            "Category",
            make_presence_validator(
                "Category assigned - improves organization and SEO",
                "Category recommended - improves organization and SEO",
                missing_status=ValidationStatus.WARNING,
            ),
        ),
        FieldConfig(
            "seoTitle",
            "Open Graph Tags",
            create_open_graph_validator(ARTICLE_OG_IMAGE, url_field=None, settings=settings),
        ),
        FieldConfig(
            "twitterCard", "Twitter Cards", make_twitter_cards_validator(ARTICLE_OG_IMAGE)
        ),
        FieldConfig(
            "twitterImageAlt",
            "Twitter Image Alt Text",
            make_image_alt_validator(TWITTER_IMAGE, "Twitter image"),
        ),
        FieldConfig("canonicalUrl", "Canonical URL", validate_canonical_url),
    )

    return EntityConfig(
        entity_type="Article",
        max_score=ARTICLE_MAX_SCORE,
        fields=fields,
        generate_structured_data=generate_article_structured_data,
    )


ARTICLE_CONFIG = create_article_config()


def get_article_config() -> EntityConfig:
    """Get the default Article config."""
    return ARTICLE_CONFIG
