"""Organization (client) SEO config.

The largest config. ``seoTitle`` appears twice: once for title length
and once for whether complete Open Graph tags can be derived.
"""

from seoscore.entities.base import EntityConfig, FieldConfig
from seoscore.seo_settings import SEOSettings
from seoscore.structured_data import generate_organization_structured_data
from seoscore.validation import (
    ValidationStatus,
    create_open_graph_validator,
    create_seo_description_validator,
    create_seo_title_validator,
    create_twitter_description_validator,
    create_twitter_title_validator,
    make_date_presence_validator,
    make_image_alt_validator,
    make_image_dimensions_validator,
    make_image_presence_validator,
    make_logo_validator,
    make_long_text_validator,
    make_presence_validator,
    make_twitter_cards_validator,
    validate_address,
    validate_canonical_url,
    validate_contact_info,
    validate_contact_point,
    validate_gtm_id,
    validate_slug,
    validate_social_profiles,
    validate_url_with_https,
)
from seoscore.validation.helpers import LOGO_IMAGE, OG_IMAGE, TWITTER_IMAGE

ORGANIZATION_MAX_SCORE = 200


def create_organization_config(settings: SEOSettings | None = None) -> EntityConfig:
    """Build the Organization config, with length thresholds from ``settings``."""
    fields = (
        FieldConfig(
            "name",
            "Client Name",
            make_presence_validator(
                "Client name is set",
                "Client name is required for Schema.org Organization",
            ),
        ),
        FieldConfig("slug", "URL Slug", validate_slug),
        FieldConfig(
            "legalName",
            "Legal Name",
            make_presence_validator(
                "Legal name provided - improves Schema.org accuracy",
                "Legal name recommended for Schema.org Organization",
                missing_status=ValidationStatus.WARNING,
            ),
        ),
        FieldConfig("url", "Website URL & HTTPS", validate_url_with_https),
        FieldConfig("logo", "Logo & Format", make_logo_validator(LOGO_IMAGE)),
        FieldConfig(
            "logoAlt",
            "Logo Alt Text",
            make_image_alt_validator(LOGO_IMAGE, "Logo", "logo"),
        ),
        FieldConfig(
            "ogImage",
            "Open Graph Image",
            make_image_presence_validator(
                OG_IMAGE,
                "Open Graph image set for social sharing",
                "Open Graph image recommended (1200x630px) for social sharing",
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
        FieldConfig("seoTitle", "SEO Title", create_seo_title_validator(settings)),
        FieldConfig(
            "seoTitle",
            "Open Graph Tags",
            create_open_graph_validator(OG_IMAGE, url_field="url", settings=settings),
        ),
        FieldConfig(
            "seoDescription",
            "SEO Description",
            create_seo_description_validator(settings),
        ),
        FieldConfig("sameAs", "Social Profiles", validate_social_profiles),
        FieldConfig(
            "businessBrief",
            "Business Brief",
            make_long_text_validator(
                "Business brief",
                "for AI content generation",
                short_score=0,
                missing_status=ValidationStatus.ERROR,
                missing_message="Business brief is required for AI content generation",
            ),
        ),
        FieldConfig("email", "Contact Information", validate_contact_info),
        FieldConfig("gtmId", "Google Tag Manager", validate_gtm_id),
        FieldConfig(
            "foundingDate",
            "Founding Date",
            make_date_presence_validator(
                "Founding date set - adds credibility to Organization schema",
                "Founding date recommended for Schema.org Organization",
            ),
        ),
        FieldConfig(
            "description",
            "Organization Description",
            make_long_text_validator(
                "Organization description", "for Schema.org Organization"
            ),
        ),
        FieldConfig("contactType", "ContactPoint Structure", validate_contact_point),
        FieldConfig("twitterCard", "Twitter Cards", make_twitter_cards_validator(OG_IMAGE)),
        FieldConfig(
            "twitterTitle", "Twitter Title", create_twitter_title_validator(settings)
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
        FieldConfig("canonicalUrl", "Canonical URL", validate_canonical_url),
        FieldConfig("addressStreet", "Address (Local SEO)", validate_address),
    )

    return EntityConfig(
        entity_type="Organization",
        max_score=ORGANIZATION_MAX_SCORE,
        fields=fields,
        generate_structured_data=generate_organization_structured_data,
    )


ORGANIZATION_CONFIG = create_organization_config()


def get_organization_config() -> EntityConfig:
    """Get the default Organization config."""
    return ORGANIZATION_CONFIG
