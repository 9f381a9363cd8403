"""Field validators for SEO health checks."""

from seoscore.validation.common import (
    make_date_presence_validator,
    make_featured_image_validator,
    make_image_alt_validator,
    make_image_dimensions_validator,
    make_image_presence_validator,
    make_logo_validator,
    make_long_text_validator,
    make_presence_validator,
    validate_address,
    validate_author_social,
    validate_canonical_url,
    validate_contact_info,
    validate_contact_point,
    validate_content_length,
    validate_date_published,
    validate_eeat_signals,
    validate_gtm_id,
    validate_https,
    validate_slug,
    validate_social_profiles,
    validate_url_format,
    validate_url_with_https,
)
from seoscore.validation.helpers import ImageSource, ResolvedImage
from seoscore.validation.lengths import (
    create_seo_description_validator,
    create_seo_title_validator,
    create_twitter_description_validator,
    create_twitter_title_validator,
)
from seoscore.validation.results import (
    FieldValidator,
    Record,
    ValidationResult,
    ValidationStatus,
)
from seoscore.validation.social import (
    create_open_graph_validator,
    make_twitter_cards_validator,
)

__all__ = [
    "FieldValidator",
    "ImageSource",
    "Record",
    "ResolvedImage",
    "ValidationResult",
    "ValidationStatus",
    # Settings-aware factories
    "create_open_graph_validator",
    "create_seo_description_validator",
    "create_seo_title_validator",
    "create_twitter_description_validator",
    "create_twitter_title_validator",
    # Builders
    "make_date_presence_validator",
    "make_featured_image_validator",
    "make_image_alt_validator",
    "make_image_dimensions_validator",
    "make_image_presence_validator",
    "make_logo_validator",
    "make_long_text_validator",
    "make_presence_validator",
    "make_twitter_cards_validator",
    # Validators
    "validate_address",
    "validate_author_social",
    "validate_canonical_url",
    "validate_contact_info",
    "validate_contact_point",
    "validate_content_length",
    "validate_date_published",
    "validate_eeat_signals",
    "validate_gtm_id",
    "validate_https",
    "validate_slug",
    "validate_social_profiles",
    "validate_url_format",
    "validate_url_with_https",
]
