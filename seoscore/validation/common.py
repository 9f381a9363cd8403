"""Field validators shared across entity configs.

Every validator has the signature ``(value, record, settings=None)`` and
returns a ValidationResult. None of them raise: values of the wrong type
are treated as absent and fall into the documented "missing" branch.

Builders (``make_*``) bind a rule to an entity's field names or image
source. They are not settings-aware; threshold-tunable validators live in
``seoscore.validation.lengths``.
"""

import re
from typing import Any

from seoscore.seo_settings import SEOSettings
from seoscore.validation.helpers import (
    URL_PATTERN,
    ImageSource,
    as_list,
    as_text,
    get_field,
    has_date,
    has_text,
    record_text,
)
from seoscore.validation.results import (
    FieldValidator,
    Record,
    ValidationResult,
    ValidationStatus,
)

URL_RE = re.compile(URL_PATTERN)
GTM_ID_RE = re.compile(r"^GTM-[A-Z0-9]+$")
IMAGE_FORMAT_RE = re.compile(r"\.(png|svg|jpg|jpeg|webp)$", re.IGNORECASE)

OPTIMAL_IMAGE_WIDTH = 1200
OPTIMAL_IMAGE_HEIGHT = 630
MIN_IMAGE_WIDTH = 600
MIN_IMAGE_HEIGHT = 314

LONG_TEXT_MIN_CHARS = 100


# ==============================================================================
# Presence
# ==============================================================================


def make_presence_validator(
    good_message: str,
    missing_message: str,
    score: float = 5,
    missing_status: ValidationStatus = ValidationStatus.ERROR,
) -> FieldValidator:
    """Non-empty text check with a fixed score."""

    def validate(
        value: Any, record: Record, settings: SEOSettings | None = None
    ) -> ValidationResult:
        if has_text(value):
            return ValidationResult.good(good_message, score)
        return ValidationResult(missing_status, missing_message, 0)

    return validate


def make_date_presence_validator(
    good_message: str,
    missing_message: str,
    score: float = 5,
) -> FieldValidator:
    """Date objects and non-empty date strings both count as set."""

    def validate(
        value: Any, record: Record, settings: SEOSettings | None = None
    ) -> ValidationResult:
        if has_date(value):
            return ValidationResult.good(good_message, score)
        return ValidationResult.warning(missing_message)

    return validate


validate_slug = make_presence_validator(
    "URL-friendly slug is set",
    "Slug is required (auto-generated from name)",
)


def make_long_text_validator(
    subject: str,
    purpose: str,
    short_score: float = 5,
    missing_status: ValidationStatus = ValidationStatus.WARNING,
    missing_message: str | None = None,
) -> FieldValidator:
    """Long-form text: 100+ chars is good, anything shorter is a warning."""
    missing_message = missing_message or (
        f"{subject} recommended (minimum {LONG_TEXT_MIN_CHARS} chars) {purpose}"
    )

    def validate(
        value: Any, record: Record, settings: SEOSettings | None = None
    ) -> ValidationResult:
        text = as_text(value)
        if text is None:
            return ValidationResult(missing_status, missing_message, 0)
        if len(text.strip()) >= LONG_TEXT_MIN_CHARS:
            return ValidationResult.good(
                f"Comprehensive {subject.lower()} ({len(text)} chars) {purpose}", 10
            )
        return ValidationResult.warning(
            f"{subject} too short ({len(text)} chars) - "
            f"minimum {LONG_TEXT_MIN_CHARS} chars recommended",
            short_score,
        )

    return validate


# ==============================================================================
# Format / regex
# ==============================================================================


def is_valid_url(value: Any) -> bool:
    text = as_text(value)
    return text is not None and URL_RE.match(text) is not None


def is_https(value: Any) -> bool:
    text = as_text(value)
    return text is not None and text.lower().startswith("https://")


def validate_url_format(
    value: Any, record: Record, settings: SEOSettings | None = None
) -> ValidationResult:
    """Website URL format only (HTTPS is scored separately)."""
    if not has_text(value):
        return ValidationResult.warning("Website URL recommended for Schema.org")
    if is_valid_url(value):
        return ValidationResult.good("Valid website URL provided", 10)
    return ValidationResult.warning("URL format should be https://example.com", 5)


def validate_https(
    value: Any, record: Record, settings: SEOSettings | None = None
) -> ValidationResult:
    """Scheme check on ``record["url"]``."""
    url = record_text(record, "url")
    if url is None:
        return ValidationResult.info("HTTPS validation requires website URL")
    if is_https(url):
        return ValidationResult.good("Website uses HTTPS - secure and SEO-friendly", 5)
    return ValidationResult.warning(
        "Website should use HTTPS for security and SEO - Google prefers secure sites"
    )


def validate_url_with_https(
    value: Any, record: Record, settings: SEOSettings | None = None
) -> ValidationResult:
    """Combined URL check: 10 for a valid URL plus 5 for HTTPS."""
    if not has_text(value):
        return ValidationResult.warning("Website URL recommended for Schema.org")
    if is_valid_url(value):
        if is_https(value):
            return ValidationResult.good(
                "Valid HTTPS URL provided - secure and SEO-friendly", 15
            )
        return ValidationResult.warning(
            "URL format valid but should use HTTPS for security and SEO", 10
        )
    return ValidationResult.warning("URL format should be https://example.com", 5)


def validate_canonical_url(
    value: Any, record: Record, settings: SEOSettings | None = None
) -> ValidationResult:
    if not has_text(value):
        return ValidationResult.warning(
            "Canonical URL recommended - prevents duplicate content "
            "and consolidates ranking signals"
        )
    if is_valid_url(value):
        return ValidationResult.good(
            "Canonical URL set - prevents duplicate content issues", 5
        )
    return ValidationResult.warning(
        "Canonical URL format invalid - should be full URL (https://example.com/page)"
    )


def validate_gtm_id(
    value: Any, record: Record, settings: SEOSettings | None = None
) -> ValidationResult:
    text = as_text(value)
    if text is None:
        return ValidationResult.info(
            "GTM ID optional - enables client to see article performance"
        )
    if GTM_ID_RE.match(text):
        return ValidationResult.good("Valid GTM ID - enables analytics tracking", 5)
    return ValidationResult.warning("GTM ID format should be GTM-XXXXXXX")


def make_logo_validator(source: ImageSource) -> FieldValidator:
    """Logo presence plus image format, with a bonus for alt text."""

    def validate(
        value: Any, record: Record, settings: SEOSettings | None = None
    ) -> ValidationResult:
        image = source.resolve(record)
        url = image.url or as_text(value)
        if url is None:
            return ValidationResult.warning(
                "Logo recommended for brand recognition - "
                "use PNG/SVG/JPG, min 112x112px for Google"
            )

        if IMAGE_FORMAT_RE.search(url.lower()):
            if image.alt is not None:
                return ValidationResult.good(
                    "Logo provided with valid format (PNG/SVG/JPG) and alt text - "
                    "recommend min 112x112px for Google",
                    13,
                )
            return ValidationResult.good(
                "Logo provided with valid format (PNG/SVG/JPG) - add alt text for "
                "accessibility and SEO, recommend min 112x112px",
                10,
            )
        return ValidationResult.warning(
            "Logo provided but should be PNG, SVG, or JPG format - "
            "recommend min 112x112px for Google rich results",
            7,
        )

    return validate


# ==============================================================================
# Images: presence, conditional alt text, dimensions
# ==============================================================================


def make_image_presence_validator(
    source: ImageSource,
    good_message: str,
    missing_message: str,
    score: float = 5,
) -> FieldValidator:
    def validate(
        value: Any, record: Record, settings: SEOSettings | None = None
    ) -> ValidationResult:
        if source.resolve(record).exists or has_text(value):
            return ValidationResult.good(good_message, score)
        return ValidationResult.warning(missing_message)

    return validate


def make_image_alt_validator(
    source: ImageSource, subject: str, noun: str | None = None
) -> FieldValidator:
    """Alt text is only scored when the image itself exists."""
    noun = noun or subject

    def validate(
        value: Any, record: Record, settings: SEOSettings | None = None
    ) -> ValidationResult:
        image = source.resolve(record)
        if not image.exists:
            return ValidationResult.info(
                f"{subject} alt text not needed (no {noun} provided)"
            )
        if image.alt is not None:
            return ValidationResult.good(
                f"{subject} alt text provided - required for accessibility and SEO", 5
            )
        return ValidationResult.error(
            f"{subject} alt text required when {noun} exists (accessibility + SEO)"
        )

    return validate


def make_image_dimensions_validator(source: ImageSource, subject: str) -> FieldValidator:
    """Bucket image size against the 1200x630 social card."""

    def validate(
        value: Any, record: Record, settings: SEOSettings | None = None
    ) -> ValidationResult:
        image = source.resolve(record)
        if not image.exists:
            return ValidationResult.info(
                f"{subject} dimensions not needed (no {subject} provided)"
            )

        width, height = image.width, image.height
        if width is not None and height is not None:
            size = f"{width:g}x{height:g}px"
            if width == OPTIMAL_IMAGE_WIDTH and height == OPTIMAL_IMAGE_HEIGHT:
                return ValidationResult.good(
                    f"{subject} dimensions optimal (1200x630px) - "
                    "perfect for social sharing",
                    5,
                )
            if width >= MIN_IMAGE_WIDTH and height >= MIN_IMAGE_HEIGHT:
                return ValidationResult.warning(
                    f"{subject} dimensions ({size}) - recommend 1200x630px "
                    "for best results",
                    3,
                )
            return ValidationResult.warning(
                f"{subject} dimensions ({size}) too small - minimum 600x314px, "
                "recommend 1200x630px",
                1,
            )
        if width is not None or height is not None:
            return ValidationResult.warning(
                f"{subject} dimensions incomplete - both width and height needed", 1
            )
        return ValidationResult.warning(
            f"{subject} dimensions missing - add width and height "
            "(1200x630px recommended)"
        )

    return validate


def make_featured_image_validator(source: ImageSource) -> FieldValidator:
    """Featured image: full marks only with alt text."""

    def validate(
        value: Any, record: Record, settings: SEOSettings | None = None
    ) -> ValidationResult:
        image = source.resolve(record)
        if not image.exists:
            return ValidationResult.warning(
                "Featured image recommended (1200x630px) for social sharing and SEO"
            )
        if image.alt is not None:
            return ValidationResult.good(
                "Featured image with alt text provided - required for SEO", 10
            )
        return ValidationResult.error(
            "Featured image alt text required when image exists (accessibility + SEO)",
            5,
        )

    return validate


# ==============================================================================
# Counts
# ==============================================================================


def _score_profile_count(count: int, subject: str) -> ValidationResult:
    if count >= 3:
        return ValidationResult.good(
            f"Excellent! {count} social profiles added - great for Schema.org", 10
        )
    if count == 2:
        return ValidationResult.good(f"Good! {count} social profiles added", 8)
    if count == 1:
        return ValidationResult.warning(
            f"Only {count} social profile - add more for better brand verification", 5
        )
    return ValidationResult.warning(
        f"Social profiles recommended for Schema.org {subject} sameAs property"
    )


def validate_social_profiles(
    value: Any, record: Record, settings: SEOSettings | None = None
) -> ValidationResult:
    """Count ``sameAs`` entries."""
    return _score_profile_count(len(as_list(value)), "Organization")


def validate_author_social(
    value: Any, record: Record, settings: SEOSettings | None = None
) -> ValidationResult:
    """Individual profile fields and ``sameAs`` entries count together."""
    count = sum(
        1 for name in ("linkedIn", "twitter", "facebook") if record_text(record, name)
    )
    count += len(as_list(get_field(record, "sameAs")))
    return _score_profile_count(count, "Person")


def validate_content_length(
    value: Any, record: Record, settings: SEOSettings | None = None
) -> ValidationResult:
    text = as_text(value)
    if text is None:
        return ValidationResult.error("Article content is required")

    word_count = len(text.split())
    if word_count >= 300:
        return ValidationResult.good(
            f"Article content has {word_count} words - good depth for SEO", 10
        )
    if word_count >= 200:
        return ValidationResult.warning(
            f"Article content has {word_count} words - aim for 300+ words for better SEO",
            5,
        )
    return ValidationResult.warning(
        f"Article content too short ({word_count} words) - minimum 300 words recommended",
        2,
    )


# ==============================================================================
# Composite (cross-field)
# ==============================================================================


def validate_contact_info(
    value: Any, record: Record, settings: SEOSettings | None = None
) -> ValidationResult:
    has_email = record_text(record, "email") is not None
    has_phone = record_text(record, "phone") is not None
    if has_email and has_phone:
        return ValidationResult.good("Email and phone provided - complete contact info", 10)
    if has_email or has_phone:
        return ValidationResult.warning(
            "Partial contact info - add both email and phone for Schema.org", 5
        )
    return ValidationResult.warning(
        "Contact information recommended for Schema.org Organization"
    )


def validate_contact_point(
    value: Any, record: Record, settings: SEOSettings | None = None
) -> ValidationResult:
    has_type = record_text(record, "contactType") is not None
    has_info = bool(record_text(record, "email") or record_text(record, "phone"))
    if has_type and has_info:
        return ValidationResult.good(
            "ContactPoint structured with contactType - better Schema.org compliance", 5
        )
    if has_info:
        return ValidationResult.warning(
            "Add contactType (e.g., customer service) for better Schema.org "
            "ContactPoint structure",
            2,
        )
    return ValidationResult.warning(
        "ContactPoint structure recommended - add contactType and contact info"
    )


ADDRESS_FIELDS = ("addressStreet", "addressCity", "addressCountry")


def validate_address(
    value: Any, record: Record, settings: SEOSettings | None = None
) -> ValidationResult:
    present = [name for name in ADDRESS_FIELDS if record_text(record, name)]
    if not present:
        return ValidationResult.info(
            "Address optional - only needed for local businesses "
            "(enables LocalBusiness schema)"
        )
    if len(present) == len(ADDRESS_FIELDS):
        return ValidationResult.good(
            "Complete address provided - enables LocalBusiness schema for local SEO", 5
        )
    return ValidationResult.warning(
        "Partial address - add street, city, and country for complete "
        "LocalBusiness schema",
        2,
    )


def validate_eeat_signals(
    value: Any, record: Record, settings: SEOSettings | None = None
) -> ValidationResult:
    """Experience/Expertise/Authority/Trust signals on an author."""
    checks = [
        ("job title", record_text(record, "jobTitle") is not None, 2),
        ("credentials", bool(as_list(get_field(record, "credentials"))), 3),
        ("qualifications", bool(as_list(get_field(record, "qualifications"))), 3),
        ("expertise areas", bool(as_list(get_field(record, "expertiseAreas"))), 2),
        ("verification", get_field(record, "verificationStatus") is True, 5),
    ]
    signals = [name for name, present, _ in checks if present]
    score = sum(points for _, present, points in checks if present)

    if len(signals) >= 4:
        return ValidationResult.good(
            f"Strong E-E-A-T signals: {', '.join(signals)} - excellent for SEO",
            min(score, 15),
        )
    if len(signals) >= 2:
        return ValidationResult.warning(
            f"Partial E-E-A-T signals: {', '.join(signals)} - add more for better SEO",
            min(score, 10),
        )
    return ValidationResult.warning(
        "E-E-A-T signals recommended - add job title, credentials, "
        "qualifications, expertise areas"
    )


def validate_date_published(
    value: Any, record: Record, settings: SEOSettings | None = None
) -> ValidationResult:
    """Only published articles need a publication date."""
    status = get_field(record, "status")
    if not (isinstance(status, str) and status.upper() == "PUBLISHED"):
        return ValidationResult.info(
            "Publication date will be set when article is published"
        )
    if has_date(value):
        return ValidationResult.good(
            "Publication date set - required for published articles", 10
        )
    return ValidationResult.error("Publication date required for published articles")
