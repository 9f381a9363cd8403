"""Tests for shared field validators."""

from datetime import date

from seoscore.entities import ARTICLE_CONFIG
from seoscore.scoring import evaluate
from seoscore.validation import (
    ValidationStatus,
    make_featured_image_validator,
    make_image_alt_validator,
    make_image_dimensions_validator,
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
    validate_social_profiles,
    validate_url_format,
    validate_url_with_https,
)
from seoscore.validation.helpers import (
    FEATURED_IMAGE,
    LOGO_IMAGE,
    OG_IMAGE,
    ImageSource,
)


class TestPresence:
    """Tests for the presence builder."""

    def test_present(self) -> None:
        """Non-empty text scores the fixed amount."""
        validate = make_presence_validator("set", "missing", score=5)
        result = validate("Acme", {})

        assert result.status == ValidationStatus.GOOD
        assert result.score == 5

    def test_missing_error_by_default(self) -> None:
        """Missing text is an error for 0."""
        validate = make_presence_validator("set", "missing")

        for value in (None, "", "  ", 0, False):
            result = validate(value, {})
            assert result.status == ValidationStatus.ERROR
            assert result.score == 0
            assert result.message == "missing"

    def test_missing_status_override(self) -> None:
        """Optional fields can be warnings instead."""
        validate = make_presence_validator(
            "set", "missing", missing_status=ValidationStatus.WARNING
        )

        assert validate(None, {}).status == ValidationStatus.WARNING


class TestUrls:
    """Tests for URL format and HTTPS validators."""

    def test_url_with_https(self) -> None:
        """Valid HTTPS URL is 15."""
        result = validate_url_with_https("https://acme.com", {})

        assert result.status == ValidationStatus.GOOD
        assert result.score == 15

    def test_url_without_https(self) -> None:
        """Valid HTTP URL is 10."""
        assert validate_url_with_https("http://acme.com", {}).score == 10

    def test_malformed_url(self) -> None:
        """Malformed URL is 5."""
        assert validate_url_with_https("acme", {}).score == 5

    def test_absent_url(self) -> None:
        """Absent URL is a warning for 0."""
        result = validate_url_with_https(None, {})

        assert result.status == ValidationStatus.WARNING
        assert result.score == 0

    def test_url_format_only(self) -> None:
        """Format check ignores the scheme."""
        assert validate_url_format("http://acme.com", {}).score == 10
        assert validate_url_format("acme", {}).score == 5

    def test_https_reads_record_url(self) -> None:
        """HTTPS check looks at record url."""
        assert validate_https(None, {"url": "https://acme.com"}).score == 5
        assert validate_https(None, {"url": "http://acme.com"}).score == 0

    def test_https_without_url_is_info(self) -> None:
        """Without a url the HTTPS check does not apply."""
        assert validate_https(None, {}).status == ValidationStatus.INFO

    def test_canonical_url(self) -> None:
        """Canonical URL is 5 when valid, 0 otherwise."""
        assert validate_canonical_url("https://acme.com/page", {}).score == 5
        assert validate_canonical_url("/page", {}).score == 0
        assert validate_canonical_url(None, {}).score == 0


class TestGtmId:
    """Tests for Google Tag Manager ids."""

    def test_valid(self) -> None:
        assert validate_gtm_id("GTM-ABC123", {}).score == 5

    def test_invalid_format(self) -> None:
        result = validate_gtm_id("gtm-abc", {})

        assert result.status == ValidationStatus.WARNING
        assert result.score == 0

    def test_absent_is_info(self) -> None:
        assert validate_gtm_id(None, {}).status == ValidationStatus.INFO


class TestLogo:
    """Tests for logo presence and format."""

    def setup_method(self) -> None:
        self.validate = make_logo_validator(LOGO_IMAGE)

    def test_valid_format_with_alt(self) -> None:
        """PNG logo with alt text scores 13."""
        record = {"logoMedia": {"url": "https://x.com/logo.png", "altText": "Logo"}}

        assert self.validate(None, record).score == 13

    def test_valid_format_without_alt(self) -> None:
        """PNG logo without alt text scores 10."""
        record = {"logoMedia": {"url": "https://x.com/logo.PNG"}}

        assert self.validate(None, record).score == 10

    def test_bad_format(self) -> None:
        """Unsupported format scores 7."""
        record = {"logo": "https://x.com/logo.gif"}
        result = self.validate(record["logo"], record)

        assert result.status == ValidationStatus.WARNING
        assert result.score == 7

    def test_missing(self) -> None:
        assert self.validate(None, {}).score == 0

    def test_malformed_relation_is_absent(self) -> None:
        """A relation that is not a mapping counts as no logo."""
        assert self.validate(None, {"logoMedia": 42}).score == 0


class TestImageAlt:
    """Tests for alt text conditional on the image."""

    def setup_method(self) -> None:
        self.validate = make_image_alt_validator(OG_IMAGE, "OG image")

    def test_info_without_image(self) -> None:
        """Alt text alone is not scored without the image."""
        result = self.validate("Alt", {"ogImageAlt": "Alt"})

        assert result.status == ValidationStatus.INFO
        assert result.score == 0

    def test_error_when_image_has_no_alt(self) -> None:
        result = self.validate(None, {"ogImage": "https://x.com/og.jpg"})

        assert result.status == ValidationStatus.ERROR
        assert result.score == 0

    def test_good_with_flat_alt(self) -> None:
        record = {"ogImage": "https://x.com/og.jpg", "ogImageAlt": "Storefront"}

        assert self.validate(None, record).score == 5

    def test_good_with_relation_alt(self) -> None:
        record = {"ogImageMedia": {"url": "https://x.com/og.jpg", "altText": "Shop"}}

        assert self.validate(None, record).score == 5


class TestImageDimensions:
    """Tests for image dimension buckets."""

    def setup_method(self) -> None:
        self.validate = make_image_dimensions_validator(OG_IMAGE, "OG image")

    def _record(self, **dims) -> dict:
        return {"ogImageMedia": {"url": "https://x.com/og.jpg", **dims}}

    def test_optimal(self) -> None:
        result = self.validate(None, self._record(width=1200, height=630))

        assert result.status == ValidationStatus.GOOD
        assert result.score == 5

    def test_acceptable(self) -> None:
        assert self.validate(None, self._record(width=800, height=400)).score == 3

    def test_too_small(self) -> None:
        assert self.validate(None, self._record(width=300, height=200)).score == 1

    def test_one_dimension(self) -> None:
        assert self.validate(None, self._record(width=1200)).score == 1

    def test_no_dimensions(self) -> None:
        result = self.validate(None, self._record())

        assert result.status == ValidationStatus.WARNING
        assert result.score == 0

    def test_no_image(self) -> None:
        assert self.validate(None, {}).status == ValidationStatus.INFO


class TestFeaturedImage:
    """Tests for the article featured image."""

    def setup_method(self) -> None:
        self.validate = make_featured_image_validator(FEATURED_IMAGE)

    def test_with_alt(self) -> None:
        record = {"featuredImage": {"url": "https://x.com/f.jpg", "altText": "Hero"}}

        assert self.validate(None, record).score == 10

    def test_without_alt(self) -> None:
        result = self.validate(None, {"featuredImage": {"url": "https://x.com/f.jpg"}})

        assert result.status == ValidationStatus.ERROR
        assert result.score == 5

    def test_missing(self) -> None:
        assert self.validate(None, {}).score == 0

    def test_uploaded_media_id_counts_as_image(self) -> None:
        """A stored media id marks the image present before its url is known."""
        record = {"featuredImageId": "media_123", "featuredImageAlt": "alt"}
        result = self.validate(record["featuredImageId"], record)

        assert result.status == ValidationStatus.GOOD
        assert result.score == 10

    def test_media_id_without_alt(self) -> None:
        result = self.validate("media_123", {"featuredImageId": "media_123"})

        assert result.status == ValidationStatus.ERROR
        assert result.score == 5

    def test_blank_media_id_is_missing(self) -> None:
        assert self.validate("  ", {"featuredImageId": "  "}).score == 0

    def test_media_id_feeds_article_social_checks(self) -> None:
        record = {
            "title": "T",
            "seoTitle": "s" * 55,
            "seoDescription": "d" * 155,
            "featuredImageId": "media_123",
            "featuredImageAlt": "alt",
        }
        checks = {c.label: c for c in evaluate(record, ARTICLE_CONFIG).checks}

        assert checks["Featured Image"].status == ValidationStatus.GOOD
        assert checks["Featured Image"].score == 10
        assert checks["Open Graph Tags"].status == ValidationStatus.GOOD
        assert checks["Open Graph Tags"].score == 10
        assert checks["Twitter Cards"].status == ValidationStatus.WARNING
        assert checks["Twitter Cards"].score == 5


class TestImageSource:
    """Tests for image resolution."""

    def test_relation_beats_flat_fields(self) -> None:
        source = ImageSource(relation="media", url_field="image", alt_field="alt")
        image = source.resolve(
            {"media": {"url": "https://a.com/1.jpg"}, "image": "https://b.com/2.jpg"}
        )

        assert image.url == "https://a.com/1.jpg"

    def test_relation_without_url_falls_back(self) -> None:
        source = ImageSource(relation="media", url_field="image", alt_field="alt")
        image = source.resolve({"media": {}, "image": "https://b.com/2.jpg", "alt": "B"})

        assert image.url == "https://b.com/2.jpg"
        assert image.alt == "B"

    def test_non_mapping_record(self) -> None:
        assert not LOGO_IMAGE.resolve(None).exists

    def test_media_id_without_url(self) -> None:
        image = FEATURED_IMAGE.resolve({"featuredImageId": "media_123"})

        assert image.exists
        assert image.url is None
        assert image.media_id == "media_123"


class TestCounts:
    """Tests for count-bucketed validators."""

    def test_social_profiles(self) -> None:
        """Profile count buckets."""
        assert validate_social_profiles(["a", "b", "c"], {}).score == 10
        assert validate_social_profiles(["a", "b"], {}).score == 8
        assert validate_social_profiles(["a"], {}).score == 5
        assert validate_social_profiles([], {}).score == 0
        assert validate_social_profiles("not a list", {}).score == 0

    def test_author_social_counts_fields_and_same_as(self) -> None:
        """Individual profile fields and sameAs add up."""
        record = {"linkedIn": "https://linkedin.com/in/a", "sameAs": ["https://x.com/a"]}

        assert validate_author_social(None, record).score == 8

    def test_content_length(self) -> None:
        """Word count buckets."""
        assert validate_content_length("word " * 300, {}).score == 10
        assert validate_content_length("word " * 250, {}).score == 5
        assert validate_content_length("word " * 10, {}).score == 2

    def test_content_missing(self) -> None:
        result = validate_content_length(None, {})

        assert result.status == ValidationStatus.ERROR
        assert result.score == 0

    def test_long_text(self) -> None:
        """100+ chars is good, shorter is a warning."""
        validate = make_long_text_validator("Bio", "for Schema.org Person")

        assert validate("b" * 100, {}).score == 10
        assert validate("b" * 40, {}).score == 5
        assert validate(None, {}).score == 0


class TestComposite:
    """Tests for cross-field validators."""

    def test_contact_info(self) -> None:
        assert validate_contact_info(None, {"email": "a@b.c", "phone": "1"}).score == 10
        assert validate_contact_info(None, {"email": "a@b.c"}).score == 5
        assert validate_contact_info(None, {}).score == 0

    def test_contact_point(self) -> None:
        record = {"contactType": "sales", "phone": "1"}

        assert validate_contact_point(None, record).score == 5
        assert validate_contact_point(None, {"phone": "1"}).score == 2
        assert validate_contact_point(None, {"contactType": "sales"}).score == 0

    def test_address(self) -> None:
        full = {"addressStreet": "1 Road", "addressCity": "Town", "addressCountry": "US"}

        assert validate_address(None, full).score == 5
        assert validate_address(None, {"addressCity": "Town"}).score == 2
        assert validate_address(None, {}).status == ValidationStatus.INFO

    def test_eeat_strong(self) -> None:
        """Four or more signals are good, capped at 15."""
        record = {
            "jobTitle": "Editor",
            "credentials": ["MBA"],
            "qualifications": ["CFA"],
            "expertiseAreas": ["Finance"],
            "verificationStatus": True,
        }
        result = validate_eeat_signals(None, record)

        assert result.status == ValidationStatus.GOOD
        assert result.score == 15

    def test_eeat_partial(self) -> None:
        """Two signals are a warning with their summed points."""
        result = validate_eeat_signals(None, {"jobTitle": "Editor", "credentials": ["MBA"]})

        assert result.status == ValidationStatus.WARNING
        assert result.score == 5

    def test_eeat_none(self) -> None:
        assert validate_eeat_signals(None, {"jobTitle": "Editor"}).score == 0


class TestDatePublished:
    """Tests for the publish date check."""

    def test_published_with_date(self) -> None:
        record = {"status": "PUBLISHED"}

        assert validate_date_published(date(2024, 1, 1), record).score == 10
        assert validate_date_published("2024-01-01", record).score == 10

    def test_published_without_date(self) -> None:
        result = validate_date_published(None, {"status": "PUBLISHED"})

        assert result.status == ValidationStatus.ERROR

    def test_draft_is_info(self) -> None:
        result = validate_date_published(None, {"status": "DRAFT"})

        assert result.status == ValidationStatus.INFO
        assert result.score == 0
