"""Article JSON-LD."""

from typing import Any

from seoscore.structured_data.common import (
    base_object,
    number,
    prune_top_level,
    relation_text,
    text,
    to_date_string,
    utc_now_iso,
)
from seoscore.validation.helpers import ARTICLE_OG_IMAGE, ImageSource, get_field
from seoscore.validation.results import Record

PUBLISHER_LOGO = ImageSource(relation="publisherLogoMedia", url_field="publisherLogo")


def _author(record: Record) -> dict[str, Any]:
    return {
        "@type": "Person",
        "name": text(record, "authorName") or relation_text(record, "author", "name") or "",
        "url": text(record, "authorUrl") or relation_text(record, "author", "url"),
    }


def _publisher(record: Record) -> dict[str, Any]:
    logo_url = PUBLISHER_LOGO.resolve(record).url
    return {
        "@type": "Organization",
        "name": text(record, "publisherName") or "",
        "logo": {"@type": "ImageObject", "url": logo_url} if logo_url else None,
    }


def generate_article_structured_data(record: Record) -> dict[str, Any]:
    """Build an Article object.

    ``headline`` and the nested author/publisher names are always emitted
    (empty when unknown); ``dateModified`` defaults to the current time.
    """
    data = base_object("Article")
    data["headline"] = text(record, "title") or ""
    data["dateModified"] = (
        to_date_string(get_field(record, "dateModified")) or utc_now_iso()
    )
    data["author"] = _author(record)
    data["publisher"] = _publisher(record)

    data["description"] = text(record, "excerpt") or text(record, "description")
    data["image"] = ARTICLE_OG_IMAGE.resolve(record).url
    data["datePublished"] = to_date_string(get_field(record, "datePublished"))

    canonical_url = text(record, "canonicalUrl")
    data["mainEntityOfPage"] = (
        {"@type": "WebPage", "@id": canonical_url} if canonical_url else None
    )
    data["articleSection"] = text(record, "categoryName") or relation_text(
        record, "category", "name"
    )
    data["wordCount"] = number(record, "wordCount")
    data["inLanguage"] = text(record, "inLanguage")

    return prune_top_level(data)
