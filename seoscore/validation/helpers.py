"""Type-tolerant accessors for record values.

Records come from a data-access layer and may hold anything. Every helper
here treats a value of the wrong type as absent instead of raising.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

URL_PATTERN = r"^https?://.+\..+"


def as_text(value: Any) -> str | None:
    """Return the string if it has non-whitespace content."""
    if isinstance(value, str) and value.strip():
        return value
    return None


def has_text(value: Any) -> bool:
    return as_text(value) is not None


def as_number(value: Any) -> float | None:
    """Return a non-zero number. Booleans are not numbers here."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)) and value:
        return value
    return None


def as_list(value: Any) -> list:
    """Return the value if it is a list or tuple, else an empty list."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def has_date(value: Any) -> bool:
    """A date counts when it is a date object or a non-empty string."""
    return isinstance(value, date) or has_text(value)


def get_field(record: Any, name: str | None) -> Any:
    """Read a key from a record that may not be a mapping at all."""
    if not name or not isinstance(record, Mapping):
        return None
    return record.get(name)


def record_text(record: Any, name: str | None) -> str | None:
    return as_text(get_field(record, name))


@dataclass(frozen=True)
class ResolvedImage:
    """An image after relation/flat-field resolution."""

    url: str | None = None
    alt: str | None = None
    width: float | None = None
    height: float | None = None
    media_id: str | None = None  # set when only an uploaded media id is known

    @property
    def exists(self) -> bool:
        return self.url is not None or self.media_id is not None


@dataclass(frozen=True)
class ImageSource:
    """Where an entity keeps one of its images.

    ``relation`` names a nested media snapshot (``{url, altText, width,
    height}``). The flat fields are the fallback when the relation is
    missing or has no usable url. ``id_field`` holds a media id that marks
    the image as present even when no url is known.
    """

    relation: str | None = None
    url_field: str | None = None
    alt_field: str | None = None
    width_field: str | None = None
    height_field: str | None = None
    id_field: str | None = None

    def resolve(self, record: Any) -> ResolvedImage:
        media = get_field(record, self.relation)
        if isinstance(media, str) and media.strip():
            # Relation already flattened to its url
            return ResolvedImage(
                url=media,
                alt=record_text(record, self.alt_field),
                width=as_number(get_field(record, self.width_field)),
                height=as_number(get_field(record, self.height_field)),
            )
        if isinstance(media, Mapping):
            url = as_text(media.get("url"))
            if url is not None:
                return ResolvedImage(
                    url=url,
                    alt=as_text(media.get("altText")),
                    width=as_number(media.get("width")),
                    height=as_number(media.get("height")),
                )

        url = record_text(record, self.url_field)
        media_id = record_text(record, self.id_field)
        if url is None and media_id is None:
            return ResolvedImage()
        return ResolvedImage(
            url=url,
            media_id=media_id,
            alt=record_text(record, self.alt_field),
            width=as_number(get_field(record, self.width_field)),
            height=as_number(get_field(record, self.height_field)),
        )


LOGO_IMAGE = ImageSource(relation="logoMedia", url_field="logo", alt_field="logoAlt")

OG_IMAGE = ImageSource(
    relation="ogImageMedia",
    url_field="ogImage",
    alt_field="ogImageAlt",
    width_field="ogImageWidth",
    height_field="ogImageHeight",
)

TWITTER_IMAGE = ImageSource(
    relation="twitterImageMedia",
    url_field="twitterImage",
    alt_field="twitterImageAlt",
)

PROFILE_IMAGE = ImageSource(relation="imageMedia", url_field="image", alt_field="imageAlt")

FEATURED_IMAGE = ImageSource(
    relation="featuredImage",
    url_field="featuredImageUrl",
    alt_field="featuredImageAlt",
    width_field="featuredImageWidth",
    height_field="featuredImageHeight",
    id_field="featuredImageId",
)

# Articles share their featured image as the Open Graph image
ARTICLE_OG_IMAGE = ImageSource(
    relation="featuredImage",
    url_field="ogImage",
    alt_field="ogImageAlt",
    width_field="ogImageWidth",
    height_field="ogImageHeight",
    id_field="featuredImageId",
)
