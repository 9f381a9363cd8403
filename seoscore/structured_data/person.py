"""Person JSON-LD for author records."""

from collections.abc import Mapping
from typing import Any

from seoscore.structured_data.common import (
    base_object,
    non_empty_list,
    prune_top_level,
    text,
)
from seoscore.validation.helpers import PROFILE_IMAGE, as_text, get_field
from seoscore.validation.results import Record

# Order matters: sameAs is assembled in this order when not given explicitly
SOCIAL_PROFILE_FIELDS = ("linkedIn", "twitter", "facebook")


def _works_for(record: Record) -> dict[str, Any] | None:
    employer = get_field(record, "worksFor")
    if isinstance(employer, Mapping):
        name = as_text(employer.get("name"))
        if name is None:
            return None
        org: dict[str, Any] = {"@type": "Organization", "name": name}
        url = as_text(employer.get("url"))
        if url:
            org["url"] = url
        return org

    name = as_text(employer)
    if name is None:
        return None
    return {"@type": "Organization", "name": name}


def _same_as(record: Record) -> list | None:
    explicit = non_empty_list(record, "sameAs")
    if explicit:
        return explicit
    profiles = [
        profile
        for profile in (text(record, field) for field in SOCIAL_PROFILE_FIELDS)
        if profile
    ]
    return profiles or None


def generate_person_structured_data(record: Record) -> dict[str, Any]:
    data = base_object("Person")
    data["name"] = text(record, "name") or ""
    data["description"] = text(record, "bio")
    data["url"] = text(record, "url")
    data["image"] = PROFILE_IMAGE.resolve(record).url
    data["jobTitle"] = text(record, "jobTitle")
    data["worksFor"] = _works_for(record)
    data["knowsAbout"] = non_empty_list(record, "expertiseAreas")
    data["sameAs"] = _same_as(record)

    return prune_top_level(data)
