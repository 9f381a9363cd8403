"""Organization JSON-LD for client records."""

from typing import Any

from seoscore.structured_data.common import (
    base_object,
    non_empty_list,
    prune_top_level,
    text,
    to_date_string,
)
from seoscore.validation.helpers import LOGO_IMAGE, get_field
from seoscore.validation.results import Record


def _contact_point(record: Record) -> dict[str, Any] | None:
    email = text(record, "email")
    phone = text(record, "phone")
    if not (email or phone):
        return None

    contact_point: dict[str, Any] = {"@type": "ContactPoint"}
    contact_type = text(record, "contactType")
    if contact_type:
        contact_point["contactType"] = contact_type
    if email:
        contact_point["email"] = email
    if phone:
        contact_point["telephone"] = phone
    return contact_point


def _postal_address(record: Record) -> dict[str, Any] | None:
    street = text(record, "addressStreet")
    city = text(record, "addressCity")
    country = text(record, "addressCountry")
    if not (street or city or country):
        return None

    address: dict[str, Any] = {"@type": "PostalAddress"}
    if street:
        address["streetAddress"] = street
    if city:
        address["addressLocality"] = city
    if country:
        address["addressCountry"] = country
    postal_code = text(record, "addressPostalCode")
    if postal_code:
        address["postalCode"] = postal_code
    return address


def generate_organization_structured_data(record: Record) -> dict[str, Any]:
    """Build an Organization object from a client record.

    The description prefers the long-form ``description`` and falls back
    to ``seoDescription``. ContactPoint and PostalAddress are only built
    when at least one of their source fields is set.
    """
    data = base_object("Organization")
    data["name"] = text(record, "name")
    data["legalName"] = text(record, "legalName")
    data["url"] = text(record, "url")
    data["logo"] = LOGO_IMAGE.resolve(record).url
    data["description"] = text(record, "description") or text(record, "seoDescription")
    data["foundingDate"] = to_date_string(get_field(record, "foundingDate"))
    data["contactPoint"] = _contact_point(record)
    data["address"] = _postal_address(record)
    data["sameAs"] = non_empty_list(record, "sameAs")

    return prune_top_level(data)
