"""Shared helpers for schema.org JSON-LD generation."""

import json
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any

from seoscore.config import get_settings
from seoscore.validation.helpers import as_list, as_number, as_text, get_field

SCHEMA_CONTEXT = "https://schema.org"


def base_object(schema_type: str) -> dict[str, Any]:
    return {"@context": SCHEMA_CONTEXT, "@type": schema_type}


def prune_top_level(data: dict[str, Any]) -> dict[str, Any]:
    """Drop top-level keys whose value is None.

    Nested objects are left exactly as built, None members included.
    """
    return {key: value for key, value in data.items() if value is not None}


def to_date_string(value: Any) -> str | None:
    """Date-only ISO string from a string, date or datetime."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    text = as_text(value)
    if text is not None:
        return text.split("T")[0]
    return None


def utc_now_iso() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def text(record: Any, name: str) -> str | None:
    return as_text(get_field(record, name))


def number(record: Any, name: str) -> float | None:
    return as_number(get_field(record, name))


def non_empty_list(record: Any, name: str) -> list | None:
    items = as_list(get_field(record, name))
    return items or None


def relation_text(record: Any, relation: str, key: str) -> str | None:
    """Read ``record[relation][key]`` when the relation is a mapping."""
    related = get_field(record, relation)
    if isinstance(related, Mapping):
        return as_text(related.get(key))
    return None


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (set, tuple)):
        return list(value)
    return str(value)


def to_json_ld(data: Mapping[str, Any], indent: int | None = None) -> str:
    """Serialize a generated object for a structured-data preview."""
    if indent is None:
        indent = get_settings().json_ld_indent
    return json.dumps(data, indent=indent, ensure_ascii=False, default=_json_default)
