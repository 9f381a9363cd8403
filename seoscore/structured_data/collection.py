"""CollectionPage JSON-LD for taxonomy records (categories, tags, industries)."""

from typing import Any

from seoscore.structured_data.common import base_object, prune_top_level, text
from seoscore.validation.results import Record


def generate_collection_structured_data(record: Record) -> dict[str, Any]:
    """Build a CollectionPage about a DefinedTerm.

    The nested ``about`` term keeps its description key even when it is
    None; only top-level keys are pruned.
    """
    name = text(record, "name") or ""
    description = text(record, "description")

    data = base_object("CollectionPage")
    data["name"] = name
    data["description"] = description
    data["url"] = text(record, "canonicalUrl")
    data["about"] = {
        "@type": "DefinedTerm",
        "name": name,
        "description": description,
    }

    return prune_top_level(data)


generate_category_structured_data = generate_collection_structured_data
generate_tag_structured_data = generate_collection_structured_data
generate_industry_structured_data = generate_collection_structured_data
