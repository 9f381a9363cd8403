"""schema.org structured-data generators."""

from seoscore.structured_data.article import generate_article_structured_data
from seoscore.structured_data.collection import (
    generate_category_structured_data,
    generate_collection_structured_data,
    generate_industry_structured_data,
    generate_tag_structured_data,
)
from seoscore.structured_data.common import (
    SCHEMA_CONTEXT,
    prune_top_level,
    to_date_string,
    to_json_ld,
)
from seoscore.structured_data.organization import generate_organization_structured_data
from seoscore.structured_data.person import generate_person_structured_data

__all__ = [
    "SCHEMA_CONTEXT",
    "generate_article_structured_data",
    "generate_category_structured_data",
    "generate_collection_structured_data",
    "generate_industry_structured_data",
    "generate_organization_structured_data",
    "generate_person_structured_data",
    "generate_tag_structured_data",
    "prune_top_level",
    "to_date_string",
    "to_json_ld",
]
