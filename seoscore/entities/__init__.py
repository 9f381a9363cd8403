"""Per-entity SEO configs."""

from seoscore.entities.article import (
    ARTICLE_CONFIG,
    create_article_config,
    get_article_config,
)
from seoscore.entities.base import EntityConfig, FieldConfig, StructuredDataGenerator
from seoscore.entities.organization import (
    ORGANIZATION_CONFIG,
    create_organization_config,
    get_organization_config,
)
from seoscore.entities.person import PERSON_CONFIG, create_person_config, get_person_config
from seoscore.entities.registry import (
    ENTITY_ALIASES,
    ENTITY_TYPES,
    generate_structured_data,
    get_entity_config,
    resolve_entity_type,
)
from seoscore.entities.taxonomy import (
    CATEGORY_CONFIG,
    INDUSTRY_CONFIG,
    TAG_CONFIG,
    create_category_config,
    create_industry_config,
    create_tag_config,
    get_category_config,
    get_industry_config,
    get_tag_config,
)

__all__ = [
    "ARTICLE_CONFIG",
    "CATEGORY_CONFIG",
    "ENTITY_ALIASES",
    "ENTITY_TYPES",
    "INDUSTRY_CONFIG",
    "ORGANIZATION_CONFIG",
    "PERSON_CONFIG",
    "TAG_CONFIG",
    "EntityConfig",
    "FieldConfig",
    "StructuredDataGenerator",
    "create_article_config",
    "create_category_config",
    "create_industry_config",
    "create_organization_config",
    "create_person_config",
    "create_tag_config",
    "generate_structured_data",
    "get_article_config",
    "get_category_config",
    "get_entity_config",
    "get_industry_config",
    "get_organization_config",
    "get_person_config",
    "get_tag_config",
    "resolve_entity_type",
]
