"""Entity config lookup by type name."""

from collections.abc import Callable
from typing import Any

import structlog

from seoscore.entities.article import ARTICLE_CONFIG, create_article_config
from seoscore.entities.base import EntityConfig
from seoscore.entities.organization import (
    ORGANIZATION_CONFIG,
    create_organization_config,
)
from seoscore.entities.person import PERSON_CONFIG, create_person_config
from seoscore.entities.taxonomy import (
    CATEGORY_CONFIG,
    INDUSTRY_CONFIG,
    TAG_CONFIG,
    create_category_config,
    create_industry_config,
    create_tag_config,
)
from seoscore.exceptions import UnknownEntityTypeError
from seoscore.seo_settings import SEOSettings
from seoscore.validation.results import Record

logger = structlog.get_logger(__name__)

# Canonical type -> (default config, factory)
_REGISTRY: dict[str, tuple[EntityConfig, Callable[[SEOSettings | None], EntityConfig]]] = {
    "Organization": (ORGANIZATION_CONFIG, create_organization_config),
    "Article": (ARTICLE_CONFIG, create_article_config),
    "Person": (PERSON_CONFIG, create_person_config),
    "Category": (CATEGORY_CONFIG, create_category_config),
    "Tag": (TAG_CONFIG, create_tag_config),
    "Industry": (INDUSTRY_CONFIG, create_industry_config),
}

ENTITY_TYPES: tuple[str, ...] = tuple(_REGISTRY)

# Names the admin screens use for the same entities
ENTITY_ALIASES = {
    "client": "Organization",
    "author": "Person",
}

_BY_LOWER_NAME = {name.lower(): name for name in ENTITY_TYPES}


def resolve_entity_type(entity_type: str) -> str:
    """Map a type name or alias (any case) to its canonical entity type."""
    key = entity_type.strip().lower() if isinstance(entity_type, str) else ""
    canonical = _BY_LOWER_NAME.get(key) or ENTITY_ALIASES.get(key)
    if canonical is None:
        raise UnknownEntityTypeError(str(entity_type), known=list(ENTITY_TYPES))
    return canonical


def get_entity_config(
    entity_type: str, settings: SEOSettings | None = None
) -> EntityConfig:
    """Get the config for an entity type.

    Without settings the shared default config is returned; with settings
    a fresh config is built so threshold-sensitive validators pick them up.

    Raises:
        UnknownEntityTypeError: if the type is not registered.
    """
    canonical = resolve_entity_type(entity_type)
    default, factory = _REGISTRY[canonical]
    if settings is None:
        return default

    logger.debug("seo_config_built", entity_type=canonical)
    return factory(settings)


def generate_structured_data(entity_type: str, record: Record) -> dict[str, Any]:
    """Generate JSON-LD for a record of the given entity type."""
    return get_entity_config(entity_type).generate_structured_data(record)
