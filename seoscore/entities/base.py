"""Declarative entity config types."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from seoscore.validation.results import FieldValidator, Record

StructuredDataGenerator = Callable[[Record], dict[str, Any]]


@dataclass(frozen=True)
class FieldConfig:
    """One ordered check in an entity config.

    ``name`` is the record key handed to the validator as its value. Names
    may repeat within a config; each entry is an independent check.
    """

    name: str
    label: str
    validator: FieldValidator


@dataclass(frozen=True)
class EntityConfig:
    """Ordered field checks, score ceiling and JSON-LD generator for one entity."""

    entity_type: str
    max_score: float
    fields: tuple[FieldConfig, ...]
    generate_structured_data: StructuredDataGenerator

    def __post_init__(self) -> None:
        # Accept any iterable of fields but store an immutable tuple
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def field_names(self) -> list[str]:
        """Field names in order, duplicates included."""
        return [f.name for f in self.fields]

    @property
    def labels(self) -> list[str]:
        return [f.label for f in self.fields]

    def to_dict(self) -> dict:
        return {
            "entity_type": self.entity_type,
            "max_score": self.max_score,
            "fields": [{"name": f.name, "label": f.label} for f in self.fields],
        }
