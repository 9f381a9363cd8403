"""Custom exceptions.

Record data never raises: bad or missing values degrade to low scores.
These exceptions cover caller mistakes only (unknown entity types,
invalid threshold settings).
"""

from typing import Any


class SeoScoreError(Exception):
    """Base exception for the scoring engine."""

    def __init__(
        self,
        message: str,
        code: str = "error",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class UnknownEntityTypeError(SeoScoreError):
    """No entity config is registered for the requested type."""

    def __init__(self, entity_type: str, known: list[str] | None = None):
        details: dict[str, Any] = {"entity_type": entity_type}
        if known:
            details["known"] = known
        super().__init__(
            message=f"No SEO config registered for entity type '{entity_type}'",
            code="unknown_entity_type",
            details=details,
        )


class SettingsError(SeoScoreError):
    """Threshold settings are invalid."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(
            message=message,
            code="settings_error",
            details=details,
        )
