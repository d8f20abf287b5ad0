"""Static field catalog.

Immutable field definitions and pre-computed suggestion tables for every
supported entity type. Everything here is built once at import time.
"""

from __future__ import annotations

from jirafields.catalog.agile import AGILE_FIELDS, AGILE_SUGGESTIONS
from jirafields.catalog.issue import ISSUE_FIELDS, ISSUE_SUGGESTIONS
from jirafields.catalog.project import PROJECT_FIELDS, PROJECT_SUGGESTIONS
from jirafields.catalog.user import USER_FIELDS, USER_SUGGESTIONS
from jirafields.core.types import EntityType, FieldDefinition, StaticSuggestionData

CATALOG_VERSION = "1.0.0"

STATIC_FIELDS: dict[EntityType, tuple[FieldDefinition, ...]] = {
    EntityType.ISSUE: ISSUE_FIELDS,
    EntityType.PROJECT: PROJECT_FIELDS,
    EntityType.USER: USER_FIELDS,
    EntityType.AGILE: AGILE_FIELDS,
}

SUGGESTION_DATA: dict[EntityType, StaticSuggestionData] = {
    EntityType.ISSUE: ISSUE_SUGGESTIONS,
    EntityType.PROJECT: PROJECT_SUGGESTIONS,
    EntityType.USER: USER_SUGGESTIONS,
    EntityType.AGILE: AGILE_SUGGESTIONS,
}


def get_static_fields(entity_type: str) -> tuple[FieldDefinition, ...]:
    """Static field definitions for an entity type, empty when unsupported."""
    parsed = EntityType.parse(entity_type)
    if parsed is None:
        return ()
    return STATIC_FIELDS[parsed]


def get_suggestion_data(entity_type: str) -> StaticSuggestionData | None:
    """Suggestion tables for an entity type, None when unsupported."""
    parsed = EntityType.parse(entity_type)
    if parsed is None:
        return None
    return SUGGESTION_DATA[parsed]


__all__ = [
    "CATALOG_VERSION",
    "STATIC_FIELDS",
    "SUGGESTION_DATA",
    "get_static_fields",
    "get_suggestion_data",
]
