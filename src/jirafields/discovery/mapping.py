"""Conversion of raw remote field records into field definitions."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from jirafields.core.types import AccessPath, FieldDefinition, FieldKind

logger = logging.getLogger(__name__)

_OBJECT_SCHEMA_TYPES = frozenset(
    {"object", "project", "user", "issuetype", "priority", "resolution", "status"}
)
_VALUE_TYPES = {"number": "number", "boolean": "boolean", "array": "array", "object": "object"}


def field_kind(schema_type: object) -> FieldKind:
    """Classify a remote schema type as string, object or array."""
    if not isinstance(schema_type, str):
        return "string"
    lowered = schema_type.lower()
    if lowered == "array":
        return "array"
    if lowered in _OBJECT_SCHEMA_TYPES:
        return "object"
    return "string"


def value_type(schema_type: object) -> str:
    """JSON type of the value a remote schema type holds (dates are strings)."""
    if not isinstance(schema_type, str):
        return "string"
    return _VALUE_TYPES.get(schema_type.lower(), "string")


def _non_empty_str(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


def to_field_definition(record: dict[str, Any]) -> FieldDefinition | None:
    """Map one remote record to a dynamic field definition.

    Returns None, with a warning, when ``id`` or ``name`` is not a non-empty
    string.
    """
    field_id = record.get("id")
    name = record.get("name")
    if not _non_empty_str(field_id):
        logger.warning(
            "Skipping malformed field record: invalid id",
            extra={"record": record},
        )
        return None
    if not _non_empty_str(name):
        logger.warning(
            "Skipping malformed field record: invalid name",
            extra={"record": record},
        )
        return None

    schema = record.get("schema")
    schema_type = schema.get("type") if isinstance(schema, dict) else None
    return FieldDefinition(
        id=field_id,
        name=name,
        description=f"Dynamic custom field: {name}",
        type=field_kind(schema_type),
        access_paths=(
            AccessPath(
                path=field_id,
                description=f"Access {name} value",
                type=value_type(schema_type),
                frequency="medium",
            ),
        ),
        examples=(field_id,),
        common_usage=((field_id,),),
        source="dynamic",
        confidence="high",
    )


def custom_field_definitions(records: Iterable[object]) -> list[FieldDefinition]:
    """Keep custom records and map them, skipping malformed ones."""
    definitions: list[FieldDefinition] = []
    for record in records:
        if not isinstance(record, dict) or not record.get("custom"):
            continue
        definition = to_field_definition(record)
        if definition is not None:
            definitions.append(definition)
    return definitions
