"""Fusion of static and dynamic field definitions into resource documents."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime

from jirafields.catalog import CATALOG_VERSION, get_static_fields
from jirafields.core.types import EntityType, FieldDefinition, ResourceDocument
from jirafields.discovery.cache import DynamicFieldCache

logger = logging.getLogger(__name__)


def resource_uri(entity_type: str) -> str:
    """URI of the field resource for an entity type."""
    return f"jira://{entity_type}/fields"


def build_path_index(fields: Iterable[FieldDefinition]) -> dict[str, str]:
    """Map every access path to the id of the field that owns it.

    Later fields win on collision; collisions between different fields are
    logged as warnings.
    """
    index: dict[str, str] = {}
    for field in fields:
        for access_path in field.access_paths:
            previous = index.get(access_path.path)
            if previous is not None and previous != field.id:
                logger.warning(
                    "Access path claimed by more than one field",
                    extra={"path": access_path.path, "previous": previous, "field_id": field.id},
                )
            index[access_path.path] = field.id
    return index


def fuse_field_definitions(
    entity_type: str,
    static_fields: Sequence[FieldDefinition],
    dynamic_fields: Sequence[FieldDefinition],
    dynamic_consulted: bool,
) -> ResourceDocument:
    """Merge static and dynamic definitions into a new resource document.

    Static definitions win on id collision. The path index is built from the
    static fields first, then the dynamic ones.

    Args:
        entity_type: Entity type the document describes
        static_fields: Catalog definitions
        dynamic_fields: Discovered custom field definitions
        dynamic_consulted: Whether discovery was attempted for this document

    Returns:
        A freshly built document
    """
    fields: dict[str, FieldDefinition] = {field.id: field for field in static_fields}
    fused_dynamic: list[FieldDefinition] = []
    for field in dynamic_fields:
        if field.id in fields:
            logger.info(
                "Dynamic field shadowed by static definition",
                extra={"entity_type": entity_type, "field_id": field.id},
            )
            continue
        fields[field.id] = field
        fused_dynamic.append(field)

    now = datetime.now(UTC)
    return ResourceDocument(
        uri=resource_uri(entity_type),
        entity_type=entity_type,
        version=CATALOG_VERSION,
        last_updated=now,
        total_fields=len(fields),
        fields=fields,
        path_index=build_path_index([*static_fields, *fused_dynamic]),
        dynamic_fields=len(fused_dynamic),
        last_dynamic_update=now if dynamic_consulted else None,
    )


class HybridResourceBuilder:
    """Builds fused field documents from the static catalog and the cache.

    Example:
        builder = HybridResourceBuilder(cache)
        doc = await builder.build_resource_document("issue", dynamic_enabled=True)
    """

    def __init__(self, cache: DynamicFieldCache | None = None) -> None:
        """Initialize the builder.

        Args:
            cache: Dynamic field cache; without one, documents are static only
        """
        self._cache = cache

    @property
    def cache(self) -> DynamicFieldCache | None:
        return self._cache

    async def build_resource_document(
        self, entity_type: str, dynamic_enabled: bool = False
    ) -> ResourceDocument:
        """Build the fused document for an entity type.

        Supported entity types are normalized (e.g. " Issue " becomes
        "issue"). Unknown entity types produce a document with no static fields.
        Discovery failures produce a static-only document. Never raises for
        either.
        """
        parsed = EntityType.parse(entity_type)
        if parsed is not None:
            entity_type = parsed.value
        static_fields = get_static_fields(entity_type)
        consult = False
        dynamic_fields: list[FieldDefinition] = []
        if dynamic_enabled and self._cache is not None:
            consult = True
            dynamic_fields = await self._cache.discover_dynamic_fields(entity_type)

        document = fuse_field_definitions(
            entity_type, static_fields, dynamic_fields, dynamic_consulted=consult
        )
        logger.debug(
            "Built resource document",
            extra={
                "entity_type": entity_type,
                "total_fields": document.total_fields,
                "dynamic_fields": document.dynamic_fields,
            },
        )
        return document
