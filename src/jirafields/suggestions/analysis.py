"""Usage analysis over sampled entity records.

Used to regenerate the usage statistics of the static catalog from real data,
e.g. a JSON dump of issues returned by the search API.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

from jirafields.catalog import get_suggestion_data
from jirafields.core.types import EntityType, FieldUsage, Frequency, StaticSuggestionData
from jirafields.exceptions import UnsupportedEntityTypeError

HIGH_AVAILABILITY = 0.8
MEDIUM_AVAILABILITY = 0.3


def _frequency_for(availability: float) -> Frequency:
    if availability >= HIGH_AVAILABILITY:
        return "high"
    if availability >= MEDIUM_AVAILABILITY:
        return "medium"
    return "low"


def _record_fields(record: Mapping[str, Any], entity_type: EntityType) -> Mapping[str, Any]:
    # Issues keep their data under "fields"; other entities are flat
    if entity_type is EntityType.ISSUE:
        fields = record.get("fields")
        return fields if isinstance(fields, Mapping) else {}
    return record


def analyze_field_usage(
    entities: Iterable[Mapping[str, Any]], entity_type: str
) -> dict[str, FieldUsage]:
    """Count how often each top-level field carries a non-null value.

    Args:
        entities: Sampled records as returned by the REST API
        entity_type: Entity type the records belong to

    Returns:
        Usage per field name, with availability as the presence rate

    Raises:
        UnsupportedEntityTypeError: If the entity type is unknown
    """
    parsed = EntityType.parse(entity_type)
    if parsed is None:
        raise UnsupportedEntityTypeError(entity_type, EntityType.values())

    counts: Counter[str] = Counter()
    total = 0
    for record in entities:
        if not isinstance(record, Mapping):
            continue
        total += 1
        for name, value in _record_fields(record, parsed).items():
            if value is not None:
                counts[name] += 1

    if total == 0:
        return {}

    usage: dict[str, FieldUsage] = {}
    for name in sorted(counts):
        availability = counts[name] / total
        usage[name] = FieldUsage(frequency=_frequency_for(availability), availability=availability)
    return usage


def top_used_fields(usage: Mapping[str, FieldUsage], limit: int) -> list[str]:
    """Field names by availability, most available first (ties by name)."""
    if limit <= 0:
        return []
    ranked = sorted(usage.items(), key=lambda item: (-item[1].availability, item[0]))
    return [name for name, _ in ranked[:limit]]


def build_suggestion_data(
    entity_type: str,
    entities: Iterable[Mapping[str, Any]],
    limit: int | None = None,
) -> StaticSuggestionData:
    """Rebuild suggestion tables for an entity type from sampled records.

    Typo corrections and custom field patterns are taken from the catalog;
    usage statistics and contextual ordering come from the samples.

    Args:
        entity_type: Entity type the records belong to
        entities: Sampled records
        limit: Keep only the ``limit`` most available fields (all when None)

    Returns:
        Freshly analysed suggestion data
    """
    base = get_suggestion_data(entity_type)
    if base is None:
        raise UnsupportedEntityTypeError(entity_type, EntityType.values())

    usage = analyze_field_usage(entities, entity_type)
    ordered = top_used_fields(usage, len(usage) if limit is None else limit)

    return StaticSuggestionData(
        entity_type=base.entity_type,
        typo_corrections=dict(base.typo_corrections),
        usage_statistics={name: usage[name] for name in ordered},
        contextual_suggestions=ordered,
        custom_field_patterns={k: list(v) for k, v in base.custom_field_patterns.items()},
        last_analyzed=datetime.now(UTC),
    )
