"""Static suggestion engine for field names.

Ranks candidate field names for a possibly misspelled input using only the
static catalog. No network access and no mutable state after construction.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from jirafields.catalog import STATIC_FIELDS, SUGGESTION_DATA
from jirafields.core.types import (
    EntityType,
    FieldDefinition,
    FieldUsage,
    Frequency,
    StaticSuggestionData,
    SuggestionMetadata,
    SuggestionResult,
)
from jirafields.exceptions import UnsupportedEntityTypeError
from jirafields.suggestions.similarity import similarity

DEFAULT_THRESHOLD = 0.2
DEFAULT_MAX_SUGGESTIONS = 10

SIMILARITY_WEIGHT = 0.6
FREQUENCY_WEIGHT = 0.2
AVAILABILITY_WEIGHT = 0.2
PREFIX_BONUS = 0.3

FREQUENCY_SCORES: dict[str, float] = {"high": 0.8, "medium": 0.6, "low": 0.4}
NEUTRAL_FREQUENCY: Frequency = "medium"
NEUTRAL_AVAILABILITY = 0.5


@dataclass(frozen=True)
class _EntityIndex:
    """Lookup tables derived once per entity type."""

    data: StaticSuggestionData
    typos: dict[str, str]
    candidates: tuple[str, ...]
    contextual_rank: dict[str, int]


def _build_index(
    data: StaticSuggestionData, fields: tuple[FieldDefinition, ...]
) -> _EntityIndex:
    typos = {key.casefold(): target for key, target in data.typo_corrections.items()}

    # Ordered, de-duplicated union of every known name
    pool: dict[str, None] = {}
    for name in data.contextual_suggestions:
        pool.setdefault(name)
    for name in data.usage_statistics:
        pool.setdefault(name)
    for field in fields:
        for access_path in field.access_paths:
            pool.setdefault(access_path.path)
    for target in typos.values():
        pool.setdefault(target)

    ranks: dict[str, int] = {}
    for position, name in enumerate(data.contextual_suggestions, start=1):
        ranks.setdefault(name, position)

    return _EntityIndex(
        data=data,
        typos=typos,
        candidates=tuple(pool),
        contextual_rank=ranks,
    )


class StaticSuggestionEngine:
    """Suggests field names from pre-computed static tables.

    Candidates are scored by a weighted mix of string similarity, observed
    usage frequency and availability. A known typo is always ranked first.

    Example:
        engine = StaticSuggestionEngine()
        engine.suggest("issue", "stat", 5)  # ['status', ...]
    """

    def __init__(
        self,
        threshold: float = DEFAULT_THRESHOLD,
        suggestion_data: Mapping[EntityType, StaticSuggestionData] | None = None,
        static_fields: Mapping[EntityType, tuple[FieldDefinition, ...]] | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            threshold: Minimum match score a candidate needs to be returned
            suggestion_data: Per-entity suggestion tables (defaults to the catalog)
            static_fields: Per-entity static fields (defaults to the catalog)
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be between 0 and 1, got {threshold}")
        self._threshold = threshold
        data = SUGGESTION_DATA if suggestion_data is None else suggestion_data
        fields = STATIC_FIELDS if static_fields is None else static_fields
        self._indexes: dict[EntityType, _EntityIndex] = {
            entity_type: _build_index(entity_data, tuple(fields.get(entity_type, ())))
            for entity_type, entity_data in data.items()
        }

    @property
    def threshold(self) -> float:
        """Minimum match score for a candidate to be returned."""
        return self._threshold

    def supported_entity_types(self) -> list[str]:
        """Entity types this engine has tables for."""
        return [entity_type.value for entity_type in self._indexes]

    def calculate_similarity(self, a: str, b: str) -> float:
        """Case-insensitive normalized Levenshtein similarity."""
        return similarity(a, b)

    def suggest(
        self,
        entity_type: str,
        input: str,
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
    ) -> list[str]:
        """Suggest field names for a possibly misspelled input.

        Args:
            entity_type: One of issue, project, user, agile
            input: Field name as typed by the caller
            max_suggestions: Maximum number of names to return

        Returns:
            Field names, best first

        Raises:
            UnsupportedEntityTypeError: If the entity type has no tables
        """
        results = self.suggest_with_metadata(entity_type, input, max_suggestions)
        return [result.field for result in results]

    def suggest_with_metadata(
        self,
        entity_type: str,
        input: str,
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
        min_similarity: float | None = None,
    ) -> list[SuggestionResult]:
        """Like ``suggest`` but returns scores and their breakdown.

        Args:
            entity_type: One of issue, project, user, agile
            input: Field name as typed by the caller
            max_suggestions: Maximum number of results
            min_similarity: Overrides the engine threshold for this call

        Returns:
            Ranked suggestion results
        """
        index = self._index_for(entity_type)
        query = input.strip() if isinstance(input, str) else ""
        if not query or max_suggestions <= 0:
            return []

        threshold = self._threshold if min_similarity is None else min_similarity
        results: list[SuggestionResult] = []

        typo_target = index.typos.get(query.casefold())
        if typo_target is not None:
            results.append(self._typo_result(index, typo_target))

        lowered = query.lower()
        scored: list[SuggestionResult] = []
        for candidate in index.candidates:
            if candidate == typo_target:
                continue
            match = similarity(query, candidate)
            if candidate.lower().startswith(lowered):
                match = min(1.0, match + PREFIX_BONUS)
            if match < threshold:
                continue
            scored.append(self._scored_result(index, candidate, match))

        last = len(index.contextual_rank) + 1
        scored.sort(
            key=lambda r: (
                -round(r.score, 6),
                r.metadata.contextual_rank or last,
                r.field,
            )
        )
        results.extend(scored)
        return results[:max_suggestions]

    def custom_field_hints(self, entity_type: str, input: str) -> list[str]:
        """Candidate custom field ids whose keyword matches the input.

        ``"Story Points"``, ``"story-points"`` and ``"story_points"`` all match
        the ``story_points`` keyword.
        """
        index = self._index_for(entity_type)
        if not isinstance(input, str):
            return []
        normalized = input.strip().lower().replace(" ", "_").replace("-", "_")
        if not normalized:
            return []

        hints: dict[str, None] = {}
        for keyword, field_ids in index.data.custom_field_patterns.items():
            if keyword in normalized or normalized in keyword:
                for field_id in field_ids:
                    hints.setdefault(field_id)
        return list(hints)

    def _index_for(self, entity_type: str) -> _EntityIndex:
        parsed = EntityType.parse(entity_type)
        if parsed is None or parsed not in self._indexes:
            raise UnsupportedEntityTypeError(entity_type, self.supported_entity_types())
        return self._indexes[parsed]

    def _usage(self, index: _EntityIndex, candidate: str) -> FieldUsage | None:
        stats = index.data.usage_statistics
        if candidate in stats:
            return stats[candidate]
        # Nested paths inherit the usage of their top-level field
        root = candidate.split(".", 1)[0].removesuffix("[]")
        return stats.get(root)

    def _typo_result(self, index: _EntityIndex, target: str) -> SuggestionResult:
        usage = self._usage(index, target)
        return SuggestionResult(
            field=target,
            score=1.0,
            metadata=SuggestionMetadata(
                similarity=1.0,
                frequency=usage.frequency if usage else NEUTRAL_FREQUENCY,
                availability=usage.availability if usage else NEUTRAL_AVAILABILITY,
                is_typo_correction=True,
                contextual_rank=index.contextual_rank.get(target),
            ),
        )

    def _scored_result(
        self, index: _EntityIndex, candidate: str, match: float
    ) -> SuggestionResult:
        usage = self._usage(index, candidate)
        frequency = usage.frequency if usage else NEUTRAL_FREQUENCY
        availability = usage.availability if usage else NEUTRAL_AVAILABILITY
        score = (
            SIMILARITY_WEIGHT * match
            + FREQUENCY_WEIGHT * FREQUENCY_SCORES[frequency]
            + AVAILABILITY_WEIGHT * availability
        )
        return SuggestionResult(
            field=candidate,
            score=score,
            metadata=SuggestionMetadata(
                similarity=match,
                frequency=frequency,
                availability=availability,
                contextual_rank=index.contextual_rank.get(candidate),
            ),
        )
