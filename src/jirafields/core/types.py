"""Core types for jirafields.

All types are designed to be JSON-serializable for agent consumption.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Frequency = Literal["high", "medium", "low"]
Confidence = Literal["high", "medium", "low"]
FieldSource = Literal["static", "dynamic"]
FieldKind = Literal["string", "object", "array"]


class EntityType(StrEnum):
    """Entity types with a field catalog."""

    ISSUE = "issue"
    PROJECT = "project"
    USER = "user"
    AGILE = "agile"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid entity type values."""
        return [t.value for t in cls]

    @classmethod
    def parse(cls, value: object) -> EntityType | None:
        """Return the matching member, or None for anything outside the set.

        Matching ignores case and surrounding whitespace.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class AccessPath(BaseModel):
    """A dot-notation route to a value nested inside a field."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Dot-notation path, e.g. 'status.statusCategory.key'")
    description: str = ""
    type: str = Field(default="string", description="JSON type of the value at this path")
    frequency: Frequency = "medium"


class FieldDefinition(BaseModel):
    """A named, typed attribute of a tracked entity with all its access paths."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable identifier, e.g. 'customfield_10001'")
    name: str
    description: str = ""
    type: FieldKind = "string"
    access_paths: tuple[AccessPath, ...] = ()
    examples: tuple[str, ...] = ()
    common_usage: tuple[tuple[str, ...], ...] = ()
    source: FieldSource = "static"
    confidence: Confidence = "high"


class ResourceDocument(BaseModel):
    """Fused field catalog for one entity type (output format)."""

    uri: str
    entity_type: str
    version: str
    last_updated: datetime
    total_fields: int
    fields: dict[str, FieldDefinition]
    path_index: dict[str, str]
    dynamic_fields: int = 0
    last_dynamic_update: datetime | None = None


class ResourceInfo(BaseModel):
    """Resource descriptor for discovery."""

    uri: str
    name: str
    description: str
    mime_type: str = "application/json"


class FieldUsage(BaseModel):
    """Observed usage of a field in sampled data."""

    model_config = ConfigDict(frozen=True)

    frequency: Frequency
    availability: float = Field(..., ge=0.0, le=1.0)


class StaticSuggestionData(BaseModel):
    """Pre-computed suggestion tables for one entity type."""

    model_config = ConfigDict(frozen=True)

    entity_type: EntityType
    typo_corrections: dict[str, str]
    usage_statistics: dict[str, FieldUsage]
    contextual_suggestions: list[str]
    custom_field_patterns: dict[str, list[str]] = Field(default_factory=dict)
    last_analyzed: datetime


class SuggestionMetadata(BaseModel):
    """Scoring breakdown of a suggestion."""

    similarity: float
    frequency: Frequency
    availability: float
    is_typo_correction: bool = False
    contextual_rank: int | None = None


class SuggestionResult(BaseModel):
    """A ranked field suggestion."""

    field: str
    score: float
    metadata: SuggestionMetadata


class PathInfo(BaseModel):
    """Details about a valid field path."""

    field_id: str
    type: str
    description: str


class BatchValidationResult(BaseModel):
    """Result of validating several field paths for one entity type."""

    is_valid: bool
    valid_paths: list[str] = Field(default_factory=list)
    invalid_paths: list[str] = Field(default_factory=list)
    error: str | None = None
    path_info: dict[str, PathInfo] = Field(default_factory=dict)
    suggestions: dict[str, list[str]] = Field(default_factory=dict)
