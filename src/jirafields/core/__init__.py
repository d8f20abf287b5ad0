"""Core components for jirafields."""

from jirafields.core.types import (
    AccessPath,
    BatchValidationResult,
    EntityType,
    FieldDefinition,
    FieldUsage,
    PathInfo,
    ResourceDocument,
    ResourceInfo,
    StaticSuggestionData,
    SuggestionMetadata,
    SuggestionResult,
)

__all__ = [
    "AccessPath",
    "BatchValidationResult",
    "EntityType",
    "FieldDefinition",
    "FieldUsage",
    "PathInfo",
    "ResourceDocument",
    "ResourceInfo",
    "StaticSuggestionData",
    "SuggestionMetadata",
    "SuggestionResult",
]
