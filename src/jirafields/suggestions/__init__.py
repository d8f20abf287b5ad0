"""Field name suggestions."""

from jirafields.suggestions.analysis import (
    analyze_field_usage,
    build_suggestion_data,
    top_used_fields,
)
from jirafields.suggestions.engine import StaticSuggestionEngine
from jirafields.suggestions.similarity import levenshtein_distance, similarity

__all__ = [
    "StaticSuggestionEngine",
    "analyze_field_usage",
    "build_suggestion_data",
    "levenshtein_distance",
    "similarity",
    "top_used_fields",
]
