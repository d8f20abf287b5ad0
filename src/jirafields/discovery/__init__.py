"""Dynamic (custom) field discovery."""

from jirafields.discovery.cache import CacheEntry, DynamicFieldCache, build_cache_key
from jirafields.discovery.mapping import custom_field_definitions, to_field_definition

__all__ = [
    "CacheEntry",
    "DynamicFieldCache",
    "build_cache_key",
    "custom_field_definitions",
    "to_field_definition",
]
