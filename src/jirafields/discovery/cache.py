"""Dynamic field cache.

Discovers custom fields through a remote field source and keeps them per
entity type with TTL expiry, LRU eviction and single-flight fetching: at most
one upstream call per cache key is in flight, concurrent callers share it.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeGuard

from jirafields.client.provider import RemoteFieldSource
from jirafields.core.types import FieldDefinition
from jirafields.discovery.mapping import custom_field_definitions
from jirafields.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3600
DEFAULT_MAX_ENTRIES = 100


def build_cache_key(entity_type: str) -> str:
    """Cache key for an entity type, e.g. ``issue-fields``."""
    return f"{entity_type.strip().lower()}-fields"


def is_valid_entity_type(entity_type: object) -> TypeGuard[str]:
    return isinstance(entity_type, str) and bool(entity_type.strip())


@dataclass
class CacheEntry:
    """Cached discovery result for one key. Replaced wholesale on refresh."""

    key: str
    fields: list[FieldDefinition]
    timestamp: float
    last_accessed: float


class DynamicFieldCache:
    """Per-instance cache of dynamically discovered custom fields.

    Expiry is judged by the time an entry was stored; eviction picks the entry
    with the oldest ``last_accessed``. Failed fetches are never cached.

    Example:
        cache = DynamicFieldCache(JiraFieldClient(url, token), ttl_seconds=600)
        fields = await cache.discover_dynamic_fields("issue")
    """

    def __init__(
        self,
        source: RemoteFieldSource,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            source: Where custom field records come from
            ttl_seconds: Lifetime of an entry in seconds (>= 1)
            max_entries: Maximum number of cached keys (>= 1)
            clock: Monotonic time source in seconds

        Raises:
            ConfigurationError: If ttl_seconds or max_entries is out of range
        """
        if isinstance(ttl_seconds, bool) or not isinstance(ttl_seconds, int) or ttl_seconds < 1:
            raise ConfigurationError(
                f"Cache TTL must be an integer >= 1 second, got {ttl_seconds!r}",
                setting="ttl_seconds",
            )
        if isinstance(max_entries, bool) or not isinstance(max_entries, int) or max_entries < 1:
            raise ConfigurationError(
                f"Cache size must be an integer >= 1, got {max_entries!r}",
                setting="max_entries",
            )
        self._source = source
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        # Ordered least recently used first
        self._entries: dict[str, CacheEntry] = {}
        self._pending: dict[str, asyncio.Task[list[FieldDefinition]]] = {}

    @property
    def ttl_seconds(self) -> int:
        return self._ttl

    @property
    def max_entries(self) -> int:
        return self._max_entries

    async def discover_dynamic_fields(self, entity_type: str) -> list[FieldDefinition]:
        """Custom fields for an entity type, from cache or upstream.

        Invalid entity types (anything but a non-blank string) and upstream
        failures both yield an empty list. Never raises for those.

        Args:
            entity_type: Entity type to discover fields for

        Returns:
            Dynamic field definitions (a fresh list on every call)
        """
        if not is_valid_entity_type(entity_type):
            return []

        key = build_cache_key(entity_type)
        now = self._clock()
        entry = self._entries.get(key)
        if entry is not None and now - entry.timestamp < self._ttl:
            entry.last_accessed = now
            # Move to the end so equal timestamps still evict the least recent
            self._entries[key] = self._entries.pop(key)
            logger.debug("Dynamic field cache hit", extra={"cache_key": key})
            return list(entry.fields)

        task = self._pending.get(key)
        if task is None:
            logger.debug("Dynamic field cache miss", extra={"cache_key": key})
            task = asyncio.get_running_loop().create_task(self._fetch(key, entity_type))
            self._pending[key] = task
        else:
            logger.debug("Joining in-flight discovery", extra={"cache_key": key})

        # A cancelled caller must not cancel the fetch other callers share
        fields = await asyncio.shield(task)
        return list(fields)

    async def _fetch(self, key: str, entity_type: str) -> list[FieldDefinition]:
        try:
            try:
                records = await self._source.fetch_remote_fields(entity_type)
                if not isinstance(records, list):
                    raise TypeError(
                        f"expected a list of field records, got {type(records).__name__}"
                    )
                fields = custom_field_definitions(records)
            except Exception as e:
                logger.error(
                    "Dynamic field discovery failed",
                    extra={"entity_type": entity_type, "error": str(e)},
                )
                return []
            self._store(key, fields)
            logger.info(
                "Discovered dynamic fields",
                extra={"entity_type": entity_type, "field_count": len(fields)},
            )
            return fields
        finally:
            if self._pending.get(key) is asyncio.current_task():
                del self._pending[key]

    def _store(self, key: str, fields: list[FieldDefinition]) -> None:
        if key in self._entries:
            del self._entries[key]
        elif len(self._entries) >= self._max_entries:
            self._evict_least_recently_used()
        now = self._clock()
        self._entries[key] = CacheEntry(
            key=key, fields=list(fields), timestamp=now, last_accessed=now
        )

    def _evict_least_recently_used(self) -> None:
        # min() keeps the first of equal candidates, i.e. the least recently moved
        oldest = min(self._entries.values(), key=lambda e: e.last_accessed)
        del self._entries[oldest.key]
        logger.info(
            "Evicted least recently used cache entry",
            extra={"cache_key": oldest.key, "cache_size": len(self._entries)},
        )

    def cached_keys(self) -> list[str]:
        """Cached keys, least recently used first (expired ones included)."""
        return list(self._entries)

    def pending_keys(self) -> list[str]:
        """Keys with an upstream fetch in flight."""
        return list(self._pending)

    def invalidate(self, entity_type: str) -> bool:
        """Drop the entry for an entity type. Returns True if one existed."""
        if not is_valid_entity_type(entity_type):
            return False
        return self._entries.pop(build_cache_key(entity_type), None) is not None

    def clear(self) -> None:
        """Drop all entries. In-flight fetches still complete and store."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entity_type: object) -> bool:
        """True if the entity type has an unexpired entry."""
        if not is_valid_entity_type(entity_type):
            return False
        entry = self._entries.get(build_cache_key(entity_type))
        return entry is not None and self._clock() - entry.timestamp < self._ttl
