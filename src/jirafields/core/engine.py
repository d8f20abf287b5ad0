"""Main jirafields entry point."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from jirafields.client.jira import JiraFieldClient
from jirafields.client.provider import RemoteFieldSource
from jirafields.core.config import HybridConfig
from jirafields.core.types import (
    BatchValidationResult,
    ResourceDocument,
    ResourceInfo,
    SuggestionResult,
)
from jirafields.discovery.cache import DynamicFieldCache
from jirafields.resources.fusion import HybridResourceBuilder
from jirafields.resources.handler import ResourceHandler
from jirafields.suggestions.engine import DEFAULT_MAX_SUGGESTIONS, StaticSuggestionEngine

logger = logging.getLogger(__name__)


class FieldResolver:
    """Hybrid field resolution for Jira.

    Wires the dynamic field cache, the fusion layer, the suggestion engine and
    the resource handler from a single configuration. Each resolver owns its
    own cache.

    Example:
        config = load_config()
        async with FieldResolver(config) as resolver:
            doc = await resolver.read_fused_resource("issue")
            print(resolver.suggest_field_names("issue", "stauts"))
    """

    def __init__(
        self,
        config: HybridConfig | None = None,
        source: RemoteFieldSource | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            config: Settings (defaults to static-only resolution)
            source: Remote field source; when omitted and dynamic discovery is
                enabled, a JiraFieldClient is built from the config
        """
        self._config = config or HybridConfig()
        self._owns_source = False
        if source is None and self._config.dynamic_discovery_enabled and self._config.jira_url:
            source = JiraFieldClient(
                self._config.jira_url,
                personal_token=self._config.personal_token,
                timeout=self._config.request_timeout,
            )
            self._owns_source = True
        elif source is None and self._config.dynamic_discovery_enabled:
            logger.warning("Dynamic discovery enabled without jira_url or source; using static fields")
        self._source = source

        self._cache: DynamicFieldCache | None = None
        if source is not None:
            self._cache = DynamicFieldCache(
                source,
                ttl_seconds=self._config.cache_ttl_seconds,
                max_entries=self._config.cache_max_entries,
            )
        self._builder = HybridResourceBuilder(self._cache)
        self._handler = ResourceHandler(
            self._builder, dynamic_enabled=self._config.dynamic_discovery_enabled
        )
        self._suggestions = StaticSuggestionEngine(threshold=self._config.similarity_threshold)
        logger.debug(
            "Field resolver ready",
            extra={"dynamic_enabled": self._config.dynamic_discovery_enabled},
        )

    @property
    def config(self) -> HybridConfig:
        return self._config

    @property
    def cache(self) -> DynamicFieldCache | None:
        """The dynamic field cache, None when there is no remote source."""
        return self._cache

    @property
    def suggestion_engine(self) -> StaticSuggestionEngine:
        return self._suggestions

    # === Resources ===

    async def read_fused_resource(self, entity_type: str) -> ResourceDocument:
        """Fused field document for an entity type.

        Unknown entity types give an empty document; discovery failures give
        a static-only one.
        """
        return await self._builder.build_resource_document(
            entity_type, dynamic_enabled=self._config.dynamic_discovery_enabled
        )

    def list_resources(self) -> list[ResourceInfo]:
        """Descriptors of every field resource."""
        return self._handler.list_resources()

    async def read_resource(self, uri: str) -> ResourceDocument:
        """Fused field document behind a ``jira://<entity>/fields`` URI."""
        return await self._handler.read_resource(uri)

    async def validate_field_paths(
        self, entity_type: str, paths: Iterable[str]
    ) -> BatchValidationResult:
        """Validate field paths for an entity type."""
        return await self._handler.validate_field_paths(entity_type, paths)

    # === Suggestions ===

    def suggest_field_names(
        self,
        entity_type: str,
        input: str,
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
    ) -> list[str]:
        """Field name suggestions for a possibly misspelled input.

        Raises:
            UnsupportedEntityTypeError: If the entity type is unknown
        """
        return self._suggestions.suggest(entity_type, input, max_suggestions)

    def suggest_with_metadata(
        self,
        entity_type: str,
        input: str,
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
        min_similarity: float | None = None,
    ) -> list[SuggestionResult]:
        """Scored field name suggestions."""
        return self._suggestions.suggest_with_metadata(
            entity_type, input, max_suggestions, min_similarity
        )

    def custom_field_hints(self, entity_type: str, input: str) -> list[str]:
        """Candidate custom field ids for a keyword such as 'story points'."""
        return self._suggestions.custom_field_hints(entity_type, input)

    # === Lifecycle ===

    async def aclose(self) -> None:
        """Close the remote source if this resolver created it."""
        if self._source is not None and self._owns_source:
            await self._source.aclose()

    async def __aenter__(self) -> FieldResolver:
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        await self.aclose()
