"""jirafields - Hybrid field resolution for Jira.

Exposes the Jira data model to agents as discoverable field documents: a
compiled-in static catalog fused with custom fields discovered at runtime,
plus typo-tolerant field name suggestions.

Example:
    from jirafields import FieldResolver, load_config

    async with FieldResolver(load_config()) as resolver:
        # Static catalog plus discovered custom fields
        doc = await resolver.read_fused_resource("issue")
        print(doc.total_fields, doc.path_index["status.name"])

        # Recover from typos
        resolver.suggest_field_names("issue", "stat")  # ['status', ...]

        # Check paths before building a query
        result = await resolver.validate_field_paths("issue", ["status.name", "asignee"])
"""

from jirafields.client import JiraFieldClient, RemoteFieldSource
from jirafields.core.config import HybridConfig, load_config
from jirafields.core.engine import FieldResolver
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
from jirafields.discovery import DynamicFieldCache
from jirafields.exceptions import (
    ConfigurationError,
    InvalidResourceUriError,
    JiraFieldsError,
    ResourceNotFoundError,
    UnsupportedEntityTypeError,
    UpstreamError,
)
from jirafields.resources import HybridResourceBuilder, ResourceHandler
from jirafields.suggestions import StaticSuggestionEngine

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "FieldResolver",
    "DynamicFieldCache",
    "HybridResourceBuilder",
    "ResourceHandler",
    "StaticSuggestionEngine",
    "JiraFieldClient",
    "RemoteFieldSource",
    # Config
    "HybridConfig",
    "load_config",
    # Types
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
    # Exceptions
    "JiraFieldsError",
    "ConfigurationError",
    "UnsupportedEntityTypeError",
    "InvalidResourceUriError",
    "ResourceNotFoundError",
    "UpstreamError",
]
