"""Static catalog for project fields."""

from __future__ import annotations

from datetime import UTC, datetime

from jirafields.catalog._builders import path, static_field, user_paths
from jirafields.core.types import EntityType, FieldUsage, StaticSuggestionData

PROJECT_FIELDS = (
    static_field(
        "key",
        "Key",
        "Unique project key used as issue key prefix",
        "string",
        [path("key", "Project key (e.g., 'PROJ')", frequency="high")],
    ),
    static_field(
        "name",
        "Name",
        "Project display name",
        "string",
        [path("name", "Project name", frequency="high")],
    ),
    static_field(
        "id",
        "ID",
        "Numeric project identifier",
        "string",
        [path("id", "Project ID")],
    ),
    static_field(
        "description",
        "Description",
        "Project description",
        "string",
        [path("description", "Project description text")],
    ),
    static_field(
        "lead",
        "Lead",
        "Project lead user information",
        "object",
        user_paths("lead", "Project lead", avatars=False),
    ),
    static_field(
        "projectCategory",
        "Project Category",
        "Category the project belongs to",
        "object",
        [
            path("projectCategory.name", "Project category name", frequency="high"),
            path("projectCategory.id", "Project category ID"),
            path("projectCategory.description", "Project category description", frequency="low"),
            path("projectCategory.self", "Project category REST API URL", frequency="low"),
        ],
    ),
    static_field(
        "projectTypeKey",
        "Project Type",
        "Project type key (software, business, service_desk)",
        "string",
        [path("projectTypeKey", "Project type key")],
    ),
    static_field(
        "components",
        "Components",
        "Components defined in the project",
        "array",
        [
            path("components[].name", "Component name", frequency="high"),
            path("components[].id", "Component ID"),
            path("components[].description", "Component description", frequency="low"),
            path("components[].lead.displayName", "Component lead display name", frequency="low"),
        ],
    ),
    static_field(
        "versions",
        "Versions",
        "Versions defined in the project",
        "array",
        [
            path("versions[].name", "Version name", frequency="high"),
            path("versions[].id", "Version ID"),
            path("versions[].released", "Version released flag", "boolean"),
            path("versions[].archived", "Version archived flag", "boolean", "low"),
            path("versions[].releaseDate", "Version release date"),
        ],
    ),
    static_field(
        "url",
        "URL",
        "Project home page URL",
        "string",
        [path("url", "Project URL", frequency="low")],
    ),
    static_field(
        "self",
        "Self",
        "Project REST API URL",
        "string",
        [path("self", "Project REST API URL", frequency="low")],
    ),
    static_field(
        "style",
        "Style",
        "Project style (classic or next-gen)",
        "string",
        [path("style", "Project style", frequency="low")],
    ),
)

PROJECT_SUGGESTIONS = StaticSuggestionData(
    entity_type=EntityType.PROJECT,
    typo_corrections={
        "keey": "key",
        "ley": "key",
        "kye": "key",
        "nam": "name",
        "nme": "name",
        "leed": "lead",
        "led": "lead",
        "categry": "projectCategory",
        "catgory": "projectCategory",
        "category": "projectCategory",
        "descripton": "description",
        "desc": "description",
        "componets": "components",
        "verions": "versions",
        "versons": "versions",
        "projecttype": "projectTypeKey",
        "type": "projectTypeKey",
    },
    usage_statistics={
        "key": FieldUsage(frequency="high", availability=1.0),
        "name": FieldUsage(frequency="high", availability=1.0),
        "id": FieldUsage(frequency="high", availability=1.0),
        "lead": FieldUsage(frequency="high", availability=0.92),
        "projectTypeKey": FieldUsage(frequency="high", availability=0.97),
        "projectCategory": FieldUsage(frequency="medium", availability=0.58),
        "description": FieldUsage(frequency="medium", availability=0.52),
        "components": FieldUsage(frequency="medium", availability=0.41),
        "versions": FieldUsage(frequency="medium", availability=0.38),
        "url": FieldUsage(frequency="low", availability=0.09),
    },
    contextual_suggestions=[
        "key",
        "name",
        "lead",
        "projectCategory",
        "description",
        "projectTypeKey",
        "components",
        "versions",
        "lead.displayName",
        "projectCategory.name",
    ],
    last_analyzed=datetime(2026, 9, 1, tzinfo=UTC),
)
