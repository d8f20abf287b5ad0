"""Static catalog for issue fields."""

from __future__ import annotations

from datetime import UTC, datetime

from jirafields.catalog._builders import path, static_field, user_paths
from jirafields.core.types import EntityType, FieldUsage, StaticSuggestionData

ISSUE_FIELDS = (
    static_field(
        "status",
        "Status",
        "Current issue status and its category information",
        "object",
        [
            path("status.name", "Status name (e.g., 'In Progress', 'Done')", frequency="high"),
            path(
                "status.statusCategory.key",
                "Status category key (new/indeterminate/done)",
                frequency="high",
            ),
            path("status.statusCategory.name", "Status category name"),
            path("status.statusCategory.id", "Status category ID", "number", "low"),
            path("status.statusCategory.colorName", "Status category color", frequency="low"),
            path("status.id", "Status ID"),
            path("status.description", "Status description", frequency="low"),
            path("status.iconUrl", "Status icon URL", frequency="low"),
            path("status.self", "Status REST API URL", frequency="low"),
        ],
        common_usage=[
            ["status.name", "status.statusCategory.key"],
            ["status.name", "status.id"],
            ["status.statusCategory.key"],
        ],
    ),
    static_field(
        "assignee",
        "Assignee",
        "Issue assignee user information",
        "object",
        user_paths("assignee", "Assignee"),
    ),
    static_field(
        "reporter",
        "Reporter",
        "Issue reporter user information",
        "object",
        user_paths("reporter", "Reporter"),
    ),
    static_field(
        "project",
        "Project",
        "Project information and metadata",
        "object",
        [
            path("project.key", "Project key", frequency="high"),
            path("project.name", "Project name", frequency="high"),
            path("project.id", "Project ID"),
            path("project.projectTypeKey", "Project type key"),
            path("project.projectCategory.name", "Project category name"),
            path("project.projectCategory.id", "Project category ID", frequency="low"),
            path("project.simplified", "Simplified project flag", "boolean", "low"),
            path("project.self", "Project REST API URL", frequency="low"),
        ],
    ),
    static_field(
        "priority",
        "Priority",
        "Issue priority information",
        "object",
        [
            path("priority.name", "Priority name", frequency="high"),
            path("priority.id", "Priority ID"),
            path("priority.iconUrl", "Priority icon URL", frequency="low"),
            path("priority.self", "Priority REST API URL", frequency="low"),
        ],
    ),
    static_field(
        "issuetype",
        "Issue Type",
        "Issue type classification",
        "object",
        [
            path("issuetype.name", "Issue type name", frequency="high"),
            path("issuetype.id", "Issue type ID"),
            path("issuetype.subtask", "Is subtask flag", "boolean"),
            path("issuetype.description", "Issue type description", frequency="low"),
            path("issuetype.iconUrl", "Issue type icon URL", frequency="low"),
            path("issuetype.avatarId", "Issue type avatar ID", "number", "low"),
        ],
    ),
    static_field(
        "summary",
        "Summary",
        "Issue summary/title",
        "string",
        [path("summary", "Issue summary text", frequency="high")],
    ),
    static_field(
        "description",
        "Description",
        "Issue description content",
        "string",
        [path("description", "Issue description text", frequency="high")],
    ),
    static_field(
        "created",
        "Created",
        "Issue creation timestamp",
        "string",
        [path("created", "Issue creation date and time", frequency="high")],
    ),
    static_field(
        "updated",
        "Updated",
        "Issue last update timestamp",
        "string",
        [path("updated", "Issue last update date and time", frequency="high")],
    ),
    static_field(
        "duedate",
        "Due Date",
        "Issue due date",
        "string",
        [path("duedate", "Due date (YYYY-MM-DD)")],
    ),
    static_field(
        "resolution",
        "Resolution",
        "Issue resolution information",
        "object",
        [
            path("resolution.name", "Resolution name", frequency="high"),
            path("resolution.id", "Resolution ID"),
            path("resolution.description", "Resolution description", frequency="low"),
            path("resolution.self", "Resolution REST API URL", frequency="low"),
        ],
    ),
    static_field(
        "resolutiondate",
        "Resolved",
        "Issue resolution timestamp",
        "string",
        [path("resolutiondate", "Date and time the issue was resolved")],
    ),
    static_field(
        "labels",
        "Labels",
        "Issue labels array",
        "array",
        [path("labels", "Array of issue labels", "string[]", "high")],
    ),
    static_field(
        "components",
        "Components",
        "Issue components array",
        "array",
        [
            path("components[].name", "Component name", frequency="high"),
            path("components[].id", "Component ID"),
            path("components[].description", "Component description", frequency="low"),
            path("components[].self", "Component REST API URL", frequency="low"),
        ],
    ),
    static_field(
        "fixVersions",
        "Fix Versions",
        "Issue fix versions array",
        "array",
        [
            path("fixVersions[].name", "Fix version name", frequency="high"),
            path("fixVersions[].id", "Fix version ID"),
            path("fixVersions[].releaseDate", "Fix version release date"),
            path("fixVersions[].released", "Fix version released flag", "boolean"),
            path("fixVersions[].description", "Fix version description", frequency="low"),
        ],
    ),
)

ISSUE_SUGGESTIONS = StaticSuggestionData(
    entity_type=EntityType.ISSUE,
    typo_corrections={
        "stat": "status",
        "statu": "status",
        "statuc": "status",
        "staus": "status",
        "assigne": "assignee",
        "asignee": "assignee",
        "assignee_name": "assignee.displayName",
        "sumary": "summary",
        "summry": "summary",
        "title": "summary",
        "desc": "description",
        "discription": "description",
        "descripion": "description",
        "priorty": "priority",
        "priorit": "priority",
        "reporte": "reporter",
        "reportr": "reporter",
        "projec": "project",
        "issutyp": "issuetype",
        "issue_type": "issuetype",
        "type": "issuetype",
        "creatd": "created",
        "updatd": "updated",
        "due": "duedate",
        "label": "labels",
        "component": "components",
        "fixversion": "fixVersions",
    },
    usage_statistics={
        "summary": FieldUsage(frequency="high", availability=1.0),
        "status": FieldUsage(frequency="high", availability=1.0),
        "issuetype": FieldUsage(frequency="high", availability=1.0),
        "project": FieldUsage(frequency="high", availability=1.0),
        "created": FieldUsage(frequency="high", availability=1.0),
        "updated": FieldUsage(frequency="high", availability=1.0),
        "reporter": FieldUsage(frequency="high", availability=0.98),
        "priority": FieldUsage(frequency="high", availability=0.96),
        "description": FieldUsage(frequency="high", availability=0.86),
        "assignee": FieldUsage(frequency="high", availability=0.78),
        "resolution": FieldUsage(frequency="medium", availability=0.46),
        "labels": FieldUsage(frequency="medium", availability=0.41),
        "resolutiondate": FieldUsage(frequency="medium", availability=0.44),
        "components": FieldUsage(frequency="medium", availability=0.33),
        "fixVersions": FieldUsage(frequency="low", availability=0.24),
        "duedate": FieldUsage(frequency="low", availability=0.12),
    },
    contextual_suggestions=[
        "summary",
        "status",
        "assignee",
        "priority",
        "description",
        "issuetype",
        "reporter",
        "project",
        "created",
        "updated",
        "status.name",
        "assignee.displayName",
        "priority.name",
        "issuetype.name",
    ],
    custom_field_patterns={
        "sprint": ["customfield_10020", "customfield_10104"],
        "epic": ["customfield_10014", "customfield_10008"],
        "epic_link": ["customfield_10014", "customfield_10008"],
        "story_points": ["customfield_10016", "customfield_10106"],
        "team": ["customfield_10001"],
    },
    last_analyzed=datetime(2026, 9, 1, tzinfo=UTC),
)
