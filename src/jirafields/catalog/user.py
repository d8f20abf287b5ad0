"""Static catalog for user fields."""

from __future__ import annotations

from datetime import UTC, datetime

from jirafields.catalog._builders import path, static_field
from jirafields.core.types import EntityType, FieldUsage, StaticSuggestionData

USER_FIELDS = (
    static_field(
        "displayName",
        "Display Name",
        "User's full display name",
        "string",
        [path("displayName", "User display name", frequency="high")],
    ),
    static_field(
        "emailAddress",
        "Email Address",
        "User's email address",
        "string",
        [path("emailAddress", "User email address", frequency="high")],
    ),
    static_field(
        "name",
        "Username",
        "Login name (Server/Data Center)",
        "string",
        [path("name", "Username")],
    ),
    static_field(
        "key",
        "User Key",
        "Stable user key (Server/Data Center)",
        "string",
        [path("key", "User key")],
    ),
    static_field(
        "accountId",
        "Account ID",
        "Account identifier (Cloud)",
        "string",
        [path("accountId", "User account ID", frequency="high")],
    ),
    static_field(
        "active",
        "Active",
        "Whether the user account is active",
        "string",
        [path("active", "User active status", "boolean", "high")],
    ),
    static_field(
        "timeZone",
        "Time Zone",
        "User's configured timezone",
        "string",
        [path("timeZone", "User timezone")],
    ),
    static_field(
        "locale",
        "Locale",
        "User's configured locale",
        "string",
        [path("locale", "User locale", frequency="low")],
    ),
    static_field(
        "avatarUrls",
        "Avatar URLs",
        "User avatar images by size",
        "object",
        [
            path(f"avatarUrls.{size}", f"Avatar URL ({size})", frequency="low")
            for size in ("48x48", "32x32", "24x24", "16x16")
        ],
    ),
    static_field(
        "groups",
        "Groups",
        "Groups the user belongs to",
        "object",
        [
            path("groups.size", "Number of groups", "number"),
            path("groups.items[].name", "Group name"),
        ],
    ),
    static_field(
        "applicationRoles",
        "Application Roles",
        "Application roles granted to the user",
        "object",
        [
            path("applicationRoles.size", "Number of application roles", "number", "low"),
            path("applicationRoles.items[].name", "Application role name", frequency="low"),
        ],
    ),
    static_field(
        "self",
        "Self",
        "User REST API URL",
        "string",
        [path("self", "User REST API URL", frequency="low")],
    ),
)

USER_SUGGESTIONS = StaticSuggestionData(
    entity_type=EntityType.USER,
    typo_corrections={
        "displaynam": "displayName",
        "displyname": "displayName",
        "display_name": "displayName",
        "fullname": "displayName",
        "emailaddres": "emailAddress",
        "emailadress": "emailAddress",
        "email": "emailAddress",
        "mail": "emailAddress",
        "acountid": "accountId",
        "accountid": "accountId",
        "activ": "active",
        "actve": "active",
        "timezon": "timeZone",
        "timezone": "timeZone",
        "locle": "locale",
        "usrname": "name",
        "username": "name",
        "grups": "groups",
        "avatar": "avatarUrls",
    },
    usage_statistics={
        "displayName": FieldUsage(frequency="high", availability=1.0),
        "active": FieldUsage(frequency="high", availability=1.0),
        "accountId": FieldUsage(frequency="high", availability=0.95),
        "emailAddress": FieldUsage(frequency="high", availability=0.88),
        "name": FieldUsage(frequency="medium", availability=0.71),
        "key": FieldUsage(frequency="medium", availability=0.71),
        "timeZone": FieldUsage(frequency="medium", availability=0.64),
        "avatarUrls": FieldUsage(frequency="medium", availability=0.99),
        "locale": FieldUsage(frequency="low", availability=0.22),
        "groups": FieldUsage(frequency="low", availability=0.18),
    },
    contextual_suggestions=[
        "displayName",
        "emailAddress",
        "active",
        "accountId",
        "name",
        "timeZone",
        "key",
        "avatarUrls.48x48",
    ],
    last_analyzed=datetime(2026, 9, 1, tzinfo=UTC),
)
