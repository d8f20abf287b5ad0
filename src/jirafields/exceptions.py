"""Custom exceptions for jirafields.

All exceptions are designed with agent-first principles:
- Actionable error messages that tell what went wrong AND how to fix it
- Include context about available options when relevant
"""

from __future__ import annotations

from typing import Any


class JiraFieldsError(Exception):
    """Base exception for all jirafields errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Return error as JSON-serializable dict for agent consumption."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class ConfigurationError(JiraFieldsError):
    """Invalid configuration value."""

    def __init__(self, message: str, setting: str | None = None) -> None:
        super().__init__(message, {"setting": setting} if setting else None)
        self.setting = setting


class UnsupportedEntityTypeError(JiraFieldsError):
    """Entity type is outside the supported closed set."""

    def __init__(self, entity_type: object, supported_types: list[str]) -> None:
        message = f"Unsupported entity type: {entity_type}"
        super().__init__(
            message,
            {"entity_type": str(entity_type), "supported_types": supported_types},
        )
        self.entity_type = entity_type
        self.supported_types = supported_types


class InvalidResourceUriError(JiraFieldsError):
    """Resource URI is empty or not of the form jira://<entity>/fields."""

    def __init__(self, uri: str) -> None:
        if uri:
            message = f"Invalid resource URI format: {uri}. Expected jira://<entity>/fields"
        else:
            message = "Resource URI is required"
        super().__init__(message, {"uri": uri})
        self.uri = uri


class ResourceNotFoundError(JiraFieldsError):
    """Resource URI is well-formed but no resource is registered for it."""

    def __init__(self, uri: str, available_uris: list[str] | None = None) -> None:
        available = available_uris or []
        message = f"Unknown resource URI: {uri}. Available resources: {', '.join(available)}"
        super().__init__(message, {"uri": uri, "available_uris": available})
        self.uri = uri
        self.available_uris = available


class UpstreamError(JiraFieldsError):
    """The remote field-listing call failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message, {"status_code": status_code})
        self.status_code = status_code
