"""Tests for core types and exceptions."""

import pytest
from pydantic import ValidationError

from jirafields.core.types import (
    AccessPath,
    BatchValidationResult,
    EntityType,
    FieldDefinition,
    FieldUsage,
)
from jirafields.exceptions import (
    ConfigurationError,
    InvalidResourceUriError,
    JiraFieldsError,
    ResourceNotFoundError,
    UnsupportedEntityTypeError,
)


class TestEntityType:
    """Tests for EntityType enum."""

    def test_all_types_exist(self):
        """All catalogued entity types should exist, in order."""
        assert EntityType.values() == ["issue", "project", "user", "agile"]

    def test_string_values(self):
        assert EntityType.ISSUE == "issue"
        assert EntityType("agile") is EntityType.AGILE

    def test_parse(self):
        """Parsing ignores case and surrounding whitespace."""
        assert EntityType.parse("Issue") is EntityType.ISSUE
        assert EntityType.parse("  USER ") is EntityType.USER
        assert EntityType.parse(EntityType.PROJECT) is EntityType.PROJECT

    @pytest.mark.parametrize("value", ["board", "", None, 42, ["issue"]])
    def test_parse_rejects(self, value):
        assert EntityType.parse(value) is None


class TestFieldDefinition:
    """Tests for FieldDefinition model."""

    def test_minimal_definition(self):
        field = FieldDefinition(id="summary", name="Summary")
        assert field.type == "string"
        assert field.source == "static"
        assert field.confidence == "high"
        assert field.access_paths == ()

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            FieldDefinition(id="", name="Nothing")

    def test_frozen(self):
        field = FieldDefinition(
            id="status",
            name="Status",
            type="object",
            access_paths=[AccessPath(path="status.name")],
        )
        with pytest.raises(ValidationError):
            field.name = "State"
        assert field.access_paths[0].frequency == "medium"


class TestModels:
    """Tests for value models."""

    def test_usage_availability_bounds(self):
        assert FieldUsage(frequency="low", availability=0.0).availability == 0.0
        with pytest.raises(ValidationError):
            FieldUsage(frequency="high", availability=1.5)

    def test_validation_result_defaults(self):
        result = BatchValidationResult(is_valid=True)
        assert result.valid_paths == []
        assert result.error is None
        assert result.model_dump()["suggestions"] == {}


class TestExceptions:
    """Tests for error payloads."""

    def test_base_to_dict(self):
        error = JiraFieldsError("boom")
        assert error.to_dict() == {"error": "JiraFieldsError", "message": "boom", "context": {}}
        assert str(error) == "boom"

    def test_unsupported_entity_type(self):
        error = UnsupportedEntityTypeError("board", EntityType.values())
        data = error.to_dict()
        assert data["error"] == "UnsupportedEntityTypeError"
        assert data["message"] == "Unsupported entity type: board"
        assert data["context"]["supported_types"] == ["issue", "project", "user", "agile"]

    def test_invalid_uri(self):
        assert "Expected jira://<entity>/fields" in InvalidResourceUriError("http://x").message
        assert InvalidResourceUriError("").message == "Resource URI is required"

    def test_resource_not_found(self):
        error = ResourceNotFoundError("jira://board/fields", ["jira://issue/fields"])
        assert error.available_uris == ["jira://issue/fields"]
        assert "jira://issue/fields" in error.message

    def test_configuration_error(self):
        error = ConfigurationError("bad", setting="JIRA_URL")
        assert error.to_dict()["context"] == {"setting": "JIRA_URL"}
        assert ConfigurationError("bad").context == {}
        assert isinstance(error, JiraFieldsError)
