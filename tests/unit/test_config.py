"""Tests for configuration loading."""

import pytest

from jirafields.core.config import HybridConfig, load_config, parse_bool
from jirafields.exceptions import ConfigurationError


class TestDefaults:
    """Test default configuration."""

    def test_defaults(self) -> None:
        config = load_config(env={})
        assert config.jira_url is None
        assert config.request_timeout == 30.0
        assert config.cache_ttl_seconds == 3600
        assert config.cache_max_entries == 100
        assert config.dynamic_discovery_enabled is False
        assert config.similarity_threshold == 0.2

    def test_model_defaults_match(self) -> None:
        assert load_config(env={}) == HybridConfig()


class TestEnvironment:
    """Test environment variable parsing."""

    def test_all_variables(self) -> None:
        config = load_config(
            env={
                "JIRA_URL": "https://jira.example.com",
                "JIRA_PERSONAL_TOKEN": "secret",
                "JIRA_TIMEOUT": "12.5",
                "ENABLE_DYNAMIC_FIELDS": "true",
                "DYNAMIC_FIELD_CACHE_TTL": "600",
                "DYNAMIC_FIELD_CACHE_MAX_ENTRIES": "10",
                "FIELD_SUGGESTION_THRESHOLD": "0.5",
            }
        )
        assert config.jira_url == "https://jira.example.com"
        assert config.personal_token == "secret"
        assert config.request_timeout == 12.5
        assert config.dynamic_discovery_enabled is True
        assert config.cache_ttl_seconds == 600
        assert config.cache_max_entries == 10
        assert config.similarity_threshold == 0.5

    def test_blank_values_ignored(self) -> None:
        config = load_config(env={"DYNAMIC_FIELD_CACHE_TTL": "  ", "JIRA_URL": ""})
        assert config.cache_ttl_seconds == 3600
        assert config.jira_url is None

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("true", True), ("1", True), ("YES", True), ("on", True),
         ("false", False), ("0", False), ("no", False), ("Off", False)],
    )
    def test_booleans(self, raw: str, expected: bool) -> None:
        assert parse_bool(raw, "X") is expected

    def test_invalid_boolean(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(env={"ENABLE_DYNAMIC_FIELDS": "maybe"})
        assert exc_info.value.setting == "ENABLE_DYNAMIC_FIELDS"

    def test_invalid_integer(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(env={"DYNAMIC_FIELD_CACHE_TTL": "an hour"})
        assert exc_info.value.setting == "DYNAMIC_FIELD_CACHE_TTL"

    @pytest.mark.parametrize(
        ("var", "value"),
        [
            ("DYNAMIC_FIELD_CACHE_TTL", "0"),
            ("DYNAMIC_FIELD_CACHE_MAX_ENTRIES", "0"),
            ("FIELD_SUGGESTION_THRESHOLD", "1.5"),
            ("JIRA_TIMEOUT", "0"),
        ],
    )
    def test_out_of_range(self, var: str, value: str) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(env={var: value})
        assert exc_info.value.setting == var
        assert var in exc_info.value.message


class TestOverrides:
    """Test explicit overrides."""

    def test_override_beats_environment(self) -> None:
        config = load_config(
            env={"JIRA_URL": "https://env.example.com"},
            jira_url="https://cli.example.com",
        )
        assert config.jira_url == "https://cli.example.com"

    def test_none_override_ignored(self) -> None:
        config = load_config(env={"ENABLE_DYNAMIC_FIELDS": "1", "JIRA_URL": "https://x"},
                             dynamic_discovery_enabled=None)
        assert config.dynamic_discovery_enabled is True

    def test_dynamic_requires_url(self) -> None:
        with pytest.raises(ConfigurationError, match="jira_url"):
            load_config(env={"ENABLE_DYNAMIC_FIELDS": "true"})

    def test_dynamic_disabled_by_override(self) -> None:
        config = load_config(env={"ENABLE_DYNAMIC_FIELDS": "true"}, dynamic_discovery_enabled=False)
        assert config.dynamic_discovery_enabled is False

    def test_model_allows_discovery_without_url(self) -> None:
        """An injected field source needs no Jira URL."""
        config = HybridConfig(dynamic_discovery_enabled=True)
        assert config.dynamic_discovery_enabled is True
        assert config.jira_url is None
