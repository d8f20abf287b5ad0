"""Configuration for jirafields.

Values come from, in increasing priority: defaults, environment variables,
explicit overrides (e.g. CLI options).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from jirafields.exceptions import ConfigurationError

# Environment variable -> config field
ENV_VARS: dict[str, str] = {
    "JIRA_URL": "jira_url",
    "JIRA_PERSONAL_TOKEN": "personal_token",
    "JIRA_TIMEOUT": "request_timeout",
    "ENABLE_DYNAMIC_FIELDS": "dynamic_discovery_enabled",
    "DYNAMIC_FIELD_CACHE_TTL": "cache_ttl_seconds",
    "DYNAMIC_FIELD_CACHE_MAX_ENTRIES": "cache_max_entries",
    "FIELD_SUGGESTION_THRESHOLD": "similarity_threshold",
}

_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off"})


class HybridConfig(BaseModel):
    """Settings for field resolution.

    A Jira URL is only required when discovery goes through the built-in
    client, so that check lives in ``load_config``.
    """

    jira_url: str | None = Field(default=None, description="Jira base URL")
    personal_token: str | None = Field(default=None, description="Personal access token")
    request_timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")
    cache_ttl_seconds: int = Field(default=3600, ge=1)
    cache_max_entries: int = Field(default=100, ge=1)
    dynamic_discovery_enabled: bool = False
    similarity_threshold: float = Field(default=0.2, ge=0.0, le=1.0)


def parse_bool(value: str, name: str) -> bool:
    """Parse a boolean environment value."""
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigurationError(
        f"Invalid boolean for {name}: {value!r}. Use true/false, 1/0, yes/no or on/off",
        setting=name,
    )


def _coerce(field_name: str, var: str, raw: str) -> Any:
    if field_name == "dynamic_discovery_enabled":
        return parse_bool(raw, var)
    try:
        if field_name in ("cache_ttl_seconds", "cache_max_entries"):
            return int(raw)
        if field_name in ("request_timeout", "similarity_threshold"):
            return float(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid value for {var}: {raw!r}", setting=var) from None
    return raw


def build_config(**values: Any) -> HybridConfig:
    """Validate config values, converting failures to ConfigurationError."""
    try:
        return HybridConfig(**values)
    except ValidationError as e:
        error = e.errors()[0]
        loc = error.get("loc") or ()
        field_name = str(loc[0]) if loc else None
        setting = next((var for var, name in ENV_VARS.items() if name == field_name), field_name)
        raise ConfigurationError(
            f"Invalid configuration{f' for {setting}' if setting else ''}: {error['msg']}",
            setting=setting,
        ) from e


def load_config(
    env: Mapping[str, str] | None = None, **overrides: Any
) -> HybridConfig:
    """Load configuration from environment variables.

    Args:
        env: Environment mapping (defaults to ``os.environ``)
        **overrides: Values taking priority over the environment; None is ignored

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If a value cannot be parsed or is out of range, or
            discovery is enabled without a Jira URL
    """
    source = os.environ if env is None else env
    values: dict[str, Any] = {}
    for var, field_name in ENV_VARS.items():
        raw = source.get(var)
        if raw is None or raw.strip() == "":
            continue
        values[field_name] = _coerce(field_name, var, raw.strip())

    values.update({k: v for k, v in overrides.items() if v is not None})
    config = build_config(**values)
    if config.dynamic_discovery_enabled and not config.jira_url:
        raise ConfigurationError(
            "Dynamic field discovery requires jira_url. Set JIRA_URL or pass --url",
            setting="JIRA_URL",
        )
    return config
