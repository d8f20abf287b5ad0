"""CLI context management for configuration and shared state."""

from dataclasses import dataclass, field

from jirafields import FieldResolver
from jirafields.core.config import HybridConfig, load_config


@dataclass
class CLIContext:
    """Shared context for CLI commands.

    Holds the global options; configuration is resolved lazily so commands
    that need none (e.g. ``version``) never fail on a bad environment.
    """

    json_output: bool = False
    jira_url: str | None = None
    personal_token: str | None = None
    dynamic: bool | None = None
    verbose: bool = False
    _config: HybridConfig | None = field(default=None, init=False, repr=False)

    def get_config(self) -> HybridConfig:
        """Resolve configuration (CLI options > environment > defaults).

        Raises:
            ConfigurationError: If the resulting configuration is invalid
        """
        if self._config is None:
            self._config = load_config(
                jira_url=self.jira_url,
                personal_token=self.personal_token,
                dynamic_discovery_enabled=self.dynamic,
            )
        return self._config

    def build_resolver(self) -> FieldResolver:
        """Create a resolver for one command invocation."""
        return FieldResolver(self.get_config())
