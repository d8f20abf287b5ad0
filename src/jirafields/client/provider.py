"""Remote field source interface."""

from abc import ABC, abstractmethod
from typing import Any


class RemoteFieldSource(ABC):
    """Interface for anything that can list the fields of a Jira instance.

    The dynamic field cache only ever talks to this interface, so tests and
    alternative transports can stand in for the HTTP client.
    """

    @abstractmethod
    async def fetch_remote_fields(self, entity_type: str) -> list[dict[str, Any]]:
        """Fetch raw field records.

        Args:
            entity_type: Entity type the fields are requested for.

        Returns:
            Raw records as returned by the remote API. Each record is expected
            to carry ``id``, ``name``, ``custom`` and optionally ``schema``.

        Raises:
            Exception: Any failure; callers are expected to recover.
        """
        ...

    async def aclose(self) -> None:
        """Release any resources held by the source."""
        return None
