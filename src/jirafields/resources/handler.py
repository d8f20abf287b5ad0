"""Resource listing, reading and field path validation."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from jirafields.catalog import STATIC_FIELDS
from jirafields.core.types import (
    BatchValidationResult,
    EntityType,
    PathInfo,
    ResourceDocument,
    ResourceInfo,
)
from jirafields.exceptions import InvalidResourceUriError, ResourceNotFoundError
from jirafields.resources.fusion import HybridResourceBuilder, resource_uri
from jirafields.suggestions.similarity import similarity

logger = logging.getLogger(__name__)

RESOURCE_URI_PATTERN = re.compile(r"^jira://\w+/\w+$", re.IGNORECASE)
CUSTOM_FIELD_PATTERN = re.compile(r"^customfield_\d+$")

PATH_SUGGESTION_THRESHOLD = 0.6
MAX_PATH_SUGGESTIONS = 3


class ResourceHandler:
    """Serves field resources for every supported entity type.

    Resources are addressed as ``jira://<entity>/fields``. Documents are
    rebuilt on every read so dynamic fields stay current.
    """

    def __init__(self, builder: HybridResourceBuilder, dynamic_enabled: bool = False) -> None:
        self._builder = builder
        self._dynamic_enabled = dynamic_enabled
        self._resources = {resource_uri(t.value): t for t in EntityType}

    @property
    def dynamic_enabled(self) -> bool:
        return self._dynamic_enabled

    def list_resources(self) -> list[ResourceInfo]:
        """Describe every available resource."""
        resources = []
        for uri, entity_type in self._resources.items():
            field_count = len(STATIC_FIELDS[entity_type])
            resources.append(
                ResourceInfo(
                    uri=uri,
                    name=f"Jira {entity_type.value.capitalize()} Fields",
                    description=(
                        f"Field definitions and access paths for Jira {entity_type.value} "
                        f"entities ({field_count} static fields"
                        + (", plus discovered custom fields)" if self._dynamic_enabled else ")")
                    ),
                )
            )
        return resources

    async def read_resource(self, uri: str) -> ResourceDocument:
        """Read the fused field document behind a resource URI.

        Args:
            uri: Resource URI, e.g. jira://issue/fields

        Returns:
            The fused document

        Raises:
            InvalidResourceUriError: If the URI is empty or malformed
            ResourceNotFoundError: If no resource is registered for the URI
        """
        if not uri or not RESOURCE_URI_PATTERN.match(uri):
            raise InvalidResourceUriError(uri)
        entity_type = self._resources.get(uri)
        if entity_type is None:
            raise ResourceNotFoundError(uri, list(self._resources))
        return await self._builder.build_resource_document(
            entity_type.value, dynamic_enabled=self._dynamic_enabled
        )

    async def validate_field_paths(
        self, entity_type: str, paths: Iterable[str]
    ) -> BatchValidationResult:
        """Check field paths against the fused path index of an entity type.

        ``customfield_<digits>`` ids are always accepted. Invalid paths get up
        to three similar known paths as suggestions.

        Args:
            entity_type: Entity type the paths belong to
            paths: Dot-notation paths to check

        Returns:
            Validation result (never raises for unknown entity types)
        """
        paths = list(paths)
        parsed = EntityType.parse(entity_type)
        if parsed is None:
            return BatchValidationResult(
                is_valid=False,
                invalid_paths=paths,
                error=(
                    f"Unknown entity type: {entity_type}. "
                    f"Supported types: {', '.join(EntityType.values())}"
                ),
            )

        document = await self._builder.build_resource_document(
            parsed.value, dynamic_enabled=self._dynamic_enabled
        )
        result = BatchValidationResult(is_valid=True)
        for path in paths:
            field_id = document.path_index.get(path)
            if field_id is not None:
                result.valid_paths.append(path)
                field = document.fields[field_id]
                for access_path in field.access_paths:
                    if access_path.path == path:
                        result.path_info[path] = PathInfo(
                            field_id=field_id,
                            type=access_path.type,
                            description=access_path.description,
                        )
                        break
            elif CUSTOM_FIELD_PATTERN.match(path):
                result.valid_paths.append(path)
            else:
                result.invalid_paths.append(path)
                similar = self._similar_paths(path, document.path_index)
                if similar:
                    result.suggestions[path] = similar

        result.is_valid = not result.invalid_paths
        if result.invalid_paths:
            logger.debug(
                "Invalid field paths",
                extra={"entity_type": parsed.value, "invalid_paths": result.invalid_paths},
            )
        return result

    def _similar_paths(self, target: str, known: Iterable[str]) -> list[str]:
        scored = [(similarity(target, path), path) for path in known]
        close = [item for item in scored if item[0] > PATH_SUGGESTION_THRESHOLD]
        close.sort(key=lambda item: (-item[0], item[1]))
        return [path for _, path in close[:MAX_PATH_SUGGESTIONS]]
