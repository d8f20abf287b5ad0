"""MCP server for jirafields.

Exposes fused Jira field resources and field tools to AI agents.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from mcp.server.fastmcp import FastMCP  # type: ignore[import-not-found]

from jirafields import FieldResolver
from jirafields.core.config import HybridConfig, load_config
from jirafields.exceptions import JiraFieldsError

# Configure logging to stderr (important for stdio transport)
logging.basicConfig(level=logging.INFO, stream=sys.stderr)
logger = logging.getLogger(__name__)

# Create MCP server
mcp = FastMCP("jirafields")

# Global resolver instance (set during server startup)
_resolver: FieldResolver | None = None


def get_resolver() -> FieldResolver:
    """Get the resolver instance."""
    if _resolver is None:
        raise RuntimeError("Resolver not initialized. Call create_server() first.")
    return _resolver


async def _read(entity_type: str) -> str:
    doc = await get_resolver().read_fused_resource(entity_type)
    return doc.model_dump_json()


# === Resources ===


@mcp.resource("jira://issue/fields", mime_type="application/json")
async def issue_fields() -> str:
    """Issue field definitions and access paths."""
    return await _read("issue")


@mcp.resource("jira://project/fields", mime_type="application/json")
async def project_fields() -> str:
    """Project field definitions and access paths."""
    return await _read("project")


@mcp.resource("jira://user/fields", mime_type="application/json")
async def user_fields() -> str:
    """User field definitions and access paths."""
    return await _read("user")


@mcp.resource("jira://agile/fields", mime_type="application/json")
async def agile_fields() -> str:
    """Board, sprint and epic field definitions and access paths."""
    return await _read("agile")


# === Tools ===


@mcp.tool()
def jirafields_list_resources() -> str:
    """List the available field resources.

    Use this first to discover which entity types have field documents.

    Returns:
        JSON array of resources with uri, name, description and mime_type.
    """
    resources = get_resolver().list_resources()
    return json.dumps([r.model_dump() for r in resources])


@mcp.tool()
async def jirafields_read_fields(entity_type: str) -> str:
    """Read the field document for an entity type.

    Includes static fields and, when enabled, custom fields discovered from
    the Jira instance.

    Args:
        entity_type: One of issue, project, user, agile

    Returns:
        JSON with fields (by id), path_index (path -> field id) and counts.
    """
    try:
        doc = await get_resolver().read_resource(f"jira://{entity_type}/fields")
        return doc.model_dump_json()
    except JiraFieldsError as e:
        return json.dumps({"error": e.message, "details": e.to_dict()})


@mcp.tool()
def jirafields_suggest_fields(
    entity_type: str,
    input: str,
    max_suggestions: int = 5,
    include_metadata: bool = False,
) -> str:
    """Suggest field names for a possibly misspelled field.

    Args:
        entity_type: One of issue, project, user, agile
        input: Field name as typed, e.g. "asignee"
        max_suggestions: Maximum number of suggestions (default 5)
        include_metadata: Include scores and their breakdown

    Returns:
        JSON with suggestions (best first) and matching custom field ids.

    Example:
        jirafields_suggest_fields("issue", "stauts")
        # {"suggestions": ["status", ...], "custom_field_hints": []}
    """
    resolver = get_resolver()
    try:
        if include_metadata:
            results = resolver.suggest_with_metadata(entity_type, input, max_suggestions)
            suggestions: list = [r.model_dump() for r in results]
        else:
            suggestions = resolver.suggest_field_names(entity_type, input, max_suggestions)
        hints = resolver.custom_field_hints(entity_type, input)
        return json.dumps({"suggestions": suggestions, "custom_field_hints": hints})
    except JiraFieldsError as e:
        return json.dumps({"error": e.message, "details": e.to_dict()})


@mcp.tool()
async def jirafields_validate_field_paths(entity_type: str, paths: list[str]) -> str:
    """Validate field paths before using them in a query.

    Args:
        entity_type: One of issue, project, user, agile
        paths: Dot-notation paths, e.g. ["status.name", "assignee.displayName"]

    Returns:
        JSON with is_valid, valid_paths, invalid_paths, path_info and
        suggestions for invalid paths.
    """
    result = await get_resolver().validate_field_paths(entity_type, paths)
    return result.model_dump_json()


def create_server(config: HybridConfig | None = None) -> FastMCP:
    """Create and configure the MCP server with a field resolver.

    Args:
        config: Settings (loaded from the environment when omitted)

    Returns:
        Configured FastMCP server instance
    """
    global _resolver
    _resolver = FieldResolver(config or load_config())
    logger.info(
        "jirafields initialized (dynamic fields %s)",
        "enabled" if _resolver.config.dynamic_discovery_enabled else "disabled",
    )
    return mcp


def main() -> None:
    """Entry point for running the MCP server."""
    parser = argparse.ArgumentParser(description="jirafields MCP Server")
    parser.add_argument("--url", help="Jira base URL (default: $JIRA_URL)")
    parser.add_argument("--token", help="Personal access token (default: $JIRA_PERSONAL_TOKEN)")
    parser.add_argument(
        "--dynamic",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Enable discovery of custom fields (default: $ENABLE_DYNAMIC_FIELDS)",
    )
    args = parser.parse_args()

    try:
        config = load_config(
            jira_url=args.url,
            personal_token=args.token,
            dynamic_discovery_enabled=args.dynamic,
        )
    except JiraFieldsError as e:
        parser.error(e.message)

    create_server(config)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
