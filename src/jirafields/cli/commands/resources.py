"""Field resource commands."""

import asyncio
from typing import Annotated

import typer

from jirafields.cli.context import CLIContext
from jirafields.cli.output import OutputFormatter

# Create resources subcommand group
app = typer.Typer(help="Inspect field resources")


@app.command("list")
def resources_list(ctx: typer.Context) -> None:
    """List available field resources."""
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        resources = cli_ctx.build_resolver().list_resources()
        formatter.print_table(
            f"Resources ({len(resources)} total)",
            [
                {
                    "uri": r.uri,
                    "name": r.name,
                    "description": r.description,
                    "mime_type": r.mime_type,
                }
                for r in resources
            ],
            ["uri", "name", "description"],
        )
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)


@app.command("show")
def resources_show(
    ctx: typer.Context,
    entity_type: Annotated[str, typer.Argument(help="Entity type: issue, project, user, agile")],
) -> None:
    """Show the fused field document for an entity type."""
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    async def _read():
        async with cli_ctx.build_resolver() as resolver:
            return await resolver.read_resource(f"jira://{entity_type}/fields")

    try:
        formatter.print_resource(asyncio.run(_read()))
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)


@app.command("validate")
def resources_validate(
    ctx: typer.Context,
    entity_type: Annotated[str, typer.Argument(help="Entity type: issue, project, user, agile")],
    paths: Annotated[list[str], typer.Argument(help="Field paths, e.g. status.name")],
) -> None:
    """Validate field paths for an entity type.

    Exits with code 1 when any path is invalid.

    Examples:

        jirafields resources validate issue status.name assignee.displayName
    """
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    async def _validate():
        async with cli_ctx.build_resolver() as resolver:
            return await resolver.validate_field_paths(entity_type, paths)

    try:
        result = asyncio.run(_validate())
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)

    formatter.print_validation(result)
    if not result.is_valid:
        raise typer.Exit(code=1)
