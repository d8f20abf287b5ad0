"""Field name suggestion command."""

from typing import Annotated

import typer

from jirafields.cli.context import CLIContext
from jirafields.cli.output import OutputFormatter


def suggest_command(
    ctx: typer.Context,
    entity_type: Annotated[str, typer.Argument(help="Entity type: issue, project, user, agile")],
    input: Annotated[str, typer.Argument(help="Field name as typed, e.g. 'asignee'")],
    limit: Annotated[
        int,
        typer.Option("--limit", "-n", help="Maximum number of suggestions"),
    ] = 5,
    metadata: Annotated[
        bool,
        typer.Option("--metadata", "-m", help="Show scores and their breakdown"),
    ] = False,
) -> None:
    """Suggest field names for a possibly misspelled field.

    Examples:

        jirafields suggest issue stauts

        jirafields suggest user emial --metadata
    """
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        resolver = cli_ctx.build_resolver()
        results = resolver.suggest_with_metadata(entity_type, input, limit)
        hints = resolver.custom_field_hints(entity_type, input)
        formatter.print_suggestions(input, results, hints, with_metadata=metadata)
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)
