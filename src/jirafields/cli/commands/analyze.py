"""Field usage analysis command."""

from typing import Annotated

import typer

from jirafields.cli.context import CLIContext
from jirafields.cli.output import OutputFormatter
from jirafields.cli.parsing import read_samples_file
from jirafields.suggestions.analysis import analyze_field_usage, top_used_fields


def analyze_command(
    ctx: typer.Context,
    entity_type: Annotated[str, typer.Argument(help="Entity type: issue, project, user, agile")],
    samples: Annotated[str, typer.Argument(help="JSON file with sampled records")],
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", help="Show only the N most available fields"),
    ] = None,
) -> None:
    """Analyze field usage in sampled records.

    Reads a JSON array of records (or a REST response such as a search
    result) and reports how often each field carries a value.

    Examples:

        jirafields analyze issue search-response.json --limit 20
    """
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        records = read_samples_file(samples)
        usage = analyze_field_usage(records, entity_type)
        ordered = top_used_fields(usage, len(usage) if limit is None else limit)
        formatter.print_usage(
            f"Field usage in {len(records)} {entity_type} records",
            {name: usage[name] for name in ordered},
        )
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)
