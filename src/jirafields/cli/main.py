"""jirafields CLI - Main entry point."""

import logging
import sys
from typing import Annotated

import typer

import jirafields
from jirafields.cli.context import CLIContext

# Create main Typer app
app = typer.Typer(
    name="jirafields",
    help="jirafields CLI - Jira field discovery and suggestions for agents",
    no_args_is_help=True,
)

# Store CLI context globally (will be set in callback)
state: dict[str, CLIContext] = {}


@app.callback()
def main_callback(
    ctx: typer.Context,
    url: Annotated[
        str | None,
        typer.Option(
            "--url",
            "-u",
            help="Jira base URL (default: $JIRA_URL)",
        ),
    ] = None,
    token: Annotated[
        str | None,
        typer.Option(
            "--token",
            "-t",
            help="Personal access token (default: $JIRA_PERSONAL_TOKEN)",
        ),
    ] = None,
    dynamic: Annotated[
        bool | None,
        typer.Option(
            "--dynamic/--static",
            help="Discover custom fields from Jira (default: $ENABLE_DYNAMIC_FIELDS)",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Output as JSON (machine-readable)",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log diagnostics to stderr",
        ),
    ] = False,
) -> None:
    """Initialize CLI context with global options."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    cli_ctx = CLIContext(
        json_output=json_output,
        jira_url=url,
        personal_token=token,
        dynamic=dynamic,
        verbose=verbose,
    )

    # Store in Typer context for command access
    ctx.obj = cli_ctx
    state["cli_ctx"] = cli_ctx


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"jirafields v{jirafields.__version__}")


# Register command groups
from jirafields.cli.commands import analyze, resources, suggest  # noqa: E402

app.add_typer(resources.app, name="resources")

# Register standalone commands (not groups)
app.command(name="suggest")(suggest.suggest_command)
app.command(name="analyze")(analyze.analyze_command)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
