"""Output formatting for CLI commands."""

import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from jirafields.core.types import (
    BatchValidationResult,
    FieldUsage,
    ResourceDocument,
    SuggestionResult,
)
from jirafields.exceptions import JiraFieldsError

console = Console()


class OutputFormatter:
    """Formats output for terminal or JSON mode."""

    def __init__(self, json_mode: bool = False) -> None:
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON instead of Rich formatting
        """
        self.json_mode = json_mode

    def print_table(
        self,
        title: str,
        data: list[dict[str, Any]],
        columns: list[str],
    ) -> None:
        """Print data as Rich table or JSON array.

        Args:
            title: Table title
            data: List of row dictionaries
            columns: Column names to display
        """
        if self.json_mode:
            print(json.dumps(data, default=str, indent=2))
        else:
            table = Table(title=title, show_header=True, header_style="bold magenta")
            for col in columns:
                table.add_column(col)
            for row in data:
                table.add_row(*[str(row.get(col, "")) for col in columns])
            console.print(table)

    def print_resource(self, doc: ResourceDocument) -> None:
        """Print a fused field document.

        Args:
            doc: Document to display
        """
        if self.json_mode:
            print(json.dumps(doc.model_dump(mode="json"), indent=2))
            return

        console.print(f"\n[bold]Resource:[/bold] {doc.uri}")
        console.print(f"Version: {doc.version}")
        console.print(f"Fields: {doc.total_fields} ({doc.dynamic_fields} dynamic)")
        console.print(f"Paths: {len(doc.path_index)}")
        if doc.last_dynamic_update:
            console.print(f"Custom fields discovered: {doc.last_dynamic_update:%Y-%m-%d %H:%M:%S}")

        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("ID")
        table.add_column("Name")
        table.add_column("Type")
        table.add_column("Source")
        table.add_column("Paths")
        for field in doc.fields.values():
            table.add_row(
                field.id,
                field.name,
                field.type,
                field.source,
                str(len(field.access_paths)),
            )
        console.print(table)

    def print_validation(self, result: BatchValidationResult) -> None:
        """Print a field path validation result.

        Args:
            result: Validation result to display
        """
        if self.json_mode:
            print(json.dumps(result.model_dump(), indent=2))
            return

        if result.error:
            console.print(f"✗ {result.error}", style="red")
            return

        for path in result.valid_paths:
            info = result.path_info.get(path)
            detail = f" [dim]({info.field_id}, {info.type})[/dim]" if info else ""
            console.print(f"[green]✓[/green] {path}{detail}")
        for path in result.invalid_paths:
            hint = result.suggestions.get(path)
            detail = f" [dim]did you mean: {', '.join(hint)}?[/dim]" if hint else ""
            console.print(f"[red]✗[/red] {path}{detail}")

    def print_suggestions(
        self,
        input: str,
        results: list[SuggestionResult],
        hints: list[str] | None = None,
        with_metadata: bool = False,
    ) -> None:
        """Print ranked field suggestions.

        Args:
            input: The field name that was looked up
            results: Ranked suggestions
            hints: Candidate custom field ids
            with_metadata: Include the score breakdown
        """
        if self.json_mode:
            suggestions: list[Any] = (
                [r.model_dump() for r in results] if with_metadata else [r.field for r in results]
            )
            print(
                json.dumps(
                    {"input": input, "suggestions": suggestions, "custom_field_hints": hints or []},
                    indent=2,
                )
            )
            return

        if not results:
            console.print(f"No suggestions for '{input}'", style="yellow")
        elif with_metadata:
            table = Table(title=f"Suggestions for '{input}'", header_style="bold magenta")
            for col in ("Field", "Score", "Similarity", "Frequency", "Availability", "Typo"):
                table.add_column(col)
            for r in results:
                table.add_row(
                    r.field,
                    f"{r.score:.3f}",
                    f"{r.metadata.similarity:.3f}",
                    r.metadata.frequency,
                    f"{r.metadata.availability:.2f}",
                    "✓" if r.metadata.is_typo_correction else "",
                )
            console.print(table)
        else:
            for r in results:
                console.print(r.field)

        if hints:
            console.print(f"Custom field candidates: {', '.join(hints)}", style="dim")

    def print_usage(self, title: str, usage: dict[str, FieldUsage]) -> None:
        """Print analysed field usage.

        Args:
            title: Table title
            usage: Usage per field, in display order
        """
        rows = [
            {"Field": name, "Frequency": u.frequency, "Availability": f"{u.availability:.2f}"}
            for name, u in usage.items()
        ]
        if self.json_mode:
            print(json.dumps({name: u.model_dump() for name, u in usage.items()}, indent=2))
        else:
            self.print_table(title, rows, ["Field", "Frequency", "Availability"])

    def print_error(self, error: Exception) -> None:
        """Print error message.

        Args:
            error: Exception to display
        """
        if self.json_mode:
            if isinstance(error, JiraFieldsError):
                print(json.dumps(error.to_dict(), indent=2))
            else:
                print(json.dumps({"error": str(error)}, indent=2))
        else:
            error_text = str(error)
            # For JiraFieldsError, include context if available
            if isinstance(error, JiraFieldsError) and error.context:
                context_str = "\n".join(f"{k}: {v}" for k, v in error.context.items())
                error_text = f"{error_text}\n\n{context_str}"

            panel = Panel(
                error_text,
                title="[red]Error[/red]",
                border_style="red",
            )
            console.print(panel)

