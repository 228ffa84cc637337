"""
Terminal and machine-readable rendering of analysis results and catalogs.
"""

import json
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

import yaml
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .analyzers.matcher import MatchRule
from .core.catalog import Entry
from .core.results import AnalysisResult, ComplexityTier, DetectedEntry


class OutputFormat(Enum):
    """Supported output formats."""
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


COMPLEXITY_STYLES = {
    ComplexityTier.LOW: "green",
    ComplexityTier.MEDIUM: "yellow",
    ComplexityTier.HIGH: "bold red",
}


class ResultRenderer:
    """Render results in the configured format.

    Text output goes through a Rich console; JSON and YAML are printed
    plainly so they can be piped.
    """

    def __init__(
        self,
        output_format: OutputFormat = OutputFormat.TEXT,
        console: Optional[Console] = None,
    ):
        self.output_format = output_format
        self.console = console or Console(highlight=False)

    def render(
        self,
        result: AnalysisResult,
        explanations: Optional[Sequence[Tuple[Entry, MatchRule]]] = None,
    ):
        """
        Output one analysis result.

        Args:
            result: Result to output
            explanations: Optional (entry, rule) pairs shown as an extra table
                in text mode
        """
        if self.output_format == OutputFormat.JSON:
            print(result.to_json())
        elif self.output_format == OutputFormat.YAML:
            print(yaml.safe_dump(result.to_dict(), sort_keys=False, allow_unicode=True), end="")
        else:
            self._render_text(result, explanations)

    def _render_text(self, result: AnalysisResult, explanations):
        style = COMPLEXITY_STYLES[result.complexity]
        self.console.print(Panel(
            f"Complexity: [{style}]{result.complexity.value}[/{style}]",
            title="Code Analysis Results",
            border_style="blue",
        ))

        if result.patterns:
            self.console.print("\n[bold]Patterns detected:[/bold]")
            for pattern in result.patterns:
                self.console.print(f"  - {pattern}")

        if result.detailed_algorithms:
            self.console.print(self._entries_table("Algorithms detected", result.detailed_algorithms))

        if result.detailed_data_structures:
            self.console.print(self._entries_table("Data structures detected", result.detailed_data_structures))

        if not (result.detailed_algorithms or result.detailed_data_structures):
            self.console.print("\n[dim]No known algorithms or data structures detected.[/dim]")

        if explanations:
            table = Table(title="Match rules", show_header=True, header_style="bold magenta")
            table.add_column("Entry", style="cyan")
            table.add_column("Category")
            table.add_column("Rule", style="yellow")
            for entry, rule in explanations:
                table.add_row(entry.name, entry.category.value, rule.value)
            self.console.print(table)

        if result.recommendations:
            self.console.print("\n[bold]Recommendations:[/bold]")
            for recommendation in result.recommendations:
                self.console.print(f"  - {recommendation}", soft_wrap=True)

    def _entries_table(self, title: str, entries: List[DetectedEntry]) -> Table:
        table = Table(title=title, show_header=True, header_style="bold magenta", box=box.SIMPLE)
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Category", style="yellow")
        table.add_column("Complexity", style="green")
        table.add_column("Description", style="white")
        for entry in entries:
            description = entry.description
            if len(description) > 80:
                description = description[:77] + "..."
            table.add_row(entry.name, entry.category, entry.complexity, description)
        return table

    def render_catalog(self, title: str, entries: Iterable[Entry]):
        """Output catalog entries without their exemplars."""
        entries = list(entries)
        if self.output_format != OutputFormat.TEXT:
            data = [entry.to_detected().to_dict() for entry in entries]
            if self.output_format == OutputFormat.JSON:
                print(json.dumps(data, indent=2, ensure_ascii=False))
            else:
                print(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), end="")
            return

        if not entries:
            self.console.print("[yellow]No matching catalog entries.[/yellow]")
            return

        table = Table(title=title, show_header=True, header_style="bold magenta")
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Category", style="yellow")
        table.add_column("Complexity", style="green")
        table.add_column("Reference", style="blue")
        for entry in entries:
            table.add_row(entry.name, entry.category.value, entry.complexity, entry.wikipedia_link)
        self.console.print(table)
