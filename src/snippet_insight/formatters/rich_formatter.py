"""Rich terminal formatter for Snippet Insight."""

import io
from typing import List, Optional

from rich.console import Console, RenderableType
from rich.table import Table
from rich.text import Text

from ..models import AnalysisResult, Category, Rank
from .base import BaseFormatter

_RANK_STYLES = {
    Rank.NO_INPUT: "dim",
    Rank.SIMPLE: "green",
    Rank.MODERATE: "yellow",
    Rank.HIGH: "red",
    Rank.CRITICAL: "red bold",
}

_CATEGORY_STYLES = {
    Category.FUNCTION: "cyan",
    Category.CONDITIONAL: "magenta",
    Category.LOOP: "blue",
}

NO_DATA = "No data to display. Paste some code to see the breakdown."


def rank_style(rank: Rank) -> str:
    return _RANK_STYLES.get(rank, "")


class RichFormatter(BaseFormatter):
    """Rich terminal output: header, metrics table, findings and syntax check."""

    name = "rich"

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, result: AnalysisResult) -> None:
        for renderable in self._renderables(result):
            self.console.print(renderable)

    def format(self, result: AnalysisResult) -> str:
        buffer = io.StringIO()
        plain = Console(file=buffer, width=100, color_system=None)
        for renderable in self._renderables(result):
            plain.print(renderable)
        return buffer.getvalue()

    def _renderables(self, result: AnalysisResult) -> List[RenderableType]:
        return [
            Text(),
            self._header(result),
            Text(),
            self._metrics_table(result),
            Text(),
            self._findings_table(result),
            Text(),
            *self._syntax_section(result),
            Text(),
        ]

    def _header(self, result: AnalysisResult) -> Text:
        header = Text()
        header.append("SNIPPET INSIGHT", style="bold cyan")
        header.append("  ")
        header.append(f" {result.language} ", style="bold reverse")
        header.append("  score ")
        header.append(str(result.score), style="bold")
        header.append("  ")
        header.append(result.rank.value, style=rank_style(result.rank))
        return header

    def _metrics_table(self, result: AnalysisResult) -> Table:
        table = Table(title="Metrics", show_header=True, pad_edge=True)
        table.add_column("Metric", min_width=20)
        table.add_column("Value", justify="right")

        table.add_row("Lines of code", str(result.line_count))
        table.add_row("Functions", str(result.function_count))
        table.add_row("Conditionals", str(result.conditional_count))
        table.add_row("Loops", str(result.loop_count))
        table.add_row("Max nesting depth", str(result.max_nesting_depth))
        table.add_row("Max loop depth", str(result.max_loop_depth))
        table.add_row("Time complexity", result.time_complexity)
        table.add_row("Space complexity", result.space_complexity)
        table.add_row(
            "Score",
            Text(f"{result.score} ({result.rank.value})", style=rank_style(result.rank)),
        )
        return table

    def _findings_table(self, result: AnalysisResult) -> Table:
        table = Table(title="Breakdown", show_header=True, pad_edge=True)
        table.add_column("Type", min_width=12)
        table.add_column("Construct", min_width=20)
        table.add_column("Line", justify="right")
        table.add_column("Weight", justify="right")

        if not result.findings:
            table.add_row("", Text(NO_DATA, style="dim"), "", "")
            return table

        for finding in result.findings:
            table.add_row(
                Text(finding.category.value, style=_CATEGORY_STYLES.get(finding.category, "")),
                Text(finding.label, style="bold"),
                f"L{finding.line}",
                f"+{finding.weight}",
            )
        return table

    def _syntax_section(self, result: AnalysisResult) -> List[RenderableType]:
        if result.is_clean:
            return [Text("✓ No syntax issues detected", style="green")]

        lines: List[RenderableType] = [
            Text(f"✗ {len(result.errors)} syntax issue(s)", style="red bold")
        ]
        for issue in result.errors:
            where = f"line {issue.line}" if issue.line is not None else "line ?"
            lines.append(Text(f"  {where}: {issue.message}", style="red"))
        return lines
