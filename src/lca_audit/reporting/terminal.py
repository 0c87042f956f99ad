"""Rich terminal report renderer.

Composes Rich tables, panels, and ASCII gauges into the primary
user-facing terminal output for an assessment.  Values are displayed
exactly as held by the :class:`LCAResult`; nothing is recomputed.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from lca_audit import __version__
from lca_audit.data.models import LCAResult
from lca_audit.reporting.ascii_charts import horizontal_bar, mini_gauge, score_gauge


class TerminalRenderer:
    """Renders assessment results to the terminal using Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render(self, result: LCAResult, show_details: bool = True) -> None:
        """Render the full assessment report to the terminal."""
        self._render_header(result)
        self._render_overall_score(result)
        self._render_impacts(result)
        if show_details:
            self._render_sub_scores(result)
            self._render_hotspots(result)
            self._render_sdg_alignment(result)
        self._render_recommendations(result)
        if show_details:
            self._render_circular_economy(result)
        self._render_warnings(result)
        self._render_footer(result)

    # ------------------------------------------------------------------
    # Private rendering methods
    # ------------------------------------------------------------------

    def _render_header(self, result: LCAResult) -> None:
        header_text = Text()
        header_text.append("LCA ASSESSMENT", style="bold cyan")
        header_text.append(" | ", style="dim")
        header_text.append(result.project_name, style="bold")
        if result.company_name:
            header_text.append(f" ({result.company_name})", style="dim")
        if result.is_ai_powered:
            header_text.append(" | AI-assisted", style="magenta")

        self.console.print()
        self.console.print(Panel(header_text, title="Life Cycle Assessment"))

    def _render_overall_score(self, result: LCAResult) -> None:
        gauge = score_gauge(result.overall_score, width=30)
        mci = result.sustainability_score.mci_score
        self.console.print()
        self.console.print(f"  [bold]OVERALL SCORE[/bold]: {gauge}")
        self.console.print(f"  [bold]MCI[/bold]: {mci}%")

    def _render_impacts(self, result: LCAResult) -> None:
        self.console.print()
        self.console.print(Rule("[bold]IMPACT METRICS[/bold]"))

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Category", style="bold", min_width=28)
        table.add_column("Value", justify="right", min_width=12)
        table.add_column("Unit", min_width=8)
        table.add_column("Benchmark", justify="right", min_width=10)
        table.add_column("Status", justify="center", min_width=9)

        for impact in result.impacts:
            color = impact.status.color
            table.add_row(
                impact.category,
                f"{impact.value:,.2f}",
                impact.unit,
                f"{impact.benchmark:,.0f}",
                f"[{color}]{impact.status.value}[/{color}]",
            )
        self.console.print(table)

    def _render_sub_scores(self, result: LCAResult) -> None:
        score = result.sustainability_score
        self.console.print()
        self.console.print(Rule("[bold]SUSTAINABILITY SCORE BREAKDOWN[/bold]"))

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Sub-score", style="bold", min_width=22)
        table.add_column("Score", justify="left", min_width=15)

        for label, value in (
            ("Global Warming", score.gwp_score),
            ("Energy", score.energy_score),
            ("Water", score.water_score),
            ("Waste", score.waste_score),
            ("Material Circularity", score.mci_score),
        ):
            table.add_row(label, mini_gauge(value))
        self.console.print(table)

    def _render_hotspots(self, result: LCAResult) -> None:
        self.console.print()
        self.console.print(Rule("[bold]HOTSPOTS[/bold]"))
        if not result.hotspots:
            self.console.print("  [dim]No emissions to attribute.[/dim]")
            return

        for hotspot in result.hotspots:
            self.console.print(
                horizontal_bar(hotspot.area, hotspot.contribution, 100, width=30)
                + f"  [dim]{hotspot.impact:,.2f} kg CO2e[/dim]"
            )
            self.console.print(f"    [dim]•[/dim] {hotspot.recommendation}")

    def _render_sdg_alignment(self, result: LCAResult) -> None:
        self.console.print()
        self.console.print(Rule("[bold]SDG ALIGNMENT[/bold]"))

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("SDG", justify="right", width=4)
        table.add_column("Goal", min_width=30)
        table.add_column("Alignment", justify="center", width=10)
        table.add_column("Detail", min_width=30)

        for sdg in result.sdg_alignments:
            color = sdg.alignment.color
            table.add_row(
                str(sdg.sdg),
                sdg.title,
                f"[{color}]{sdg.alignment.value}[/{color}]",
                sdg.description,
            )
        self.console.print(table)

    def _render_recommendations(self, result: LCAResult) -> None:
        self.console.print()
        self.console.print(Rule("[bold]RECOMMENDATIONS[/bold]"))
        for i, rec in enumerate(result.recommendations, start=1):
            self.console.print(f"  [bold]{i}.[/bold] {rec}")

        if result.ai_recommendations:
            self.console.print()
            self.console.print("  [bold magenta]AI Recommendations:[/bold magenta]")
            for rec in result.ai_recommendations:
                self.console.print(f"    [dim]•[/dim] {rec}")

    def _render_circular_economy(self, result: LCAResult) -> None:
        self.console.print()
        self.console.print(Rule("[bold]CIRCULAR ECONOMY[/bold]"))
        for suggestion in result.circular_economy_suggestions:
            self.console.print(f"  [dim]•[/dim] {suggestion}")

    def _render_warnings(self, result: LCAResult) -> None:
        if not result.validation_warnings:
            return
        lines = []
        for warning in result.validation_warnings:
            tag = "[yellow]benchmark[/yellow] " if warning.used_benchmark else ""
            lines.append(f"{tag}[bold]{warning.field}[/bold]: {warning.message}")

        self.console.print()
        self.console.print(
            Panel(
                "\n".join(lines),
                title="[bold]DATA QUALITY WARNINGS[/bold]",
                border_style="yellow",
            )
        )

    def _render_footer(self, result: LCAResult) -> None:
        self.console.print()
        self.console.print(Rule(style="dim"))
        self.console.print(
            f"  [dim]Generated: {result.timestamp.strftime('%Y-%m-%d %H:%M UTC')} | "
            f"lca-audit v{__version__}[/dim]"
        )
        self.console.print()
