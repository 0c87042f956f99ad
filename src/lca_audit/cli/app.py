# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Main CLI application for lca-audit."""

from __future__ import annotations

import logging

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from lca_audit import __version__
from lca_audit.config import load_factor_tables
from lca_audit.data.factors import DEFAULT_FACTORS, FactorTables
from lca_audit.data.models import LCAInput, LCAResult
from lca_audit.data.samples import SAMPLES, get_sample
from lca_audit.engine import LCAEngine
from lca_audit.ingest.file_import import LCAFileImporter
from lca_audit.reporting.terminal import TerminalRenderer

SAMPLE_CHOICES = list(SAMPLES.keys())
DEFAULT_SAMPLE = "copper_concentrate"

_INPUT_ERRORS = (FileNotFoundError, ValueError, ValidationError)


def _load_factors(path: str | None) -> FactorTables:
    if path is None:
        return DEFAULT_FACTORS
    return load_factor_tables(path)


def _load_input(input_path: str | None, sample: str | None,
                company: str | None) -> LCAInput:
    if input_path and sample:
        raise ValueError("--input and --sample are mutually exclusive")
    if input_path:
        return LCAFileImporter(input_path, company_name=company).load()
    lca_input = get_sample(sample or DEFAULT_SAMPLE)
    if company:
        lca_input.company_name = company
    return lca_input


def _run_assessment(
    input_path: str | None,
    sample: str | None,
    company: str | None,
    factors_path: str | None,
    console: Console,
) -> LCAResult:
    """Load the input and factors, run the engine, and return the result.

    Input problems are reported in red and terminate with exit status 1.
    """
    try:
        factors = _load_factors(factors_path)
        with console.status("[bold cyan]Loading input data..."):
            lca_input = _load_input(input_path, sample, company)
    except _INPUT_ERRORS as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise SystemExit(1)

    with console.status("[bold cyan]Running life cycle assessment..."):
        return LCAEngine(factors).assess(lca_input)


def _input_options(func):
    """Attach the shared input-selection options to a command."""
    func = click.option(
        "--factors", "factors_path", type=click.Path(), default=None,
        help="YAML file overriding the emission factor tables",
    )(func)
    func = click.option(
        "--company", type=str, default=None, help="Company name for the report",
    )(func)
    func = click.option(
        "--sample", "-s", type=click.Choice(SAMPLE_CHOICES), default=None,
        help=f"Built-in sample project (default: {DEFAULT_SAMPLE})",
    )(func)
    func = click.option(
        "--input", "-i", "input_path", type=click.Path(), default=None,
        help="CSV or JSON file with the process inventory",
    )(func)
    return func


@click.group()
@click.version_option(version=__version__)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, no_color: bool, verbose: bool) -> None:
    """lca-audit: Life Cycle Assessment for Metallurgical Processes

    Turn a process inventory into environmental impact metrics:

    \b
      Impacts:          GWP, energy intensity, water footprint
      Circularity:      Material Circularity Index
      Score:            weighted 0-100 score with A-F grade
      Recommendations:  hotspots, SDG alignment, improvement actions
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    ctx.ensure_object(dict)
    ctx.obj["console"] = Console(no_color=no_color)


@cli.command()
@_input_options
@click.option(
    "--export-pdf", type=click.Path(), default=None,
    help="Export results to PDF at this path",
)
@click.option(
    "--export-json", type=click.Path(), default=None,
    help="Export raw results as JSON at this path",
)
@click.option("--show-details/--no-details", default=True, help="Show detailed breakdown")
@click.pass_context
def run(
    ctx: click.Context,
    input_path: str | None,
    sample: str | None,
    company: str | None,
    factors_path: str | None,
    export_pdf: str | None,
    export_json: str | None,
    show_details: bool,
) -> None:
    """Run a full life cycle assessment and print the report."""
    console: Console = ctx.obj["console"]
    result = _run_assessment(input_path, sample, company, factors_path, console)

    renderer = TerminalRenderer(console)
    renderer.render(result, show_details=show_details)

    if export_pdf:
        _export_pdf(result, export_pdf, console)

    if export_json:
        _export_json(result, export_json, console)


@cli.command()
@click.option(
    "--format", "-f",
    type=click.Choice(["pdf", "json"]),
    default="pdf",
    help="Export format",
)
@click.option("--output", "-o", type=click.Path(), required=True, help="Output file path")
@_input_options
@click.pass_context
def export(
    ctx: click.Context,
    format: str,
    output: str,
    input_path: str | None,
    sample: str | None,
    company: str | None,
    factors_path: str | None,
) -> None:
    """Export an assessment report to PDF or JSON."""
    console: Console = ctx.obj["console"]
    result = _run_assessment(input_path, sample, company, factors_path, console)

    if format == "pdf":
        _export_pdf(result, output, console)
    elif format == "json":
        _export_json(result, output, console)


@cli.command()
@click.pass_context
def samples(ctx: click.Context) -> None:
    """List the built-in sample projects."""
    console: Console = ctx.obj["console"]

    table = Table(title="Sample Projects", show_header=True, header_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Project")
    table.add_column("Description")
    for sample in SAMPLES.values():
        table.add_row(sample.name, sample.lca_input.project_name, sample.description)
    console.print(table)


@cli.command()
@click.option(
    "--factors", "factors_path", type=click.Path(), default=None,
    help="YAML file overriding the emission factor tables",
)
@click.pass_context
def factors(ctx: click.Context, factors_path: str | None) -> None:
    """Print the active emission factor tables."""
    console: Console = ctx.obj["console"]
    try:
        tables = _load_factors(factors_path)
    except _INPUT_ERRORS as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise SystemExit(1)

    for title, unit, values in (
        ("Energy", "kg CO2e / kWh", tables.energy),
        ("Transport", "kg CO2e / tonne-km", tables.transport),
        ("Global Warming Potential", "kg CO2e / kg", tables.gwp),
    ):
        table = Table(title=f"{title} ({unit})", show_header=True, header_style="bold")
        table.add_column("Key", style="cyan")
        table.add_column("Factor", justify="right")
        for key, value in values.items():
            table.add_row(key, f"{value:g}")
        console.print(table)

    console.print(f"  [bold]Water[/bold]: {tables.water:g} kg CO2e / m³")
    bench = tables.benchmarks
    console.print(
        f"  [bold]Benchmarks[/bold]: {bench.energy_kwh_per_tonne:g} kWh/t, "
        f"{bench.water_m3_per_tonne:g} m³/t, "
        f"{bench.transport_distance_km:g} km, "
        f"waste recycle {bench.waste_recycle_rate:.0%}"
    )


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind host")
@click.option("--port", "-p", default=8080, type=int, help="Bind port")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int) -> None:
    """Start the REST API server."""
    from lca_audit.api import check_dependency

    check_dependency("fastapi", "pip install -e '.[api]'")
    check_dependency("uvicorn", "pip install -e '.[api]'")

    console: Console = ctx.obj["console"]
    console.print(f"[bold cyan]Starting API server on {host}:{port}...[/]")

    from lca_audit.api.server import create_app
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)


def _export_pdf(result: LCAResult, path: str, console: Console) -> None:
    """Export to PDF."""
    from lca_audit.reporting.pdf_report import PDFReportGenerator

    with console.status("[bold cyan]Generating PDF report..."):
        generator = PDFReportGenerator()
        generator.generate(result, path)
    console.print(f"  [green]PDF report exported to:[/green] {path}")


def _export_json(result: LCAResult, path: str, console: Console) -> None:
    """Export to JSON."""
    with open(path, "w") as f:
        f.write(result.model_dump_json(indent=2))
    console.print(f"  [green]JSON report exported to:[/green] {path}")
