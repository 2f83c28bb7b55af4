#!/usr/bin/env python3
"""
Cash Flow CLI - Period Analytics Commands

Command-line presentation of the per-period cash flow table, the list of
available years, and the cash flow chart.
"""

from pathlib import Path

import click

from ..analysis import COLUMNS, CashFlowAnalytics, generate_cash_flow_chart, grand_totals
from ..core.config import get_config
from ..core.currency import format_usd
from ..core.dates import Granularity
from ..core.json_utils import format_json, write_json
from ..services.store import ServiceStore

SCALE_CHOICE = click.Choice([g.value for g in Granularity], case_sensitive=False)


def load_store(data_file: str | None) -> ServiceStore:
    """Load the service store from an explicit file or the configured default."""
    path = Path(data_file) if data_file else get_config().store.services_file
    return ServiceStore.from_json_file(path)


def build_analytics(data_file: str | None, year: int | None, scale: str | None) -> CashFlowAnalytics:
    """
    Create analytics for the requested year (default: latest) and scale.

    The caller owns the result and must close it, usually with ``with``.
    """
    config = get_config()
    granularity = Granularity.from_title(scale) if scale else config.analysis.default_scale
    return CashFlowAnalytics(load_store(data_file), scale=granularity, year=year)


def render_table(analytics: CashFlowAnalytics) -> list[str]:
    """Lay out the period rows as aligned text lines with a totals footer."""
    rows = analytics.rows()
    totals = grand_totals(analytics.periods)
    footer = {"period": "Total", **{name: format_usd(value) for name, value in totals.items()}}

    widths = {
        column.id: max(len(column.title), *(len(row[column.id]) for row in [*rows, footer]))
        for column in COLUMNS
    }

    def line(values: dict[str, str]) -> str:
        cells = []
        for column in COLUMNS:
            text = values[column.id]
            width = widths[column.id]
            cells.append(text.ljust(width) if column.alignment == "left" else text.rjust(width))
        return "  ".join(cells)

    header = line({column.id: column.title for column in COLUMNS})
    rule = "-" * len(header)
    return [header, rule, *(line(row) for row in rows), rule, line(footer)]


def emit_report(analytics: CashFlowAnalytics, output_format: str, output: str | None, verbose: bool) -> None:
    """Print or save the period report in the requested format."""
    if verbose:
        click.echo(f"Year: {analytics.selected_year}")
        click.echo(f"Scale: {analytics.scale.title}")
        click.echo(f"Periods: {len(analytics.periods)}")
        click.echo()

    if analytics.selected_year is None:
        click.echo("No services with due dates found.")
        return

    if output_format == "json":
        data = {
            "year": analytics.selected_year,
            "scale": analytics.scale.value,
            "periods": [bucket.to_dict() for bucket in analytics.periods],
            "totals": {name: str(value) for name, value in grand_totals(analytics.periods).items()},
        }
        if output:
            write_json(output, data)
        else:
            click.echo(format_json(data))
    elif output_format == "csv":
        df = analytics.to_dataframe()
        if output:
            df.to_csv(output)
        else:
            click.echo(df.to_csv(), nl=False)
    else:
        text = "\n".join(render_table(analytics))
        if output:
            Path(output).write_text(text + "\n", encoding="utf-8")
        else:
            click.echo(f"Cash Flow {analytics.selected_year} by {analytics.scale.title}")
            click.echo(text)

    if output:
        click.echo(f"✅ Report saved to: {output}")


@click.group()
def cashflow() -> None:
    """Cash flow analytics by month or ISO week."""
    pass


@cashflow.command()
@click.option("--data-file", help="Services JSON file (defaults to configured file)")
@click.option("--year", type=int, help="Year to report (defaults to latest year with due dates)")
@click.option("--scale", type=SCALE_CHOICE, help="Bucket by month or ISO week")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "csv"]),
    default="table",
    help="Output format (default: table)",
)
@click.option("--output", help="Write the report to this file instead of stdout")
@click.pass_context
def report(
    ctx: click.Context,
    data_file: str | None,
    year: int | None,
    scale: str | None,
    output_format: str,
    output: str | None,
) -> None:
    """
    Show inflows, outflows and net per period for one year.

    Examples:
      a2b cashflow report
      a2b cashflow report --year 2024 --scale week
      a2b cashflow report --format csv --output cashflow.csv
    """
    try:
        analytics = build_analytics(data_file, year, scale)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"❌ Error loading services: {e}", err=True)
        raise click.ClickException(str(e)) from e

    verbose = ctx.obj.get("verbose", False) if ctx.obj else False
    with analytics:
        emit_report(analytics, output_format, output, verbose)


@cashflow.command()
@click.option("--data-file", help="Services JSON file (defaults to configured file)")
def years(data_file: str | None) -> None:
    """List years that have any due date."""
    try:
        analytics = build_analytics(data_file, None, None)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    with analytics:
        if not analytics.years:
            click.echo("No services with due dates found.")
            return
        for year in analytics.years:
            click.echo(str(year))


@cashflow.command()
@click.option("--data-file", help="Services JSON file (defaults to configured file)")
@click.option("--year", type=int, help="Year to chart (defaults to latest year with due dates)")
@click.option("--scale", type=SCALE_CHOICE, help="Bucket by month or ISO week")
@click.option("--output-dir", help="Override output directory")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["png", "pdf", "svg"]),
    default="png",
    help="Output format (default: png)",
)
def chart(
    data_file: str | None,
    year: int | None,
    scale: str | None,
    output_dir: str | None,
    output_format: str,
) -> None:
    """
    Render the per-period cash flow chart.

    Example:
      a2b cashflow chart --year 2024 --scale month --format svg
    """
    config = get_config()
    output_path = Path(output_dir) if output_dir else config.analysis.output_dir

    try:
        with build_analytics(data_file, year, scale) as analytics:
            title = f"Cash Flow {analytics.selected_year} by {analytics.scale.title}"
            output_file = generate_cash_flow_chart(
                analytics.periods,
                output_path,
                title=title,
                figure_size=(config.analysis.chart_width, config.analysis.chart_height),
                dpi=config.analysis.chart_dpi,
                output_format=output_format,
            )
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"❌ Error generating chart: {e}", err=True)
        raise click.ClickException(str(e)) from e

    click.echo(f"✅ Chart saved to: {output_file}")
