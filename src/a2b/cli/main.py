#!/usr/bin/env python3
"""
Main CLI Entry Point for A2B Cash Flow

Provides a unified command-line interface for service cash flow tools.
"""

import logging
import os

import click

from ..core.config import get_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    A2B Cash Flow - Service Receivables and Payables

    Tracks gross sales receivables, commissions and cost of sales payables,
    and reports them by month or ISO week.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["A2B_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("a2b").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = get_config()

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Services file: {ctx.obj['config'].store.services_file}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from a2b import __version__

    click.echo(f"A2B Cash Flow v{__version__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Services File: {config_obj.store.services_file}")
    click.echo(f"  Chart Directory: {config_obj.analysis.output_dir}")
    click.echo(f"  Default Scale: {config_obj.analysis.default_scale.title}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


from .cards import cards  # noqa: E402
from .cashflow import cashflow  # noqa: E402

main.add_command(cashflow)
main.add_command(cards)


if __name__ == "__main__":
    main()
