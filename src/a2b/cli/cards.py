#!/usr/bin/env python3
"""
Cards CLI - Open Receivables, Payables, Commissions and Revenue Shares
"""

import click

from ..core.json_utils import format_json
from ..services.cards import build_commission_items, build_pr_items, build_revshare_items
from .cashflow import load_store


@click.group()
def cards() -> None:
    """Payable, receivable, commission and revenue share cards."""
    pass


@cards.command()
@click.option("--data-file", help="Services JSON file (defaults to configured file)")
@click.option("--include-cleared", is_flag=True, help="Also list cleared items")
def receivables(data_file: str | None, include_cleared: bool) -> None:
    """List GSPR receivables and COSP payables by due date."""
    try:
        items = build_pr_items(load_store(data_file).load_all(), include_cleared=include_cleared)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    if not items:
        click.echo("No open payables or receivables.")
        return

    for item in items:
        status = " [cleared]" if item.cleared else ""
        click.echo(f"{item.due_date.isoformat()}  {item.title:<18} {item.amount_text:>14}{status}")
        click.echo(f"    {item.client_label}  Type: {item.service_type}  Notes: {item.notes}")


@cards.command()
@click.option("--data-file", help="Services JSON file (defaults to configured file)")
@click.option("--pending-only", is_flag=True, help="Hide commissions already received")
def commissions(data_file: str | None, pending_only: bool) -> None:
    """List commissions receivable by due date."""
    try:
        items = build_commission_items(load_store(data_file).load_all(), include_received=not pending_only)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    if not items:
        click.echo("No commissions receivable.")
        return

    for item in items:
        mark = "x" if item.received else " "
        click.echo(f"[{mark}] {item.due_date.isoformat()}  {item.amount_text:>14}  {item.agent}")


@cards.command()
@click.option("--data-file", help="Services JSON file (defaults to configured file)")
@click.option("--unpaid-only", is_flag=True, help="Hide revenue shares already paid")
def revshares(data_file: str | None, unpaid_only: bool) -> None:
    """List revenue shares payable by due date."""
    try:
        items = build_revshare_items(load_store(data_file).load_all(), include_paid=not unpaid_only)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    if not items:
        click.echo("No revenue shares payable.")
        return

    for item in items:
        mark = "x" if item.paid else " "
        click.echo(f"[{mark}] {item.due_date.isoformat()}  {item.amount_text:>14}  {item.counterparty}")


@cards.command()
@click.argument("service_id")
@click.option("--data-file", help="Services JSON file (defaults to configured file)")
def show(service_id: str, data_file: str | None) -> None:
    """Print the full service record behind a card."""
    try:
        record = load_store(data_file).get(service_id)
    except KeyError as e:
        raise click.ClickException(f"Service not found: {service_id}") from e
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(format_json(record.to_dict()))
