#!/usr/bin/env python3
"""
Payables/Receivables, Commission and Revenue Share Cards

Builds the card lists shown for open receivables, payables, commissions and
revenue shares, and applies the card actions (clear, mark received, mark paid)
through the store.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from ..core.currency import format_usd
from ..core.models import FinancialRecord
from .store import ServiceStore


class PRKind(Enum):
    """Whether a card is a GSPR receivable or a COSP payable."""

    RECEIVABLE_GSPR = "receivable_gspr"
    PAYABLE_COSP = "payable_cosp"


_TITLES = {
    PRKind.RECEIVABLE_GSPR: "Receivable (GSPR)",
    PRKind.PAYABLE_COSP: "Payable (COSP)",
}

# Flag on FinancialRecord that marks each kind as cleared
_CLEARED_FLAGS = {
    PRKind.RECEIVABLE_GSPR: "gspr_cleared",
    PRKind.PAYABLE_COSP: "cosp_cleared",
}


@dataclass(frozen=True)
class PRItem:
    """A single payable or receivable entry derived from a service."""

    kind: PRKind
    record: FinancialRecord
    due_date: date
    amount: Decimal
    client_first_name: str = ""
    client_last_name: str = ""
    service_type: str = ""
    notes: str = ""

    @property
    def title(self) -> str:
        return _TITLES[self.kind]

    @property
    def amount_text(self) -> str:
        return format_usd(self.amount)

    @property
    def client_label(self) -> str:
        return f"Client: {self.client_first_name} {self.client_last_name}"

    @property
    def cleared(self) -> bool:
        return getattr(self.record, _CLEARED_FLAGS[self.kind])


@dataclass(frozen=True)
class CommissionItem:
    """A commission receivable card."""

    record: FinancialRecord
    due_date: date
    amount: Decimal
    agent: str = ""
    received: bool = False

    @property
    def amount_text(self) -> str:
        return format_usd(self.amount)


@dataclass(frozen=True)
class RevShareItem:
    """A revenue share payable card."""

    record: FinancialRecord
    due_date: date
    amount: Decimal
    counterparty: str = ""
    paid: bool = False

    title = "Revenue Share Payable"

    @property
    def amount_text(self) -> str:
        return format_usd(self.amount)


def _pr_item(kind: PRKind, record: FinancialRecord, due_date: date, amount: Decimal) -> PRItem:
    return PRItem(
        kind=kind,
        record=record,
        due_date=due_date,
        amount=amount,
        client_first_name=record.client_first_name,
        client_last_name=record.client_last_name,
        service_type=record.service_type,
        notes=record.notes,
    )


def build_pr_items(records: Iterable[FinancialRecord], include_cleared: bool = False) -> list[PRItem]:
    """
    Payable and receivable cards for records with GSPR/COSP due dates.

    Args:
        records: Service records
        include_cleared: Keep legs already marked cleared

    Returns:
        Cards ordered by due date, receivables before payables on the same day
    """
    items = []
    for record in records:
        if record.gspr_due_date is not None and (include_cleared or not record.gspr_cleared):
            items.append(_pr_item(PRKind.RECEIVABLE_GSPR, record, record.gspr_due_date, record.gspr_amount))
        if record.cosp_due_date is not None and (include_cleared or not record.cosp_cleared):
            items.append(_pr_item(PRKind.PAYABLE_COSP, record, record.cosp_due_date, record.cosp_amount))

    kind_order = list(PRKind)
    items.sort(key=lambda item: (item.due_date, kind_order.index(item.kind), item.record.id))
    return items


def build_commission_items(
    records: Iterable[FinancialRecord], include_received: bool = True
) -> list[CommissionItem]:
    """Commission cards for records with a commission due date, by due date."""
    items = [
        CommissionItem(
            record=record,
            due_date=record.comm_due_date,
            amount=record.commission_amount,
            agent=record.agent,
            received=record.commission_received,
        )
        for record in records
        if record.comm_due_date is not None and (include_received or not record.commission_received)
    ]
    items.sort(key=lambda item: (item.due_date, item.record.id))
    return items


def clear_item(store: ServiceStore, item: PRItem) -> FinancialRecord:
    """Mark the card's leg as cleared so it drops off the open list."""
    return store.update(item.record.id, **{_CLEARED_FLAGS[item.kind]: True})


def set_commission_received(store: ServiceStore, item: CommissionItem, received: bool) -> FinancialRecord:
    """Toggle the received state of a commission card."""
    return store.update(item.record.id, commission_received=received)


def build_revshare_items(records: Iterable[FinancialRecord], include_paid: bool = True) -> list[RevShareItem]:
    """
    Revenue share cards for records with a revenue share due date.

    The counterparty falls back to the record's agent when none is set.
    """
    items = [
        RevShareItem(
            record=record,
            due_date=record.revshare_due_date,
            amount=record.revshare_amount,
            counterparty=record.revshare_counterparty or record.agent,
            paid=record.revshare_paid,
        )
        for record in records
        if record.revshare_due_date is not None and (include_paid or not record.revshare_paid)
    ]
    items.sort(key=lambda item: (item.due_date, item.record.id))
    return items


def set_revshare_paid(store: ServiceStore, item: RevShareItem, paid: bool) -> FinancialRecord:
    """Toggle the paid state of a revenue share card."""
    return store.update(item.record.id, revshare_paid=paid)
