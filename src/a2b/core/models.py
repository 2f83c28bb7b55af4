#!/usr/bin/env python3
"""
Core Data Models for A2B Cash Flow

A service record carries up to three independently dated cash-flow legs:
gross sales price receivable (GSPR), commission receivable, and cost of sales
payable (COSP). Period buckets are the derived per-period totals of those legs.
"""

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from .currency import ZERO, parse_amount
from .currency import commission_amount as compute_commission
from .dates import parse_iso_date


class LegKind(Enum):
    """Cash-flow leg of a service record."""

    GSPR = "gspr"
    COMMISSION = "commission"
    COSP = "cosp"

    @property
    def is_inflow(self) -> bool:
        """GSPR and commission are receivables; COSP is payable."""
        return self is not LegKind.COSP


@dataclass(frozen=True)
class CashFlowLeg:
    """A single dated amount contributed by a record."""

    kind: LegKind
    due_date: date
    amount: Decimal


# JSON key <-> attribute name
_FIELD_KEYS = {
    "id": "id",
    "grossSalesPriceReceivable": "gross_sales_price_receivable",
    "grossSalesCommissionable": "gross_sales_commissionable",
    "commissionPercent": "commission_percent",
    "costOfSalesPayable": "cost_of_sales_payable",
    "revenueSharePayable": "revenue_share_payable",
    "revShareCounterparty": "revshare_counterparty",
    "clientFirstName": "client_first_name",
    "clientLastName": "client_last_name",
    "serviceType": "service_type",
    "notes": "notes",
    "agent": "agent",
    "gsprCleared": "gspr_cleared",
    "cospCleared": "cosp_cleared",
    "commissionReceived": "commission_received",
    "revSharePaid": "revshare_paid",
}
_DATE_KEYS = {
    "gsprDueDate": "gspr_due_date",
    "commDueDate": "comm_due_date",
    "cospDueDate": "cosp_due_date",
    "revShareDueDate": "revshare_due_date",
}
_FLAG_FIELDS = {"gspr_cleared", "cosp_cleared", "commission_received", "revshare_paid"}


@dataclass(frozen=True)
class FinancialRecord:
    """
    A tracked service with its receivable and payable legs.

    Monetary fields are kept as the raw user-entered strings; they are parsed
    when legs are derived, so malformed values never block loading.
    """

    id: str = ""

    gross_sales_price_receivable: str | None = None
    gross_sales_commissionable: str | None = None
    commission_percent: str | None = None
    cost_of_sales_payable: str | None = None

    gspr_due_date: date | None = None
    comm_due_date: date | None = None
    cosp_due_date: date | None = None

    # Descriptive fields shown on cards
    client_first_name: str = ""
    client_last_name: str = ""
    service_type: str = ""
    notes: str = ""
    agent: str = ""

    # Revenue share owed to a counterparty; tracked on cards, not in cash flow
    revenue_share_payable: str | None = None
    revshare_due_date: date | None = None
    revshare_counterparty: str = ""

    # Status flags (ignored by cash flow aggregation)
    gspr_cleared: bool = False
    cosp_cleared: bool = False
    commission_received: bool = False
    revshare_paid: bool = False

    @property
    def gspr_amount(self) -> Decimal:
        return parse_amount(self.gross_sales_price_receivable)

    @property
    def commission_amount(self) -> Decimal:
        return compute_commission(self.gross_sales_commissionable, self.commission_percent)

    @property
    def cosp_amount(self) -> Decimal:
        return parse_amount(self.cost_of_sales_payable)

    @property
    def revshare_amount(self) -> Decimal:
        return parse_amount(self.revenue_share_payable)

    def legs(self) -> list[CashFlowLeg]:
        """Dated legs of this record; legs without a due date are omitted."""
        legs = []
        if self.gspr_due_date is not None:
            legs.append(CashFlowLeg(LegKind.GSPR, self.gspr_due_date, self.gspr_amount))
        if self.comm_due_date is not None:
            legs.append(CashFlowLeg(LegKind.COMMISSION, self.comm_due_date, self.commission_amount))
        if self.cosp_due_date is not None:
            legs.append(CashFlowLeg(LegKind.COSP, self.cosp_due_date, self.cosp_amount))
        return legs

    def with_changes(self, **changes: Any) -> "FinancialRecord":
        """Return a copy with the given attributes replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {key: getattr(self, attr) for key, attr in _FIELD_KEYS.items()}
        for key, attr in _DATE_KEYS.items():
            value = getattr(self, attr)
            result[key] = value.isoformat() if value else None
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FinancialRecord":
        """
        Create a FinancialRecord from a JSON-shaped dictionary.

        Raises:
            ValueError: If a due date is present but not an ISO date
        """
        kwargs: dict[str, Any] = {}
        for key, attr in _FIELD_KEYS.items():
            if data.get(key) is None:
                continue
            value = data[key]
            kwargs[attr] = bool(value) if attr in _FLAG_FIELDS else str(value)

        for key, attr in _DATE_KEYS.items():
            try:
                kwargs[attr] = parse_iso_date(data.get(key))
            except ValueError as e:
                raise ValueError(f"Invalid {key} {data.get(key)!r}: {e}") from e

        return cls(**kwargs)


@dataclass(frozen=True)
class PeriodBucket:
    """Cash flow totals for one month or ISO week."""

    period_key: str
    display_string: str
    year: int
    gspr: Decimal = ZERO
    commission: Decimal = ZERO
    cosp: Decimal = ZERO

    @property
    def inflows(self) -> Decimal:
        return self.gspr + self.commission

    @property
    def outflows(self) -> Decimal:
        return self.cosp

    @property
    def net(self) -> Decimal:
        return self.inflows - self.outflows

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization (decimals as strings)."""
        return {
            "period_key": self.period_key,
            "display_string": self.display_string,
            "year": self.year,
            "inflows": str(self.inflows),
            "outflows": str(self.outflows),
            "net": str(self.net),
            "gspr": str(self.gspr),
            "commission": str(self.commission),
            "cosp": str(self.cosp),
        }


@dataclass
class BucketAccumulator:
    """Mutable running totals for one period during a single aggregation pass."""

    period_key: str
    display_string: str
    year: int
    totals: dict[LegKind, Decimal] = field(default_factory=lambda: dict.fromkeys(LegKind, ZERO))

    def add(self, leg: CashFlowLeg) -> None:
        self.totals[leg.kind] += leg.amount

    def to_bucket(self) -> PeriodBucket:
        return PeriodBucket(
            period_key=self.period_key,
            display_string=self.display_string,
            year=self.year,
            gspr=self.totals[LegKind.GSPR],
            commission=self.totals[LegKind.COMMISSION],
            cosp=self.totals[LegKind.COSP],
        )
