"""
A2B Cash Flow - Service Receivables and Payables Tracking

Tracks services with up to three dated cash-flow legs (gross sales price
receivable, commission, cost of sales payable) and reports them per month or
ISO week.

Domain Packages:
- core: Currency parsing, period derivation, models, notifications, configuration
- analysis: Period aggregation, analytics state and charts
- services: Record store and payable/receivable cards
- cli: Command-line interface

Example Usage:
    from a2b import FinancialRecord, Granularity, aggregate

    buckets = aggregate(records, 2024, Granularity.MONTH)
"""

__version__ = "0.1.0"

from .analysis.period_aggregator import aggregate, available_years, default_year, grand_totals
from .core.currency import format_usd, parse_amount
from .core.dates import Granularity
from .core.models import FinancialRecord, PeriodBucket

__all__ = [
    "FinancialRecord",
    "Granularity",
    "PeriodBucket",
    "aggregate",
    "available_years",
    "default_year",
    "format_usd",
    "grand_totals",
    "parse_amount",
]
