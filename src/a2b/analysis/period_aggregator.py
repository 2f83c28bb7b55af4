#!/usr/bin/env python3
"""
Period Aggregation of Cash-Flow Legs

Groups the dated legs of service records into month or ISO-week buckets for a
selected year and derives inflow/outflow/net totals per bucket.

Every call is a full recompute from the records given; nothing is cached.
"""

from collections.abc import Iterable
from decimal import Decimal

from ..core.currency import ZERO
from ..core.dates import EMPTY_PERIOD, Granularity, period_info
from ..core.models import BucketAccumulator, FinancialRecord, PeriodBucket


def aggregate(
    records: Iterable[FinancialRecord], selected_year: int, granularity: Granularity
) -> list[PeriodBucket]:
    """
    Bucket the cash-flow legs of records by period.

    Each present due date (GSPR, commission, COSP) is bucketed independently,
    so one record can feed up to three periods. Legs whose period year differs
    from ``selected_year`` are skipped and create no bucket. Week periods use
    the ISO week-numbering year.

    Args:
        records: Service records snapshot (may be empty)
        selected_year: Year filter applied to each leg's period year
        granularity: Month or week bucketing

    Returns:
        Buckets sorted ascending by period key
    """
    accumulators: dict[str, BucketAccumulator] = {}

    for record in records:
        for leg in record.legs():
            year, period_key, display_string = period_info(leg.due_date, granularity)
            if year != selected_year:
                continue

            accumulator = accumulators.get(period_key)
            if accumulator is None:
                accumulator = BucketAccumulator(period_key, display_string, year)
                accumulators[period_key] = accumulator
            accumulator.add(leg)

    return sorted((acc.to_bucket() for acc in accumulators.values()), key=lambda b: b.period_key)


def available_years(records: Iterable[FinancialRecord]) -> list[int]:
    """
    Sorted calendar years of every due date present on the records.

    Due dates whose year cannot be extracted are left out, matching the
    empty period ``aggregate`` gives them.
    """
    years = {
        period_info(leg.due_date, Granularity.MONTH).year for record in records for leg in record.legs()
    }
    years.discard(EMPTY_PERIOD.year)
    return sorted(years)


def default_year(records: Iterable[FinancialRecord]) -> int | None:
    """Latest year with any dated leg, or None."""
    years = available_years(records)
    return years[-1] if years else None


def grand_totals(buckets: Iterable[PeriodBucket]) -> dict[str, Decimal]:
    """Sum every bucket column; net is independent of the bucketing scale."""
    totals = dict.fromkeys(("gspr", "commission", "cosp", "inflows", "outflows", "net"), ZERO)
    for bucket in buckets:
        for name in totals:
            totals[name] += getattr(bucket, name)
    return totals
