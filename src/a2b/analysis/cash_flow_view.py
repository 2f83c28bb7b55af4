#!/usr/bin/env python3
"""
Cash Flow Analytics Screen State

Headless model behind the cash flow analytics table: year and scale
selection, the aggregated periods, and the formatted rows to render.
"""

import logging
from dataclasses import dataclass
from typing import Any

import pandas as pd

from ..core.currency import format_usd
from ..core.dates import Granularity
from ..core.events import SALES_UPDATED, SERVICES_UPDATED, ChangeNotifier
from ..core.models import PeriodBucket
from ..services.store import ServiceStore
from .period_aggregator import aggregate, available_years

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Column:
    """Table column definition."""

    id: str
    title: str
    alignment: str


COLUMNS = (
    Column("period", "Period", "left"),
    Column("inflows", "Inflows", "right"),
    Column("outflows", "Outflows", "right"),
    Column("net", "Net", "right"),
    Column("gspr", "GSPR", "right"),
    Column("commission", "Commission", "right"),
    Column("cosp", "COSP", "right"),
)

AMOUNT_COLUMNS = tuple(column.id for column in COLUMNS if column.id != "period")


class CashFlowAnalytics:
    """
    Year/scale selection over a service store, kept current by notifications.

    Changing the selected year or scale triggers a full recompute; so does any
    services or sales update published on the notifier. The selected year
    starts at ``year`` when given, otherwise at the latest available year.
    Use as a context manager, or call ``close()``, to drop the subscriptions.
    """

    def __init__(
        self,
        store: ServiceStore,
        notifier: ChangeNotifier | None = None,
        scale: Granularity = Granularity.MONTH,
        year: int | None = None,
    ) -> None:
        self.store = store
        self.notifier = notifier or store.notifier
        self._scale = scale
        self._selected_year: int | None = None
        self.years: list[int] = []
        self.periods: list[PeriodBucket] = []

        self._unsubscribers = [
            self.notifier.subscribe(SERVICES_UPDATED, self._on_records_changed),
            self.notifier.subscribe(SALES_UPDATED, self._on_records_changed),
        ]

        self.load_years()
        if year is None and self.years:
            year = max(self.years)
        self.selected_year = year

    @property
    def selected_year(self) -> int | None:
        return self._selected_year

    @selected_year.setter
    def selected_year(self, year: int | None) -> None:
        self._selected_year = year
        self.reload()

    @property
    def scale(self) -> Granularity:
        return self._scale

    @scale.setter
    def scale(self, scale: Granularity) -> None:
        self._scale = scale
        self.reload()

    def load_years(self) -> list[int]:
        self.years = available_years(self.store.load_all())
        return self.years

    def reload(self) -> list[PeriodBucket]:
        """Recompute periods from a fresh store snapshot."""
        if self._selected_year is None:
            self.periods = []
        else:
            self.periods = aggregate(self.store.load_all(), self._selected_year, self._scale)
        logger.debug(
            "Reloaded %d %s periods for %s", len(self.periods), self._scale.value, self._selected_year
        )
        return self.periods

    def _on_records_changed(self, **_: Any) -> None:
        self.load_years()
        if self._selected_year not in self.years:
            self.selected_year = max(self.years) if self.years else None
        else:
            self.reload()

    def rows(self) -> list[dict[str, str]]:
        """Display strings for each period, keyed by column id."""
        rows = []
        for bucket in self.periods:
            row = {"period": bucket.display_string}
            for column_id in AMOUNT_COLUMNS:
                row[column_id] = format_usd(getattr(bucket, column_id))
            rows.append(row)
        return rows

    def to_dataframe(self) -> pd.DataFrame:
        """Raw period values as a DataFrame indexed by period key."""
        columns = ["period_key", "display_string", *AMOUNT_COLUMNS]
        data = [
            [bucket.period_key, bucket.display_string, *(getattr(bucket, c) for c in AMOUNT_COLUMNS)]
            for bucket in self.periods
        ]
        return pd.DataFrame(data, columns=columns).set_index("period_key")

    def close(self) -> None:
        """Stop listening for store changes."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def __enter__(self) -> "CashFlowAnalytics":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
