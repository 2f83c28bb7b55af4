"""
Cash Flow Analysis Package

Period bucketing of service cash-flow legs and the analytics built on it.

Key Components:
- period_aggregator: Month/ISO-week bucketing and totals
- cash_flow_view: Year/scale selection state kept current by notifications
- charts: Inflow/outflow/net chart rendering
"""

from .cash_flow_view import COLUMNS, CashFlowAnalytics
from .charts import generate_cash_flow_chart
from .period_aggregator import aggregate, available_years, default_year, grand_totals

__all__ = [
    "COLUMNS",
    "CashFlowAnalytics",
    "aggregate",
    "available_years",
    "default_year",
    "generate_cash_flow_chart",
    "grand_totals",
]
