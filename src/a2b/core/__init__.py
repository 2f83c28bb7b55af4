"""
Core Utilities Package

Shared data models and utilities used by the analytics, store and CLI layers.

This package provides:
- Decimal amount parsing and US dollar formatting
- Month and ISO-week period derivation for due dates
- Service record and period bucket models
- Change notifications and environment configuration
"""

from .config import (
    Config,
    Environment,
    get_config,
    get_data_dir,
    get_services_file,
    reload_config,
)
from .currency import commission_amount, format_usd, parse_amount
from .dates import Granularity, PeriodInfo, parse_iso_date, period_info
from .events import SALES_UPDATED, SERVICES_UPDATED, ChangeNotifier
from .models import CashFlowLeg, FinancialRecord, LegKind, PeriodBucket

__all__ = [
    "SALES_UPDATED",
    "SERVICES_UPDATED",
    "CashFlowLeg",
    "ChangeNotifier",
    # Configuration
    "Config",
    "Environment",
    # Data models
    "FinancialRecord",
    "Granularity",
    "LegKind",
    "PeriodBucket",
    "PeriodInfo",
    # Currency utilities
    "commission_amount",
    "format_usd",
    "get_config",
    "get_data_dir",
    "get_services_file",
    "parse_amount",
    "parse_iso_date",
    "period_info",
    "reload_config",
]
