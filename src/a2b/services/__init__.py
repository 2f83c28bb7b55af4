"""
Services Package

Record storage and the card lists derived from service records.
"""

from .cards import (
    CommissionItem,
    PRItem,
    PRKind,
    RevShareItem,
    build_commission_items,
    build_pr_items,
    build_revshare_items,
    clear_item,
    set_commission_received,
    set_revshare_paid,
)
from .store import ServiceStore

__all__ = [
    "CommissionItem",
    "PRItem",
    "PRKind",
    "RevShareItem",
    "ServiceStore",
    "build_commission_items",
    "build_pr_items",
    "build_revshare_items",
    "clear_item",
    "set_commission_received",
    "set_revshare_paid",
]
