#!/usr/bin/env python3
"""
Currency Parsing and Formatting Utilities

Amount and percentage fields on services are free-form strings typed by users.
All calculations use Decimal arithmetic to avoid floating-point errors.

Key Principles:
- Never raise on malformed input; unparseable text counts as zero
- Parse with fixed en_US conventions ("1,234.56"), independent of host locale
- Keep values as exact Decimals; formatting is a presentation concern
"""

import logging
import re
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
CENT = Decimal("0.01")

# en_US decimal style: optional sign, digits (optionally grouped by thousands), optional fraction
_EN_US_DECIMAL = re.compile(r"^[+-]?(?:\d{1,3}(?:,\d{3})+|\d+)?(?:\.\d+)?$")


def _parse_en_us(text: str) -> Decimal | None:
    """Parse text written with en_US grouping and decimal separators."""
    if not _EN_US_DECIMAL.match(text) or not any(ch.isdigit() for ch in text):
        return None
    return Decimal(text.replace(",", ""))


def _parse_direct(text: str) -> Decimal | None:
    """Parse text as a plain numeric literal (exponent notation allowed)."""
    if "_" in text:
        return None
    try:
        value = Decimal(text)
    except (InvalidOperation, ValueError):
        return None
    return value if value.is_finite() else None


def parse_amount(text: str | None) -> Decimal:
    """
    Parse a user-entered amount or percentage string.

    Args:
        text: Raw field value, e.g. "1,000.00", " 250 ", "1e3" or None

    Returns:
        Decimal value, or 0 when the text is absent or unparseable

    Examples:
        parse_amount("1,234.50") -> Decimal("1234.50")
        parse_amount("abc") -> Decimal("0")
        parse_amount(None) -> Decimal("0")
    """
    if text is None:
        return ZERO

    stripped = str(text).strip()
    if not stripped:
        return ZERO

    value = _parse_en_us(stripped)
    if value is None:
        value = _parse_direct(stripped)
    if value is None:
        logger.debug("Unparseable amount %r treated as 0", text)
        return ZERO
    return value


def format_usd(value: Decimal | int | str) -> str:
    """
    Format a value as US dollars with two decimal places.

    Args:
        value: Amount to format

    Returns:
        String like "$1,234.50" or "-$45.99"; "$0.00" if the value is not numeric
    """
    try:
        amount = Decimal(value)
        if not amount.is_finite():
            return "$0.00"
        amount = amount.quantize(CENT, rounding=ROUND_HALF_EVEN)
    except (InvalidOperation, ValueError, TypeError):
        return "$0.00"

    if amount == 0:
        amount = abs(amount)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def commission_amount(commissionable: str | None, percent: str | None) -> Decimal:
    """Commission owed on a commissionable amount at a percentage rate."""
    return parse_amount(commissionable) * (parse_amount(percent) / 100)
