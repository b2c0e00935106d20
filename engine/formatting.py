'''
    File Name: formatting.py
    Version: 1.0.0
    Date: 18/10/2026
    Author: Pablo Bartolomé Molina
    Description: Display formatting for amounts, calendar cells and percentages.
'''
from decimal import ROUND_HALF_UP, Decimal

import config
from engine.month import MonthCursor

ONE_DECIMAL = Decimal("0.1")


def format_yen(amount: int) -> str:
    """Format a whole-yen amount with separators, e.g. ¥12,300."""
    return f"{config.CURRENCY_SYMBOL}{amount:,}"


def compact_day_total(total: int) -> str:
    """Calendar cell label for a day total.

    Totals from COMPACT_TOTAL_THRESHOLD up are shown in tens of thousands
    with one decimal, halves rounded up (12300 -> "1.2m", 12500 -> "1.3m");
    smaller totals are shown as is.
    """
    if total >= config.COMPACT_TOTAL_THRESHOLD:
        scaled = Decimal(total) / Decimal(config.COMPACT_TOTAL_THRESHOLD)
        return f"{scaled.quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)}m"
    return str(total)


def format_percent(value: float) -> str:
    return f"{value:.1f}%"


def month_title(cursor: MonthCursor) -> str:
    return f"{cursor.year}年 {cursor.month}月"
