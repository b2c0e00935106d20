'''
    File Name: aggregator.py
    Version: 1.0.0
    Date: 18/10/2026
    Author: Pablo Bartolomé Molina
    Description: Monthly views derived from the transaction list. Every
    function here is pure; callers recompute on each refresh.
'''
from collections import defaultdict
from decimal import ROUND_HALF_UP, Decimal
from datetime import date as Date
from typing import Dict, Iterable, List, NamedTuple

from engine.month import MonthCursor
from models.category import CATEGORIES, Category
from models.transaction import Transaction, date_key

ONE_DECIMAL = Decimal("0.1")


class CategoryTotal(NamedTuple):
    category: Category
    total: int


def month_transactions(transactions: Iterable[Transaction], cursor: MonthCursor) -> List[Transaction]:
    """Transactions dated in the cursor's month, newest date first.

    Same-day entries are ordered by descending id, so the most recently
    created one comes first.
    """
    in_month = [t for t in transactions if cursor.contains(t.day)]
    return sorted(in_month, key=lambda t: (t.day, t.id), reverse=True)


def monthly_total(transactions: Iterable[Transaction], cursor: MonthCursor) -> int:
    return sum(t.amount for t in month_transactions(transactions, cursor))


def daily_totals(transactions: Iterable[Transaction], cursor: MonthCursor) -> Dict[str, int]:
    """Sum of amounts per date key. Days without spending are absent."""
    totals: Dict[str, int] = defaultdict(int)
    for t in month_transactions(transactions, cursor):
        totals[t.date] += t.amount
    return dict(totals)


def daily_total(totals: Dict[str, int], day: Date) -> int:
    return totals.get(date_key(day), 0)


def category_totals(transactions: Iterable[Transaction], cursor: MonthCursor) -> List[CategoryTotal]:
    """Total per registry category (zeros included), largest first.

    sorted() is stable, so equal totals keep registry order.
    """
    sums: Dict[Category, int] = {info.category: 0 for info in CATEGORIES}
    for t in month_transactions(transactions, cursor):
        sums[t.category] += t.amount
    stats = [CategoryTotal(info.category, sums[info.category]) for info in CATEGORIES]
    return sorted(stats, key=lambda ct: ct.total, reverse=True)


def category_percent(total: int, month_total: int) -> float:
    """Share of the month in percent, one decimal, halves rounded up (display only)."""
    if month_total == 0:
        return 0.0
    share = Decimal(100 * total) / Decimal(month_total)
    return float(share.quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP))


class MonthSummary(NamedTuple):
    transactions: List[Transaction]
    total: int
    daily: Dict[str, int]
    categories: List[CategoryTotal]


def month_summary(transactions: Iterable[Transaction], cursor: MonthCursor) -> MonthSummary:
    """Every month view from a single month filter."""
    items = month_transactions(transactions, cursor)
    return MonthSummary(
        items,
        monthly_total(items, cursor),
        daily_totals(items, cursor),
        category_totals(items, cursor),
    )
