'''
    File Name: book.py
    Version: 1.0.0
    Date: 18/10/2026
    Author: Pablo Bartolomé Molina
    Description: Application state and the operations the UI calls.
'''
import logging
from dataclasses import dataclass, replace
from datetime import date as Date
from typing import Dict, List, Optional, Tuple, Union

from engine import aggregator, segmenter
from engine.aggregator import CategoryTotal, MonthSummary
from engine.month import MonthCursor, days_in_month
from engine.segmenter import Segment
from engine.store import TransactionStore
from models.category import Category
from models.transaction import Transaction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppState:
    """Snapshot of everything the views are derived from."""
    transactions: Tuple[Transaction, ...]
    cursor: MonthCursor

    def with_cursor(self, cursor: MonthCursor) -> "AppState":
        return replace(self, cursor=cursor)

    def month_transactions(self) -> List[Transaction]:
        return aggregator.month_transactions(self.transactions, self.cursor)

    def monthly_total(self) -> int:
        return aggregator.monthly_total(self.transactions, self.cursor)

    def daily_totals(self) -> Dict[str, int]:
        return aggregator.daily_totals(self.transactions, self.cursor)

    def category_totals(self) -> List[CategoryTotal]:
        return aggregator.category_totals(self.transactions, self.cursor)

    def summary(self) -> MonthSummary:
        return aggregator.month_summary(self.transactions, self.cursor)

    def segments(self) -> List[Segment]:
        return segmenter.segments(self.category_totals(), self.monthly_total())

    def days_in_month(self, full_weeks: bool = False) -> List[Optional[Date]]:
        return days_in_month(self.cursor, full_weeks=full_weeks)


class ExpenseBook:
    """Transaction store plus the month on screen.

    Reads go through `state`, a fresh AppState built from the store each
    time, so views never see stale totals after a write.
    """

    def __init__(self, store: TransactionStore, cursor: Optional[MonthCursor] = None):
        self.store = store
        self.cursor = cursor or MonthCursor.today()

    @classmethod
    def open(cls, repository, cursor: Optional[MonthCursor] = None) -> "ExpenseBook":
        return cls(TransactionStore.open(repository), cursor)

    @property
    def state(self) -> AppState:
        return AppState(self.store.all(), self.cursor)

    # --- Queries ---
    def month_transactions(self) -> List[Transaction]:
        return self.state.month_transactions()

    def monthly_total(self) -> int:
        return self.state.monthly_total()

    def daily_totals(self) -> Dict[str, int]:
        return self.state.daily_totals()

    def category_totals(self) -> List[CategoryTotal]:
        return self.state.category_totals()

    def segments(self) -> List[Segment]:
        return self.state.segments()

    def days_in_month(self, full_weeks: bool = False) -> List[Optional[Date]]:
        return self.state.days_in_month(full_weeks)

    # --- Mutations ---
    def create(self, date: Union[Date, str], amount: Union[int, str],
               category: Union[Category, str], memo: str = "") -> Optional[Transaction]:
        return self.store.create(date, amount, category, memo)

    def update(self, tx_id: int, date: Union[Date, str], amount: Union[int, str],
               category: Union[Category, str], memo: str = "") -> Optional[Transaction]:
        return self.store.update(tx_id, date, amount, category, memo)

    # --- Navigation ---
    def advance(self, delta_months: int) -> MonthCursor:
        self.cursor = self.cursor.advance(delta_months)
        logger.debug("Viewing %s", self.cursor)
        return self.cursor

    def next_month(self) -> MonthCursor:
        return self.advance(1)

    def previous_month(self) -> MonthCursor:
        return self.advance(-1)
