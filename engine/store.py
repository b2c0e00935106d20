'''
    File Name: store.py
    Version: 1.0.0
    Date: 18/10/2026
    Author: Pablo Bartolomé Molina
'''
import logging
import time
from datetime import date as Date
from typing import Callable, Iterable, List, Optional, Tuple, Union

from engine.errors import ExpenseError
from engine.expression import parse_amount
from models.category import Category
from models.transaction import Transaction, normalize_date

logger = logging.getLogger(__name__)


def _now_millis() -> int:
    return int(time.time() * 1000)


class TransactionStore:
    """In-memory list of transactions, written through to a repository.

    The repository only needs `load() -> list | None` and `save(list)`.
    Every successful create/update saves the whole list; rejected writes
    leave both memory and the repository untouched.
    """

    def __init__(self, repository=None, transactions: Iterable[Transaction] = (),
                 clock: Callable[[], int] = _now_millis):
        self.repository = repository
        self._transactions: List[Transaction] = list(transactions)
        self._clock = clock

    @classmethod
    def open(cls, repository, clock: Callable[[], int] = _now_millis) -> "TransactionStore":
        """Load the persisted list once; missing or corrupt data starts empty."""
        loaded = None
        if repository is not None:
            loaded = repository.load()
        store = cls(repository, loaded or (), clock=clock)
        logger.debug("Opened store with %d transactions", len(store))
        return store

    def __len__(self) -> int:
        return len(self._transactions)

    def all(self) -> Tuple[Transaction, ...]:
        return tuple(self._transactions)

    def get(self, tx_id: int) -> Optional[Transaction]:
        for t in self._transactions:
            if t.id == tx_id:
                return t
        return None

    def _next_id(self) -> int:
        candidate = self._clock()
        if self._transactions:
            # same millisecond or clock moved back
            candidate = max(candidate, max(t.id for t in self._transactions) + 1)
        return candidate

    def _build(self, tx_id: int, date: Union[Date, str], amount: Union[int, str],
               category: Union[Category, str], memo: str) -> Transaction:
        return Transaction(
            id=tx_id,
            date=normalize_date(date),
            amount=parse_amount(amount),
            category=Category.parse(category),
            memo=memo or "",
        )

    def create(self, date: Union[Date, str], amount: Union[int, str],
               category: Union[Category, str], memo: str = "") -> Optional[Transaction]:
        """Append a new transaction. Returns None (and writes nothing) if invalid."""
        try:
            tx = self._build(self._next_id(), date, amount, category, memo)
        except ExpenseError as e:
            logger.debug("Rejected new transaction: %s", e)
            return None
        self._transactions.append(tx)
        self._persist()
        return tx

    def update(self, tx_id: int, date: Union[Date, str], amount: Union[int, str],
               category: Union[Category, str], memo: str = "") -> Optional[Transaction]:
        """Replace every field of transaction `tx_id` except its id."""
        index = next((i for i, t in enumerate(self._transactions) if t.id == tx_id), None)
        if index is None:
            logger.debug("Rejected update of unknown transaction id=%s", tx_id)
            return None
        try:
            tx = self._build(tx_id, date, amount, category, memo)
        except ExpenseError as e:
            logger.debug("Rejected update of id=%s: %s", tx_id, e)
            return None
        self._transactions[index] = tx
        self._persist()
        return tx

    def _persist(self) -> None:
        if self.repository is None:
            return
        self.repository.save(list(self._transactions))
