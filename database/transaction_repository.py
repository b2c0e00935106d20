'''
    File Name: transaction_repository.py
    Version: 1.0.0
    Date: 18/10/2026
    Author: Pablo Bartolomé Molina
'''

import json
import logging
from typing import Iterable, List, Optional

import config
from database.kv_store import KeyValueStore
from engine.errors import CorruptDataError, ExpenseError
from models.transaction import Transaction

logger = logging.getLogger(__name__)


def encode_transactions(transactions: Iterable[Transaction]) -> str:
    """Serialize the full list as a JSON array of plain records."""
    return json.dumps([t.to_dict() for t in transactions], ensure_ascii=False)


def decode_transactions(blob: str) -> List[Transaction]:
    """Parse a JSON blob into transactions.

    Raises CorruptDataError if the blob is not a JSON list. Records that
    fail validation are skipped with a warning.
    """
    try:
        data = json.loads(blob)
    except (TypeError, ValueError) as e:
        raise CorruptDataError(f"Stored transactions are not valid JSON: {e}")
    if not isinstance(data, list):
        raise CorruptDataError(f"Stored transactions are a {type(data).__name__}, not a list")

    transactions: List[Transaction] = []
    seen_ids = set()
    for row in data:
        if not isinstance(row, dict):
            logger.warning("Skipping non-object record: %r", row)
            continue
        try:
            tx = Transaction.from_dict(row)
        except ExpenseError as e:
            logger.warning("Skipping invalid record %r: %s", row, e)
            continue
        if tx.id in seen_ids:
            logger.warning("Skipping duplicate id %s", tx.id)
            continue
        seen_ids.add(tx.id)
        transactions.append(tx)
    return transactions


class TransactionRepository:
    """Loads and saves the whole transaction list under one key."""

    def __init__(self, kv: Optional[KeyValueStore] = None, key: str = config.STORAGE_KEY):
        self.kv = kv if kv is not None else KeyValueStore()
        self.key = key

    def load(self) -> Optional[List[Transaction]]:
        """Return the stored list, or None when missing or corrupt."""
        blob = self.kv.get(self.key)
        if blob is None:
            logger.debug("No stored transactions under %s", self.key)
            return None
        try:
            transactions = decode_transactions(blob)
        except CorruptDataError:
            logger.warning("Ignoring corrupt data under %s", self.key, exc_info=True)
            return None
        logger.debug("Loaded %d transactions", len(transactions))
        return transactions

    def save(self, transactions: Iterable[Transaction]) -> bool:
        """Overwrite the stored list. Returns True on success."""
        ok = self.kv.set(self.key, encode_transactions(transactions))
        if not ok:
            logger.error("Failed saving transactions under %s", self.key)
        return ok
