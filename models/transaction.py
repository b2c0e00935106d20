'''
    File Name: transaction.py
    Version: 3.0.0
    Date: 18/10/2026
    Author: Pablo Bartolomé Molina
    Description: Transaction data model for the expense calendar.
'''
from dataclasses import dataclass
from datetime import date as Date
from typing import Union

import config
from engine.errors import InvalidAmountError, InvalidTransactionError
from models.category import Category


def date_key(day: Date) -> str:
    """Format a date as the grouping key used for daily totals (e.g. 2024/3/1)."""
    return config.DATE_KEY_FORMAT.format(year=day.year, month=day.month, day=day.day)


def parse_date_key(value: str) -> Date:
    """Parse a YYYY/M/D key back into a date. Zero padded parts are accepted."""
    try:
        year, month, day = (int(part) for part in str(value).split("/"))
        return Date(year, month, day)
    except (ValueError, TypeError):
        raise InvalidTransactionError(f"Invalid date: {value!r}. Expected YYYY/M/D")


def normalize_date(value: Union[Date, str]) -> str:
    """Accept a date or a date key and return the canonical date key."""
    if isinstance(value, Date):
        return date_key(value)
    return date_key(parse_date_key(value))


@dataclass(frozen=True)
class Transaction:
    """
    Represents a single expense.

    Attributes:
        id: Unique identifier, kept across edits
        date: Date key in YYYY/M/D form; identical keys mean the same day
        amount: Positive amount in whole yen
        category: Category member
        memo: Free text, may be empty
    """
    id: int
    date: str
    amount: int
    category: Category
    memo: str = ""

    def __post_init__(self):
        """Validate transaction data after initialization."""
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise InvalidAmountError(f"Amount must be an integer: {self.amount!r}")
        if self.amount <= 0:
            raise InvalidAmountError(f"Amount must be positive: {self.amount}")
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise InvalidTransactionError(f"Id must be an integer: {self.id!r}")
        # frozen dataclass: coerce through object.__setattr__
        object.__setattr__(self, "category", Category.parse(self.category))
        parse_date_key(self.date)
        object.__setattr__(self, "memo", "" if self.memo is None else str(self.memo))

    @property
    def day(self) -> Date:
        return parse_date_key(self.date)

    def to_dict(self) -> dict:
        """Convert transaction to the persisted dictionary shape."""
        return {
            "id": self.id,
            "date": self.date,
            "amount": self.amount,
            "category": self.category.value,
            "memo": self.memo,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        """Create a Transaction instance from a persisted dictionary."""
        return cls(
            id=data.get("id"),
            date=data.get("date", ""),
            amount=data.get("amount", 0),
            category=data.get("category", ""),
            memo=data.get("memo", ""),
        )

    def __repr__(self) -> str:
        return f"Transaction(id={self.id}, date={self.date}, amount={self.amount}, category='{self.category.value}', memo='{self.memo}')"
