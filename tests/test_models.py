from datetime import date

import pytest

from engine.errors import InvalidAmountError, InvalidTransactionError
from models.category import CATEGORIES, Category, category_info, default_category
from models.transaction import Transaction, date_key, normalize_date, parse_date_key


def test_registry_order_and_colors():
    assert [c.id for c in CATEGORIES] == ["food", "entertainment", "daily", "medical"]
    assert category_info("food").hex == "#f97316"
    assert category_info(Category.MEDICAL).label == "医療"
    assert default_category() is Category.FOOD


def test_category_parse_rejects_unknown():
    assert Category.parse("daily") is Category.DAILY
    with pytest.raises(InvalidTransactionError):
        Category.parse("travel")


def test_date_key_has_no_zero_padding():
    assert date_key(date(2024, 3, 1)) == "2024/3/1"
    assert date_key(date(2024, 12, 25)) == "2024/12/25"


def test_parse_date_key():
    assert parse_date_key("2024/3/1") == date(2024, 3, 1)
    assert parse_date_key("2024/03/01") == date(2024, 3, 1)
    assert normalize_date("2024/03/01") == "2024/3/1"
    with pytest.raises(InvalidTransactionError):
        parse_date_key("2024-03-01")
    with pytest.raises(InvalidTransactionError):
        parse_date_key("2024/2/30")


def test_transaction_coerces_category_and_validates():
    tx = Transaction(id=1, date="2024/3/1", amount=1000, category="food")
    assert tx.category is Category.FOOD
    assert tx.memo == ""
    assert tx.day == date(2024, 3, 1)


@pytest.mark.parametrize("amount", [0, -1, 10.5, "100", True])
def test_transaction_rejects_bad_amount(amount):
    with pytest.raises(InvalidAmountError):
        Transaction(id=1, date="2024/3/1", amount=amount, category="food")


def test_transaction_rejects_unknown_category_and_bad_date():
    with pytest.raises(InvalidTransactionError):
        Transaction(id=1, date="2024/3/1", amount=1, category="travel")
    with pytest.raises(InvalidTransactionError):
        Transaction(id=1, date="yesterday", amount=1, category="food")
    with pytest.raises(InvalidTransactionError):
        Transaction(id=None, date="2024/3/1", amount=1, category="food")


def test_dict_round_trip_uses_category_id():
    tx = Transaction(id=7, date="2024/3/2", amount=2000, category=Category.FOOD, memo="lunch")
    data = tx.to_dict()
    assert data == {"id": 7, "date": "2024/3/2", "amount": 2000, "category": "food", "memo": "lunch"}
    assert Transaction.from_dict(data) == tx
