'''
    File Name: category.py
    Version: 1.0.0
    Date: 18/10/2026
    Author: Pablo Bartolomé Molina
    Description: Fixed category registry for expenses.
'''
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

import config
from engine.errors import InvalidTransactionError


class Category(str, Enum):
    """Closed set of expense categories, declared in registry order."""
    FOOD = "food"
    ENTERTAINMENT = "entertainment"
    DAILY = "daily"
    MEDICAL = "medical"

    @classmethod
    def parse(cls, value) -> "Category":
        """Coerce a string id (or a member) into a Category.

        Raises InvalidTransactionError for ids outside the registry.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            raise InvalidTransactionError(f"Unknown category: {value!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CategoryInfo:
    """Display data for one category: label and chart colour."""
    category: Category
    label: str
    hex: str

    @property
    def id(self) -> str:
        return self.category.value


def _build_registry() -> Tuple[CategoryInfo, ...]:
    entries = tuple(
        CategoryInfo(category=Category(cid), label=label, hex=color)
        for cid, label, color in config.CATEGORY_REGISTRY
    )
    if [e.category for e in entries] != list(Category):
        raise RuntimeError("CATEGORY_REGISTRY does not match the Category enum")
    return entries


CATEGORIES: Tuple[CategoryInfo, ...] = _build_registry()
_BY_CATEGORY = {info.category: info for info in CATEGORIES}


def category_info(category) -> CategoryInfo:
    """Return the registry entry for a Category or its string id."""
    return _BY_CATEGORY[Category.parse(category)]


def default_category() -> Category:
    return Category.parse(config.DEFAULT_CATEGORY)
