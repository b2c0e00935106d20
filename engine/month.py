'''
    File Name: month.py
    Version: 1.0.0
    Date: 18/10/2026
    Author: Pablo Bartolomé Molina
    Description: Month cursor and calendar day grid.
'''
import calendar
from dataclasses import dataclass
from datetime import date as Date
from typing import List, Optional


@dataclass(frozen=True, order=True)
class MonthCursor:
    """The (year, month) currently on screen. Day of month is always 1."""
    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month out of range: {self.month}")

    @classmethod
    def from_date(cls, day: Date) -> "MonthCursor":
        return cls(day.year, day.month)

    @classmethod
    def today(cls) -> "MonthCursor":
        return cls.from_date(Date.today())

    @property
    def first_day(self) -> Date:
        return Date(self.year, self.month, 1)

    @property
    def last_day_number(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    def contains(self, day: Date) -> bool:
        return day.year == self.year and day.month == self.month

    def advance(self, delta_months: int) -> "MonthCursor":
        """Return the cursor `delta_months` away, rolling over year boundaries."""
        index = self.year * 12 + (self.month - 1) + delta_months
        year, month0 = divmod(index, 12)
        return MonthCursor(year, month0 + 1)

    def __str__(self) -> str:
        return f"{self.year}-{self.month:02d}"


def advance(cursor: MonthCursor, delta_months: int) -> MonthCursor:
    return cursor.advance(delta_months)


def leading_blanks(cursor: MonthCursor) -> int:
    """Weekday of day 1 with Sunday = 0."""
    # calendar.weekday counts Monday as 0
    return (calendar.weekday(cursor.year, cursor.month, 1) + 1) % 7


def days_in_month(cursor: MonthCursor, full_weeks: bool = False) -> List[Optional[Date]]:
    """Build the calendar grid for a month, Sunday first.

    One None per weekday before the 1st, then every day of the month. The
    last week is left short unless `full_weeks` is set, in which case it is
    padded with None to a multiple of 7.
    """
    cells: List[Optional[Date]] = [None] * leading_blanks(cursor)
    cells.extend(
        Date(cursor.year, cursor.month, day)
        for day in range(1, cursor.last_day_number + 1)
    )
    if full_weeks and len(cells) % 7:
        cells.extend([None] * (7 - len(cells) % 7))
    return cells
