from engine.formatting import compact_day_total, format_percent, format_yen, month_title
from engine.month import MonthCursor


def test_format_yen():
    assert format_yen(0) == "¥0"
    assert format_yen(1234567) == "¥1,234,567"


def test_compact_day_total():
    assert compact_day_total(9999) == "9999"
    assert compact_day_total(10000) == "1.0m"
    assert compact_day_total(12300) == "1.2m"
    assert compact_day_total(250000) == "25.0m"


def test_compact_day_total_rounds_halves_up():
    assert compact_day_total(12500) == "1.3m"
    assert compact_day_total(10050) == "1.0m"
    assert compact_day_total(10450) == "1.0m"
    assert compact_day_total(10550) == "1.1m"


def test_format_percent_and_title():
    assert format_percent(85.7) == "85.7%"
    assert format_percent(0.0) == "0.0%"
    assert month_title(MonthCursor(2024, 3)) == "2024年 3月"
