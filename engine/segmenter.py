'''
    File Name: segmenter.py
    Version: 1.0.0
    Date: 18/10/2026
    Author: Pablo Bartolomé Molina
    Description: Turns category totals into contiguous donut segments.
'''
from dataclasses import dataclass
from typing import Iterable, List, Optional

import config
from engine.aggregator import CategoryTotal
from models.category import Category, category_info

FULL_CIRCLE = 360.0


@dataclass(frozen=True)
class Segment:
    """One arc of the donut, in percent of the full circle.

    `category` is None only for the empty-month placeholder.
    """
    category: Optional[Category]
    start_percent: float
    end_percent: float
    color_hex: str

    @property
    def width_percent(self) -> float:
        return self.end_percent - self.start_percent

    @property
    def start_degrees(self) -> float:
        return FULL_CIRCLE * self.start_percent / 100

    @property
    def end_degrees(self) -> float:
        return FULL_CIRCLE * self.end_percent / 100

    @property
    def sweep_degrees(self) -> float:
        return self.end_degrees - self.start_degrees

    @property
    def is_placeholder(self) -> bool:
        return self.category is None


def placeholder_segment() -> Segment:
    return Segment(None, 0.0, 100.0, config.NEUTRAL_SEGMENT_HEX)


def segments(totals: Iterable[CategoryTotal], month_total: int) -> List[Segment]:
    """Lay the categories out from 0% to 100% in the order given.

    Every category gets a segment, zero-width when it has no spending.
    Each bound is taken from the running integer sum, so a bound reached
    by the full month total is exactly 100 and neighbours share it.
    """
    if month_total == 0:
        return [placeholder_segment()]

    result: List[Segment] = []
    cumulative = 0
    start = 0.0
    for category, total in totals:
        cumulative += total
        end = 100 * cumulative / month_total
        result.append(Segment(category, start, end, category_info(category).hex))
        start = end

    if not result:
        return [placeholder_segment()]
    return result


def conic_gradient(segs: Iterable[Segment]) -> str:
    """CSS conic-gradient string for the segments, e.g. for debug output."""
    stops = ", ".join(
        f"{s.color_hex} {s.start_percent:g}% {s.end_percent:g}%" for s in segs
    )
    return f"conic-gradient({stops})"
