"""Greedy earliest-finish interval selection used to size the checker crew."""

from __future__ import annotations

import math
from typing import Iterable, Sequence, Tuple

Interval = Tuple[int, int]


def max_non_overlapping(intervals: Iterable[Sequence[int]]) -> int:
    """Return the largest number of pairwise non-overlapping intervals.

    Intervals that only touch (one ends when the next starts) do not overlap.
    """
    ordered = []
    for raw in intervals:
        start, end = raw[0], raw[1]
        if end < start:
            raise ValueError(f"Interval ({start}, {end}) ends before it starts")
        ordered.append((start, end))
    ordered.sort(key=lambda interval: interval[1])

    count = 0
    last_end = -math.inf
    for start, end in ordered:
        if start >= last_end:
            count += 1
            last_end = end
    return count


def hire_ticket_checkers(schedules: Iterable[Sequence[int]]) -> int:
    """Number of checker shifts one crew can cover without overlap."""
    return max_non_overlapping(schedules)


__all__ = ["Interval", "hire_ticket_checkers", "max_non_overlapping"]
