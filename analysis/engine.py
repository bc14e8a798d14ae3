"""Orchestration entry point for the award-interval analysis.

The analysis is a pure, non-Django pipeline that accepts an in-memory snapshot
of winning movies and returns DTOs. It must not import Django or perform any
database I/O.
"""

from __future__ import annotations

from collections.abc import Iterable

from .aggregations import aggregate_producer_wins
from .dto import AwardIntervalsResult, WinRecord
from .extrema import select_interval_extremes
from .intervals import compute_award_intervals


def analyze_award_intervals(records: Iterable[WinRecord]) -> AwardIntervalsResult:
    """Find the producers with the shortest and longest gaps between wins.

    Args:
        records: Winning movies (year + raw producer credit).

    Returns:
        AwardIntervalsResult with tie-inclusive `min` and `max` records. No
        data, or no producer with two distinct win years, yields empty lists.
    """

    producer_wins = aggregate_producer_wins(records)
    intervals = compute_award_intervals(producer_wins)
    return select_interval_extremes(intervals)
