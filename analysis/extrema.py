"""Tie-aware selection of the shortest and longest award intervals."""

from __future__ import annotations

from collections.abc import Sequence

from .dto import AwardIntervalsResult, ProducerInterval


def select_interval_extremes(intervals: Sequence[ProducerInterval]) -> AwardIntervalsResult:
    """Collect every record sharing the global minimum and maximum interval.

    Args:
        intervals: All interval records across producers, in any order.

    Returns:
        AwardIntervalsResult whose `min` holds every record with the smallest
        interval and whose `max` holds every record with the largest one. Both
        are empty when `intervals` is empty.

    Notes:
        When every interval is equal, `min` and `max` contain the same records.
    """

    if not intervals:
        return AwardIntervalsResult()

    shortest = min(record.interval for record in intervals)
    longest = max(record.interval for record in intervals)
    return AwardIntervalsResult(
        min=tuple(record for record in intervals if record.interval == shortest),
        max=tuple(record for record in intervals if record.interval == longest),
    )
