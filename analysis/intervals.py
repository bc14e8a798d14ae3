"""Consecutive-win interval derivation."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .dto import ProducerInterval


def compute_award_intervals(producer_wins: Mapping[str, Sequence[int]]) -> tuple[ProducerInterval, ...]:
    """Derive one interval record per pair of consecutive wins.

    Args:
        producer_wins: Mapping of producer -> ascending distinct win years, as
            returned by `aggregate_producer_wins`.

    Returns:
        Interval records; for each producer they follow ascending year order.
        Producers with fewer than two win years contribute nothing.
    """

    intervals: list[ProducerInterval] = []
    for producer, years in producer_wins.items():
        for previous_win, following_win in zip(years, years[1:]):
            intervals.append(
                ProducerInterval(
                    producer=producer,
                    previous_win=previous_win,
                    following_win=following_win,
                    interval=following_win - previous_win,
                )
            )
    return tuple(intervals)
