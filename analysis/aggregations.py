"""Aggregation helpers for the award-interval pipeline.

This module groups winning years by producer without introducing Django
dependencies.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from .dto import WinRecord
from .producers import split_producers


def aggregate_producer_wins(records: Iterable[WinRecord]) -> dict[str, tuple[int, ...]]:
    """Group winning years by individual producer.

    Args:
        records: Winning movies. Input ordering is not relied upon.

    Returns:
        Mapping of producer name -> strictly ascending distinct win years. A
        producer credited on two winners in the same year counts that year once.
        Iteration order of the mapping carries no meaning.
    """

    buckets: dict[str, set[int]] = defaultdict(set)
    for record in records:
        for producer in split_producers(record.producers_raw):
            buckets[producer].add(record.year)

    return {producer: tuple(sorted(years)) for producer, years in buckets.items()}
