"""DTO types consumed and returned by the award-interval pipeline.

DTOs are plain data containers used to transport analysis results to the API.
They intentionally avoid any Django/ORM dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class WinRecord:
    """A single winning movie as seen by the analysis pipeline.

    Attributes:
        year: Ceremony year of the win.
        producers_raw: Raw producer credit as stored, possibly naming several
            producers separated by commas and/or the word "and".
    """

    year: int
    producers_raw: str


@dataclass(frozen=True, slots=True)
class ProducerInterval:
    """The gap between two consecutive wins of the same producer.

    Attributes:
        producer: Producer name (trimmed, case-sensitive).
        previous_win: Year of the earlier win.
        following_win: Year of the next win.
        interval: `following_win - previous_win`, always positive.
    """

    producer: str
    previous_win: int
    following_win: int
    interval: int

    def as_json(self) -> dict[str, Any]:
        """Return the JSON-ready representation used by the API."""

        return {
            "producer": self.producer,
            "interval": self.interval,
            "previousWin": self.previous_win,
            "followingWin": self.following_win,
        }


@dataclass(frozen=True)
class AwardIntervalsResult:
    """Producers with the shortest and longest gaps between consecutive wins.

    Attributes:
        min: Every interval record sharing the smallest interval value.
        max: Every interval record sharing the largest interval value.
    """

    min: tuple[ProducerInterval, ...] = ()
    max: tuple[ProducerInterval, ...] = ()

    def as_json(self) -> dict[str, list[dict[str, Any]]]:
        """Return the JSON-ready `{"min": [...], "max": [...]}` payload."""

        return {
            "min": [record.as_json() for record in self.min],
            "max": [record.as_json() for record in self.max],
        }
