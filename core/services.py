"""Service-layer functions for the core app.

Services in `core` coordinate Django persistence concerns (ORM, transactions)
with pure parsing/analysis modules.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from django.db import transaction

from analysis.dto import AwardIntervalsResult, WinRecord
from analysis.engine import analyze_award_intervals
from core.exceptions import MovieListError
from core.parsers.movie_list import parse_movie_list
from movies.models import Movie

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MovieListLoadSummary:
    """Totals reported by a movie list load.

    Attributes:
        loaded: Number of movies persisted.
        skipped: Number of malformed rows dropped.
        already_loaded: True when loading was skipped because movies exist.
    """

    loaded: int = 0
    skipped: int = 0
    already_loaded: bool = False

    def as_dict(self) -> dict[str, int | bool]:
        """Return the summary as a plain dict for command output."""

        return {"loaded": self.loaded, "skipped": self.skipped, "already_loaded": self.already_loaded}


def load_movie_list(path: str | Path, *, replace: bool = False) -> MovieListLoadSummary:
    """Load the movie list file into the catalogue.

    Args:
        path: Path to the `;`-separated movie list file.
        replace: Delete existing movies before loading. When False and the
            catalogue already holds movies, nothing is loaded.

    Returns:
        MovieListLoadSummary describing what was persisted.

    Raises:
        MovieListError: The file is missing, unreadable, or not valid UTF-8.
    """

    if not replace and Movie.objects.exists():
        logger.info("Movie catalogue already populated; skipping load of %s", path)
        return MovieListLoadSummary(already_loaded=True)

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Unable to read movie list %s: %s", source, exc)
        raise MovieListError(f"Unable to read movie list {source}") from exc

    parsed = parse_movie_list(text)
    for skipped in parsed.skipped:
        logger.warning("Skipping movie list line %s: %s", skipped.line_number, skipped.reason)

    movies = [
        Movie(
            year=row.year,
            title=row.title,
            studios=row.studios,
            producers=row.producers,
            winner=row.winner,
        )
        for row in parsed.rows
    ]
    with transaction.atomic():
        if replace:
            Movie.objects.all().delete()
        Movie.objects.bulk_create(movies)

    logger.info("Loaded %s movies from %s (%s rows skipped)", len(movies), source, len(parsed.skipped))
    return MovieListLoadSummary(loaded=len(movies), skipped=len(parsed.skipped))


def winner_snapshot() -> tuple[WinRecord, ...]:
    """Return an immutable snapshot of winning movies ordered by year."""

    rows = Movie.objects.filter(winner=True).order_by("year", "id").values_list("year", "producers")
    return tuple(WinRecord(year=year, producers_raw=producers) for year, producers in rows)


def producer_award_intervals() -> AwardIntervalsResult:
    """Compute the shortest and longest producer award intervals.

    Returns:
        AwardIntervalsResult computed over a snapshot of the current winners.
    """

    return analyze_award_intervals(winner_snapshot())
