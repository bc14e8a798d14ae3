"""Pytest fixtures shared across unit and Django integration tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

MOVIE_LIST_HEADER = "year;title;studios;producers;winner"


def pytest_configure(config: pytest.Config) -> None:
    """Keep the test database empty: do not load the bundled movie list on migrate."""

    from django.conf import settings

    settings.MOVIE_LIST_AUTOLOAD = False


@pytest.fixture
def write_movie_list(tmp_path: Path) -> Callable[[Sequence[str]], Path]:
    """Return a helper that writes movie list rows (after the header) to disk."""

    def _write(lines: Sequence[str], *, name: str = "movielist.csv") -> Path:
        path = tmp_path / name
        path.write_text("\n".join([MOVIE_LIST_HEADER, *lines]) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def create_movie(db):
    """Return a factory creating persisted Movie rows."""

    from movies.models import Movie

    def _create(year: int, producers: str, *, winner: bool = True, title: str = "Untitled") -> Movie:
        return Movie.objects.create(
            year=year,
            title=title,
            studios="Studio",
            producers=producers,
            winner=winner,
        )

    return _create


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    The suite is runnable by intent:
    - `unit`: pure, fast tests with no database access.
    - `integration`: tests touching Django, database, views, commands, or IO.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
