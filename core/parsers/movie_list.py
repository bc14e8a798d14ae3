"""Best-effort parsing of the Golden Raspberry movie list.

The movie list is a `;`-separated text file with a single header line followed
by `year;title;studios;producers;winner` rows. Parsing follows two rules:

- Malformed rows are non-fatal: each one is reported as a `SkippedRow`.
- Quote characters carry no meaning and are kept as literal text.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass, field

MOVIE_LIST_DELIMITER = ";"
MOVIE_LIST_FIELD_COUNT = 5
WINNER_TOKEN = "yes"


@dataclass(frozen=True)
class ParsedMovieRow:
    """A well-formed movie list row.

    Attributes:
        line_number: 1-based line number in the source text.
        year: Ceremony year.
        title: Movie title.
        studios: Raw studios credit.
        producers: Raw producers credit.
        winner: True when the winner column holds "yes" (any case).
    """

    line_number: int
    year: int
    title: str
    studios: str
    producers: str
    winner: bool


@dataclass(frozen=True)
class SkippedRow:
    """A movie list row that could not be parsed.

    Attributes:
        line_number: 1-based line number in the source text.
        reason: Human-readable reason the row was dropped.
    """

    line_number: int
    reason: str


@dataclass(frozen=True)
class MovieListParseResult:
    """Outcome of parsing a whole movie list.

    Attributes:
        rows: Well-formed rows in file order.
        skipped: Rows dropped during parsing, in file order.
    """

    rows: tuple[ParsedMovieRow, ...] = ()
    skipped: tuple[SkippedRow, ...] = field(default_factory=tuple)


def parse_movie_row(fields: list[str], *, line_number: int) -> ParsedMovieRow | SkippedRow:
    """Parse one split movie list row.

    Args:
        fields: Raw column values for the row.
        line_number: 1-based line number used for reporting.

    Returns:
        ParsedMovieRow for a well-formed row, otherwise SkippedRow.
    """

    if len(fields) < MOVIE_LIST_FIELD_COUNT:
        return SkippedRow(
            line_number=line_number,
            reason=f"expected {MOVIE_LIST_FIELD_COUNT} fields, got {len(fields)}",
        )

    raw_year = fields[0].strip()
    try:
        year = int(raw_year)
    except ValueError:
        return SkippedRow(line_number=line_number, reason=f"invalid year {raw_year!r}")
    if year <= 0:
        return SkippedRow(line_number=line_number, reason=f"invalid year {raw_year!r}")

    return ParsedMovieRow(
        line_number=line_number,
        year=year,
        title=fields[1].strip(),
        studios=fields[2].strip(),
        producers=fields[3].strip(),
        winner=fields[4].strip().lower() == WINNER_TOKEN,
    )


def parse_movie_list(text: str) -> MovieListParseResult:
    """Parse the full movie list text.

    Args:
        text: File contents. The first line is a header and is discarded.

    Returns:
        MovieListParseResult with parsed rows and skipped rows. Blank lines are
        ignored without being reported.
    """

    rows: list[ParsedMovieRow] = []
    skipped: list[SkippedRow] = []
    for line_number, line in enumerate(text.lstrip("\ufeff").splitlines(), start=1):
        if line_number == 1 or not line.strip():
            continue
        fields = _split_line(line)
        if fields is None:
            skipped.append(SkippedRow(line_number=line_number, reason="unreadable line"))
            continue
        parsed = parse_movie_row(fields, line_number=line_number)
        if isinstance(parsed, SkippedRow):
            skipped.append(parsed)
        else:
            rows.append(parsed)

    return MovieListParseResult(rows=tuple(rows), skipped=tuple(skipped))


def _split_line(line: str) -> list[str] | None:
    """Split one movie list line into columns, or None when csv rejects it."""

    reader = csv.reader([line], delimiter=MOVIE_LIST_DELIMITER, quoting=csv.QUOTE_NONE)
    try:
        return next(reader, [])
    except csv.Error:
        return None
