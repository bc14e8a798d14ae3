"""Golden tests for movie list parsing."""

from __future__ import annotations

import pytest

from core.parsers.movie_list import ParsedMovieRow, SkippedRow, parse_movie_list, parse_movie_row

pytestmark = [pytest.mark.unit, pytest.mark.golden]


def test_parse_movie_list_extracts_rows_and_discards_header() -> None:
    """Parse well-formed rows and drop the header line."""

    text = (
        "year;title;studios;producers;winner\n"
        "1980;Can't Stop the Music;Associated Film Distribution;Allan Carr;yes\n"
        "1980;Cruising;Lorimar Productions, United Artists;Jerry Weintraub;\n"
    )

    parsed = parse_movie_list(text)

    assert parsed.skipped == ()
    assert parsed.rows == (
        ParsedMovieRow(
            line_number=2,
            year=1980,
            title="Can't Stop the Music",
            studios="Associated Film Distribution",
            producers="Allan Carr",
            winner=True,
        ),
        ParsedMovieRow(
            line_number=3,
            year=1980,
            title="Cruising",
            studios="Lorimar Productions, United Artists",
            producers="Jerry Weintraub",
            winner=False,
        ),
    )


def test_parse_movie_list_skips_malformed_rows_individually() -> None:
    """Short rows and non-numeric years are reported without aborting the parse."""

    text = "\n".join(
        [
            "year;title;studios;producers;winner",
            "1981;Mommie Dearest;Paramount Pictures",
            "nineteen;Inchon;MGM;Mitsuharu Ishii;yes",
            "1983;The Lonely Lady;Universal Studios;Robert R. Weston;yes",
        ]
    )

    parsed = parse_movie_list(text)

    assert [row.title for row in parsed.rows] == ["The Lonely Lady"]
    assert parsed.skipped == (
        SkippedRow(line_number=2, reason="expected 5 fields, got 3"),
        SkippedRow(line_number=3, reason="invalid year 'nineteen'"),
    )


def test_parse_movie_list_keeps_quotes_literal_and_ignores_blank_lines() -> None:
    """Quote characters are plain text and blank lines are not reported."""

    text = '\ufeffyear;title;studios;producers;winner\n\n1984;"Bolero";Cannon Films;Bo Derek;YES\n\n'

    parsed = parse_movie_list(text)

    assert parsed.skipped == ()
    assert len(parsed.rows) == 1
    assert parsed.rows[0].title == '"Bolero"'
    assert parsed.rows[0].winner is True


@pytest.mark.parametrize("winner", ["yes", " Yes ", "YES"])
def test_parse_movie_row_accepts_case_insensitive_winner(winner: str) -> None:
    """The winner column is the token "yes" in any case."""

    parsed = parse_movie_row(["1990", "Hudson Hawk", "TriStar", "Joel Silver", winner], line_number=5)

    assert isinstance(parsed, ParsedMovieRow)
    assert parsed.winner is True


@pytest.mark.parametrize("winner", ["", "no", "y", "true"])
def test_parse_movie_row_treats_other_tokens_as_non_winner(winner: str) -> None:
    """Anything other than "yes" marks a nominee."""

    parsed = parse_movie_row(["1990", "Hudson Hawk", "TriStar", "Joel Silver", winner], line_number=5)

    assert isinstance(parsed, ParsedMovieRow)
    assert parsed.winner is False


def test_parse_movie_row_rejects_non_positive_year() -> None:
    """Years must be positive integers."""

    parsed = parse_movie_row(["0", "Title", "Studio", "Producer", "yes"], line_number=9)

    assert parsed == SkippedRow(line_number=9, reason="invalid year '0'")


def test_parse_movie_list_skips_oversized_line_and_keeps_following_rows() -> None:
    """A line the csv module rejects is skipped without losing later rows."""

    text = "\n".join(
        [
            "year;title;studios;producers;winner",
            "1980;Big;Studio;" + "x" * 200_000 + ";yes",
            "1981;Mommie Dearest;Paramount Pictures;Frank Yablans;yes",
        ]
    )

    parsed = parse_movie_list(text)

    assert parsed.skipped == (SkippedRow(line_number=2, reason="unreadable line"),)
    assert [row.producers for row in parsed.rows] == ["Frank Yablans"]
