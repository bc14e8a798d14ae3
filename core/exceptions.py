"""Exceptions raised by the core service layer."""

from __future__ import annotations


class MovieListError(Exception):
    """Raised when the movie list source cannot be read."""
