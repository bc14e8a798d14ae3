"""Django app configuration for the movie catalogue."""

from __future__ import annotations

from django.apps import AppConfig


class MoviesConfig(AppConfig):
    """AppConfig for the Golden Raspberry movie catalogue."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "movies"
