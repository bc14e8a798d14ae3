"""Signals that populate the movie catalogue."""

from __future__ import annotations

from django.conf import settings
from django.db.models.signals import post_migrate
from django.dispatch import receiver

from core.services import load_movie_list


@receiver(post_migrate)
def load_catalogue_after_migrate(sender, **kwargs) -> None:
    """Load the bundled movie list once the `movies` tables exist.

    Loading is skipped when the catalogue is already populated. A missing or
    unreadable movie list raises `MovieListError`, failing `migrate`.
    """

    if sender.name != "movies" or not settings.MOVIE_LIST_AUTOLOAD:
        return
    load_movie_list(settings.MOVIE_LIST_PATH)
