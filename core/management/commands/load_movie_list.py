"""Load the Golden Raspberry movie list into the catalogue."""

from __future__ import annotations

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from core.exceptions import MovieListError
from core.services import load_movie_list


class Command(BaseCommand):
    """Load movies from the `;`-separated movie list file."""

    help = "Load the movie list CSV into the catalogue (skipped when movies already exist)."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument(
            "--path",
            default=None,
            help="Movie list file to load (defaults to settings.MOVIE_LIST_PATH).",
        )
        parser.add_argument(
            "--replace",
            action="store_true",
            help="Delete existing movies before loading.",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        path = options["path"] or settings.MOVIE_LIST_PATH
        replace: bool = options["replace"]

        try:
            summary = load_movie_list(path, replace=replace)
        except MovieListError as exc:
            raise CommandError(str(exc)) from exc

        mode = "REPLACE" if replace else "LOAD"
        self.stdout.write(f"[{mode}] {summary.as_dict()}")
        return None
