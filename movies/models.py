"""Database models for the Golden Raspberry movie catalogue."""

from __future__ import annotations

from django.db import models


class Movie(models.Model):
    """A nominated (and possibly winning) Worst Picture movie."""

    year = models.PositiveIntegerField(db_index=True)
    title = models.CharField(max_length=500)
    studios = models.CharField(max_length=500, blank=True, default="")
    producers = models.CharField(max_length=500)
    winner = models.BooleanField(default=False, db_index=True)

    class Meta:
        verbose_name = "Movie"
        verbose_name_plural = "Movies"
        ordering = ["year", "id"]

    def __str__(self) -> str:
        """Return a concise display string for admin/debug usage."""

        return f"Movie(year={self.year}, title={self.title!r}, winner={self.winner})"
