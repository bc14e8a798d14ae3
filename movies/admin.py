"""Admin registrations for movie catalogue models."""

from __future__ import annotations

from django.contrib import admin

from movies.models import Movie


@admin.register(Movie)
class MovieAdmin(admin.ModelAdmin):
    """Admin configuration for Movie."""

    list_display = ("year", "title", "producers", "winner")
    list_filter = ("winner",)
    search_fields = ("title", "producers")
    ordering = ("year", "id")
