"""URL configuration for the core API."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("producers/award-intervals", views.producer_award_intervals, name="producer_award_intervals"),
    path("health", views.health, name="health"),
]
