"""JSON API views for producer award intervals and liveness checks."""

from __future__ import annotations

import logging

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views.decorators.http import require_GET

from core.services import producer_award_intervals as compute_producer_award_intervals

logger = logging.getLogger(__name__)

HEALTH_MESSAGE = "Golden Raspberry Awards API is up!"


@require_GET
def producer_award_intervals(request: HttpRequest) -> HttpResponse:
    """Return producers with the shortest and longest gaps between wins."""

    logger.info("Received request for producer award intervals")
    try:
        result = compute_producer_award_intervals()
    except Exception:
        logger.exception("Failed to compute producer award intervals")
        return HttpResponse(status=500)

    logger.info("Producer award intervals computed (min=%s, max=%s)", len(result.min), len(result.max))
    return JsonResponse(result.as_json())


@require_GET
def health(request: HttpRequest) -> HttpResponse:
    """Return a fixed liveness confirmation."""

    logger.debug("Health check requested")
    return HttpResponse(HEALTH_MESSAGE, content_type="text/plain; charset=utf-8")
