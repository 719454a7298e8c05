"""Health and metrics routes for pagewire applications."""

from __future__ import annotations

import uuid
from typing import cast

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest
from quart import Blueprint, Response, current_app, jsonify

from pagewire.config import Settings
from pagewire.logging_utils import create_logger
from pagewire.quart_app import PageWireApp
from pagewire.registry import ComponentRegistry

logger = create_logger("pagewire.api.health")
health_bp = Blueprint("health_routes", __name__)


@health_bp.route("/healthz")
async def health_check() -> Response | tuple[Response, int]:
    """Standardized health check endpoint."""
    correlation_id = uuid.uuid4()
    app = cast(PageWireApp, current_app)

    try:
        async with app.container() as request_container:
            settings = await request_container.get(Settings)
            registry = await request_container.get(ComponentRegistry)

        health_response = {
            "service": settings.SERVICE_NAME,
            "status": "healthy",
            "message": "pagewire application is healthy",
            "checks": {
                "service_responsive": True,
                "pages_registered": len(registry.pages),
                "events_registered": len(registry.events),
            },
            "environment": settings.ENVIRONMENT.value,
            "correlation_id": str(correlation_id),
        }
        return jsonify(health_response), 200

    except Exception as e:
        logger.error(
            f"Health check unexpected error: {e}",
            correlation_id=str(correlation_id),
            exc_info=True,
        )
        return jsonify(
            {
                "status": "unhealthy",
                "message": "Health check failed",
                "error": str(e),
                "correlation_id": str(correlation_id),
            }
        ), 503


@health_bp.route("/metrics")
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    correlation_id = uuid.uuid4()
    app = cast(PageWireApp, current_app)

    try:
        async with app.container() as request_container:
            registry = await request_container.get(CollectorRegistry)
        response = Response(generate_latest(registry), content_type=CONTENT_TYPE_LATEST)
        response.headers["X-Correlation-ID"] = str(correlation_id)
        return response
    except Exception as e:
        logger.error(
            f"Error generating metrics: {e}",
            correlation_id=str(correlation_id),
            exc_info=True,
        )
        return Response("Error generating metrics", status=500)
