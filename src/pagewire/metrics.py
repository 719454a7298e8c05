"""Prometheus-based framework metrics implementation."""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Histogram

from pagewire.logging_utils import create_logger
from pagewire.protocols import PageMetricsProtocol

logger = create_logger("pagewire.metrics")


class PrometheusPageMetrics(PageMetricsProtocol):
    """Prometheus-based implementation of framework metrics collection."""

    def __init__(
        self,
        requests_counter: Counter,
        ajax_calls_counter: Counter,
        render_duration: Histogram,
    ) -> None:
        self.requests = requests_counter
        self.ajax_calls = ajax_calls_counter
        self.render_duration = render_duration

    @classmethod
    def create(cls, registry: CollectorRegistry) -> PrometheusPageMetrics:
        """Register the framework metrics on ``registry``."""
        return cls(
            Counter(
                "pagewire_requests_total",
                "Total framework requests",
                ["route", "outcome"],
                registry=registry,
            ),
            Counter(
                "pagewire_ajax_calls_total",
                "Total AJAX calls by outcome",
                ["outcome"],
                registry=registry,
            ),
            Histogram(
                "pagewire_render_duration_seconds",
                "Time spent rendering framework responses",
                ["route"],
                registry=registry,
            ),
        )

    def record_request(self, route: str, outcome: str) -> None:
        try:
            self.requests.labels(route=route, outcome=outcome).inc()
        except Exception as e:
            logger.error(f"Error recording request metric: {e}")

    def record_ajax_call(self, outcome: str) -> None:
        try:
            self.ajax_calls.labels(outcome=outcome).inc()
        except Exception as e:
            logger.error(f"Error recording ajax metric: {e}")

    def observe_render(self, route: str, seconds: float) -> None:
        try:
            self.render_duration.labels(route=route).observe(seconds)
        except Exception as e:
            logger.error(f"Error recording render duration: {e}")
