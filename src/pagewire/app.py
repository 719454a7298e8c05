"""
pagewire application factory.
"""

from __future__ import annotations

from collections.abc import Sequence

from dishka import AsyncContainer

from pagewire.api.framework_routes import create_framework_blueprint, create_page_blueprint
from pagewire.api.health_routes import health_bp
from pagewire.config import Settings
from pagewire.config import settings as default_settings
from pagewire.logging_utils import create_logger
from pagewire.protocols import AjaxCallInterceptor, DataCallInterceptor
from pagewire.quart_app import PageWireApp
from pagewire.registry import ComponentRegistry
from pagewire.startup_setup import create_di_container, scan_packages, shutdown_services

logger = create_logger("pagewire.app")


def create_app(
    registry: ComponentRegistry | None = None,
    settings: Settings | None = None,
    ajax_interceptors: Sequence[AjaxCallInterceptor] = (),
    data_interceptors: Sequence[DataCallInterceptor] = (),
    container: AsyncContainer | None = None,
) -> PageWireApp:
    """Build a ``PageWireApp`` serving ``registry``.

    Packages listed in ``settings.PAGE_PACKAGES`` are scanned into the registry
    before routes are bound. Pass ``container`` to supply a prebuilt DI
    container instead of one made from the default providers.
    """
    settings = settings or default_settings
    registry = registry if registry is not None else ComponentRegistry()
    scan_packages(registry, settings.PAGE_PACKAGES)

    app = PageWireApp(__name__)
    app.config["DEBUG"] = settings.DEBUG
    app.registry = registry
    app.container = container or create_di_container(
        registry, settings, ajax_interceptors, data_interceptors
    )

    app.register_blueprint(create_framework_blueprint(settings))
    app.register_blueprint(health_bp)
    if settings.BIND_PAGES:
        app.register_blueprint(create_page_blueprint(registry))
    else:
        logger.info("Page routes disabled by BIND_PAGES")

    @app.after_serving
    async def shutdown() -> None:
        """Gracefully shutdown the DI container."""
        await shutdown_services(app.container)

    logger.info(
        "pagewire application created",
        pages=len(registry.pages),
        events=len(registry.events),
        data_components=len(registry.data_components),
        bind_pages=settings.BIND_PAGES,
    )
    return app
