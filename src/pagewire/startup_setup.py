"""Startup and shutdown logic for pagewire applications."""

from __future__ import annotations

from collections.abc import Sequence

from dishka import AsyncContainer, make_async_container

from pagewire.config import Settings
from pagewire.di import PageWireProvider, RequestContextProvider
from pagewire.logging_utils import create_logger
from pagewire.protocols import AjaxCallInterceptor, DataCallInterceptor
from pagewire.registry import ComponentRegistry

logger = create_logger("pagewire.startup")


def create_di_container(
    registry: ComponentRegistry,
    settings: Settings,
    ajax_interceptors: Sequence[AjaxCallInterceptor] = (),
    data_interceptors: Sequence[DataCallInterceptor] = (),
) -> AsyncContainer:
    """Creates and returns the DI AsyncContainer."""
    container = make_async_container(
        PageWireProvider(registry, settings, ajax_interceptors, data_interceptors),
        RequestContextProvider(),
    )
    logger.info("DI AsyncContainer created.")
    return container


def scan_packages(registry: ComponentRegistry, packages: Sequence[str]) -> None:
    for package in packages:
        registry.scan(package)


async def shutdown_services(container: AsyncContainer) -> None:
    """Close the DI container, running APP-scoped finalisers."""
    try:
        await container.close()
        logger.info("pagewire DI container closed")
    except Exception as e:
        logger.error(f"Error during pagewire shutdown: {e}", exc_info=True)
