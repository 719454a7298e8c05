"""
Shared fixtures for the pagewire test suite.

The sample application in ``tests.sample_app`` provides pages, events, data
components and Angular components; every fixture builds on a fresh registry
scanned from it.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

import pytest
from dishka import AsyncContainer

from pagewire.app import create_app
from pagewire.config import Environment, Settings
from pagewire.quart_app import PageWireApp
from pagewire.registry import ComponentRegistry
from pagewire.startup_setup import create_di_container

SAMPLE_PACKAGE = "tests.sample_app"


@pytest.fixture
def registry() -> ComponentRegistry:
    registry = ComponentRegistry()
    registry.scan(SAMPLE_PACKAGE)
    return registry


@pytest.fixture
def settings() -> Settings:
    return Settings(
        ENVIRONMENT=Environment.DEVELOPMENT,
        BIND_PAGES=True,
        PAGE_PACKAGES=[],
        AJAX_ERROR_STACK_TRACES=False,
    )


@pytest.fixture
async def app(registry: ComponentRegistry, settings: Settings) -> AsyncIterator[PageWireApp]:
    app = create_app(registry, settings)
    yield app
    await app.container.close()


class _CountingScope:
    def __init__(self, owner: CountingContainer, scope: Any) -> None:
        self._owner = owner
        self._scope = scope

    async def __aenter__(self) -> AsyncContainer:
        self._owner.entered += 1
        return await self._scope.__aenter__()

    async def __aexit__(self, *exc_info: Any) -> Any:
        self._owner.exited += 1
        return await self._scope.__aexit__(*exc_info)


class CountingContainer:
    """Wraps a container and counts REQUEST scopes opened with a context."""

    def __init__(self, container: AsyncContainer) -> None:
        self._container = container
        self.entered = 0
        self.exited = 0

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        scope = self._container(*args, **kwargs)
        if "context" not in kwargs:
            return scope
        return _CountingScope(self, scope)

    async def close(self) -> None:
        await self._container.close()


@pytest.fixture
async def counting_app(
    registry: ComponentRegistry, settings: Settings
) -> AsyncIterator[tuple[PageWireApp, CountingContainer]]:
    container = CountingContainer(create_di_container(registry, settings))
    app = create_app(registry, settings, container=container)  # type: ignore[arg-type]
    yield app, container
    await container.close()
