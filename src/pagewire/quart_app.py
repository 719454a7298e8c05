"""
Type-safe Quart application class for pagewire.

``PageWireApp`` declares the infrastructure every pagewire handler relies on
as typed attributes instead of ``setattr()``/``getattr()`` lookups.
"""

from __future__ import annotations

from dishka import AsyncContainer
from quart import Quart

from pagewire.registry import ComponentRegistry


class PageWireApp(Quart):
    """Quart application with guaranteed pagewire infrastructure.

    GUARANTEED INFRASTRUCTURE:
        container: Dishka async container; handlers open a REQUEST scope on it
        registry: The pages, events and components this application serves

    These are set by ``pagewire.app.create_app`` before any blueprint is
    registered.

    Examples:
        >>> from pagewire.app import create_app
        >>> app = create_app(registry)
        >>> async with app.container() as request_container:
        ...     settings = await request_container.get(Settings)
    """

    container: AsyncContainer
    registry: ComponentRegistry
