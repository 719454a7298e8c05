"""
Startup registry of pages, events, data components and Angular components.

Classes are registered explicitly (``register_*``, usable as decorators) or by
scanning a package. Requests only ever resolve names that were registered;
nothing named by a client is imported.
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
from types import ModuleType
from typing import Any, NoReturn, TypeVar

from pagewire.ajax.events import Event
from pagewire.angular.component import AngularComponent, AngularService
from pagewire.error_handling import (
    raise_configuration_error,
    raise_invalid_request_error,
    raise_resource_not_found,
)
from pagewire.html.page import Page, get_page_configuration
from pagewire.logging_utils import create_logger
from pagewire.naming import encode_class_name, qualified_name
from pagewire.protocols import DataComponentProtocol

logger = create_logger("pagewire.registry")

T = TypeVar("T", bound=type)

EVENT_NOT_FOUND_MESSAGE = "The Event To Be Triggered Could Not Be Found"
DATA_COMPONENT_NOT_FOUND_MESSAGE = "The Data Component Could Not Be Found"


def _is_data_component(cls: type) -> bool:
    return issubclass(cls, DataComponentProtocol)


class ComponentRegistry:
    """Name and URL lookups for everything a pagewire application serves."""

    def __init__(self) -> None:
        self._pages: dict[str, type[Page]] = {}
        self._events: dict[str, type[Event]] = {}
        self._data_components: dict[str, type[DataComponentProtocol]] = {}
        self._angular: dict[str, type] = {}

    # Registration

    def register_page(self, cls: T) -> T:
        if not (isinstance(cls, type) and issubclass(cls, Page)):
            self._reject(cls, "register_page", "is not a Page subclass")
        if inspect.isabstract(cls):
            self._reject(cls, "register_page", "is abstract and cannot be served")
        configuration = get_page_configuration(cls)
        if configuration is None:
            self._reject(cls, "register_page", "has no page_configuration")

        existing = self._pages.get(configuration.url)
        if existing is not None and existing is not cls:
            self._reject(
                cls,
                "register_page",
                f"url '{configuration.url}' is already bound to {qualified_name(existing)}",
            )
        self._pages[configuration.url] = cls
        logger.debug("Registered page", page=qualified_name(cls), url=configuration.url)
        return cls

    def register_event(self, cls: T) -> T:
        if not (isinstance(cls, type) and issubclass(cls, Event)):
            self._reject(cls, "register_event", "is not an Event subclass")
        if inspect.isabstract(cls):
            self._reject(cls, "register_event", "is abstract and cannot be fired")
        self._register_named(self._events, cls, "register_event")
        return cls

    def register_data_component(self, cls: T) -> T:
        if not (isinstance(cls, type) and _is_data_component(cls)):
            self._reject(cls, "register_data_component", "does not define render_data()")
        self._register_named(self._data_components, cls, "register_data_component")
        return cls

    def register_angular(self, cls: T) -> T:
        if not (isinstance(cls, type) and issubclass(cls, (AngularComponent, AngularService))):
            self._reject(cls, "register_angular", "is neither an Angular component nor service")
        self._angular[qualified_name(cls)] = cls
        return cls

    def scan(self, package: str | ModuleType) -> int:
        """Import ``package`` and its submodules and register what they define.

        Returns the number of classes registered.
        """
        module = importlib.import_module(package) if isinstance(package, str) else package
        modules = [module]
        if hasattr(module, "__path__"):
            for info in pkgutil.walk_packages(module.__path__, prefix=f"{module.__name__}."):
                modules.append(importlib.import_module(info.name))

        registered = 0
        for scanned in modules:
            for cls in vars(scanned).values():
                if not inspect.isclass(cls) or cls.__module__ != scanned.__name__:
                    continue
                if inspect.isabstract(cls):
                    continue
                registered += self._register_discovered(cls)

        logger.info(
            "Scanned package",
            package=module.__name__,
            modules=len(modules),
            registered=registered,
        )
        return registered

    def _register_discovered(self, cls: type) -> int:
        count = 0
        if issubclass(cls, Page):
            if get_page_configuration(cls) is not None:
                self.register_page(cls)
                count += 1
        elif issubclass(cls, Event):
            self.register_event(cls)
            count += 1
        elif _is_data_component(cls):
            self.register_data_component(cls)
            count += 1
        if issubclass(cls, (AngularComponent, AngularService)):
            self.register_angular(cls)
            count += 1
        return count

    def _register_named(self, table: dict[str, Any], cls: type, operation: str) -> None:
        for name in (qualified_name(cls), encode_class_name(cls)):
            existing = table.get(name)
            if existing is not None and existing is not cls:
                self._reject(
                    cls, operation, f"name '{name}' is already bound to {qualified_name(existing)}"
                )
        table[qualified_name(cls)] = cls
        table[encode_class_name(cls)] = cls

    def _reject(self, cls: object, operation: str, reason: str) -> NoReturn:
        name = qualified_name(cls) if isinstance(cls, type) else repr(cls)
        raise_configuration_error(
            service="pagewire",
            operation=operation,
            message=f"{name} {reason}",
            class_name=name,
        )

    # Lookups

    def resolve_event(self, class_name: str) -> type[Event]:
        event = self._events.get(class_name.strip())
        if event is None:
            raise_invalid_request_error(
                service="pagewire",
                operation="resolve_event",
                message=EVENT_NOT_FOUND_MESSAGE,
                class_name=class_name,
            )
        return event

    def resolve_data_component(self, class_name: str) -> type[DataComponentProtocol]:
        component = self._data_components.get(class_name.strip())
        if component is None:
            raise_invalid_request_error(
                service="pagewire",
                operation="resolve_data_component",
                message=DATA_COMPONENT_NOT_FOUND_MESSAGE,
                class_name=class_name,
            )
        return component

    def match_page_url(self, path: str) -> str | None:
        """Longest registered url that ``path`` equals or lies under."""
        path = path or "/"
        best: str | None = None
        for url in self._pages:
            prefix = url.rstrip("/")
            if url == "/" or path == url or path == prefix or path.startswith(f"{prefix}/"):
                if best is None or len(url) > len(best):
                    best = url
        return best

    def page_class(self, url: str) -> type[Page]:
        cls = self._pages.get(url)
        if cls is None:
            raise_resource_not_found(
                service="pagewire",
                operation="create_page",
                resource_type="Page",
                resource_id=url,
            )
        return cls

    def create_page(self, url: str) -> Page:
        return self.page_class(url)()

    # Views

    @property
    def pages(self) -> dict[str, type[Page]]:
        return dict(self._pages)

    @property
    def events(self) -> list[type[Event]]:
        return list(dict.fromkeys(self._events.values()))

    @property
    def data_components(self) -> list[type[DataComponentProtocol]]:
        return list(dict.fromkeys(self._data_components.values()))

    @property
    def angular_classes(self) -> list[type]:
        return list(self._angular.values())
