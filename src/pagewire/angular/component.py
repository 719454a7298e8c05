"""
Mixins that turn server-side classes into generated Angular sources.

``AngularComponent`` is mixed into an HTML component class; its children form
the Angular template. ``AngularService`` marks a plain class rendered as an
``@Injectable`` service.
"""

from __future__ import annotations

from pagewire.angular.annotations import (
    NgAnnotation,
    NgComponent,
    NgInjectable,
    class_annotations,
    find_annotation,
)
from pagewire.naming import to_kebab_case


def get_ts_class_name(cls: type) -> str:
    """TypeScript class name: the ``NgComponent``/``NgInjectable`` value or the class name."""
    marker = find_annotation(cls, NgComponent, inherited=False) or find_annotation(
        cls, NgInjectable, inherited=False
    )
    if marker is not None and marker.value:
        return marker.value
    return cls.__name__


def get_ts_filename(cls: type) -> str:
    """Generated file stem, e.g. ``example-dialog-component``."""
    return to_kebab_case(get_ts_class_name(cls))


class AngularSource:
    """Dynamic contributions shared by components and services.

    Override any of these to add strings computed from instance state; the
    renderer appends them after the statically declared markers.
    """

    def fields(self) -> list[str]:
        return []

    def methods(self) -> list[str]:
        return []

    def constructor_parameters(self) -> list[str]:
        return []

    def constructor_body(self) -> list[str]:
        return []


class AngularComponent(AngularSource):
    """Mixin for HTML components that generate an Angular component.

    Use it ahead of the HTML base class::

        class ExampleComponent(AngularComponent, DivSimple): ...
    """

    def standalone_override(self) -> bool | None:
        """Return True/False to force standalone generation, None for the default."""
        return None

    def is_standalone(self) -> bool:
        override = self.standalone_override()
        if override is not None:
            return override
        marker = find_annotation(type(self), NgComponent)
        if marker is not None and marker.standalone is not None:
            return marker.standalone
        return True

    def selector(self) -> str:
        marker = find_annotation(type(self), NgComponent, inherited=False)
        if marker is not None and marker.selector:
            return marker.selector
        if getattr(self, "_tag_overridden", False):
            return self.tag
        return get_ts_filename(type(self))

    def init(self) -> None:
        if not self.is_initialized():
            self.tag = self.selector()
        super().init()

    def _render(self, pretty: bool, tab_count: int, shell_angular: bool) -> str:
        if not shell_angular:
            return super()._render(pretty, tab_count, shell_angular)
        # Inside another component's template only the host element is emitted.
        indent = "\t" * tab_count if pretty else ""
        return f"{indent}<{self.tag}{self._render_attributes()}></{self.tag}>"


class AngularService(AngularSource):
    """Mixin for classes that generate an ``@Injectable`` service."""

    def provided_in(self) -> str:
        marker = find_annotation(type(self), NgInjectable)
        return marker.provided_in if marker is not None else "root"

    def get_configurations(self) -> list[NgAnnotation]:
        return class_annotations(type(self))
