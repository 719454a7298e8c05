"""
Component-generation markers.

Each marker is a frozen value object that can be used in two ways:

- as a class decorator, declaring the marker for every instance::

    @NgField("staticTypescriptField : string = '';")
    @NgOnInit("console.log('rendered inside ngOnInit()');")
    class ExampleComponent(AngularComponent, DivSimple): ...

- as a dynamic configuration on a single instance::

    button.add_configuration(NgMethod("openDialog() { ... }"))

Markers with ``on_parent=True`` are applied to the nearest enclosing Angular
component instead of the declaring one. Decorator order is preserved top to
bottom and markers declared on base classes come first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeVar

T = TypeVar("T", bound=type)

ANNOTATIONS_ATTRIBUTE = "__ng_annotations__"


class NgAnnotation:
    """Base class of all markers."""

    on_parent: bool = False

    def __call__(self, cls: T) -> T:
        # Decorators apply bottom-up; prepend to keep source order.
        declared = cls.__dict__.get(ANNOTATIONS_ATTRIBUTE, ())
        setattr(cls, ANNOTATIONS_ATTRIBUTE, (self, *declared))
        return cls


def class_annotations(cls: type) -> list[NgAnnotation]:
    """Collect markers declared on ``cls`` and its bases, base classes first."""
    collected: list[NgAnnotation] = []
    for klass in reversed(cls.__mro__):
        collected.extend(klass.__dict__.get(ANNOTATIONS_ATTRIBUTE, ()))
    return collected


A = TypeVar("A", bound=NgAnnotation)


def find_annotation(cls: type, annotation_type: type[A], inherited: bool = True) -> A | None:
    """Return the most specific marker of ``annotation_type`` declared on ``cls``."""
    for klass in cls.__mro__ if inherited else (cls,):
        for annotation in klass.__dict__.get(ANNOTATIONS_ATTRIBUTE, ()):
            if isinstance(annotation, annotation_type):
                return annotation
    return None


# Type level markers


@dataclass(frozen=True)
class NgComponent(NgAnnotation):
    value: str = ""
    selector: str = ""
    standalone: bool | None = None


@dataclass(frozen=True)
class NgInjectable(NgAnnotation):
    value: str = ""
    provided_in: str = "root"


# Structures


@dataclass(frozen=True)
class NgField(NgAnnotation):
    value: str
    on_parent: bool = False


@dataclass(frozen=True)
class NgInput(NgAnnotation):
    value: str
    type: str = "any"
    on_parent: bool = False


@dataclass(frozen=True)
class NgOutput(NgAnnotation):
    value: str
    on_parent: bool = False


@dataclass(frozen=True)
class NgInject(NgAnnotation):
    value: str
    reference_name: str
    on_parent: bool = False


@dataclass(frozen=True)
class NgMethod(NgAnnotation):
    value: str
    on_parent: bool = False


# Constructors


@dataclass(frozen=True)
class NgConstructorParameter(NgAnnotation):
    value: str
    on_parent: bool = False


@dataclass(frozen=True)
class NgConstructorBody(NgAnnotation):
    value: str
    on_parent: bool = False


# References


@dataclass(frozen=True)
class NgComponentReference(NgAnnotation):
    reference: type
    on_parent: bool = False


@dataclass(frozen=True)
class NgImportReference(NgAnnotation):
    value: str
    reference: str
    on_parent: bool = False
    wrap_braces: bool = True


@dataclass(frozen=True)
class NgImportModule(NgAnnotation):
    value: str
    on_parent: bool = False


# Life-cycle hooks


@dataclass(frozen=True)
class NgLifecycleHook(NgAnnotation):
    value: str
    on_parent: bool = False

    method_name: ClassVar[str] = ""
    interface: ClassVar[str] = ""


@dataclass(frozen=True)
class NgOnChanges(NgLifecycleHook):
    method_name = "ngOnChanges"
    interface = "OnChanges"


@dataclass(frozen=True)
class NgOnInit(NgLifecycleHook):
    method_name = "ngOnInit"
    interface = "OnInit"


@dataclass(frozen=True)
class NgDoCheck(NgLifecycleHook):
    method_name = "ngDoCheck"
    interface = "DoCheck"


@dataclass(frozen=True)
class NgAfterContentInit(NgLifecycleHook):
    method_name = "ngAfterContentInit"
    interface = "AfterContentInit"


@dataclass(frozen=True)
class NgAfterContentChecked(NgLifecycleHook):
    method_name = "ngAfterContentChecked"
    interface = "AfterContentChecked"


@dataclass(frozen=True)
class NgAfterViewInit(NgLifecycleHook):
    method_name = "ngAfterViewInit"
    interface = "AfterViewInit"


@dataclass(frozen=True)
class NgAfterViewChecked(NgLifecycleHook):
    method_name = "ngAfterViewChecked"
    interface = "AfterViewChecked"


@dataclass(frozen=True)
class NgOnDestroy(NgLifecycleHook):
    method_name = "ngOnDestroy"
    interface = "OnDestroy"


# Angular invokes hooks in this order; generated classes list them the same way.
LIFECYCLE_ORDER: tuple[type[NgLifecycleHook], ...] = (
    NgOnChanges,
    NgOnInit,
    NgDoCheck,
    NgAfterContentInit,
    NgAfterContentChecked,
    NgAfterViewInit,
    NgAfterViewChecked,
    NgOnDestroy,
)
