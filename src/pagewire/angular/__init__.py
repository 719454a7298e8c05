"""Angular component generation from server-side classes."""

from pagewire.angular.annotations import (
    LIFECYCLE_ORDER,
    NgAfterContentChecked,
    NgAfterContentInit,
    NgAfterViewChecked,
    NgAfterViewInit,
    NgAnnotation,
    NgComponent,
    NgComponentReference,
    NgConstructorBody,
    NgConstructorParameter,
    NgDoCheck,
    NgField,
    NgImportModule,
    NgImportReference,
    NgInject,
    NgInjectable,
    NgInput,
    NgLifecycleHook,
    NgMethod,
    NgOnChanges,
    NgOnDestroy,
    NgOnInit,
    NgOutput,
    class_annotations,
    find_annotation,
)
from pagewire.angular.component import (
    AngularComponent,
    AngularService,
    get_ts_class_name,
    get_ts_filename,
)
from pagewire.angular.typescript import ComponentDefinition, GeneratedSource, TypeScriptRenderer

__all__ = [
    "LIFECYCLE_ORDER",
    "AngularComponent",
    "AngularService",
    "ComponentDefinition",
    "GeneratedSource",
    "NgAfterContentChecked",
    "NgAfterContentInit",
    "NgAfterViewChecked",
    "NgAfterViewInit",
    "NgAnnotation",
    "NgComponent",
    "NgComponentReference",
    "NgConstructorBody",
    "NgConstructorParameter",
    "NgDoCheck",
    "NgField",
    "NgImportModule",
    "NgImportReference",
    "NgInject",
    "NgInjectable",
    "NgInput",
    "NgLifecycleHook",
    "NgMethod",
    "NgOnChanges",
    "NgOnDestroy",
    "NgOnInit",
    "NgOutput",
    "TypeScriptRenderer",
    "class_annotations",
    "find_annotation",
    "get_ts_class_name",
    "get_ts_filename",
]
