"""
TypeScript renderer for Angular components and services.

The renderer collects the markers that apply to a component (its own markers,
markers bubbled up from plain descendants, and ``on_parent`` markers of
Angular children), folds them into a ``ComponentDefinition`` and renders that
definition through the Jinja2 templates shipped in ``pagewire/templates``.
"""

from __future__ import annotations

import textwrap
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from pagewire.angular.annotations import (
    LIFECYCLE_ORDER,
    NgAnnotation,
    NgComponentReference,
    NgConstructorBody,
    NgConstructorParameter,
    NgField,
    NgImportModule,
    NgImportReference,
    NgInject,
    NgInput,
    NgLifecycleHook,
    NgMethod,
    NgOutput,
)
from pagewire.angular.component import (
    AngularComponent,
    AngularService,
    get_ts_class_name,
    get_ts_filename,
)
from pagewire.error_handling import raise_configuration_error
from pagewire.html.components import Component
from pagewire.logging_utils import create_logger
from pagewire.templating import TEMPLATE_DIR, get_template_environment

logger = create_logger("pagewire.angular.typescript")

ANGULAR_CORE = "@angular/core"


@dataclass
class LifecycleHookDefinition:
    method_name: str
    statements: list[str] = field(default_factory=list)


@dataclass
class ComponentDefinition:
    """Everything needed to render one generated TypeScript file."""

    class_name: str
    filename: str
    kind: str
    selector: str = ""
    standalone: bool = True
    provided_in: str = "root"
    named_imports: dict[str, list[str]] = field(default_factory=dict)
    default_imports: dict[str, str] = field(default_factory=dict)
    import_modules: list[str] = field(default_factory=list)
    fields: list[str] = field(default_factory=list)
    constructor_parameters: list[str] = field(default_factory=list)
    constructor_body: list[str] = field(default_factory=list)
    hooks: dict[str, LifecycleHookDefinition] = field(default_factory=dict)
    interfaces: list[str] = field(default_factory=list)
    methods: list[str] = field(default_factory=list)
    template: str | None = None

    def add_import(self, name: str, module: str) -> None:
        names = self.named_imports.setdefault(module, [])
        if name not in names:
            names.append(name)

    def add_default_import(self, name: str, module: str) -> None:
        self.default_imports.setdefault(name, module)

    def add_import_module(self, name: str) -> None:
        if name not in self.import_modules:
            self.import_modules.append(name)

    def import_lines(self) -> list[str]:
        """Angular packages first, then everything else; names sorted."""
        modules = sorted(self.named_imports, key=lambda m: (not m.startswith("@angular/"), m))
        lines = [
            f"import {{{', '.join(sorted(self.named_imports[m], key=str.lower))}}} from '{m}';"
            for m in modules
        ]
        lines.extend(
            f"import {name} from '{module}';" for name, module in self.default_imports.items()
        )
        return lines

    def ordered_hooks(self) -> list[LifecycleHookDefinition]:
        order = [hook.method_name for hook in LIFECYCLE_ORDER]
        return sorted(self.hooks.values(), key=lambda hook: order.index(hook.method_name))


@dataclass(frozen=True)
class GeneratedSource:
    filename: str
    typescript: str
    template: str | None = None


def _statement(value: str) -> str:
    value = value.strip()
    if value and not value.endswith((";", "}")):
        value += ";"
    return value


def _block(value: str, level: int, terminate: bool = False) -> str:
    """Dedent a multi-line snippet and re-indent it with ``level`` tabs."""
    dedented = textwrap.dedent(value).strip("\n").rstrip()
    if terminate:
        dedented = _statement(dedented)
    prefix = "\t" * level
    return "\n".join(
        f"{prefix}{line.rstrip()}" if line.strip() else "" for line in dedented.splitlines()
    )


def _unique(annotations: Iterable[NgAnnotation]) -> list[NgAnnotation]:
    seen: set[NgAnnotation] = set()
    ordered = []
    for annotation in annotations:
        if annotation not in seen:
            seen.add(annotation)
            ordered.append(annotation)
    return ordered


class TypeScriptRenderer:
    """Render ``AngularComponent`` and ``AngularService`` instances to TypeScript."""

    def __init__(self, template_dir: Path = TEMPLATE_DIR) -> None:
        self.env = get_template_environment(template_dir)

    # Collection

    def applicable_annotations(self, component: Component) -> list[NgAnnotation]:
        """Markers that land on ``component`` when it is generated."""
        component.preconfigure()
        own = [a for a in component.get_configurations() if not a.on_parent]
        return _unique([*own, *self._bubbled_annotations(component)])

    def _bubbled_annotations(self, component: Component) -> Iterator[NgAnnotation]:
        for child in component.children:
            if isinstance(child, AngularComponent):
                yield from (a for a in child.get_configurations() if a.on_parent)
                yield NgComponentReference(type(child))
            else:
                # Plain components belong to the enclosing Angular component.
                yield from child.get_configurations()
                yield from self._bubbled_annotations(child)

    def collect(self, source: AngularComponent | AngularService) -> ComponentDefinition:
        cls = type(source)
        if isinstance(source, AngularComponent) and isinstance(source, Component):
            annotations = self.applicable_annotations(source)
            definition = ComponentDefinition(
                class_name=get_ts_class_name(cls),
                filename=get_ts_filename(cls),
                kind="component",
                selector=source.selector(),
                standalone=source.is_standalone(),
                template=source.render_inner_html(pretty=True, shell_angular=True),
            )
            definition.add_import("Component", ANGULAR_CORE)
        elif isinstance(source, AngularService):
            annotations = [a for a in source.get_configurations() if not a.on_parent]
            definition = ComponentDefinition(
                class_name=get_ts_class_name(cls),
                filename=get_ts_filename(cls),
                kind="service",
                provided_in=source.provided_in(),
            )
            definition.add_import("Injectable", ANGULAR_CORE)
        else:
            raise_configuration_error(
                service="pagewire",
                operation="collect_typescript",
                message=f"{cls.__name__} is neither an Angular component nor an Angular service",
                source_class=cls.__name__,
            )

        for annotation in annotations:
            self._apply(definition, annotation, cls)

        definition.fields.extend(_statement(value) for value in source.fields())
        definition.constructor_parameters.extend(source.constructor_parameters())
        definition.constructor_body.extend(source.constructor_body())
        definition.methods.extend(source.methods())
        return definition

    def _apply(
        self, definition: ComponentDefinition, annotation: NgAnnotation, owner: type
    ) -> None:
        if isinstance(annotation, NgField):
            definition.fields.append(_statement(annotation.value))
        elif isinstance(annotation, NgInput):
            definition.add_import("Input", ANGULAR_CORE)
            definition.fields.append(f"@Input() {annotation.value}: {annotation.type};")
        elif isinstance(annotation, NgOutput):
            definition.add_import("Output", ANGULAR_CORE)
            definition.add_import("EventEmitter", ANGULAR_CORE)
            definition.fields.append(f"@Output() {annotation.value} = new EventEmitter<any>();")
        elif isinstance(annotation, NgInject):
            definition.add_import("inject", ANGULAR_CORE)
            definition.fields.append(f"{annotation.reference_name} = inject({annotation.value});")
        elif isinstance(annotation, NgMethod):
            definition.methods.append(annotation.value)
        elif isinstance(annotation, NgConstructorParameter):
            if annotation.value not in definition.constructor_parameters:
                definition.constructor_parameters.append(annotation.value)
        elif isinstance(annotation, NgConstructorBody):
            definition.constructor_body.append(annotation.value)
        elif isinstance(annotation, NgLifecycleHook):
            hook = definition.hooks.setdefault(
                annotation.method_name, LifecycleHookDefinition(annotation.method_name)
            )
            hook.statements.append(annotation.value)
            if annotation.interface not in definition.interfaces:
                definition.interfaces.append(annotation.interface)
                definition.add_import(annotation.interface, ANGULAR_CORE)
        elif isinstance(annotation, NgImportReference):
            if annotation.wrap_braces:
                definition.add_import(annotation.value, annotation.reference)
            else:
                definition.add_default_import(annotation.value, annotation.reference)
        elif isinstance(annotation, NgImportModule):
            definition.add_import_module(annotation.value)
        elif isinstance(annotation, NgComponentReference):
            self._apply_reference(definition, annotation.reference, owner)

    def _apply_reference(
        self, definition: ComponentDefinition, reference: type, owner: type
    ) -> None:
        if reference is owner:
            return
        if not isinstance(reference, type) or not issubclass(
            reference, (AngularComponent, AngularService)
        ):
            raise_configuration_error(
                service="pagewire",
                operation="apply_component_reference",
                message=f"{reference!r} referenced from {owner.__name__} is not an Angular class",
                owner=owner.__name__,
            )
        class_name = get_ts_class_name(reference)
        definition.add_import(class_name, f"./{get_ts_filename(reference)}")
        if issubclass(reference, AngularComponent):
            definition.add_import_module(class_name)

    # Rendering

    def render(self, source: AngularComponent | AngularService) -> GeneratedSource:
        definition = self.collect(source)
        template_name = "component.ts.j2" if definition.kind == "component" else "injectable.ts.j2"
        typescript = self.env.get_template(template_name).render(
            definition=definition,
            import_lines=definition.import_lines(),
            fields=definition.fields,
            constructor_parameters=definition.constructor_parameters,
            constructor_body=[_block(s, 2, terminate=True) for s in definition.constructor_body],
            hooks=[
                (hook.method_name, [_block(s, 2, terminate=True) for s in hook.statements])
                for hook in definition.ordered_hooks()
            ],
            methods=[_block(method, 1) for method in definition.methods],
        )
        logger.debug(
            "Rendered TypeScript source",
            class_name=definition.class_name,
            kind=definition.kind,
        )
        return GeneratedSource(
            filename=definition.filename,
            typescript=typescript,
            template=definition.template,
        )

    def write(self, source: AngularComponent | AngularService, output_dir: Path) -> list[Path]:
        """Write ``<filename>.ts`` (and ``<filename>.html`` for components)."""
        generated = self.render(source)
        output_dir.mkdir(parents=True, exist_ok=True)

        written = [output_dir / f"{generated.filename}.ts"]
        written[0].write_text(generated.typescript, encoding="utf-8")
        if generated.template is not None:
            html_path = output_dir / f"{generated.filename}.html"
            html_path.write_text(generated.template + "\n", encoding="utf-8")
            written.append(html_path)

        logger.info("Wrote generated sources", files=[str(path) for path in written])
        return written
