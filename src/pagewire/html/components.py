"""
Server-side HTML component tree.

Components hold a tag, attributes, classes, CSS properties and children, and
render themselves to HTML and to aggregated CSS. Component-generation markers
(see ``pagewire.angular.annotations``) can be attached to any component with
``add_configuration``; plain components hand them to their nearest Angular
ancestor when TypeScript is generated.
"""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from markupsafe import escape

from pagewire.naming import encode_class_name

if TYPE_CHECKING:
    from pagewire.angular.annotations import NgAnnotation

C = TypeVar("C", bound="Component")

VOID_TAGS = frozenset({"area", "base", "br", "col", "hr", "img", "input", "link", "meta", "source"})

_id_sequence = itertools.count(1)


def _next_id(tag: str) -> str:
    return f"{tag}_{next(_id_sequence)}"


class Component:
    """A node in the server-side HTML tree."""

    tag: ClassVar[str] = "div"
    render_id: ClassVar[bool] = True

    def __init__(self, text: str | None = None, *, tag: str | None = None, id: str | None = None):
        self.tag = tag or type(self).tag
        self._tag_overridden = tag is not None
        self.id = id or _next_id(self.tag)
        self.text = text
        self.attributes: dict[str, str] = {}
        self.classes: list[str] = []
        self.css: dict[str, str] = {}
        self.children: list[Component] = []
        self.parent: Component | None = None
        self.configurations: list[NgAnnotation] = []
        self._initialized = False

    # Tree building

    def add(self, child: C) -> C:
        child.parent = self
        self.children.append(child)
        return child

    def set_tag(self: C, tag: str) -> C:
        self.tag = tag
        self._tag_overridden = True
        return self

    def set_text(self: C, text: str | None) -> C:
        self.text = text
        return self

    def add_attribute(self: C, name: str, value: Any) -> C:
        self.attributes[name] = str(value)
        return self

    def add_class(self: C, css_class: str) -> C:
        if css_class not in self.classes:
            self.classes.append(css_class)
        return self

    def add_style(self: C, name: str, value: str) -> C:
        self.css[name] = value
        return self

    def add_configuration(self: C, configuration: NgAnnotation) -> C:
        """Attach a component-generation marker to this instance."""
        self.configurations.append(configuration)
        return self

    def add_event(self: C, event_class: type, event_type: str = "click") -> C:
        """Fire ``event_class`` on the server when the DOM event occurs."""
        self.add_attribute(
            f"on{event_type}",
            f"jw.fireEvent('{encode_class_name(event_class)}', '{event_type}', '{self.id}')",
        )
        return self

    def get_configurations(self) -> list[NgAnnotation]:
        """Markers declared on the class hierarchy followed by instance markers."""
        from pagewire.angular.annotations import class_annotations

        return [*class_annotations(type(self)), *self.configurations]

    def walk(self):
        """Yield this component and all descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    # Life-cycle

    def init(self) -> None:
        """Called once before the first render; override to build content lazily."""
        self._initialized = True

    def is_initialized(self) -> bool:
        return self._initialized

    def preconfigure(self) -> None:
        if not self._initialized:
            self.init()
            self._initialized = True
        for child in list(self.children):
            child.preconfigure()

    # Rendering

    def to_html(self, pretty: bool = False, tab_count: int = 0) -> str:
        self.preconfigure()
        return self._render(pretty, tab_count, shell_angular=False)

    def render_inner_html(self, pretty: bool = False, shell_angular: bool = False) -> str:
        """Render text and children without this component's own tag."""
        self.preconfigure()
        parts = []
        if self.text:
            parts.append(str(escape(self.text)))
        parts.extend(child._render(pretty, 0, shell_angular) for child in self.children)
        return ("\n" if pretty else "").join(parts)

    def _render_attributes(self) -> str:
        rendered = []
        if self.render_id and self.id:
            rendered.append(f'id="{escape(self.id)}"')
        if self.classes:
            rendered.append(f'class="{escape(" ".join(self.classes))}"')
        for name, value in self.attributes.items():
            rendered.append(f'{name}="{escape(value)}"')
        return (" " + " ".join(rendered)) if rendered else ""

    def _render(self, pretty: bool, tab_count: int, shell_angular: bool) -> str:
        indent = "\t" * tab_count if pretty else ""
        open_tag = f"<{self.tag}{self._render_attributes()}>"
        if self.tag in VOID_TAGS:
            return f"{indent}{open_tag}"

        text = str(escape(self.text)) if self.text else ""
        close_tag = f"</{self.tag}>"
        if not self.children:
            return f"{indent}{open_tag}{text}{close_tag}"

        rendered_children = [
            child._render(pretty, tab_count + 1, shell_angular) for child in self.children
        ]
        if not pretty:
            return f"{open_tag}{text}{''.join(rendered_children)}{close_tag}"

        lines = [f"{indent}{open_tag}"]
        if text:
            lines.append(f"{indent}\t{text}")
        lines.extend(rendered_children)
        lines.append(f"{indent}{close_tag}")
        return "\n".join(lines)

    def render_css(self, tab_count: int = 0) -> str:
        """Aggregate ``#id { ... }`` blocks for this component and its descendants."""
        self.preconfigure()
        blocks = []
        indent = "\t" * tab_count
        for component in self.walk():
            if not component.css:
                continue
            declarations = "".join(
                f"{indent}\t{name}: {value};\n" for name, value in component.css.items()
            )
            blocks.append(f"{indent}#{component.id} {{\n{declarations}{indent}}}\n")
        return "".join(blocks)

    def __str__(self) -> str:
        return self.to_html()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tag={self.tag!r}, id={self.id!r})"


class Div(Component):
    tag = "div"


class DivSimple(Component):
    """A div rendered without its id attribute."""

    tag = "div"
    render_id = False


class Span(Component):
    tag = "span"


class Paragraph(Component):
    tag = "p"


class H1(Component):
    tag = "h1"


class H2(Component):
    tag = "h2"


class Button(Component):
    tag = "button"


class Body(Component):
    tag = "body"
    render_id = False
