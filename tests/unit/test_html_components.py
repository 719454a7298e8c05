"""Tests for the server-side HTML component tree."""

from __future__ import annotations

from pagewire.html import H1, Body, Button, Component, Div, DivSimple, Paragraph, Span
from pagewire.naming import encode_class_name, qualified_name, to_kebab_case

from tests.sample_app.events import GreetEvent


class LazyDiv(Div):
    def __init__(self) -> None:
        super().__init__(id="lazy")
        self.init_calls = 0

    def init(self) -> None:
        self.init_calls += 1
        self.add(Span("built lazily", id="lazy_span"))
        super().init()


class TestRendering:
    """HTML output of components."""

    def test_simple_component(self) -> None:
        assert Paragraph("Hello", id="p1").to_html() == '<p id="p1">Hello</p>'

    def test_nested_compact_output(self) -> None:
        div = Div(id="outer")
        div.add(Span("inner", id="s1"))

        assert div.to_html() == '<div id="outer"><span id="s1">inner</span></div>'

    def test_pretty_output_indents_with_tabs(self) -> None:
        div = Div(id="outer")
        div.add(H1("Title", id="t"))

        assert div.to_html(pretty=True) == '<div id="outer">\n\t<h1 id="t">Title</h1>\n</div>'

    def test_text_and_attributes_are_escaped(self) -> None:
        span = Span("<b>&</b>", id="s").add_attribute("title", 'say "hi"')

        assert span.to_html() == (
            '<span id="s" title="say &#34;hi&#34;">&lt;b&gt;&amp;&lt;/b&gt;</span>'
        )

    def test_void_tags_are_not_closed(self) -> None:
        image = Component(tag="img", id="logo").add_attribute("src", "/logo.png")

        assert image.to_html() == '<img id="logo" src="/logo.png">'

    def test_simple_variants_omit_id(self) -> None:
        assert DivSimple("x").to_html() == "<div>x</div>"
        assert Body().to_html() == "<body></body>"

    def test_classes_render_once(self) -> None:
        button = Button("Go", id="b").add_class("primary").add_class("primary").add_class("wide")

        assert button.to_html() == '<button id="b" class="primary wide">Go</button>'

    def test_generated_ids_use_tag(self) -> None:
        assert Span().id.startswith("span_")
        assert Span().id != Span().id


class TestLifecycle:
    """The init hook and tree traversal."""

    def test_init_runs_once_before_first_render(self) -> None:
        lazy = LazyDiv()
        lazy.to_html()
        lazy.render_css()

        assert lazy.init_calls == 1
        assert lazy.to_html() == '<div id="lazy"><span id="lazy_span">built lazily</span></div>'

    def test_walk_is_depth_first(self) -> None:
        root = Div(id="root")
        first = root.add(Div(id="first"))
        first.add(Span(id="deep"))
        root.add(Span(id="second"))

        assert [c.id for c in root.walk()] == ["root", "first", "deep", "second"]

    def test_add_sets_parent(self) -> None:
        root = Div()
        child = root.add(Span())

        assert child.parent is root
        assert root.children == [child]


class TestCssAndEvents:
    """CSS aggregation and event wiring."""

    def test_render_css_aggregates_subtree(self) -> None:
        root = Div(id="root").add_style("color", "red")
        child = root.add(Span(id="child"))
        child.add_style("margin", "0").add_style("padding", "1px")
        root.add(Span(id="plain"))

        assert root.render_css() == (
            "#root {\n\tcolor: red;\n}\n#child {\n\tmargin: 0;\n\tpadding: 1px;\n}\n"
        )

    def test_render_css_with_indent(self) -> None:
        div = Div(id="d").add_style("color", "red")

        assert div.render_css(1) == "\t#d {\n\t\tcolor: red;\n\t}\n"

    def test_add_event_wires_fire_event(self) -> None:
        button = Button("Greet", id="greet").add_event(GreetEvent)

        assert button.attributes["onclick"] == (
            f"jw.fireEvent('{encode_class_name(GreetEvent)}', 'click', 'greet')"
        )

    def test_add_event_with_custom_type(self) -> None:
        div = Div(id="d").add_event(GreetEvent, "dblclick")

        assert "ondblclick" in div.attributes


class TestNaming:
    """Class-name helpers."""

    def test_qualified_and_encoded_names(self) -> None:
        assert qualified_name(GreetEvent) == "tests.sample_app.events.GreetEvent"
        assert encode_class_name(GreetEvent) == "tests_sample_app_events_GreetEvent"

    def test_kebab_case(self) -> None:
        assert to_kebab_case("ExampleDialogComponent") == "example-dialog-component"
        assert to_kebab_case("RabbitMQPage") == "rabbit-mq-page"
        assert to_kebab_case("simple") == "simple"
