"""
Pages: server-side classes bound to a URL and rendered to a full HTML document.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar

from markupsafe import Markup

from pagewire import constants
from pagewire.html.components import Body, C, Component
from pagewire.templating import get_template_environment

P = TypeVar("P", bound=type)

PAGE_CONFIGURATION_ATTRIBUTE = "__page_configuration__"


@dataclass(frozen=True)
class PageConfiguration:
    url: str = constants.DEFAULT_PAGE_URL
    title: str = ""


def page_configuration(url: str = constants.DEFAULT_PAGE_URL, title: str = "") -> Callable[[P], P]:
    """Bind a ``Page`` subclass to ``url``. An empty url binds to ``/``."""
    configuration = PageConfiguration(url=url or constants.DEFAULT_PAGE_URL, title=title)

    def decorate(cls: P) -> P:
        setattr(cls, PAGE_CONFIGURATION_ATTRIBUTE, configuration)
        return cls

    return decorate


def get_page_configuration(cls: type) -> PageConfiguration | None:
    """Return the configuration declared on ``cls`` itself, not inherited."""
    return cls.__dict__.get(PAGE_CONFIGURATION_ATTRIBUTE)


class Page:
    """A full HTML document with a body component tree."""

    title: str = ""

    def __init__(self) -> None:
        self.body = Body()
        self._initialized = False
        configuration = get_page_configuration(type(self))
        if configuration and configuration.title and not self.title:
            self.title = configuration.title

    def add(self, component: C) -> C:
        return self.body.add(component)

    def init(self) -> None:
        """Called once before the first render; override to build the body lazily."""

    def preconfigure(self) -> None:
        if not self._initialized:
            self._initialized = True
            self.init()
        self.body.preconfigure()

    def url(self) -> str:
        configuration = get_page_configuration(type(self))
        return configuration.url if configuration else constants.DEFAULT_PAGE_URL

    def get_body(self) -> Component:
        self.preconfigure()
        return self.body

    def render_css(self) -> str:
        return self.get_body().render_css(0)

    def to_html(
        self,
        pretty: bool = True,
        css_location: str = constants.CSS_LOCATION,
        script_location: str = constants.JW_SCRIPT_LOCATION,
    ) -> str:
        body_html = self.get_body().to_html(pretty=pretty)
        template = get_template_environment().get_template("page.html.j2")
        return template.render(
            title=self.title,
            page_url=self.url(),
            css_location=css_location,
            script_location=script_location,
            body=Markup(body_html),
        )
