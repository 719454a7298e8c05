"""Server-side HTML component tree and pages."""

from pagewire.html.components import (
    H1,
    H2,
    Body,
    Button,
    Component,
    Div,
    DivSimple,
    Paragraph,
    Span,
)
from pagewire.html.page import Page, PageConfiguration, get_page_configuration, page_configuration

__all__ = [
    "Body",
    "Button",
    "Component",
    "Div",
    "DivSimple",
    "H1",
    "H2",
    "Page",
    "PageConfiguration",
    "Paragraph",
    "Span",
    "get_page_configuration",
    "page_configuration",
]
