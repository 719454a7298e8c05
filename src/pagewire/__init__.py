"""pagewire: server-side pages, AJAX events and Angular generation on Quart."""

from pagewire.ajax import AjaxCall, AjaxResponse, AjaxResponseReaction, Event
from pagewire.app import create_app
from pagewire.html import Component, Page, page_configuration
from pagewire.registry import ComponentRegistry

__all__ = [
    "AjaxCall",
    "AjaxResponse",
    "AjaxResponseReaction",
    "Component",
    "ComponentRegistry",
    "Event",
    "Page",
    "create_app",
    "page_configuration",
]
