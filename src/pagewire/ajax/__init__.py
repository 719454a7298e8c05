"""AJAX envelopes and the event base class."""

from pagewire.ajax.events import Event
from pagewire.ajax.models import (
    AjaxCall,
    AjaxComponentUpdate,
    AjaxResponse,
    AjaxResponseReaction,
    AjaxResponseType,
    ReactionType,
)

__all__ = [
    "AjaxCall",
    "AjaxComponentUpdate",
    "AjaxResponse",
    "AjaxResponseReaction",
    "AjaxResponseType",
    "Event",
    "ReactionType",
]
