"""
Server-side events fired by AJAX calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pagewire.ajax.models import AjaxCall, AjaxResponse


class Event(ABC):
    """Base class for events named in an AJAX call's ``className``.

    A fresh instance is created for every call. Implementations fill the
    request's ``AjaxResponse`` with reactions, component updates and storage
    changes; raising an invalid-request ``PageWireError`` rejects the call
    with a dialog on the client.
    """

    @abstractmethod
    async def fire_event(self, call: AjaxCall, response: AjaxResponse) -> None:
        ...
