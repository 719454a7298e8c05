"""
pagewire behavioral contracts and protocols.

This module defines the protocols that pluggable pagewire components must
implement, enabling dependency injection and testability.
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pagewire.ajax.models import AjaxCall, AjaxResponse


@runtime_checkable
class DataComponentProtocol(Protocol):
    """A component whose data payload is served from the data endpoint."""

    def render_data(self) -> str | Awaitable[str]:
        """
        Render the component's data payload.

        Returns:
            JSON text written to the response body, or an awaitable of it
        """
        ...


@runtime_checkable
class AjaxCallInterceptor(Protocol):
    """Hook run for every AJAX call before the event fires."""

    async def intercept(self, call: AjaxCall, response: AjaxResponse) -> None:
        """
        Inspect or amend the call and response.

        Args:
            call: The request-scoped AJAX call, already populated from the client
            response: The request-scoped AJAX response the event will fill

        Raises:
            PageWireError: An invalid-request error rejects the call
        """
        ...


@runtime_checkable
class DataCallInterceptor(Protocol):
    """Hook run after a data component renders successfully."""

    async def intercept(self, call: AjaxCall, response: AjaxResponse) -> None:
        ...


@runtime_checkable
class PageMetricsProtocol(Protocol):
    """Protocol for framework metrics collection."""

    def record_request(self, route: str, outcome: str) -> None:
        """
        Record a handled framework request.

        Args:
            route: Logical route name (page, css, data, ajax, script)
            outcome: success, invalid_request, not_found or error
        """
        ...

    def record_ajax_call(self, outcome: str) -> None:
        ...

    def observe_render(self, route: str, seconds: float) -> None:
        ...
