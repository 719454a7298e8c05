"""
Per-request scope: the property bag, client information and the context
manager every framework handler runs inside.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from dishka import AsyncContainer
from quart import Request, request

from pagewire.logging_utils import bind_request_context, clear_request_context

if TYPE_CHECKING:
    from pagewire.quart_app import PageWireApp

REQUEST_ID_HEADER = "X-Correlation-ID"


class CallScopeSource(str, Enum):
    HTTP = "HTTP"
    WEBSOCKET = "WEBSOCKET"
    RABBITMQ = "RABBITMQ"
    TIMER = "TIMER"
    UNKNOWN = "UNKNOWN"


@dataclass
class CallScopeProperties:
    """Values describing the call that opened the current request scope."""

    source: CallScopeSource = CallScopeSource.UNKNOWN
    properties: dict[str, Any] = field(default_factory=dict)

    def clear(self) -> None:
        self.source = CallScopeSource.UNKNOWN
        self.properties.clear()


@dataclass(frozen=True)
class ClientInfo:
    """Request-derived client details; missing headers are empty strings."""

    host: str
    user_agent: str
    remote_addr: str
    referer: str
    request_id: str


@asynccontextmanager
async def request_scope(app: PageWireApp) -> AsyncIterator[AsyncContainer]:
    """Enter the REQUEST scope for the current Quart request.

    The scope is exited on every path out of the ``async with`` block, which
    runs the REQUEST-scoped finalisers.
    """
    current = request._get_current_object()
    async with app.container(context={Request: current}) as request_container:
        client = await request_container.get(ClientInfo)
        bind_request_context(client.request_id, current.path, current.method)
        try:
            await request_container.get(CallScopeProperties)
            yield request_container
        finally:
            clear_request_context()
