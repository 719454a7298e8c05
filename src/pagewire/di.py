"""Dependency injection configuration for pagewire applications.

``PageWireProvider`` supplies APP-scoped infrastructure; ``RequestContextProvider``
supplies values that live for a single request.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from urllib.parse import urlsplit
from uuid import uuid4

from dishka import Provider, Scope, from_context, provide
from jinja2 import Environment
from prometheus_client import CollectorRegistry
from quart import Request

from pagewire import constants
from pagewire.ajax.models import AjaxCall, AjaxResponse
from pagewire.config import Settings
from pagewire.html.page import Page
from pagewire.logging_utils import create_logger
from pagewire.metrics import PrometheusPageMetrics
from pagewire.protocols import AjaxCallInterceptor, DataCallInterceptor, PageMetricsProtocol
from pagewire.registry import ComponentRegistry
from pagewire.scope import REQUEST_ID_HEADER, CallScopeProperties, CallScopeSource, ClientInfo
from pagewire.templating import get_template_environment

logger = create_logger("pagewire.di")


def page_url_for_request(request: Request, registry: ComponentRegistry) -> str:
    """The registered page url a request is for.

    Page routes carry their url in the view arguments; framework routes name
    the page with ``?page=`` or fall back to the ``Referer`` path.
    """
    url = (request.view_args or {}).get("page_url")
    if url is not None:
        return url
    path = request.args.get(constants.PAGE_QUERY_PARAMETER)
    if not path:
        referer = request.headers.get("Referer", "")
        path = urlsplit(referer).path or constants.DEFAULT_PAGE_URL
    return registry.match_page_url(path) or path


class PageWireProvider(Provider):
    """Provider for application-wide pagewire dependencies."""

    def __init__(
        self,
        registry: ComponentRegistry,
        settings: Settings,
        ajax_interceptors: Sequence[AjaxCallInterceptor] = (),
        data_interceptors: Sequence[DataCallInterceptor] = (),
    ) -> None:
        super().__init__()
        self._registry = registry
        self._settings = settings
        self._ajax_interceptors = list(ajax_interceptors)
        self._data_interceptors = list(data_interceptors)

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return self._settings

    @provide(scope=Scope.APP)
    def provide_component_registry(self) -> ComponentRegistry:
        return self._registry

    @provide(scope=Scope.APP)
    def provide_collector_registry(self) -> CollectorRegistry:
        """Provide Prometheus collector registry."""
        return CollectorRegistry()

    @provide(scope=Scope.APP)
    def provide_metrics(self, registry: CollectorRegistry) -> PageMetricsProtocol:
        return PrometheusPageMetrics.create(registry)

    @provide(scope=Scope.APP)
    def provide_ajax_interceptors(self) -> list[AjaxCallInterceptor]:
        return self._ajax_interceptors

    @provide(scope=Scope.APP)
    def provide_data_interceptors(self) -> list[DataCallInterceptor]:
        return self._data_interceptors

    @provide(scope=Scope.APP)
    def provide_template_environment(self) -> Environment:
        return get_template_environment()


class RequestContextProvider(Provider):
    """Request-scoped values derived from the current Quart request."""

    request = from_context(provides=Request, scope=Scope.REQUEST)

    @provide(scope=Scope.REQUEST)
    def provide_client_info(self, request: Request) -> ClientInfo:
        headers = request.headers
        return ClientInfo(
            host=urlsplit(f"//{request.host}").hostname or "",
            user_agent=headers.get("User-Agent", ""),
            remote_addr=request.remote_addr or "",
            referer=headers.get("Referer", ""),
            request_id=headers.get(REQUEST_ID_HEADER) or str(uuid4()),
        )

    @provide(scope=Scope.REQUEST)
    async def provide_call_scope_properties(
        self, request: Request, client: ClientInfo
    ) -> AsyncIterator[CallScopeProperties]:
        properties = CallScopeProperties(
            source=CallScopeSource.HTTP,
            properties={
                "Request": request,
                "RequestId": client.request_id,
                "Path": request.path,
                "Method": request.method,
            },
        )
        yield properties
        properties.clear()

    @provide(scope=Scope.REQUEST)
    def provide_ajax_call(self) -> AjaxCall:
        return AjaxCall()

    @provide(scope=Scope.REQUEST)
    def provide_ajax_response(self) -> AjaxResponse:
        return AjaxResponse()

    @provide(scope=Scope.REQUEST)
    def provide_page(self, request: Request, registry: ComponentRegistry) -> Page:
        url = page_url_for_request(request, registry)
        logger.debug("Resolved page for request", url=url)
        return registry.create_page(url)
