"""Framework routes: data, CSS, AJAX, site-loader script and page rendering."""

from __future__ import annotations

import inspect
import time
import traceback
from typing import Any, cast

from jinja2 import Environment
from pydantic import ValidationError
from quart import Blueprint, Response, current_app, jsonify, request

from pagewire import constants
from pagewire.ajax.models import AjaxCall, AjaxResponse
from pagewire.config import Settings
from pagewire.di import page_url_for_request
from pagewire.error_handling import PageWireError
from pagewire.html.page import Page
from pagewire.logging_utils import create_logger
from pagewire.naming import qualified_name
from pagewire.protocols import AjaxCallInterceptor, DataCallInterceptor, PageMetricsProtocol
from pagewire.quart_app import PageWireApp
from pagewire.registry import ComponentRegistry
from pagewire.scope import ClientInfo, request_scope

logger = create_logger("pagewire.api.framework")

INVALID_REQUEST_TITLE = "Invalid Request Value"
INVALID_REQUEST_MESSAGE = "A value in the request was found to be incorrect.<br>"
UNKNOWN_ERROR_TITLE = "Unknown Error"
UNKNOWN_ERROR_MESSAGE = "An AJAX call resulted in an unknown server error<br>"


def _app() -> PageWireApp:
    return cast(PageWireApp, current_app)


def _text_response(body: str, content_type: str, status: int = 200) -> Response:
    return Response(body, status=status, content_type=content_type)


def _not_found(error: PageWireError) -> tuple[Response, int]:
    return jsonify({"error": error.to_dict()}), 404


async def serve_data() -> Response:
    """Render a data component named by ``?component=``; failures give an empty body."""
    started = time.perf_counter()
    async with request_scope(_app()) as request_container:
        metrics = await request_container.get(PageMetricsProtocol)
        registry = await request_container.get(ComponentRegistry)
        name = request.args.get(constants.COMPONENT_QUERY_PARAMETER, "")

        try:
            component_class = registry.resolve_data_component(name)
            body = component_class().render_data()
            if inspect.isawaitable(body):
                body = await body

            call = await request_container.get(AjaxCall)
            response = await request_container.get(AjaxResponse)
            for interceptor in await request_container.get(list[DataCallInterceptor]):
                await interceptor.intercept(call, response)
        except Exception as e:
            logger.error(
                "Unable to render data component",
                component=name,
                error=str(e),
                exc_info=True,
            )
            metrics.record_request("data", "error")
            return _text_response("", constants.HTML_HEADER_JSON)

        metrics.record_request("data", "success")
        metrics.observe_render("data", time.perf_counter() - started)
        return _text_response(str(body), constants.HTML_HEADER_JSON)


async def serve_css() -> Response | tuple[Response, int]:
    """Aggregated CSS of the current page."""
    started = time.perf_counter()
    async with request_scope(_app()) as request_container:
        metrics = await request_container.get(PageMetricsProtocol)
        try:
            page = await request_container.get(Page)
        except PageWireError as e:
            logger.warning("No page for stylesheet request", error=str(e))
            metrics.record_request("css", "not_found")
            return _not_found(e)

        css = page.render_css()
        metrics.record_request("css", "success")
        metrics.observe_render("css", time.perf_counter() - started)
        return _text_response(css, constants.HTML_HEADER_CSS)


def _failure_response(title: str, message: str) -> AjaxResponse:
    return AjaxResponse.failure(title, message)


async def receive_ajax() -> Response:
    """Fire the event named in the AJAX envelope.

    Every failure is answered with ``success=false`` and a dialog reaction.
    """
    started = time.perf_counter()
    async with request_scope(_app()) as request_container:
        settings = await request_container.get(Settings)
        metrics = await request_container.get(PageMetricsProtocol)
        registry = await request_container.get(ComponentRegistry)
        call = await request_container.get(AjaxCall)
        response = await request_container.get(AjaxResponse)

        outcome = "success"
        try:
            raw_body = await request.get_data(as_text=True)
            call.from_call(AjaxCall.model_validate_json(raw_body or "{}"))
            call.page_call = True

            event_class = registry.resolve_event(call.class_name)
            interceptors: list[AjaxCallInterceptor] = await request_container.get(
                list[AjaxCallInterceptor]
            )
            for interceptor in interceptors:
                await interceptor.intercept(call, response)
            await event_class().fire_event(call, response)
        except ValidationError as e:
            outcome = "invalid_request"
            logger.error("Malformed AJAX envelope", error=str(e))
            response = _failure_response(INVALID_REQUEST_TITLE, INVALID_REQUEST_MESSAGE + str(e))
        except PageWireError as e:
            if not e.is_invalid_request():
                outcome = "error"
                response = _unknown_error_response(e, settings)
            else:
                outcome = "invalid_request"
                logger.error(
                    "Invalid AJAX request",
                    class_name=call.class_name,
                    error=e.error_detail.message,
                    exc_info=True,
                )
                response = _failure_response(
                    INVALID_REQUEST_TITLE, INVALID_REQUEST_MESSAGE + e.error_detail.message
                )
        except Exception as e:
            outcome = "error"
            response = _unknown_error_response(e, settings)

        metrics.record_ajax_call(outcome)
        metrics.record_request("ajax", outcome)
        metrics.observe_render("ajax", time.perf_counter() - started)
        return _text_response(response.to_json(), constants.HTML_HEADER_JSON)


def _unknown_error_response(error: Exception, settings: Settings) -> AjaxResponse:
    logger.error("Unknown error in AJAX reply", error=str(error), exc_info=True)
    message = UNKNOWN_ERROR_MESSAGE + str(error)
    if settings.include_stack_traces():
        message += "<br>" + "".join(traceback.format_exception(error))
    return _failure_response(UNKNOWN_ERROR_TITLE, message)


async def serve_script() -> Response:
    """The site-loader script, parameterised with the caller's details."""
    started = time.perf_counter()
    async with request_scope(_app()) as request_container:
        settings = await request_container.get(Settings)
        metrics = await request_container.get(PageMetricsProtocol)
        client = await request_container.get(ClientInfo)
        environment = await request_container.get(Environment)
        registry = await request_container.get(ComponentRegistry)

        try:
            url = page_url_for_request(request, registry)
            page_class = qualified_name(registry.page_class(url))
        except PageWireError as e:
            logger.debug("No page class for site-loader script", error=str(e))
            page_class = ""

        script = environment.get_template("siteloader.js.j2").render(
            site_address=client.host,
            root_address=client.host,
            page_class=page_class,
            user_agent=client.user_agent,
            client_ip=client.remote_addr,
            referer=client.referer,
            data_location=settings.DATA_LOCATION,
            css_location=settings.CSS_LOCATION,
            ajax_location=settings.AJAX_SCRIPT_LOCATION,
        )
        metrics.record_request("script", "success")
        metrics.observe_render("script", time.perf_counter() - started)
        return _text_response(script, constants.HTML_HEADER_JAVASCRIPT)


async def render_page(**_: Any) -> Response | tuple[Response, int]:
    """Render the page bound to this route's url."""
    started = time.perf_counter()
    async with request_scope(_app()) as request_container:
        settings = await request_container.get(Settings)
        metrics = await request_container.get(PageMetricsProtocol)
        try:
            page = await request_container.get(Page)
        except PageWireError as e:
            logger.warning("Page could not be resolved", error=str(e))
            metrics.record_request("page", "not_found")
            return _not_found(e)

        html = page.to_html(
            pretty=True,
            css_location=settings.CSS_LOCATION,
            script_location=settings.JW_SCRIPT_LOCATION,
        )
        metrics.record_request("page", "success")
        metrics.observe_render("page", time.perf_counter() - started)
        return _text_response(html, constants.HTML_HEADER_DEFAULT_CONTENT_TYPE)


def create_framework_blueprint(settings: Settings) -> Blueprint:
    """Bind the framework endpoints at the configured locations."""
    blueprint = Blueprint("pagewire_framework", __name__)
    blueprint.add_url_rule(settings.DATA_LOCATION, "data", serve_data, methods=["GET"])
    blueprint.add_url_rule(settings.CSS_LOCATION, "css", serve_css, methods=["GET"])
    blueprint.add_url_rule(settings.AJAX_SCRIPT_LOCATION, "ajax", receive_ajax, methods=["POST"])
    blueprint.add_url_rule(settings.JW_SCRIPT_LOCATION, "script", serve_script, methods=["GET"])
    return blueprint


def create_page_blueprint(registry: ComponentRegistry) -> Blueprint:
    """One route for each page url and one for everything below it."""
    blueprint = Blueprint("pagewire_pages", __name__)
    for index, (url, page_class) in enumerate(sorted(registry.pages.items())):
        below = f"{url.rstrip('/')}/<path:subpath>"
        blueprint.add_url_rule(
            url, f"page_{index}", render_page, methods=["GET"], defaults={"page_url": url}
        )
        blueprint.add_url_rule(
            below, f"page_{index}_below", render_page, methods=["GET"], defaults={"page_url": url}
        )
        logger.info("Bound page route", url=url, page=qualified_name(page_class))
    return blueprint
