"""
Static strings shared by the HTTP adapter, page rendering and the site loader.
"""

from __future__ import annotations

DATA_LOCATION = "/jwdata"
CSS_LOCATION = "/jwcss"
AJAX_SCRIPT_LOCATION = "/jwajax"
JW_SCRIPT_LOCATION = "/jwscript"

COMPONENT_QUERY_PARAMETER = "component"
PAGE_QUERY_PARAMETER = "page"

HTML_HEADER_JSON = "application/json;charset=UTF-8"
HTML_HEADER_CSS = "text/css;charset=UTF-8"
HTML_HEADER_JAVASCRIPT = "application/javascript;charset=UTF-8"
HTML_HEADER_DEFAULT_CONTENT_TYPE = "text/html;charset=UTF-8"

CHAR_DOT = "."
CHAR_UNDERSCORE = "_"

DEFAULT_PAGE_URL = "/"
