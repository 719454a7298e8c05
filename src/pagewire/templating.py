"""Jinja2 environment for the templates shipped with pagewire."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

TEMPLATE_DIR = Path(__file__).parent / "templates"


@lru_cache(maxsize=None)
def get_template_environment(template_dir: Path = TEMPLATE_DIR) -> Environment:
    """Return the shared environment for ``template_dir``.

    HTML templates are autoescaped; TypeScript and JavaScript templates are not,
    their values are escaped explicitly with the ``tojson`` filter where needed.
    """
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(enabled_extensions=("html", "html.j2")),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
