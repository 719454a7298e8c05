"""Class-name helpers shared by the registry, events and code generation."""

from __future__ import annotations

import re

from pagewire.constants import CHAR_DOT, CHAR_UNDERSCORE

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def qualified_name(cls: type) -> str:
    """Return the dotted ``module.QualName`` of a class."""
    return f"{cls.__module__}.{cls.__qualname__}"


def encode_class_name(cls: type) -> str:
    """Return the underscore-for-dot form used by clients to name a class."""
    return qualified_name(cls).replace(CHAR_DOT, CHAR_UNDERSCORE)


def to_kebab_case(name: str) -> str:
    """ExampleDialogComponent -> example-dialog-component."""
    return _CAMEL_BOUNDARY.sub("-", name).replace("_", "-").lower()
