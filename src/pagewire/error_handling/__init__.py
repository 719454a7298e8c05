"""Error handling utilities for pagewire."""

from pagewire.error_handling.error_models import ErrorCode, ErrorDetail
from pagewire.error_handling.factories import (
    create_error_detail,
    raise_configuration_error,
    raise_invalid_request_error,
    raise_resource_not_found,
)
from pagewire.error_handling.pagewire_error import PageWireError

__all__ = [
    "ErrorCode",
    "ErrorDetail",
    "PageWireError",
    "create_error_detail",
    "raise_configuration_error",
    "raise_invalid_request_error",
    "raise_resource_not_found",
]
