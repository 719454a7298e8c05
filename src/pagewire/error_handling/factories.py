"""
Factory functions that build an ErrorDetail and raise PageWireError.

Every factory is annotated ``NoReturn`` so call sites can rely on control
flow ending at the call.
"""

from __future__ import annotations

import traceback
from datetime import datetime, timezone
from typing import Any, NoReturn
from uuid import UUID, uuid4

from pagewire.error_handling.error_models import ErrorCode, ErrorDetail
from pagewire.error_handling.pagewire_error import PageWireError


def create_error_detail(
    error_code: ErrorCode,
    message: str,
    service: str,
    operation: str,
    correlation_id: UUID | None = None,
    capture_stack: bool = False,
    **details: Any,
) -> ErrorDetail:
    """Build an ErrorDetail with a timestamp and optional stack capture."""
    return ErrorDetail(
        error_code=error_code,
        message=message,
        correlation_id=correlation_id or uuid4(),
        timestamp=datetime.now(timezone.utc),
        service=service,
        operation=operation,
        details=details,
        stack_trace="".join(traceback.format_stack()) if capture_stack else None,
    )


def raise_invalid_request_error(
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID | None = None,
    **details: Any,
) -> NoReturn:
    raise PageWireError(
        create_error_detail(
            ErrorCode.INVALID_REQUEST,
            message,
            service,
            operation,
            correlation_id,
            **details,
        )
    )


def raise_resource_not_found(
    service: str,
    operation: str,
    resource_type: str,
    resource_id: str,
    correlation_id: UUID | None = None,
    **details: Any,
) -> NoReturn:
    raise PageWireError(
        create_error_detail(
            ErrorCode.RESOURCE_NOT_FOUND,
            f"{resource_type} '{resource_id}' not found",
            service,
            operation,
            correlation_id,
            resource_type=resource_type,
            resource_id=resource_id,
            **details,
        )
    )


def raise_configuration_error(
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID | None = None,
    **details: Any,
) -> NoReturn:
    raise PageWireError(
        create_error_detail(
            ErrorCode.CONFIGURATION_ERROR,
            message,
            service,
            operation,
            correlation_id,
            **details,
        )
    )
