"""
Unit tests for the pagewire error model, exception and factories.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from uuid import UUID

import pytest
from pydantic import ValidationError

from pagewire.error_handling import (
    ErrorCode,
    ErrorDetail,
    PageWireError,
    create_error_detail,
    raise_configuration_error,
    raise_invalid_request_error,
    raise_resource_not_found,
)


@pytest.fixture
def correlation_id() -> UUID:
    """Provide consistent correlation ID for testing."""
    return uuid.uuid4()


class TestErrorDetail:
    """The frozen error data model."""

    def test_error_detail_is_immutable(self, correlation_id: UUID) -> None:
        detail = ErrorDetail(
            error_code=ErrorCode.UNKNOWN_ERROR,
            message="broken",
            correlation_id=correlation_id,
            timestamp=datetime.now(timezone.utc),
            service="pagewire",
            operation="test",
        )

        with pytest.raises(ValidationError):
            detail.message = "changed"  # type: ignore[misc]

    def test_create_error_detail_collects_details(self, correlation_id: UUID) -> None:
        detail = create_error_detail(
            ErrorCode.RENDERING_ERROR,
            "render failed",
            "pagewire",
            "render_page",
            correlation_id,
            page="/about",
        )

        assert detail.correlation_id == correlation_id
        assert detail.details == {"page": "/about"}
        assert detail.stack_trace is None
        assert detail.timestamp.tzinfo is not None

    def test_create_error_detail_captures_stack(self) -> None:
        detail = create_error_detail(
            ErrorCode.UNKNOWN_ERROR, "x", "pagewire", "op", capture_stack=True
        )

        assert detail.stack_trace is not None
        assert "test_create_error_detail_captures_stack" in detail.stack_trace


class TestFactories:
    """raise_* helpers."""

    def test_invalid_request(self, correlation_id: UUID) -> None:
        with pytest.raises(PageWireError) as exc_info:
            raise_invalid_request_error(
                service="pagewire",
                operation="resolve_event",
                message="The Event To Be Triggered Could Not Be Found",
                correlation_id=correlation_id,
                class_name="missing",
            )

        error = exc_info.value
        assert error.is_invalid_request()
        assert error.correlation_id == correlation_id
        assert error.error_detail.details == {"class_name": "missing"}
        assert str(error) == "[INVALID_REQUEST] The Event To Be Triggered Could Not Be Found"

    def test_resource_not_found_message(self) -> None:
        with pytest.raises(PageWireError) as exc_info:
            raise_resource_not_found(
                service="pagewire",
                operation="create_page",
                resource_type="Page",
                resource_id="/missing",
            )

        assert exc_info.value.error_code is ErrorCode.RESOURCE_NOT_FOUND
        assert exc_info.value.error_detail.message == "Page '/missing' not found"
        assert not exc_info.value.is_invalid_request()

    def test_configuration_error_serialises(self) -> None:
        with pytest.raises(PageWireError) as exc_info:
            raise_configuration_error(service="pagewire", operation="scan", message="bad")

        payload = exc_info.value.to_dict()
        assert payload["error_code"] == "CONFIGURATION_ERROR"
        assert payload["message"] == "bad"
        assert isinstance(payload["correlation_id"], str)
