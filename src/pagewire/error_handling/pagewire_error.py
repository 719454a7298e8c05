"""
PageWireError - the structured exception raised by pagewire components.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from pagewire.error_handling.error_models import ErrorCode, ErrorDetail


class PageWireError(Exception):
    """Exception wrapping an ErrorDetail.

    Handlers inspect ``error_detail.error_code`` to decide how a failure is
    surfaced to the client.
    """

    def __init__(self, error_detail: ErrorDetail) -> None:
        super().__init__(error_detail.message)
        self.error_detail = error_detail

    @property
    def error_code(self) -> ErrorCode:
        return self.error_detail.error_code

    @property
    def correlation_id(self) -> UUID:
        return self.error_detail.correlation_id

    def is_invalid_request(self) -> bool:
        return self.error_detail.error_code is ErrorCode.INVALID_REQUEST

    def to_dict(self) -> dict[str, Any]:
        return self.error_detail.model_dump(mode="json")

    def __str__(self) -> str:
        return f"[{self.error_detail.error_code.value}] {self.error_detail.message}"
