"""Tests for logging_utils processors and request context binding."""

from __future__ import annotations

import json
import logging
import logging.handlers
import os
from pathlib import Path
from typing import Any

import pytest
import structlog
from structlog.contextvars import get_contextvars

from pagewire.logging_utils import (
    add_service_context,
    bind_request_context,
    clear_request_context,
    configure_logging,
    create_logger,
)


class TestAddServiceContext:
    """Tests for the add_service_context processor."""

    def test_adds_service_fields(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SERVICE_NAME", "pages")
        monkeypatch.setenv("ENVIRONMENT", "staging")
        event_dict: dict[str, Any] = {"event": "hello"}

        result = add_service_context(None, "", event_dict)

        assert result["service.name"] == "pages"
        assert result["deployment.environment"] == "staging"
        assert result["event"] == "hello"

    def test_defaults_when_env_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SERVICE_NAME", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        result = add_service_context(None, "", {})

        assert result["service.name"] == "unknown"
        assert result["deployment.environment"] == "development"


class TestRequestContext:
    """Request identifiers bound into structlog contextvars."""

    def test_bind_and_clear(self) -> None:
        bind_request_context("req-1", "/about", "GET")

        assert get_contextvars() == {"request_id": "req-1", "path": "/about", "method": "GET"}

        clear_request_context()

        assert get_contextvars() == {}

    def test_bind_replaces_previous_request(self) -> None:
        bind_request_context("req-1", "/", "GET")
        bind_request_context("req-2", "/jwajax", "POST")

        assert get_contextvars()["request_id"] == "req-2"
        clear_request_context()


class TestConfigureLogging:
    """configure_logging wiring."""

    @pytest.fixture(autouse=True)
    def _restore_structlog(self) -> Any:
        yield
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    def test_file_logging_creates_rotating_handler(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SERVICE_NAME", "placeholder")
        monkeypatch.delenv("SERVICE_NAME")
        monkeypatch.setenv("ENVIRONMENT", "development")
        log_file = tmp_path / "logs" / "pagewire.log"

        configure_logging(
            "pagewire", log_level="DEBUG", log_to_file=True, log_file_path=str(log_file)
        )

        assert log_file.parent.is_dir()
        assert os.environ["SERVICE_NAME"] == "pagewire"
        assert logging.getLogger().level == logging.DEBUG
        assert any(
            isinstance(handler, logging.handlers.RotatingFileHandler)
            for handler in logging.getLogger().handlers
        )

    def test_create_logger_binds_name(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SERVICE_NAME", "pagewire")
        monkeypatch.setenv("ENVIRONMENT", "development")
        configure_logging("pagewire", environment="development")

        logger = create_logger("pagewire.test")

        assert logger is not None
        logger.info("logger works", detail="value")

    def test_logger_created_before_configuration_honours_it(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("SERVICE_NAME", "pagewire")
        monkeypatch.setenv("LOG_FORMAT", "json")
        early_logger = create_logger("pagewire.early")

        configure_logging("pagewire", environment="development", log_level="WARNING")
        early_logger.info("filtered out")
        early_logger.warning("kept", detail="value")

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 1
        record = json.loads(lines[0])
        assert record["event"] == "kept"
        assert record["logger_name"] == "pagewire.early"
        assert record["level"] == "warning"
