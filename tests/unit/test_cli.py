"""Tests for the pagewire command line interface."""

from __future__ import annotations

import json
import logging
import os
import subprocess
import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
import structlog
from typer.testing import CliRunner

from pagewire.cli import app

runner = CliRunner()

SAMPLE_PACKAGE = "tests.sample_app"
PROJECT_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch: pytest.MonkeyPatch) -> object:
    monkeypatch.setenv("SERVICE_NAME", "pagewire")
    monkeypatch.setenv("ENVIRONMENT", "development")
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


class TestGenerateCommand:
    """pagewire generate."""

    def test_writes_sources_for_every_angular_class(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["generate", "--package", SAMPLE_PACKAGE, "--out", str(tmp_path)]
        )

        assert result.exit_code == 0, result.output
        written = {path.name for path in tmp_path.iterdir()}
        assert {
            "example-component.ts",
            "example-component.html",
            "example-dialog-component.ts",
            "rabbit-mq-page.ts",
            "dashboard-component.ts",
            "example-service.ts",
        } <= written
        assert "example-service.html" not in written
        assert "Generated" in result.output

    def test_unknown_package_fails(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["generate", "--package", "tests.no_such_package", "--out", str(tmp_path)]
        )

        assert result.exit_code == 1


class TestRoutesCommand:
    """pagewire routes."""

    def test_json_listing(self) -> None:
        result = runner.invoke(app, ["routes", "--package", SAMPLE_PACKAGE, "--json"])

        assert result.exit_code == 0, result.output
        rows = json.loads(result.output)
        pages = {row["route"]: row["class"] for row in rows if row["kind"] == "page"}
        assert pages == {
            "/": "tests.sample_app.pages.HomePage",
            "/about": "tests.sample_app.pages.AboutPage",
        }
        assert {
            "kind": "event",
            "route": "tests_sample_app_events_GreetEvent",
            "class": "tests.sample_app.events.GreetEvent",
        } in rows
        assert any(row["route"].startswith("/jwdata?component=") for row in rows)

    def test_json_listing_in_fresh_process(self) -> None:
        env = {
            **os.environ,
            "PYTHONPATH": os.pathsep.join([str(PROJECT_ROOT / "src"), str(PROJECT_ROOT)]),
        }
        env.pop("LOG_FORMAT", None)

        result = subprocess.run(
            [sys.executable, "-m", "pagewire.cli", "routes", "--package", SAMPLE_PACKAGE, "--json"],
            capture_output=True,
            text=True,
            cwd=PROJECT_ROOT,
            env=env,
            timeout=60,
        )

        assert result.returncode == 0, result.stderr
        rows = json.loads(result.stdout)
        assert {row["kind"] for row in rows} == {"page", "event", "data"}

    def test_table_listing(self) -> None:
        result = runner.invoke(app, ["routes", "--package", SAMPLE_PACKAGE])

        assert result.exit_code == 0, result.output
        assert "pagewire routes" in result.output


class TestServeCommand:
    """pagewire serve hands the app to Hypercorn."""

    def test_serve_binds_requested_address(self) -> None:
        with (
            patch("pagewire.cli.hypercorn_serve", new=AsyncMock()) as serve,
            patch("pagewire.cli.configure_logging"),
        ):
            result = runner.invoke(
                app, ["serve", "--package", SAMPLE_PACKAGE, "--host", "127.0.0.1", "--port", "9999"]
            )

        assert result.exit_code == 0, result.output
        served_app, config = serve.await_args.args
        assert config.bind == ["127.0.0.1:9999"]
        assert "/about" in served_app.registry.pages
