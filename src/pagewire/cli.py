"""pagewire command line interface.

Usage:
    pagewire serve --package myapp.pages --port 8080
    pagewire generate --package myapp.components --out ./generated
    pagewire routes --package myapp.pages
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from hypercorn.asyncio import serve as hypercorn_serve
from hypercorn.config import Config as HypercornConfig
from rich.console import Console
from rich.table import Table

from pagewire.angular.typescript import TypeScriptRenderer
from pagewire.app import create_app
from pagewire.config import settings
from pagewire.error_handling import PageWireError
from pagewire.logging_utils import configure_logging, create_logger
from pagewire.naming import encode_class_name, qualified_name
from pagewire.registry import ComponentRegistry

app = typer.Typer(help="pagewire server-side UI framework CLI")
console = Console()
logger = create_logger("pagewire.cli")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at INFO level"),
) -> None:
    """Server-side pages, AJAX events and Angular generation."""
    configure_logging(
        settings.SERVICE_NAME,
        environment=settings.ENVIRONMENT.value,
        log_level="INFO" if verbose else "WARNING",
    )


def _load_registry(packages: list[str]) -> ComponentRegistry:
    registry = ComponentRegistry()
    for package in packages:
        try:
            registry.scan(package)
        except (ImportError, PageWireError) as e:
            console.print(f"[red]Unable to scan {package}: {e}[/red]")
            raise typer.Exit(code=1)
    return registry


def _hypercorn_config(host: str, port: int) -> HypercornConfig:
    config = HypercornConfig()
    config.bind = [f"{host}:{port}"]
    config.loglevel = settings.LOG_LEVEL.lower()
    config.accesslog = "-"
    config.errorlog = "-"
    config.graceful_timeout = 30
    config.keep_alive_timeout = 5
    return config


@app.command()
def serve(
    package: list[str] = typer.Option(
        [], "--package", "-p", help="Package to scan for pages, events and components"
    ),
    host: Optional[str] = typer.Option(None, help="Bind host (defaults to PAGEWIRE_HOST)"),
    port: Optional[int] = typer.Option(None, help="Bind port (defaults to PAGEWIRE_PORT)"),
) -> None:
    """Serve the scanned pages with Hypercorn."""
    configure_logging(
        settings.SERVICE_NAME,
        environment=settings.ENVIRONMENT.value,
        log_level=settings.LOG_LEVEL,
    )
    registry = _load_registry(package)
    quart_app = create_app(registry)
    config = _hypercorn_config(host or settings.HOST, port or settings.PORT)
    logger.info("Starting pagewire", bind=config.bind)
    asyncio.run(hypercorn_serve(quart_app, config))


@app.command()
def generate(
    package: list[str] = typer.Option(..., "--package", "-p", help="Package to scan"),
    out: Path = typer.Option(
        settings.TYPESCRIPT_OUTPUT_DIR, "--out", "-o", help="Directory for generated sources"
    ),
) -> None:
    """Write TypeScript and HTML sources for every Angular component and service."""
    registry = _load_registry(package)
    renderer = TypeScriptRenderer()

    written: list[Path] = []
    for cls in registry.angular_classes:
        try:
            written.extend(renderer.write(cls(), out))
        except PageWireError as e:
            console.print(f"[red]{qualified_name(cls)}: {e.error_detail.message}[/red]")
            raise typer.Exit(code=1)

    for path in written:
        typer.echo(str(path))
    typer.secho(f"Generated {len(written)} files in {out}", fg=typer.colors.GREEN)


@app.command()
def routes(
    package: list[str] = typer.Option(..., "--package", "-p", help="Package to scan"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List page urls, events and data components."""
    registry = _load_registry(package)
    data_route = f"{settings.DATA_LOCATION}?component="
    rows = [
        *(("page", url, qualified_name(cls)) for url, cls in sorted(registry.pages.items())),
        *(("event", encode_class_name(cls), qualified_name(cls)) for cls in registry.events),
        *(
            ("data", data_route + encode_class_name(cls), qualified_name(cls))
            for cls in registry.data_components
        ),
    ]

    if json_output:
        typer.echo(json.dumps([{"kind": k, "route": r, "class": c} for k, r, c in rows], indent=2))
        return

    table = Table(title="pagewire routes")
    table.add_column("Kind", style="cyan")
    table.add_column("Route / name")
    table.add_column("Class", style="green")
    for row in rows:
        table.add_row(*row)
    console.print(table)


if __name__ == "__main__":
    app()
