from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from .config import Settings
from .core.application import Application, ApplicationRegistry, get_default_registry
from .core.page import Page
from .logging import lookup_context, setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, help="Inspect parfait page definitions.")


def main() -> None:
    app()


def _load_definitions(module: str, search_path: Path) -> ApplicationRegistry:
    location = str(search_path.resolve())
    if location not in sys.path:
        sys.path.insert(0, location)
    importlib.invalidate_caches()
    try:
        importlib.import_module(module)
    except ImportError as exc:
        raise typer.BadParameter(f"Cannot import {module}: {exc}") from exc
    return get_default_registry()


def _configure(log_level: Optional[str]) -> None:
    settings = Settings.from_env()
    settings.ensure_directories()
    setup_logging(log_level or settings.log_level, settings.log_dir / "parfait.log", stream=sys.stderr)


def _require_application(registry: ApplicationRegistry, name: str) -> Application:
    application = registry.find(name)
    if application is None:
        typer.echo(f"Unknown application: {name}", err=True)
        raise typer.Exit(code=1)
    return application


def _find_page(application: Application, name: str) -> Page | None:
    for page in application.pages():
        if page.name == name or name in page.aliases:
            return page
    return None


def _label(names: tuple[str, ...] | list[str]) -> str:
    if not names:
        return ""
    return " (aliases: " + ", ".join(names) + ")"


@app.command()
def inspect(
    module: str = typer.Argument(..., help="Importable module that defines pages"),
    application: Optional[str] = typer.Option(None, help="Only show this application"),
    path: Path = typer.Option(Path("."), help="Directory added to the import path"),
    log_level: Optional[str] = typer.Option("WARNING", help="Log level override"),
) -> None:
    """List applications, their pages and every region and control key."""

    _configure(log_level)
    registry = _load_definitions(module, path)
    if application:
        applications = [_require_application(registry, application)]
    else:
        applications = registry.applications()

    if not applications:
        typer.echo("No applications defined")
        return

    for current in applications:
        typer.echo(f"Application: {current.name}{_label(current.aliases)}")
        for page in current.pages():
            details = page.describe()
            typer.echo(f"  Page: {page.name}{_label(page.aliases)}")
            for key, canonical in details["regions"].items():
                suffix = f" -> {canonical}" if key != canonical else ""
                typer.echo(f"    region  {key}{suffix}")
            for key, canonical in details["controls"].items():
                suffix = f" -> {canonical}" if key != canonical else ""
                typer.echo(f"    control {key}{suffix}")


@app.command()
def lookup(
    module: str = typer.Argument(..., help="Importable module that defines pages"),
    application: str = typer.Argument(..., help="Application name"),
    page: str = typer.Argument(..., help="Page name or alias"),
    key: str = typer.Argument(..., help="Region or control name or alias"),
    path: Path = typer.Option(Path("."), help="Directory added to the import path"),
    log_level: Optional[str] = typer.Option("WARNING", help="Log level override"),
) -> None:
    """Show which region or control a key resolves to, without touching a browser."""

    _configure(log_level)
    registry = _load_definitions(module, path)
    current = _require_application(registry, application)
    target = _find_page(current, page)
    if target is None:
        typer.echo(f'Invalid page name requested: "{page}"', err=True)
        raise typer.Exit(code=1)

    details = target.describe()
    with lookup_context(application=current.name, page=target.name):
        matches = []
        if key in details["regions"]:
            matches.append(f"region {details['regions'][key]}")
        if key in details["controls"]:
            matches.append(f"control {details['controls'][key]}")
        if not matches:
            logger.warning("No region or control named %s", key)
            typer.echo(f'No region or control named "{key}" on page "{target.name}"', err=True)
            raise typer.Exit(code=1)
        for match in matches:
            logger.info("Resolved %s to %s", key, match)
            typer.echo(match)
