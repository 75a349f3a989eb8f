from __future__ import annotations

import json
import logging
import sys
import textwrap
import uuid
from pathlib import Path
from typing import Iterator

import pytest
from typer.testing import CliRunner

from parfait.cli import app
from parfait.core.application import get_default_registry

DEFINITIONS = textwrap.dedent(
    """
    from parfait import Control, Page, Region

    edit_user = Page(name="Edit User", aliases=["User Edit"])
    edit_user.add_region(Region(name="Role List", aliases=["Roles"]))
    edit_user.add_control(Control(name="User ID", aliases=["Login"]))
    edit_user.add_to_application("Blogger")
    """
)

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def definitions(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[tuple[str, Path]]:
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    module = f"pages_{uuid.uuid4().hex}"
    (tmp_path / f"{module}.py").write_text(DEFINITIONS, encoding="utf-8")
    get_default_registry().clear()
    yield module, tmp_path
    get_default_registry().clear()
    sys.modules.pop(module, None)


def test_inspect_lists_pages_and_keys(definitions: tuple[str, Path]) -> None:
    module, path = definitions
    result = runner.invoke(app, ["inspect", module, "--path", str(path)])

    assert result.exit_code == 0, result.output
    assert "Application: Blogger" in result.output
    assert "Page: Edit User (aliases: User Edit)" in result.output
    assert "region  Roles -> Role List" in result.output
    assert "control Login -> User ID" in result.output


def test_inspect_unknown_application_fails(definitions: tuple[str, Path]) -> None:
    module, path = definitions
    result = runner.invoke(app, ["inspect", module, "--path", str(path), "--application", "Nope"])

    assert result.exit_code == 1


def test_lookup_resolves_alias(definitions: tuple[str, Path]) -> None:
    module, path = definitions
    result = runner.invoke(app, ["lookup", module, "Blogger", "User Edit", "Login", "--path", str(path)])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "control User ID"


def test_lookup_unknown_key_fails(definitions: tuple[str, Path]) -> None:
    module, path = definitions
    result = runner.invoke(app, ["lookup", module, "Blogger", "Edit User", "Password", "--path", str(path)])

    assert result.exit_code == 1


def test_inspect_unimportable_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    result = runner.invoke(app, ["inspect", "no_such_pages_module", "--path", str(tmp_path)])

    assert result.exit_code != 0


def test_lookup_logs_resolution_with_application_and_page(definitions: tuple[str, Path]) -> None:
    module, path = definitions
    result = runner.invoke(
        app,
        ["lookup", module, "Blogger", "User Edit", "Roles", "--path", str(path), "--log-level", "INFO"],
    )

    assert result.exit_code == 0, result.output
    log_file = path / "logs" / "parfait.log"
    assert log_file.is_file()

    for handler in logging.getLogger().handlers:
        handler.flush()
    records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines() if line]
    resolved = [record for record in records if record["message"].startswith("Resolved Roles")]
    assert resolved, records
    assert resolved[0]["application"] == "Blogger"
    assert resolved[0]["page"] == "Edit User"
