from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from parfait.config import Settings
from parfait.logging import ORJSONFormatter, lookup_context


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("BROWSER_NAME", "Firefox")
    monkeypatch.setenv("HEADLESS_DEFAULT", "no")
    monkeypatch.setenv("STEP_TIMEOUT_S", "12")
    monkeypatch.setenv("BASE_URL", "https://staging.example.com")

    settings = Settings.from_env()

    assert settings.log_level == "DEBUG"
    assert settings.browser_name == "firefox"
    assert settings.headless_default is False
    assert settings.step_timeout_ms == 12_000
    assert settings.base_url == "https://staging.example.com"

    settings.ensure_directories()
    assert (tmp_path / "logs").is_dir()


def test_settings_fall_back_on_unknown_browser(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BROWSER_NAME", "netscape")
    monkeypatch.delenv("BASE_URL", raising=False)

    settings = Settings.from_env()

    assert settings.browser_name == "chromium"
    assert settings.base_url is None


def test_formatter_includes_context_and_extras() -> None:
    record = logging.LogRecord(
        name="parfait.core.page",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Registered control %s",
        args=("Save",),
        exc_info=None,
    )
    record.control = "Save"

    with lookup_context(application="Blogger", page="Edit User"):
        payload = json.loads(ORJSONFormatter().format(record))
    outside = json.loads(ORJSONFormatter().format(record))

    assert payload["message"] == "Registered control Save"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "parfait.core.page"
    assert payload["application"] == "Blogger"
    assert payload["page"] == "Edit User"
    assert payload["control"] == "Save"
    assert "application" not in outside
