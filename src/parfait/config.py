from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv

load_dotenv()


BrowserName = Literal["chromium", "firefox", "webkit"]


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(slots=True)
class Settings:
    """Test run configuration loaded from environment variables."""

    log_level: str = "INFO"
    log_dir: Path = Path("logs")
    browser_name: BrowserName = "chromium"
    headless_default: bool = True
    step_timeout_s: int = 30
    base_url: str | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        browser_raw = os.getenv("BROWSER_NAME", "chromium").strip().lower()
        browser_name: BrowserName = (
            browser_raw if browser_raw in {"chromium", "firefox", "webkit"} else "chromium"  # type: ignore[assignment]
        )

        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_dir=Path(os.getenv("LOG_DIR", "logs")),
            browser_name=browser_name,
            headless_default=_bool_env("HEADLESS_DEFAULT", True),
            step_timeout_s=int(os.getenv("STEP_TIMEOUT_S", "30")),
            base_url=os.getenv("BASE_URL") or None,
        )

    @property
    def step_timeout_ms(self) -> int:
        return self.step_timeout_s * 1000

    def ensure_directories(self) -> None:
        self.log_dir.mkdir(parents=True, exist_ok=True)
