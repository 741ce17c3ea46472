# src/bartasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a default.
- Settings stay injectable (tests build their own instead of reading env).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "BARTASKS"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Shell ----
    start_shown: bool

    # ---- Local data paths ----
    data_dir: Path
    store_path: Path

    # ---- Storage keys ----
    now_key: str
    later_key: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "BarTasks")
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        start_shown = _env_bool(_k("START_SHOWN"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path("~/.local/share/bartasks").expanduser())
        store_path = _env_path(_k("STORE_PATH"), data_dir / "defaults.json")

        now_key = _env(_k("NOW_KEY"), "nowItems")
        later_key = _env(_k("LATER_KEY"), "laterItems")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            start_shown=start_shown,
            data_dir=data_dir,
            store_path=store_path,
            now_key=now_key,
            later_key=later_key,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Process-wide settings, built from the environment on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
