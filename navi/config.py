"""Read-only JSON configuration.

Loaded once at startup from the platform config directory. The file is
optional and never written; missing, malformed, or mistyped values fall
back to defaults.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "navi"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class Settings:
    preview_supported: bool = True
    preview_enabled: bool = False
    status_seconds: float = 3.0
    delete_confirm_seconds: float = 3.0
    show_splash: bool = True
    no_color: bool = False
    style: str = "monokai"
    log_file: Path | None = None


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _bool(data: dict[str, object], key: str, default: bool) -> bool:
    value = data.get(key)
    return value if isinstance(value, bool) else default


def _seconds(data: dict[str, object], key: str, default: float) -> float:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return default
    return float(value)


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build ``Settings`` from the config file and ``NO_COLOR``."""
    environ = os.environ if environ is None else environ
    data = load_config()
    defaults = Settings()

    style = data.get("style")
    log_file = data.get("log_file")
    return Settings(
        preview_supported=_bool(data, "preview_supported", defaults.preview_supported),
        preview_enabled=_bool(data, "preview_enabled", defaults.preview_enabled),
        status_seconds=_seconds(data, "status_seconds", defaults.status_seconds),
        delete_confirm_seconds=_seconds(data, "delete_confirm_seconds", defaults.delete_confirm_seconds),
        show_splash=_bool(data, "show_splash", defaults.show_splash),
        no_color=_bool(data, "no_color", defaults.no_color) or "NO_COLOR" in environ,
        style=style if isinstance(style, str) and style else defaults.style,
        log_file=Path(log_file).expanduser() if isinstance(log_file, str) and log_file else None,
    )
