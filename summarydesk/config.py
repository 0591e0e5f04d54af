"""Persistent JSON config helpers.

Stores autosave timing, log level and the dropped-document policy.
Malformed or missing config falls back to defaults.
The workspace root and open paths are session-only and never written here.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "summarydesk"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

AUTO_SAVE_DELAY_MS = 1000
SAVE_INDICATOR_DURATION_MS = 500
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    autosave_delay_ms: int = AUTO_SAVE_DELAY_MS
    save_indicator_ms: int = SAVE_INDICATOR_DURATION_MS
    log_level: str = DEFAULT_LOG_LEVEL
    persist_dropped_documents: bool = False

    @property
    def autosave_delay(self) -> float:
        return self.autosave_delay_ms / 1000.0

    @property
    def save_indicator(self) -> float:
        return self.save_indicator_ms / 1000.0


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except Exception as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored so a read-only config
    directory never breaks the session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _coerce_positive_ms(value: object, default: int) -> int:
    """Accept positive integers only; booleans and other types fall back."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return default
    return value


def _coerce_log_level(value: object) -> str:
    if not isinstance(value, str):
        return DEFAULT_LOG_LEVEL
    normalized = value.strip().upper()
    return normalized if normalized in LOG_LEVELS else DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    """Return validated settings, defaulting every missing or invalid key."""
    data = load_config()
    persist = data.get("persist_dropped_documents")
    return Settings(
        autosave_delay_ms=_coerce_positive_ms(data.get("autosave_delay_ms"), AUTO_SAVE_DELAY_MS),
        save_indicator_ms=_coerce_positive_ms(data.get("save_indicator_ms"), SAVE_INDICATOR_DURATION_MS),
        log_level=_coerce_log_level(data.get("log_level")),
        persist_dropped_documents=persist if isinstance(persist, bool) else False,
    )


def save_setting(key: str, value: object) -> None:
    """Persist one known settings key."""
    if key not in Settings.__dataclass_fields__:
        raise KeyError(key)
    config = load_config()
    config[key] = value
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "AUTO_SAVE_DELAY_MS",
    "SAVE_INDICATOR_DURATION_MS",
    "LOG_LEVELS",
    "Settings",
    "load_config",
    "save_config",
    "load_settings",
    "save_setting",
]
