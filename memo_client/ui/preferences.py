from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import QSettings

from memo_client.logging_setup import get_logger
from memo_client.settings import APP_NAME

log = get_logger("ui.preferences")


@dataclass(frozen=True)
class SettingsKeys:
    UI_THEME: str = "ui/theme"
    UI_GEOMETRY: str = "ui/geometry"
    UI_SPLITTER: str = "ui/splitter_sizes"
    API_BASE_URL: str = "api/base_url"


def open_settings() -> QSettings:
    return QSettings(APP_NAME, APP_NAME)


def get_str(settings: QSettings, key: str, default: str) -> str:
    try:
        val = settings.value(key, default)
        return str(val) if val is not None else default
    except Exception:
        return default


def get_int_list(settings: QSettings, key: str) -> list[int] | None:
    """QSettings отдаёт списки то как list, то как строку "200,800"."""
    value = settings.value(key)
    if value is None:
        return None
    if isinstance(value, str):
        value = value.replace(",", " ").split()
    if not isinstance(value, (list, tuple)):
        return None
    out: list[int] = []
    for x in value:
        try:
            out.append(int(x))
        except (TypeError, ValueError):
            continue
    return out or None


def safe_set_setting(settings: QSettings, key: str, value) -> None:
    """Best-effort: a broken settings backend must not break the UI."""
    try:
        settings.setValue(key, value)
    except Exception:
        log.exception("Failed to write setting %s", key)
