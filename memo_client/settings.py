from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

APP_NAME = "memo-client"
LOG_DIR = Path.home() / f".{APP_NAME}" / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"

CODE_LENGTH = 4
LOGIN_TRANSITION_MS = 500

THEME_LIGHT_PINK = "light-pink"
THEME_DEEP_BLUE = "deep-blue"
THEMES = (THEME_LIGHT_PINK, THEME_DEEP_BLUE)
DEFAULT_THEME = THEME_DEEP_BLUE

DEFAULT_API_BASE_URL = "http://127.0.0.1:3000"
DEFAULT_HTTP_TIMEOUT = 15.0


def normalize_theme(name: str | None) -> str:
    name = (name or "").strip().lower()
    return name if name in THEMES else DEFAULT_THEME


@dataclass(frozen=True)
class ClientConfig:
    api_base_url: str = DEFAULT_API_BASE_URL
    upload_url: str = DEFAULT_API_BASE_URL + "/api/upload"
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    log_level: str = "INFO"


def _env(env: Mapping[str, str], name: str, default: str) -> str:
    value = env.get(name)
    if value is None or not str(value).strip():
        return default
    return str(value).strip()


def load_config(env: Mapping[str, str] | None = None) -> ClientConfig:
    """
    Собирает конфигурацию клиента из переменных окружения.
    Некорректные значения не роняют запуск: берётся значение по умолчанию.
    """
    env = os.environ if env is None else env

    base_url = _env(env, "MEMO_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/")
    upload_url = _env(env, "MEMO_UPLOAD_URL", f"{base_url}/api/upload")

    try:
        timeout = float(_env(env, "MEMO_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT)))
        if not math.isfinite(timeout) or timeout <= 0:
            timeout = DEFAULT_HTTP_TIMEOUT
    except ValueError:
        timeout = DEFAULT_HTTP_TIMEOUT

    level = _env(env, "MEMO_LOG_LEVEL", "INFO").upper()

    return ClientConfig(
        api_base_url=base_url,
        upload_url=upload_url,
        http_timeout=timeout,
        log_level=level,
    )
