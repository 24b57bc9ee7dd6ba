import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from memo_client.settings import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_THEME,
    load_config,
    normalize_theme,
)


def test_defaults():
    cfg = load_config({})
    assert cfg.api_base_url == "http://127.0.0.1:3000"
    assert cfg.upload_url == "http://127.0.0.1:3000/api/upload"
    assert cfg.http_timeout == DEFAULT_HTTP_TIMEOUT
    assert cfg.log_level == "INFO"


def test_env_overrides():
    cfg = load_config({
        "MEMO_API_BASE_URL": "https://memo.example/",
        "MEMO_HTTP_TIMEOUT": "2.5",
        "MEMO_LOG_LEVEL": "debug",
    })
    assert cfg.api_base_url == "https://memo.example"
    assert cfg.upload_url == "https://memo.example/api/upload"
    assert cfg.http_timeout == 2.5
    assert cfg.log_level == "DEBUG"


def test_bad_timeout_falls_back():
    assert load_config({"MEMO_HTTP_TIMEOUT": "soon"}).http_timeout == DEFAULT_HTTP_TIMEOUT
    assert load_config({"MEMO_HTTP_TIMEOUT": "-1"}).http_timeout == DEFAULT_HTTP_TIMEOUT
    assert load_config({"MEMO_HTTP_TIMEOUT": "nan"}).http_timeout == DEFAULT_HTTP_TIMEOUT
    assert load_config({"MEMO_HTTP_TIMEOUT": "inf"}).http_timeout == DEFAULT_HTTP_TIMEOUT


def test_explicit_upload_url():
    cfg = load_config({"MEMO_UPLOAD_URL": "https://files.example/up"})
    assert cfg.upload_url == "https://files.example/up"


def test_normalize_theme():
    assert normalize_theme(" Light-Pink ") == "light-pink"
    assert normalize_theme(None) == DEFAULT_THEME
    assert normalize_theme("pink") == DEFAULT_THEME
