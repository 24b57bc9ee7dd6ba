from __future__ import annotations

from PySide6.QtWidgets import QApplication

from memo_client.core.app_state import MemoApp
from memo_client.logging_setup import SESSION_ID, install_global_exception_hooks, log, setup_logging
from memo_client.services.api_client import MemoApiClient
from memo_client.services.upload import HttpUploadAdapter
from memo_client.settings import load_config
from memo_client.ui.main_window import MemoWindow
from memo_client.ui.preferences import SettingsKeys, get_str, open_settings
from memo_client.workers.qt_runner import QtTaskRunner


def main() -> int:
    config = load_config()
    setup_logging(config.log_level)
    install_global_exception_hooks()

    qt_app = QApplication([])
    prefs = open_settings()

    base_url = get_str(prefs, SettingsKeys.API_BASE_URL, config.api_base_url)
    api = MemoApiClient(base_url, timeout=config.http_timeout)
    uploader = HttpUploadAdapter(config.upload_url, timeout=config.http_timeout)
    runner = QtTaskRunner(qt_app)

    state = MemoApp(
        api,
        uploader,
        runner=runner,
        theme=get_str(prefs, SettingsKeys.UI_THEME, ""),
    )
    win = MemoWindow(state, prefs)
    win.show()
    log.info("Application started: api=%s sid=%s", base_url, SESSION_ID)
    return qt_app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
