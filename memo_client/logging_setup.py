from __future__ import annotations

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler

from memo_client.settings import APP_NAME, LOG_DIR, LOG_PATH

SESSION_ID = uuid.uuid4().hex[:8]


class EnsureSessionFilter(logging.Filter):
    """Records from plain module loggers get the session id too."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


class SessionAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        extra = kwargs.setdefault("extra", {})
        extra.setdefault("session", SESSION_ID)
        return msg, kwargs


def get_logger(name: str | None = None) -> SessionAdapter:
    """
    Логгер в пространстве имён приложения. Хэндлеры вешаются в setup_logging(),
    до этого записи просто уходят в стандартный logging.
    """
    full_name = APP_NAME if not name else f"{APP_NAME}.{name}"
    return SessionAdapter(logging.getLogger(full_name), {})


def setup_logging(level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if logger.handlers:
        return logger

    LOG_DIR.mkdir(parents=True, exist_ok=True)

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"
    )
    session_filter = EnsureSessionFilter()

    fh = RotatingFileHandler(
        LOG_PATH, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8"
    )
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)
    fh.addFilter(session_filter)

    ch = logging.StreamHandler(sys.stdout or sys.stderr)
    ch.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    ch.setFormatter(fmt)
    ch.addFilter(session_filter)

    logger.addHandler(fh)
    logger.addHandler(ch)

    logger.info("Logging initialized. log_file=%s", LOG_PATH)
    return logger


log = get_logger()


_QT_LEVELS = {
    0: logging.DEBUG,     # QtDebugMsg
    1: logging.WARNING,   # QtWarningMsg
    2: logging.ERROR,     # QtCriticalMsg
    3: logging.CRITICAL,  # QtFatalMsg
    4: logging.INFO,      # QtInfoMsg
}


def install_global_exception_hooks() -> None:
    def _excepthook(exc_type, exc, tb):
        log.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook

    try:
        from PySide6.QtCore import qInstallMessageHandler

        def _qt_message_handler(mode, context, message):
            file = getattr(context, "file", None)
            line = getattr(context, "line", None)
            where = f"{file}:{line}" if file else "unknown"
            try:
                level = _QT_LEVELS.get(int(mode), logging.WARNING)
            except (TypeError, ValueError):
                level = logging.WARNING
            log.log(level, "Qt: %s | where=%s", message, where)

        qInstallMessageHandler(_qt_message_handler)
        log.info("Qt message handler installed")
    except Exception:
        log.exception("Failed to install Qt message handler")
