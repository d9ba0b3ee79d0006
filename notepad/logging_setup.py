from __future__ import annotations

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path

from PySide6.QtCore import QtMsgType

from notepad.settings import APP_NAME, LOG_PATH

SESSION_ID = uuid.uuid4().hex[:8]

FILE_HANDLER_NAME = f"{APP_NAME}-file"
CONSOLE_HANDLER_NAME = f"{APP_NAME}-console"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


class SessionFilter(logging.Filter):
    """Stamps every record with this process' session id."""
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


def setup_logging(log_path: Path = LOG_PATH, *, console: bool = True) -> logging.Logger:
    """
    Attach the file (DEBUG, 2 MiB x 5) and console (INFO) handlers to the
    `notepad` logger. Records from `notepad.*` modules reach them by propagation.
    Calling it again is a no-op while our handlers are attached.
    """
    logger = logging.getLogger(APP_NAME)
    if any(h.get_name() == FILE_HANDLER_NAME for h in logger.handlers):
        return logger

    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    log_path = Path(log_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    fmt = logging.Formatter(LOG_FORMAT)
    session_filter = SessionFilter()

    fh = RotatingFileHandler(log_path, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8")
    fh.set_name(FILE_HANDLER_NAME)
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)
    fh.addFilter(session_filter)
    logger.addHandler(fh)

    if console:
        ch = logging.StreamHandler(sys.stdout or sys.stderr)
        ch.set_name(CONSOLE_HANDLER_NAME)
        ch.setLevel(logging.INFO)
        ch.setFormatter(fmt)
        ch.addFilter(session_filter)
        logger.addHandler(ch)

    logger.info("Logging initialized. log_file=%s", log_path)
    return logger


def qt_message_level(mode) -> int:
    return _QT_LEVELS.get(mode, logging.WARNING)


def install_global_exception_hooks(log: logging.Logger) -> None:
    """Send uncaught Python exceptions and Qt's own messages to the app log."""

    def _excepthook(exc_type, exc, tb):
        # Ctrl+C in the terminal is not a crash
        if not issubclass(exc_type, KeyboardInterrupt):
            log.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook

    from PySide6.QtCore import qInstallMessageHandler

    qt_log = log.getChild("qt")

    def _qt_message_handler(mode, context, message):
        category = getattr(context, "category", None) or "default"
        qt_log.log(qt_message_level(mode), "[%s] %s", category, message)

    qInstallMessageHandler(_qt_message_handler)
    log.debug("Qt message handler installed")
