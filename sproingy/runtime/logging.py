"""Viewer logging: console output plus an optional JSON-lines file."""

from __future__ import annotations

import json
import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from sproingy.runtime.config import LogConfig

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes every record carries; anything else came in through ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))) | {
    "message",
    "asctime",
}

_listener: QueueListener | None = None


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra=`` values are kept under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS}
        if fields:
            entry["fields"] = fields
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=True, default=repr)


def configure_logging(config: LogConfig) -> None:
    """Install root handlers from the ``SPROINGY_LOG_*`` settings.

    The console uses ``config.console_format``. With ``config.file_path`` set,
    the file always receives JSON lines and both handlers are fed from a
    queue drained by a listener thread until :func:`shutdown_logging`.
    """
    global _listener

    shutdown_logging()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.getLevelNamesMapping().get(config.level_name.upper(), logging.INFO))

    console = logging.StreamHandler()
    console.setFormatter(JsonFormatter() if config.console_format == "json" else logging.Formatter(TEXT_FORMAT))
    if config.file_path is None:
        root.addHandler(console)
        return

    path = Path(config.file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, encoding="utf-8", delay=True)
    file_handler.setFormatter(JsonFormatter())

    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(records))
    _listener = QueueListener(records, console, file_handler, respect_handler_level=True)
    _listener.start()


def shutdown_logging() -> None:
    """Drain the file listener, if one runs, and close its file."""
    global _listener

    if _listener is None:
        return
    _listener.stop()
    for handler in _listener.handlers:
        handler.close()
    _listener = None
