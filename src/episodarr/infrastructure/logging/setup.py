from __future__ import annotations

import atexit
import copy
import logging
import queue
import sys
from datetime import datetime, timezone
from logging.handlers import QueueHandler, QueueListener
from typing import Any, Optional

import structlog

from episodarr.infrastructure.config.schema import AppConfig

log = structlog.get_logger(__name__)


def _add_record_created_timestamp_utc(
    _: Any, __: Any, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """
    Ensure timestamps for non-structlog (foreign) LogRecords match the time when the record
    was created, not the time when the background listener formats it.

    ProcessorFormatter sets event_dict["_record"] for foreign records.
    """
    record = event_dict.get("_record")
    if isinstance(record, logging.LogRecord):
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        event_dict["timestamp"] = dt.isoformat().replace("+00:00", "Z")
    return event_dict


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


class _MinLevelFilter(logging.Filter):
    def __init__(self, min_level: int) -> None:
        super().__init__()
        self._min_level = min_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= self._min_level


class _StructlogPreservingQueueHandler(QueueHandler):
    """QueueHandler that keeps structlog event_dicts (record.msg as dict) intact."""

    def prepare(self, record: logging.LogRecord) -> logging.LogRecord:
        # QueueHandler.prepare() would normally do record.msg = record.getMessage().
        return copy.copy(record)


_QUEUE_LISTENER: Optional[QueueListener] = None


def _processor_formatter(
    renderer: structlog.typing.Processor,
) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            _add_record_created_timestamp_utc,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def build_handlers(config: AppConfig) -> list[logging.Handler]:
    """
    Build the emitting handlers:
    - DEBUG/INFO/WARNING -> stdout, ERROR/CRITICAL -> stderr
    - everything -> config.log_file (append, plain/JSON, no colors) if set
    """
    if config.log_format == "json":
        screen_renderer: structlog.typing.Processor = structlog.processors.JSONRenderer()
        file_renderer: structlog.typing.Processor = structlog.processors.JSONRenderer()
    else:
        screen_renderer = structlog.dev.ConsoleRenderer()
        file_renderer = structlog.dev.ConsoleRenderer(colors=False)

    screen_formatter = _processor_formatter(screen_renderer)

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setFormatter(screen_formatter)
    stdout_handler.addFilter(_MaxLevelFilter(logging.WARNING))

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setFormatter(screen_formatter)
    stderr_handler.addFilter(_MinLevelFilter(logging.ERROR))

    handlers: list[logging.Handler] = [stdout_handler, stderr_handler]

    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(config.log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(_processor_formatter(file_renderer))
        handlers.append(file_handler)

    return handlers


def stop_logging() -> None:
    """Flush and stop the background listener (idempotent)."""
    global _QUEUE_LISTENER
    if _QUEUE_LISTENER is not None:
        try:
            _QUEUE_LISTENER.stop()
            for handler in _QUEUE_LISTENER.handlers:
                handler.close()
        finally:
            _QUEUE_LISTENER = None


def configure_logging(config: AppConfig) -> list[logging.Handler]:
    """
    Configure structlog + stdlib logging.

    All records are routed through a QueueHandler and emitted by a
    QueueListener thread. Returns the emitting handlers (useful for
    inspection in tests).
    """
    global _QUEUE_LISTENER

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            # Timestamp at log-call time for structlog-originated events
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    stop_logging()
    handlers = build_handlers(config)

    q: queue.Queue[logging.LogRecord] = queue.Queue()  # unbounded; non-dropping

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_StructlogPreservingQueueHandler(q))
    root.setLevel(config.log_level)

    # httpx logs every request at INFO; keep it one level quieter.
    logging.getLogger("httpx").setLevel(
        max(logging.WARNING, logging.getLevelName(config.log_level))
    )

    _QUEUE_LISTENER = QueueListener(q, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()
    atexit.register(stop_logging)

    log.debug(
        "logging_configured",
        log_format=config.log_format,
        log_level=config.log_level,
        log_file=str(config.log_file) if config.log_file else None,
    )
    return handlers
