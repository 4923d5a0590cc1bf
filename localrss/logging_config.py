"""JSON log output with per-run context for localrss."""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

LOGGER_PREFIX = "localrss"

# Record attributes copied into the JSON entry when a call supplies them.
CONTEXT_FIELDS = (
    "execution_id",
    "component",
    "feed_name",
    "feed_url",
    "file_path",
    "article_title",
    "metrics",
)

COMPONENTS = (
    "main",
    "feed_fetcher",
    "image_extractor",
    "feed_processor",
    "article_writer",
    "retention",
    "scheduler",
    "config",
)


def _run_id(prefix: str = "exec") -> str:
    return f"{prefix}_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S_%f')}"


class StructuredFormatter(logging.Formatter):
    """Renders each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        entry.update(
            (field, getattr(record, field))
            for field in CONTEXT_FIELDS
            if hasattr(record, field)
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


class ExecutionLogger:
    """Wraps a component logger so every record carries the run's id.

    Keyword arguments given to the logging methods become record attributes;
    the ones listed in ``CONTEXT_FIELDS`` show up in the JSON output.
    """

    def __init__(self, execution_id: str, component: str = "main"):
        self.execution_id = execution_id
        self.component = component
        self.logger = logging.getLogger(f"{LOGGER_PREFIX}.{component}")
        self.start_time: datetime | None = None

    def _emit(self, level: int, message: str, exc_info: bool = False, **context) -> None:
        context.update(execution_id=self.execution_id, component=self.component)
        self.logger.log(level, message, extra=context, exc_info=exc_info)

    def debug(self, message: str, **context) -> None:
        self._emit(logging.DEBUG, message, **context)

    def info(self, message: str, **context) -> None:
        self._emit(logging.INFO, message, **context)

    def warning(self, message: str, **context) -> None:
        self._emit(logging.WARNING, message, **context)

    def error(self, message: str, exc_info: bool = False, **context) -> None:
        self._emit(logging.ERROR, message, exc_info=exc_info, **context)

    def log_execution_start(self, **context) -> None:
        self.start_time = datetime.now(UTC)
        self.info(
            f"Update run started ({self.component})",
            execution_start=self.start_time.isoformat(),
            **context,
        )

    def log_execution_end(self, success: bool = True, **context) -> None:
        """Log the end of the run with its duration since ``log_execution_start``."""
        finished = datetime.now(UTC)
        duration = (finished - self.start_time).total_seconds() if self.start_time else None
        self.info(
            f"Update run finished ({self.component})",
            execution_end=finished.isoformat(),
            execution_duration_seconds=duration,
            execution_success=success,
            **context,
        )

    def log_feed_processing(self, feed_name: str, items_count: int, **context) -> None:
        self.info(
            f"Feed {feed_name}: {items_count} items",
            feed_name=feed_name,
            items_count=items_count,
            **context,
        )

    def log_article(self, article_title: str, action: str, **context) -> None:
        self.info(
            f"Article {action}: {article_title}",
            article_title=article_title,
            action=action,
            **context,
        )

    def log_metrics(self, metrics: dict[str, Any]) -> None:
        self.info("Update metrics", metrics=metrics)


def setup_structured_logging(log_level: str = "INFO") -> None:
    """Send all records to stdout as JSON at ``log_level``.

    Unknown level names fall back to INFO.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)

    for name in (LOGGER_PREFIX, *(f"{LOGGER_PREFIX}.{c}" for c in COMPONENTS)):
        component_logger = logging.getLogger(name)
        component_logger.setLevel(level)
        component_logger.propagate = True


def create_execution_logger(
    component: str, execution_id: str | None = None
) -> ExecutionLogger:
    """Logger for ``component``; a fresh ``exec_`` id is used when none is given."""
    return ExecutionLogger(execution_id or _run_id(), component)
