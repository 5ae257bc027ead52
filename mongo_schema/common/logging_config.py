"""
Logging setup for schema extraction runs.

Plain text by default; JSON lines with ``--log-json``. Every record of a
run carries the same run id in JSON mode.
"""

import logging
import json
import time
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Optional

run_id_ctx: ContextVar[Optional[str]] = ContextVar("run_id", default=None)

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class StructuredFormatter(logging.Formatter):
    """Formats each record as one JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        run_id = run_id_ctx.get()
        if run_id:
            log_data["run_id"] = run_id
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # extra={"extra_fields": {...}}
        log_data.update(getattr(record, "extra_fields", {}))
        return json.dumps(log_data, default=str)


@contextmanager
def track_duration(operation: str, logger: logging.Logger, **fields) -> Iterator[Dict[str, Any]]:
    """
    Log how long the block took, at INFO on success and ERROR on failure.

    The yielded dict is logged with the result, so the block can add
    fields it only knows at the end:

        with track_duration("collection_scan", logger, collection="users") as scan:
            scan["fields"] = len(build())
    """
    start = time.perf_counter()
    try:
        yield fields
    except Exception as e:
        fields["duration_ms"] = round((time.perf_counter() - start) * 1000, 2)
        fields["error_type"] = type(e).__name__
        logger.error(f"{operation} failed: {e}", extra={"extra_fields": {"operation": operation, **fields}})
        raise
    fields["duration_ms"] = round((time.perf_counter() - start) * 1000, 2)
    logger.info(
        f"{operation} finished in {fields['duration_ms']} ms",
        extra={"extra_fields": {"operation": operation, **fields}},
    )


def setup_logging(log_level: str = "INFO", json_format: bool = False):
    """
    Configure the root logger with a single stderr handler.

    Args:
        log_level: Log level name, case-insensitive
        json_format: Use StructuredFormatter instead of plain text
    """
    level = getattr(logging, log_level.upper())
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(
        StructuredFormatter() if json_format else logging.Formatter(TEXT_FORMAT))
    root_logger.addHandler(console_handler)

    # pymongo logs every server heartbeat at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)


def set_run_id(run_id: Optional[str] = None) -> str:
    """Set (or generate) the id attached to this run's log records."""
    if run_id is None:
        run_id = uuid.uuid4().hex[:12]
    run_id_ctx.set(run_id)
    return run_id


def get_run_id() -> Optional[str]:
    return run_id_ctx.get()


def clear_run_id():
    run_id_ctx.set(None)
