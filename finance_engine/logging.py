"""Logging setup for finance-engine scripts."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, TYPE_CHECKING, Any

from finance_engine.sinks.serialization import serialize_value

if TYPE_CHECKING:
    from finance_engine.config import EngineConfig

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are noisy below WARNING
QUIET_LOGGERS = ("faker",)


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Send every record to one stream handler on the root logger.

    Handlers installed by an earlier call are replaced, so repeated calls
    do not duplicate output.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        "standard" (pipe-separated text) or "json" (one object per line).
    stream : IO[str] | None
        Destination; ``sys.stdout`` when None.

    Returns
    -------
    logging.Handler
        The installed handler.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt=DATE_FORMAT)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    logging.getLogger("finance_engine").setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))
    return handler


def configure_logging(config: "EngineConfig") -> logging.Handler:
    """:func:`setup_logging` with the level and format of ``config``."""
    return setup_logging(config.log_level, config.log_format)


class JsonFormatter(logging.Formatter):
    """One JSON object per line.

    Structured fields passed as ``extra={"extra": {...}}`` are merged into
    the object, with amounts and dates rendered as strings.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            entry.update(serialize_value(extra))

        return json.dumps(entry, ensure_ascii=False)
