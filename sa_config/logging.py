import json
import logging
import sys
from typing import TextIO

_handler: logging.Handler | None = None


class CustomJsonFormatter(logging.Formatter):
    def __init__(self, datefmt: str | None = None) -> None:
        super().__init__(datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        record_dict = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "module": record.name,
            "funcName": record.funcName,
            "lineno": record.lineno,
            "message": record.getMessage(),
        }

        if hasattr(record, "config_path"):
            record_dict["config_path"] = record.config_path  # type: ignore[attr-defined]
        if record.exc_info:
            record_dict["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(record_dict, ensure_ascii=False)


def setup_logging(level: str | int = "INFO", stream: TextIO | None = None) -> None:
    """
    Send JSON log lines for the ``sa_config`` loggers to stderr.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Level name or number; unknown names fall back to INFO.
        stream: Destination stream (default: ``sys.stderr``).
    """
    global _handler

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    package_logger = logging.getLogger("sa_config")
    if _handler is not None:
        package_logger.removeHandler(_handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(CustomJsonFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    _handler = handler
