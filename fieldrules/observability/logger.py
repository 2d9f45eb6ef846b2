"""
Logging setup for fieldrules.

Records go to stderr as JSON (python-json-logger) or plain text. Rules and the
executor attach their context through ``extra`` (``field_name``,
``rule_type``, ``type_name``, ...), which the JSON formatter emits as
top-level keys.
"""
import logging
import os
import sys

from pythonjsonlogger import jsonlogger

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class RuleLogFormatter(jsonlogger.JsonFormatter):
    """JSON formatter emitting timestamp, level, logger, message and extras."""

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("timestamp", self.formatTime(record, self.datefmt))
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def build_formatter(format_type: str) -> logging.Formatter:
    """Return the formatter for "json" or "text" output."""
    if format_type == "text":
        return logging.Formatter(TEXT_FORMAT)
    return RuleLogFormatter("%(message)s", datefmt="%Y-%m-%dT%H:%M:%S")


def setup_logger(
    name: str = "fieldrules",
    level: str | None = None,
    format_type: str | None = None,
) -> logging.Logger:
    """
    Configure a logger writing to stderr.

    Args:
        name: Logger name
        level: Level name, defaults to LOG_LEVEL then INFO
        format_type: "json" or "text", defaults to LOG_FORMAT then "json"

    Returns:
        Configured logger instance
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers.clear()

    # stdout is reserved for CLI output
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(build_formatter(format_type or os.getenv("LOG_FORMAT", "json")))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str = "fieldrules") -> logging.Logger:
    """Return a logger, configuring it on first use."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        return setup_logger(name)
    return logger
