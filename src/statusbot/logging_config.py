"""
Structured JSON Logging Configuration for statusbot

Provides consistent, parseable logging for development and production.
Logs can be viewed with jq for easy filtering and analysis.
"""
import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# Attributes every LogRecord carries; anything else came in through extra={}
_STANDARD_ATTRS = {
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'message', 'pathname', 'process', 'processName', 'relativeCreated',
    'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
    'taskName', 'getMessage',
}


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}
    for attr_name, attr_value in record.__dict__.items():
        if attr_name in _STANDARD_ATTRS:
            continue
        # Only include serializable types
        if isinstance(attr_value, (str, int, float, bool, type(None), dict, list)):
            fields[attr_name] = attr_value
    return fields


class JSONFormatter(logging.Formatter):
    """
    Single-line JSON formatter for structured logging.

    Machine-parseable (CloudWatch, Elasticsearch, etc.) and readable with jq.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        for key, value in _extra_fields(record).items():
            log_data.setdefault(key, value)

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


class PrettyFormatter(logging.Formatter):
    """Colored one-line formatter for local development."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m',
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset = self.COLORS['RESET']
        timestamp = datetime.now().strftime('%H:%M:%S.%f')[:-3]

        parts = [
            f"{color}[{record.levelname}]{reset}",
            timestamp,
            f"{record.name}:",
            record.getMessage(),
        ]

        extras = _extra_fields(record)
        if extras:
            parts.append("(" + ", ".join(f"{k}={v}" for k, v in extras.items()) + ")")

        result = ' '.join(parts)
        if record.exc_info:
            result += '\n' + self.formatException(record.exc_info)
        return result


def setup_logging(
    app_name: str = 'statusbot',
    log_level: str = 'INFO',
    log_format: str = 'json',
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure structured logging for the application.

    Args:
        app_name: Name of the application logger (package loggers inherit it)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Format type ('json' or 'pretty')
        log_file: Optional file path for file-based logging

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(app_name)
    logger.setLevel(numeric_level)
    logger.handlers = []

    formatter = PrettyFormatter() if log_format == 'pretty' else JSONFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            directory = os.path.dirname(log_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(numeric_level)
            # Always use JSON for file logs
            file_handler.setFormatter(JSONFormatter())
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Failed to setup file logging: {e}")

    logger.propagate = False
    return logger


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    conversation_id: Optional[str] = None,
    **kwargs
) -> None:
    """
    Log with additional context fields.

    Example:
        >>> log_with_context(
        ...     logger, logging.INFO, "Flow advanced",
        ...     conversation_id="abc123", state="SuiteStep"
        ... )
    """
    extra: Dict[str, Any] = {}
    if conversation_id:
        extra['conversation_id'] = conversation_id
    extra.update(kwargs)
    logger.log(level, message, extra=extra)
