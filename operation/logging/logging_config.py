"""
Logging configuration for the player profile quiz.
Provides structured logging tagged with the quiz session id.
"""

import logging
import sys
import os
from typing import Optional
from datetime import datetime
import uuid
from contextvars import ContextVar

# Quiz session id for log correlation
correlation_id: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)

_logging_configured = False


class CorrelationFilter(logging.Filter):
    """Add the quiz session id to log records"""
    def filter(self, record):
        record.correlation_id = correlation_id.get() or 'N/A'
        return True


class StructuredFormatter(logging.Formatter):
    """Structured log formatter with session id"""
    def format(self, record):
        # Format: [TIMESTAMP] [LEVEL] [SESSION_ID] [MODULE] MESSAGE
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{timestamp}] [{record.levelname}] [{getattr(record, 'correlation_id', 'N/A')}] [{record.name}] {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure application-wide logging. Only the first call has an effect.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
    """
    global _logging_configured

    if _logging_configured:
        return

    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    formatter = StructuredFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(CorrelationFilter())
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(CorrelationFilter())
        root_logger.addHandler(file_handler)

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return logging.getLogger(name)


def set_correlation_id(cid: Optional[str] = None) -> str:
    """
    Set the session id for the current context.
    Generates a new id if None provided.

    Returns:
        Session id string
    """
    if cid is None:
        cid = str(uuid.uuid4())
    correlation_id.set(cid)
    return cid


def get_correlation_id() -> Optional[str]:
    """Get current session id"""
    return correlation_id.get()
