# 📄 File: plantkeeper/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Sets up a logging system that records what happens to plants (created, watered, grown)
# in a structured way, making it easy to follow and debug what the app did.

# 🧪 Purpose (Technical Summary):
# Implements structured logging with JSON formatting, contextual information (correlation ids),
# business-event helpers and one-shot root logger configuration driven by settings.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Correlation context tracking

# 🔄 Connected Modules / Calls From:
# Used by: Plant domain model, event publisher and handlers, formatters, localization

import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from plantkeeper.shared.config.settings import get_settings

SERVICE_NAME = 'plantkeeper'

# Context variables for tracking
correlation_id_var: ContextVar[str] = ContextVar('correlation_id', default='')

# Global logging configuration
_logging_configured = False
_installed_handlers: List[logging.Handler] = []
_loggers_cache: Dict[str, "StructuredLogger"] = {}


class ContextualFormatter(logging.Formatter):
    """
    Custom formatter that adds contextual information to log records.

    Adds correlation ID, hostname and service name to every log
    message for better traceability.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'
        self.service_name = SERVICE_NAME

    def format(self, record):
        record.correlation_id = correlation_id_var.get('')
        record.hostname = self.hostname
        record.service = self.service_name
        record.timestamp = datetime.now(timezone.utc).isoformat()

        if getattr(record, 'extra_fields', None):
            for key, value in record.extra_fields.items():
                if not hasattr(record, key):
                    setattr(record, key, value)

        return super().format(record)


class JSONFormatter(JsonFormatter):
    """
    JSON formatter for structured logging.

    Outputs logs in JSON format with consistent structure for
    log aggregation and analysis tools.
    """

    def __init__(self):
        super().__init__(
            '%(levelname)s %(name)s %(message)s %(module)s %(funcName)s %(lineno)d',
            rename_fields={
                'levelname': 'level',
                'name': 'logger',
                'funcName': 'function',
                'lineno': 'line',
            },
            timestamp=True,
            json_ensure_ascii=False,
        )
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['service'] = SERVICE_NAME
        log_record['hostname'] = self.hostname

        if correlation_id_var.get():
            log_record['correlation_id'] = correlation_id_var.get()

        extra_fields = log_record.pop('extra_fields', None)
        if extra_fields:
            log_record['extra'] = extra_fields


class StructuredLogger:
    """
    Enhanced logger with structured logging capabilities.

    Provides methods for logging different types of events with
    consistent structure and contextual information.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self.logger.name

    def debug(self, message: str, extra: Dict = None, **kwargs):
        """Log debug message with extra fields."""
        self._log(logging.DEBUG, message, extra, **kwargs)

    def info(self, message: str, extra: Dict = None, **kwargs):
        """Log info message with extra fields."""
        self._log(logging.INFO, message, extra, **kwargs)

    def warning(self, message: str, extra: Dict = None, **kwargs):
        """Log warning message with extra fields."""
        self._log(logging.WARNING, message, extra, **kwargs)

    def error(self, message: str, extra: Dict = None, exc_info: bool = False, **kwargs):
        """Log error message with extra fields."""
        self._log(logging.ERROR, message, extra, exc_info=exc_info, **kwargs)

    def critical(self, message: str, extra: Dict = None, exc_info: bool = False, **kwargs):
        """Log critical message with extra fields."""
        self._log(logging.CRITICAL, message, extra, exc_info=exc_info, **kwargs)

    def _log(self, level: int, message: str, extra: Dict = None, **kwargs):
        """Internal log method with extra fields handling."""
        extra_fields = dict(extra or {})

        # Add any additional kwargs as extra fields
        for key, value in kwargs.items():
            if key not in ['exc_info', 'stack_info', 'stacklevel']:
                extra_fields[key] = value

        clean_kwargs = {k: v for k, v in kwargs.items()
                        if k in ['exc_info', 'stack_info', 'stacklevel']}
        # Report the caller, not this wrapper
        clean_kwargs.setdefault('stacklevel', 3)

        if extra_fields:
            clean_kwargs['extra'] = {'extra_fields': extra_fields}

        self.logger.log(level, message, **clean_kwargs)

    def log_business_event(
        self,
        event_type: str,
        description: str,
        entity_id: str = None,
        entity_type: str = None,
        extra: Dict = None
    ):
        """Log business events for analytics."""
        extra_fields = {
            'event_type': 'business_event',
            'business_event_type': event_type,
            'description': description,
            **(extra or {})
        }

        if entity_id:
            extra_fields['entity_id'] = entity_id
        if entity_type:
            extra_fields['entity_type'] = entity_type

        # Report the caller of log_business_event, one frame above info()
        self.info(description, extra=extra_fields, stacklevel=4)


def setup_logging(
    log_level: str = None,
    log_format: str = None,
    log_file: str = None,
    enable_console: bool = True,
    force: bool = False
) -> logging.Logger:
    """
    Setup application logging configuration.

    Installs console and optional file handlers on the root logger.
    Runs once per process unless ``force`` is given; handlers installed
    by an earlier call are replaced, foreign handlers are left alone.

    Args:
        log_level: Level name, defaults to Settings.LOG_LEVEL
        log_format: 'json' or 'text', defaults to Settings.LOG_FORMAT
        log_file: Optional log file path, defaults to Settings.LOG_FILE
        enable_console: Whether to log to stdout
        force: Reconfigure even if logging was already set up

    Returns:
        The 'startup' logger
    """
    global _logging_configured

    if _logging_configured and not force:
        return logging.getLogger("startup")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT
    log_file = log_file or settings.LOG_FILE

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter = JSONFormatter()
    else:
        formatter = ContextualFormatter('%(timestamp)s - %(name)s - %(levelname)s - %(message)s')

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    _logging_configured = True
    log_startup_event(
        settings.APP_NAME,
        settings.APP_VERSION,
        extra={'environment': settings.ENVIRONMENT, 'log_format': log_format.lower()}
    )
    return logging.getLogger("startup")


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        StructuredLogger instance
    """
    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = StructuredLogger(name)
    _loggers_cache[name] = logger

    return logger


@contextmanager
def log_context(correlation_id: Optional[str] = None) -> Iterator[Dict[str, Any]]:
    """
    Context manager for adding a correlation id to logs.

    Args:
        correlation_id: Correlation identifier, generated when omitted
    """
    if correlation_id is None:
        correlation_id = str(uuid4())

    token = correlation_id_var.set(correlation_id)
    try:
        yield {'correlation_id': correlation_id}
    finally:
        correlation_id_var.reset(token)


def log_startup_event(service_name: str, version: str, extra: Dict = None):
    """Log application startup event."""
    logger = get_logger('startup')
    logger.info(
        f"Service {service_name} {version} starting up",
        extra={
            'event_type': 'service_startup',
            'service_name': service_name,
            'version': version,
            **(extra or {})
        }
    )
