"""
Structured Logging System for the Plugin Registry

Provides structured JSON logging with correlation IDs and configurable
formatters and handlers, plus the adapter that routes plugin diagnostics
into it.
"""

import json
import sys
import uuid
from abc import ABC, abstractmethod
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, TextIO, Union

from ...domain.interfaces import ErrorLog

if TYPE_CHECKING:
    from ...framework.configuration.models import LoggingConfiguration

# Context variables for correlation tracking
correlation_id_var: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)

ROOT_LOGGER_NAME = "plugin_registry"


class LogLevel(Enum):
    """Log levels for the plugin registry logging system"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


_LEVEL_ORDER = {
    LogLevel.DEBUG: 0,
    LogLevel.INFO: 1,
    LogLevel.WARNING: 2,
    LogLevel.ERROR: 3,
    LogLevel.CRITICAL: 4
}


class LogFormatter(ABC):
    """Abstract base class for log formatters"""

    @abstractmethod
    def format(self, record: Dict[str, Any]) -> str:
        """Format a log record into a string"""
        pass


class JSONLogFormatter(LogFormatter):
    """JSON formatter for structured logging"""

    def format(self, record: Dict[str, Any]) -> str:
        return json.dumps(record, default=str, ensure_ascii=False)


class HumanReadableFormatter(LogFormatter):
    """Human-readable formatter for development/debugging"""

    def format(self, record: Dict[str, Any]) -> str:
        timestamp = record.get('timestamp', '')
        level = record.get('level', '')
        message = record.get('message', '')
        correlation_id = record.get('correlation_id', '')

        base_msg = f"[{timestamp}] {level}: {message}"

        if correlation_id:
            base_msg += f" [correlation_id={correlation_id}]"

        if record.get('extra'):
            extra_str = ', '.join(f"{k}={v}" for k, v in record['extra'].items())
            base_msg += f" [{extra_str}]"

        return base_msg


class LogHandler(ABC):
    """Abstract base class for log handlers"""

    def __init__(self, formatter: LogFormatter):
        self.formatter = formatter

    @abstractmethod
    def emit(self, record: Dict[str, Any]) -> None:
        """Emit a log record"""
        pass


class ConsoleLogHandler(LogHandler):
    """Console log handler that writes to stdout/stderr"""

    def __init__(self, formatter: LogFormatter, stream: TextIO = sys.stderr):
        super().__init__(formatter)
        self.stream = stream

    def emit(self, record: Dict[str, Any]) -> None:
        self.stream.write(self.formatter.format(record) + '\n')
        self.stream.flush()


class FileLogHandler(LogHandler):
    """File log handler that appends to a file"""

    def __init__(self, formatter: LogFormatter, file_path: Union[str, Path]):
        super().__init__(formatter)
        self.file_path = Path(file_path)
        self.file_path.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, record: Dict[str, Any]) -> None:
        with open(self.file_path, 'a', encoding='utf-8') as f:
            f.write(self.formatter.format(record) + '\n')


class PluginLogger:
    """
    Structured logger with correlation ID support.

    Records are dictionaries carrying the timestamp, level, logger name and
    message, plus the current correlation ID when set.
    """

    def __init__(self, name: str, level: LogLevel = LogLevel.INFO):
        self.name = name
        self.level = level
        self.handlers: List[LogHandler] = []

    def add_handler(self, handler: LogHandler) -> None:
        self.handlers.append(handler)

    def remove_handler(self, handler: LogHandler) -> None:
        if handler in self.handlers:
            self.handlers.remove(handler)

    def set_level(self, level: LogLevel) -> None:
        self.level = level

    def _should_log(self, level: LogLevel) -> bool:
        return _LEVEL_ORDER[level] >= _LEVEL_ORDER[self.level]

    def _create_log_record(self, level: LogLevel, message: str, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        record = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level.value,
            'logger': self.name,
            'message': message,
            'correlation_id': correlation_id_var.get(),
        }

        if extra:
            record['extra'] = extra

        # Remove None values to keep logs clean
        return {k: v for k, v in record.items() if v is not None}

    def _log(self, level: LogLevel, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        if not self._should_log(level):
            return

        record = self._create_log_record(level, message, extra)

        for handler in self.handlers:
            try:
                handler.emit(record)
            except Exception as e:
                # Fallback to stderr if handler fails
                sys.stderr.write(f"Logging handler failed: {e}\n")

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(LogLevel.DEBUG, message, extra)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(LogLevel.INFO, message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        self._log(LogLevel.WARNING, message, extra)

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: Optional[Exception] = None) -> None:
        """Log error message with optional exception info"""
        if exc_info:
            if extra is None:
                extra = {}
            extra['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info),
                'module': type(exc_info).__module__
            }
        self._log(LogLevel.ERROR, message, extra)

    @contextmanager
    def correlation_context(self, correlation_id: Optional[str] = None):
        """Context manager for correlation ID tracking"""
        if correlation_id is None:
            correlation_id = str(uuid.uuid4())

        token = correlation_id_var.set(correlation_id)
        try:
            yield correlation_id
        finally:
            correlation_id_var.reset(token)


class LoggerErrorLog(ErrorLog):
    """ErrorLog that forwards plugin diagnostics to a structured logger."""

    def __init__(self, logger: Optional[PluginLogger] = None):
        self.logger = logger or get_logger(ROOT_LOGGER_NAME)

    def log_error(self, message: str) -> None:
        self.logger.error(message)


# Global logger registry
_loggers: Dict[str, PluginLogger] = {}


def get_logger(name: str, level: LogLevel = LogLevel.INFO) -> PluginLogger:
    """Get or create a logger instance"""
    if name not in _loggers:
        _loggers[name] = PluginLogger(name, level)
    return _loggers[name]


def configure_default_logging(
    level: LogLevel = LogLevel.INFO,
    use_json: bool = True,
    log_file: Optional[Union[str, Path]] = None
) -> PluginLogger:
    """Configure the root plugin registry logger with console and optional file output"""
    formatter = JSONLogFormatter() if use_json else HumanReadableFormatter()

    root_logger = get_logger(ROOT_LOGGER_NAME)
    root_logger.set_level(level)
    root_logger.handlers.clear()
    root_logger.add_handler(ConsoleLogHandler(formatter))

    if log_file:
        root_logger.add_handler(FileLogHandler(formatter, log_file))

    return root_logger


def configure_logging(config: 'LoggingConfiguration') -> PluginLogger:
    """Configure the root plugin registry logger from a LoggingConfiguration"""
    formatter = JSONLogFormatter() if config.format == "json" else HumanReadableFormatter()

    root_logger = get_logger(ROOT_LOGGER_NAME)
    root_logger.set_level(LogLevel(config.level))
    root_logger.handlers.clear()

    if config.output in ("console", "both"):
        root_logger.add_handler(ConsoleLogHandler(formatter))
    if config.output in ("file", "both") and config.file_path:
        root_logger.add_handler(FileLogHandler(formatter, config.file_path))

    return root_logger


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from context"""
    return correlation_id_var.get()
