"""
Observability - structured logging and the diagnostic sink used while
loading plugins.
"""

from .logging import (
    PluginLogger,
    LogLevel,
    LogFormatter,
    LogHandler,
    JSONLogFormatter,
    HumanReadableFormatter,
    ConsoleLogHandler,
    FileLogHandler,
    LoggerErrorLog,
    get_logger,
    configure_default_logging,
    configure_logging,
    get_correlation_id,
)

__all__ = [
    "PluginLogger",
    "LogLevel",
    "LogFormatter",
    "LogHandler",
    "JSONLogFormatter",
    "HumanReadableFormatter",
    "ConsoleLogHandler",
    "FileLogHandler",
    "LoggerErrorLog",
    "get_logger",
    "configure_default_logging",
    "configure_logging",
    "get_correlation_id",
]
