"""
Structured Exception Hierarchy

Provides the exception hierarchy used by the plugin registry, carrying
contextual information for diagnostics.

Routine plugin problems (unknown attributes, dependency conflicts, duplicate
names, missing files) are reported through the error log and never raised.
These exceptions cover host-side failures only.
"""

from typing import Dict, List, Any, Optional
import uuid
from datetime import datetime, timezone


class PluginRegistryException(Exception):
    """
    Base exception class for all plugin registry exceptions.

    Provides structured error information including error codes,
    context data, and correlation IDs for tracing.
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        correlation_id: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.cause = cause
        self.correlation_id = correlation_id or str(uuid.uuid4())
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "correlation_id": self.correlation_id,
            "timestamp": self.timestamp.isoformat(),
            "cause": str(self.cause) if self.cause else None
        }


class ConfigurationError(PluginRegistryException):
    """Raised when configuration-related errors occur."""

    def __init__(
        self,
        message: str,
        config_path: Optional[str] = None,
        validation_errors: Optional[List[str]] = None,
        **kwargs
    ):
        context = kwargs.pop('context', {})
        if config_path:
            context['config_path'] = config_path
        if validation_errors:
            context['validation_errors'] = validation_errors

        super().__init__(
            message=message,
            error_code="CONFIG_ERROR",
            context=context,
            **kwargs
        )


class DataFileError(PluginRegistryException):
    """Raised when a data file cannot be written or a writer is misused."""

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        **kwargs
    ):
        context = kwargs.pop('context', {})
        if file_path:
            context['file_path'] = file_path

        super().__init__(
            message=message,
            error_code="DATA_FILE_ERROR",
            context=context,
            **kwargs
        )


class PluginError(PluginRegistryException):
    """Raised when plugin-related errors occur."""

    def __init__(
        self,
        message: str,
        error_code: str = "PLUGIN_ERROR",
        **kwargs
    ):
        super().__init__(message=message, error_code=error_code, **kwargs)


class PluginSettingsError(PluginError):
    """Raised when the plugin settings file cannot be saved."""

    def __init__(
        self,
        message: str,
        settings_path: Optional[str] = None,
        **kwargs
    ):
        context = kwargs.pop('context', {})
        if settings_path:
            context['settings_path'] = settings_path

        super().__init__(
            message=message,
            error_code="PLUGIN_SETTINGS_ERROR",
            context=context,
            **kwargs
        )
