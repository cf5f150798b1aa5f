"""
Core configuration management class.
"""

import logging
from typing import Dict, Any, Optional, List

from pydantic import ValidationError

from ...infrastructure.exceptions import ConfigurationError
from .models import PluginsConfiguration
from .sources import ConfigurationSource

logger = logging.getLogger(__name__)


class PluginSystemConfiguration:
    """
    Configuration for the plugin system with priority-based merging of
    multiple sources.

    Sources are merged from lowest to highest priority, so a value from an
    environment source (priority 200) overrides the same value from a YAML
    file (priority 100).
    """

    def __init__(self, sources: Optional[List[ConfigurationSource]] = None):
        self._sources = list(sources or [])
        self._config_data: Dict[str, Any] = {}
        self._plugins_config: Optional[PluginsConfiguration] = None

        if self._sources:
            self._load_configuration()

    def add_source(self, source: ConfigurationSource) -> None:
        """Add a source; it takes effect on the next get_plugins_config()."""
        self._sources.append(source)
        self._sources.sort(key=lambda s: s.get_priority())
        self._plugins_config = None

    def _load_configuration(self) -> None:
        """Load, merge and validate configuration from all sources."""
        merged_config: Dict[str, Any] = {}

        for source in sorted(self._sources, key=lambda s: s.get_priority()):
            try:
                merged_config = self._deep_merge(merged_config, source.load())
            except ConfigurationError as e:
                logger.error(f"Failed to load configuration from source: {type(source).__name__}: {e}")
                raise

        try:
            plugins_config = PluginsConfiguration(**merged_config)
        except ValidationError as e:
            errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
            logger.error(f"Configuration validation failed: {errors}")
            raise ConfigurationError(
                "Configuration validation failed",
                validation_errors=errors,
                cause=e
            ) from e

        self._config_data = merged_config
        self._plugins_config = plugins_config

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries, with override taking precedence."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def get_plugins_config(self) -> PluginsConfiguration:
        """Get the plugin configuration, or the defaults when there are no sources."""
        if self._plugins_config is None:
            if not self._sources:
                return PluginsConfiguration()
            self._load_configuration()
        return self._plugins_config

    def reload_configuration(self) -> None:
        """Reload configuration from all sources."""
        self._load_configuration()
        logger.info("Plugin configuration reloaded")

    def get_raw_config(self) -> Dict[str, Any]:
        return self._config_data.copy()
