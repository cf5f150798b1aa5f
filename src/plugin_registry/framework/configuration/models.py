"""
Configuration data models with validation.
"""

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class LoggingConfiguration(BaseModel):
    """Logging system configuration with validation."""
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = Field(default="text", pattern="^(json|text)$")
    output: str = Field(default="console", pattern="^(console|file|both)$")
    file_path: Optional[str] = None

    @model_validator(mode='after')
    def validate_file_path(self):
        """Validate file path when file output is used."""
        if self.output in ('file', 'both') and not self.file_path:
            raise ValueError("file_path is required when output is 'file' or 'both'")
        return self


class PluginsConfiguration(BaseModel):
    """Locations and file names used by the plugin registry."""
    resources_path: str = Field(default="./resources")
    config_path: str = Field(default="./config")
    plugin_search_paths: List[str] = Field(default=["./plugins"])
    settings_file_name: str = Field(default="plugins.txt", min_length=1)
    descriptor_file_name: str = Field(default="plugin.txt", min_length=1)
    about_file_name: str = Field(default="about.txt", min_length=1)
    asset_directories: List[str] = Field(default=["data", "images", "sounds"], min_length=1)
    logging_config: LoggingConfiguration = Field(default_factory=LoggingConfiguration)

    @field_validator('settings_file_name', 'descriptor_file_name', 'about_file_name')
    @classmethod
    def validate_file_name(cls, v):
        """File names must not contain path separators."""
        if '/' in v or '\\' in v:
            raise ValueError(f"File name must not contain path separators: {v}")
        return v

    @property
    def global_settings_path(self) -> Path:
        """Settings shipped with the host's resources, read first."""
        return Path(self.resources_path) / self.settings_file_name

    @property
    def local_settings_path(self) -> Path:
        """Per-user settings, read last and written on save."""
        return Path(self.config_path) / self.settings_file_name
