"""
Shared fixtures for the plugin registry tests.
"""

import pytest

from plugin_registry.framework.plugin_management import PluginDiscovery, PluginRegistry
from tests.fixtures.plugin_fixtures import CollectingErrorLog


@pytest.fixture
def error_log():
    return CollectingErrorLog()


@pytest.fixture
def registry():
    return PluginRegistry()


@pytest.fixture
def discovery(registry, error_log):
    return PluginDiscovery(registry, error_log=error_log)


@pytest.fixture
def plugins_dir(tmp_path):
    path = tmp_path / "plugins"
    path.mkdir()
    return path
