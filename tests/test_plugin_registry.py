"""
Tests for the PluginRegistry.
"""

import pytest

from plugin_registry.framework.plugin_management import Plugin, PluginRegistry


class TestPluginRegistry:
    """Test registry lookups, enumeration and toggling."""

    def test_registry_starts_empty(self, registry):
        """A new registry has no entries."""
        assert registry.is_empty()
        assert len(registry) == 0
        assert dict(registry.all()) == {}
        assert not registry.has_changed()

    def test_get_or_create_inserts_placeholder(self, registry):
        """Unknown names get an invalid placeholder."""
        plugin = registry.get_or_create("Unknown")

        assert isinstance(plugin, Plugin)
        assert not plugin.is_valid()
        assert "Unknown" in registry
        assert len(registry) == 1

    def test_get_or_create_returns_same_entry(self, registry):
        """Repeated lookups return the same mutable record."""
        first = registry.get_or_create("Test")
        first.version = "1.0"

        assert registry.get_or_create("Test") is first
        assert registry.get_or_create("Test").version == "1.0"
        assert len(registry) == 1

    def test_get_does_not_insert(self, registry):
        """Plain lookups leave the registry untouched."""
        assert registry.get("Missing") is None
        assert "Missing" not in registry

    def test_all_is_sorted_and_read_only(self, registry):
        """Enumeration is ordered by name and cannot be modified."""
        for name in ("Charlie", "alpha", "Bravo"):
            registry.get_or_create(name)

        view = registry.all()
        assert list(view) == ["Bravo", "Charlie", "alpha"]
        assert list(registry) == ["Bravo", "Charlie", "alpha"]
        with pytest.raises(TypeError):
            view["Delta"] = Plugin()

    def test_toggle_flips_current_state(self, registry):
        """Toggling changes the state for the next launch only."""
        plugin = registry.get_or_create("Test")
        plugin.name = "Test"

        registry.toggle("Test")
        assert plugin.current_state is False
        assert plugin.enabled is True
        assert registry.has_changed()

        registry.toggle("Test")
        assert plugin.current_state is True
        assert not registry.has_changed()

    def test_toggle_unknown_name_creates_placeholder(self, registry):
        """Toggling a name that was never loaded does not fail."""
        registry.toggle("Ghost")

        ghost = registry.get("Ghost")
        assert ghost is not None
        assert not ghost.is_valid()
        assert ghost.current_state is False

    def test_has_changed_checks_every_entry(self, registry):
        """Any single divergent entry means a restart is required."""
        registry.get_or_create("A")
        changed = registry.get_or_create("B")
        assert not registry.has_changed()

        changed.enabled = False
        assert registry.has_changed()

    def test_independent_registries(self):
        """Registries do not share state."""
        first, second = PluginRegistry(), PluginRegistry()
        first.get_or_create("Test")

        assert "Test" not in second
