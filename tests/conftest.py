"""Shared fixtures for plugin option tests."""

import pytest

from plantuml_doc_plugin import MemorySettingsStore, PlantUmlPluginOptions


@pytest.fixture
def store():
    """An empty in-memory settings store."""
    return MemorySettingsStore()


@pytest.fixture
def plugin_options(store):
    """A plugin option set registered with ``store``."""
    options = PlantUmlPluginOptions()
    options.register_all(store)
    return options
