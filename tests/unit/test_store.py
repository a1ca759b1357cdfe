"""Unit tests for the in-memory settings store."""

from plantuml_doc_plugin.core.store import Declaration, MemorySettingsStore


class TestMemorySettingsStore:
    """Tests for MemorySettingsStore."""

    def test_lookup_missing_key_returns_none(self):
        """Test that keys without raw value report absence."""
        assert MemorySettingsStore().lookup("umlFormat") is None

    def test_lookup_returns_raw_value_unchanged(self):
        """Test that raw values are handed back as ingested."""
        store = MemorySettingsStore({"umlFormat": "SVG"})
        store.set_value("umlClassDiagramBoxBorderRadius", 4)

        assert store.lookup("umlFormat") == "SVG"
        assert store.lookup("umlClassDiagramBoxBorderRadius") == 4

    def test_update_overrides_values(self):
        """Test that later input replaces earlier input."""
        store = MemorySettingsStore({"umlFormat": "png"})
        store.update({"umlFormat": "svg", "umlLocation": "remote"})

        assert store.lookup("umlFormat") == "svg"
        assert store.lookup("umlLocation") == "remote"

    def test_declarations_keep_order(self):
        """Test that declarations are listed in declaration order."""
        store = MemorySettingsStore()
        store.declare("umlFormat", "png|svg", "png")
        store.declare("umlLocation", "local|remote", "local")

        assert store.declarations == [
            Declaration("umlFormat", "png|svg", "png"),
            Declaration("umlLocation", "local|remote", "local"),
        ]
        assert store.is_declared("umlLocation")
        assert not store.is_declared("umlClassDiagramType")

    def test_undeclared_keys(self):
        """Test that ingested keys nobody declared are reported."""
        store = MemorySettingsStore({"umlFormat": "svg", "umlFromat": "svg"})
        store.declare("umlFormat", "png|svg", "png")

        assert store.undeclared_keys() == ["umlFromat"]

    def test_help_text(self):
        """Test that help text lists one line per declaration."""
        store = MemorySettingsStore()
        store.declare("umlFormat", "png|svg", "png")
        store.declare("umlClassDiagramHideShadow", "true|false", False)

        lines = store.help_text().splitlines()

        assert len(lines) == 2
        assert "--umlFormat" in lines[0]
        assert "png|svg" in lines[0]
        assert "(default: False)" in lines[1]
