"""Unit tests for config file loading."""

import logging

from plantuml_doc_plugin.core.config import find_config, load_config


class TestFindConfig:
    """Tests for find_config."""

    def test_no_config_file(self, tmp_path):
        """Test that a project without config file yields None."""
        assert find_config(tmp_path) is None

    def test_yaml_preferred_over_json(self, tmp_path):
        """Test that config files are searched in order."""
        (tmp_path / "plantuml-doc.json").write_text("{}")
        (tmp_path / ".plantuml-doc.yml").write_text("umlFormat: svg\n")

        assert find_config(tmp_path) == tmp_path / ".plantuml-doc.yml"


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_returns_none(self, tmp_path):
        """Test loading from a project without config file."""
        assert load_config(tmp_path) is None

    def test_load_yaml(self, tmp_path):
        """Test that YAML scalars are returned as raw strings."""
        (tmp_path / ".plantuml-doc.yml").write_text(
            "umlFormat: svg\n"
            "umlClassDiagramTopDownLayoutMaxSiblings: 12\n"
            "umlClassDiagramArrowColor: '#FF0000'\n"
        )

        config = load_config(tmp_path)

        assert config == {
            "umlFormat": "svg",
            "umlClassDiagramTopDownLayoutMaxSiblings": "12",
            "umlClassDiagramArrowColor": "#FF0000",
        }

    def test_load_json(self, tmp_path):
        """Test that JSON config files are supported."""
        (tmp_path / "plantuml-doc.json").write_text(
            '{"umlLocation": "remote", "umlClassDiagramHideShadow": true}'
        )

        config = load_config(tmp_path)

        assert config == {"umlLocation": "remote", "umlClassDiagramHideShadow": "true"}

    def test_nested_section_unwrapped(self, tmp_path):
        """Test that options under a plantuml section are found."""
        (tmp_path / ".plantuml-doc.yaml").write_text(
            "name: my-docs\n"
            "plantuml:\n"
            "  umlClassDiagramType: detailed\n"
        )

        assert load_config(tmp_path) == {"umlClassDiagramType": "detailed"}

    def test_malformed_file_returns_none(self, tmp_path, caplog):
        """Test that a broken config file is reported and ignored."""
        (tmp_path / ".plantuml-doc.yml").write_text("umlFormat: [svg\n")

        with caplog.at_level(logging.WARNING):
            assert load_config(tmp_path) is None

        assert "Failed to load config" in caplog.text

    def test_non_mapping_returns_none(self, tmp_path):
        """Test that a document which is not a mapping is ignored."""
        (tmp_path / ".plantuml-doc.yml").write_text("- umlFormat\n- svg\n")

        assert load_config(tmp_path) is None

    def test_yaml_booleans_and_numbers_stay_strings(self, tmp_path):
        """Test that YAML 1.1 typing does not reinterpret values."""
        (tmp_path / ".plantuml-doc.yml").write_text(
            "umlClassDiagramHideShadow: yes\n"
            "umlClassDiagramBoxBorderColor: 000000\n"
        )

        config = load_config(tmp_path)

        assert config == {
            "umlClassDiagramHideShadow": "yes",
            "umlClassDiagramBoxBorderColor": "000000",
        }

    def test_invalid_utf8_returns_none(self, tmp_path, caplog):
        """Test that a file that is not UTF-8 is reported and ignored."""
        (tmp_path / ".plantuml-doc.yml").write_bytes(b"umlFormat: \xff\xfe svg\n")

        with caplog.at_level(logging.WARNING):
            assert load_config(tmp_path) is None

        assert "Failed to load config" in caplog.text
