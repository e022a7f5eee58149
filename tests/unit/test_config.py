"""Unit tests for configuration loading."""

import logging

from jsonlens.config import MAX_TRAVERSAL_DEPTH, OUTLINE_STRING_CUT, LensConfig


class TestLensConfig:
    def test_defaults(self):
        """Defaults match the module constants."""
        config = LensConfig()
        assert config.traversal.max_depth == MAX_TRAVERSAL_DEPTH == 10
        assert config.traversal.value_text_limit == 50
        assert config.outline.string_cut == OUTLINE_STRING_CUT
        assert config.narrative.max_depth is None
        assert config.graph.style == "network"

    def test_missing_file_gives_defaults(self, tmp_path):
        """A missing file yields the defaults."""
        assert LensConfig.load(tmp_path / "absent.yaml") == LensConfig()

    def test_load_yaml(self, tmp_path):
        """YAML values override only the keys they set."""
        path = tmp_path / ".jsonlens.yaml"
        path.write_text("traversal:\n  max_depth: 4\ngraph:\n  style: hierarchy\n")
        config = LensConfig.load(path)
        assert config.traversal.max_depth == 4
        assert config.traversal.value_text_limit == 50
        assert config.graph.style == "hierarchy"

    def test_unknown_keys_ignored(self):
        """Unknown sections and keys are ignored."""
        config = LensConfig.from_dict({"colors": {"root": "red"}, "outline": {"bogus": 1}})
        assert config == LensConfig()

    def test_empty_file(self, tmp_path):
        """An empty file yields the defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert LensConfig.load(path) == LensConfig()

    def test_invalid_yaml_warns(self, tmp_path, caplog):
        """Malformed YAML is logged and ignored."""
        path = tmp_path / "bad.yaml"
        path.write_text("traversal: [unclosed\n")
        with caplog.at_level(logging.WARNING):
            config = LensConfig.load(path)
        assert config == LensConfig()
        assert "Failed to read" in caplog.text

    def test_non_mapping_warns(self, tmp_path, caplog):
        """A non-mapping document is logged and ignored."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with caplog.at_level(logging.WARNING):
            config = LensConfig.load(path)
        assert config == LensConfig()
        assert "expected a mapping" in caplog.text
