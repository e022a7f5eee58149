"""Unit tests for CLI utilities."""

import json

import click
import pytest

from jsonlens.cli.utils import echo_json, echo_json_error, load_document


class TestJsonEnvelope:
    def test_success(self, capsys):
        """Success payloads are wrapped in the meta/data envelope."""
        echo_json({"x": 1})
        payload = json.loads(capsys.readouterr().out)
        assert payload == {"meta": {"status": "success"}, "data": {"x": 1}}

    def test_error_from_message(self, capsys):
        """A plain message becomes an error object."""
        echo_json_error("boom")
        payload = json.loads(capsys.readouterr().out)
        assert payload["meta"]["status"] == "error"
        assert payload["error"] == {"message": "boom"}

    def test_error_from_dict(self, capsys):
        """A dict error is passed through unchanged."""
        echo_json_error({"type": "ShapeError", "message": "no"})
        assert json.loads(capsys.readouterr().out)["error"]["type"] == "ShapeError"


class TestLoadDocument:
    def test_from_file(self, write_json):
        """A JSON file loads into a document."""
        doc = load_document(write_json({"a": 1}))
        assert doc.value == {"a": 1}

    def test_sample(self):
        """--sample uses the bundled document."""
        doc = load_document(None, sample=True)
        assert doc.value["status"] == "success"

    def test_missing_source(self, capsys):
        """No source and no --sample is reported."""
        assert load_document(None) is None
        assert "Provide a JSON file" in capsys.readouterr().err

    def test_file_not_found(self, tmp_path, capsys):
        """A missing file is reported."""
        assert load_document(str(tmp_path / "nope.json")) is None
        assert "File not found" in capsys.readouterr().err

    def test_parse_error_as_json(self, write_json, capsys):
        """Parse errors become a JSON envelope with position."""
        path = write_json('{"a": }')
        assert load_document(path, as_json=True) is None
        payload = json.loads(capsys.readouterr().out)
        assert payload["error"]["type"] == "ParseError"
        assert payload["error"]["line"] == 1
        assert payload["error"]["column"] == 7

    def test_config_file_applies(self, write_json, tmp_path):
        """An explicit config file is honoured."""
        config = tmp_path / "lens.yaml"
        config.write_text("graph:\n  style: hierarchy\n")
        doc = load_document(write_json([1]), config_path=str(config))
        assert doc.config.graph.style == "hierarchy"

    @pytest.mark.parametrize("text", ["", "   \n"])
    def test_blank_file(self, write_json, capsys, text):
        """A blank file asks for data."""
        assert load_document(write_json(text)) is None
        assert "Please enter JSON data" in capsys.readouterr().err


def test_stdin_source(monkeypatch):
    """Source "-" reads the document from stdin."""
    class FakeStream:
        def read(self):
            return "[1, 2, 3]"

    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeStream())
    doc = load_document("-")
    assert doc.value == [1, 2, 3]
