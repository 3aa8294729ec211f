"""Tests for the command-line interface."""

import json

import pytest

from json_flow.cli import main
from json_flow.config import FlowConfig
from json_flow.templates import get_template


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(get_template("registration")), encoding="utf-8")
    return path


class TestCli:
    """Tests for json-flow subcommands."""

    def test_generate(self, schema_file, capsys):
        assert main(["generate", str(schema_file)]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["type"] == "VerticalLayout"
        assert [e["scope"] for e in output["elements"]] == [
            "#/properties/firstName",
            "#/properties/lastName",
            "#/properties/email",
            "#/properties/age",
            "#/properties/subscribe",
        ]

    def test_validate_with_errors(self, schema_file, tmp_path, capsys):
        data_file = tmp_path / "data.json"
        data_file.write_text(json.dumps({"firstName": "A", "age": 12}), encoding="utf-8")
        assert main(["validate", str(schema_file), str(data_file)]) == 1
        output = json.loads(capsys.readouterr().out)
        assert output == [
            {"path": "firstName", "message": "Must be at least 2 characters"},
            {"path": "age", "message": "Must be at least 18"},
            {"path": "lastName", "message": "Last Name is required"},
            {"path": "email", "message": "Email is required"},
        ]

    def test_validate_clean(self, schema_file, tmp_path, capsys):
        data_file = tmp_path / "data.json"
        data_file.write_text(
            json.dumps({"firstName": "Ada", "lastName": "Lovelace", "email": "ada@example.com"}),
            encoding="utf-8",
        )
        assert main(["validate", str(schema_file), str(data_file)]) == 0
        assert json.loads(capsys.readouterr().out) == []

    def test_check(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"type": "object", "required": ["x"]}), encoding="utf-8")
        assert main(["check", str(path)]) == 1
        assert json.loads(capsys.readouterr().out)["is_valid"] is False

    def test_template(self, capsys):
        assert main(["template", "contact"]) == 0
        assert json.loads(capsys.readouterr().out)["title"] == "Contact Form"

    def test_template_list(self, capsys):
        assert main(["template"]) == 0
        assert capsys.readouterr().out.split() == ["registration", "contact", "signup", "survey"]

    def test_missing_file(self, tmp_path, capsys):
        assert main(["generate", str(tmp_path / "nope.json")]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        assert main(["generate", str(path)]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_unknown_template(self, capsys):
        assert main(["template", "missing"]) == 1
        assert "Unknown template: missing" in capsys.readouterr().err


class TestLogLevel:
    """Tests for the log level the CLI configures."""

    def test_configured_level(self):
        assert FlowConfig(log_level="WARNING").effective_log_level == "WARNING"

    def test_verbose_forces_debug(self):
        assert FlowConfig(log_level="WARNING", verbose_output=True).effective_log_level == "DEBUG"

    def test_verbose_read_from_env(self, monkeypatch):
        monkeypatch.setenv("JSON_FLOW_VERBOSE_OUTPUT", "true")
        assert FlowConfig.from_env().effective_log_level == "DEBUG"
