"""Tests for MCP tool handlers."""

import json

from json_flow.mcp_server.tools import TOOL_HANDLERS, call_tool, get_mcp_tools
from json_flow.templates import get_template, list_templates


class TestToolDefinitions:
    """Tests for tool registration data."""

    def test_every_tool_has_a_handler(self):
        names = [t["name"] for t in get_mcp_tools()]
        assert sorted(names) == sorted(TOOL_HANDLERS)

    def test_definitions_are_json(self):
        for tool in get_mcp_tools():
            assert tool["description"]
            assert tool["inputSchema"]["type"] == "object"
            json.dumps(tool)


class TestCallTool:
    """Tests for call_tool dispatch."""

    def test_generate_ui_schema(self):
        result = call_tool("generate_ui_schema", {"schema": get_template("contact")})
        assert result["type"] == "VerticalLayout"
        assert result["elements"][0] == {
            "type": "Control",
            "scope": "#/properties/name",
            "label": "Full Name",
            "options": {},
        }

    def test_validate_form(self):
        schema = {
            "type": "object",
            "properties": {"age": {"type": "integer", "minimum": 18}},
            "required": ["age"],
        }
        assert call_tool("validate_form", {"schema": schema, "data": {"age": 17}}) == {
            "valid": False,
            "errors": [{"path": "age", "message": "Must be at least 18"}],
        }
        assert call_tool("validate_form", {"schema": schema, "data": {"age": 30}}) == {
            "valid": True,
            "errors": [],
        }

    def test_format_property_name(self):
        assert call_tool("format_property_name", {"name": "zip_code"}) == {
            "name": "zip_code",
            "label": "Zip Code",
        }

    def test_check_schema(self):
        result = call_tool("check_schema", {"schema": {"type": "object", "required": ["x"]}})
        assert result["is_valid"] is False
        assert "Required field 'x' not in properties" in result["errors"]

    def test_get_template(self):
        result = call_tool("get_template", {"name": "survey"})
        assert result["schema"]["title"] == "Customer Survey"
        assert result["uiSchema"]["elements"][0]["options"] == {"showAsStar": True}

    def test_list_templates(self):
        assert call_tool("get_template", {}) == {"templates": list_templates()}

    def test_unknown_tool(self):
        assert call_tool("render_form", {}) == {"error": "Unknown tool: render_form"}

    def test_failures_become_error_payloads(self):
        """Test handler exceptions are reported, not raised."""
        bad_pattern = {
            "type": "object",
            "properties": {"code": {"type": "string", "pattern": "(x"}},
        }
        result = call_tool("validate_form", {"schema": bad_pattern, "data": {"code": "x"}})
        assert "error" in result

        assert "error" in call_tool("get_template", {"name": "missing"})
        assert "error" in call_tool("format_property_name", {"label": "x"})
