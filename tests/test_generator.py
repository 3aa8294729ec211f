"""Tests for UI schema generation."""

import pytest

from json_flow.generator import create_options, generate_ui_schema
from json_flow.models.schema_node import as_schema
from json_flow.models.ui_schema import Control, Layout
from json_flow.templates import get_template, list_templates
from json_flow.utils.paths import resolve_property, scope_to_key
from json_flow.walker import iter_leaves

NESTED_SCHEMA = {
    "type": "object",
    "properties": {
        "firstName": {"type": "string"},
        "person": {
            "type": "object",
            "title": "Personal Details",
            "properties": {
                "age": {"type": "integer", "minimum": 1, "maximum": 5},
                "homeAddress": {
                    "type": "object",
                    "properties": {
                        "city": {"type": "string", "title": "Town"},
                        "zip_code": {"type": "string"},
                    },
                },
            },
        },
        "tags": {"type": "array", "title": "Tags", "items": {"type": "string", "enum": ["a", "b", "c", "d"]}},
        "bio": {"type": "string", "format": "textarea"},
    },
}


class TestGenerateUiSchema:
    """Tests for generate_ui_schema."""

    def test_root_layout(self):
        ui = generate_ui_schema(NESTED_SCHEMA)
        assert ui.type == "VerticalLayout"
        assert len(ui.elements) == 4

    def test_schema_without_properties(self):
        """Test an empty layout for a schema with no properties."""
        assert generate_ui_schema({"type": "object"}).to_dict() == {
            "type": "VerticalLayout",
            "elements": [],
        }

    def test_leaf_control(self):
        """Test a leaf gets scope, formatted label and options."""
        control = generate_ui_schema(NESTED_SCHEMA).elements[0]
        assert control == Control(scope="#/properties/firstName", label="First Name", options={})

    def test_group_for_nested_object(self):
        """Test nested objects become groups with qualified scopes."""
        group = generate_ui_schema(NESTED_SCHEMA).elements[1]
        assert isinstance(group, Layout)
        assert group.type == "Group"
        assert group.label == "Personal Details"
        assert group.elements[0].scope == "#/properties/person.age"
        assert group.elements[0].label == "Age"

        inner = group.elements[1]
        assert inner.type == "Group"
        assert inner.label == "Home Address"
        assert [c.scope for c in inner.elements] == [
            "#/properties/person.homeAddress.city",
            "#/properties/person.homeAddress.zip_code",
        ]
        assert [c.label for c in inner.elements] == ["Town", "Zip Code"]

    def test_array_is_a_single_control(self):
        """Test arrays produce one control and no per-item controls."""
        control = generate_ui_schema(NESTED_SCHEMA).elements[2]
        assert isinstance(control, Control)
        assert control.scope == "#/properties/tags"
        assert control.label == "Tags"
        assert control.options == {}

    def test_empty_object_is_an_empty_group(self):
        """Test an object with an empty properties map still becomes a group."""
        ui = generate_ui_schema({
            "type": "object",
            "properties": {"meta": {"type": "object", "properties": {}}},
        })
        assert ui.to_dict()["elements"] == [{"type": "Group", "label": "Meta", "elements": []}]

    def test_textarea_rows(self):
        control = generate_ui_schema(NESTED_SCHEMA).elements[3]
        assert control.options == {"rows": 5}

    def test_to_dict_shape(self):
        ui = generate_ui_schema({
            "type": "object",
            "properties": {
                "person": {"type": "object", "properties": {"name": {"type": "string"}}},
            },
        })
        assert ui.to_dict() == {
            "type": "VerticalLayout",
            "elements": [
                {
                    "type": "Group",
                    "label": "Person",
                    "elements": [
                        {
                            "type": "Control",
                            "scope": "#/properties/person.name",
                            "label": "Name",
                            "options": {},
                        },
                    ],
                },
            ],
        }

    def test_generation_is_repeatable(self):
        """Test identical input yields identical trees."""
        assert generate_ui_schema(NESTED_SCHEMA) == generate_ui_schema(NESTED_SCHEMA)
        assert generate_ui_schema(NESTED_SCHEMA).to_dict() == generate_ui_schema(NESTED_SCHEMA).to_dict()

    def test_input_not_modified(self):
        schema = get_template("survey")
        generate_ui_schema(schema)
        assert schema == get_template("survey")

    @pytest.mark.parametrize("name", list_templates() + ["nested"])
    def test_every_leaf_has_one_resolvable_control(self, name):
        """Test each scalar leaf maps to exactly one control that resolves back to it."""
        schema = NESTED_SCHEMA if name == "nested" else get_template(name)
        root = as_schema(schema)
        controls = list(generate_ui_schema(root).iter_controls())

        leaf_paths = [path for _, _, path in iter_leaves(root)]
        assert [scope_to_key(c.scope) for c in controls] == leaf_paths

        for (_, node, path), control in zip(iter_leaves(root), controls):
            assert resolve_property(root, scope_to_key(control.scope)) == node


class TestCreateOptions:
    """Tests for the option heuristics."""

    @pytest.mark.parametrize("count, radio", [(3, False), (4, True), (5, True), (6, True), (7, False)])
    def test_enum_radio_bounds(self, count, radio):
        """Test radio format only for 4 to 6 enum values."""
        node = as_schema({"type": "string", "enum": [f"v{i}" for i in range(count)]})
        options = create_options(node)
        if radio:
            assert options["format"] == "radio"
        else:
            assert "format" not in options

    def test_star_rating(self):
        node = as_schema({"type": "integer", "minimum": 1, "maximum": 5})
        assert create_options(node) == {"showAsStar": True}

    @pytest.mark.parametrize(
        "schema",
        [
            {"type": "number", "minimum": 1, "maximum": 5},
            {"type": "integer", "minimum": 0, "maximum": 5},
            {"type": "integer", "minimum": 1, "maximum": 10},
            {"type": "integer", "minimum": 1},
        ],
    )
    def test_no_star_rating(self, schema):
        assert "showAsStar" not in create_options(as_schema(schema))

    def test_rules_combine(self):
        """Test heuristics are evaluated independently."""
        node = as_schema({
            "type": "integer",
            "format": "textarea",
            "enum": [1, 2, 3, 4, 5],
            "minimum": 1,
            "maximum": 5,
        })
        assert create_options(node) == {"rows": 5, "format": "radio", "showAsStar": True}

    def test_plain_leaf_has_empty_options(self):
        assert create_options(as_schema({"type": "boolean"})) == {}

    def test_survey_template_hints(self):
        """Test the survey template gets star and radio hints."""
        ui = generate_ui_schema(get_template("survey"))
        by_scope = {c.scope: c for c in ui.iter_controls()}
        assert by_scope["#/properties/satisfaction"].options == {"showAsStar": True}
        assert by_scope["#/properties/source"].options == {"format": "radio"}
        assert by_scope["#/properties/wouldRecommend"].label == "Would you recommend us?"
