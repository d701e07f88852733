"""Tests for the schema simplifier."""

import pytest

from apiresolver.resolver.simplify import simplify


class TestSimplifyPrimitives:
    """Tests for primitive schema display values."""

    def test_plain_string(self):
        """Test that a bare string type shows as 'string'."""
        assert simplify({"type": "string"}) == "string"

    def test_string_format_shown(self):
        """Test that format replaces the type name."""
        assert simplify({"type": "string", "format": "uuid"}) == "uuid"
        assert simplify({"type": "string", "format": "date-time"}) == "date-time"

    def test_string_enum_shown(self):
        """Test that enum values are JSON-quoted and comma-joined."""
        assert simplify({"type": "string", "enum": ["a", "b"]}) == 'enum ("a", "b")'

    def test_enum_takes_precedence_over_format(self):
        """Test that enum is checked before format."""
        schema = {"type": "string", "format": "iso-code", "enum": ["EUR"]}

        assert simplify(schema) == 'enum ("EUR")'

    def test_empty_format_falls_back_to_string(self):
        """Test that an empty format string is ignored."""
        assert simplify({"type": "string", "format": ""}) == "string"

    def test_enum_with_non_string_values(self):
        """Test that enum values are rendered as JSON literals."""
        assert simplify({"type": "string", "enum": ["x", None]}) == 'enum ("x", null)'

    @pytest.mark.parametrize("schema_type", ["number", "integer"])
    def test_numeric_types(self, schema_type):
        """Test that numeric types show their type name."""
        assert simplify({"type": schema_type, "format": "int64"}) == schema_type

    def test_boolean(self):
        """Test that boolean shows as 'boolean'."""
        assert simplify({"type": "boolean"}) == "boolean"


class TestSimplifyContainers:
    """Tests for object and array display values."""

    def test_object_with_properties(self):
        """Test that objects become a mapping of property display values."""
        schema = {
            "type": "object",
            "properties": {
                "id": {"type": "string", "format": "uuid"},
                "age": {"type": "integer"},
                "active": {"type": "boolean"},
            },
        }

        assert simplify(schema) == {"id": "uuid", "age": "integer", "active": "boolean"}

    def test_object_property_order_preserved(self):
        """Test that property order follows the source."""
        schema = {"type": "object", "properties": {"z": {"type": "string"}, "a": {"type": "string"}}}

        assert list(simplify(schema)) == ["z", "a"]

    def test_array_of_primitive(self):
        """Test that arrays of simple items read 'array of X'."""
        assert simplify({"type": "array", "items": {"type": "string"}}) == "array of string"

    def test_array_of_formatted_items(self):
        """Test that item formats carry through."""
        schema = {"type": "array", "items": {"type": "string", "format": "uuid"}}

        assert simplify(schema) == "array of uuid"

    def test_array_of_arrays(self):
        """Test that nested simple arrays read naturally."""
        schema = {"type": "array", "items": {"type": "array", "items": {"type": "number"}}}

        assert simplify(schema) == "array of array of number"

    def test_array_of_objects(self):
        """Test that complex items keep the array wrapper."""
        schema = {
            "type": "array",
            "items": {"type": "object", "properties": {"name": {"type": "string"}}},
        }

        assert simplify(schema) == {"type": "array", "items": {"name": "string"}}

    def test_array_without_items(self):
        """Test that an array with no items shows as 'array'."""
        assert simplify({"type": "array"}) == "array"

    @pytest.mark.parametrize("items", [None, False, "", 0])
    def test_array_with_falsy_items(self, items):
        """Test that falsy items, such as a closed tuple's items: false, show as 'array'."""
        assert simplify({"type": "array", "items": items}) == "array"

    def test_array_with_empty_items_keeps_wrapper(self):
        """Test that empty items containers still count as items."""
        assert simplify({"type": "array", "items": {}}) == {"type": "array", "items": {}}
        assert simplify({"type": "array", "items": []}) == {"type": "array", "items": []}

    def test_nested_objects(self):
        """Test that nested objects simplify recursively."""
        schema = {
            "type": "object",
            "properties": {
                "owner": {
                    "type": "object",
                    "properties": {"tags": {"type": "array", "items": {"type": "string"}}},
                }
            },
        }

        assert simplify(schema) == {"owner": {"tags": "array of string"}}


class TestSimplifyReferencesAndFallbacks:
    """Tests for refs and unknown shapes."""

    def test_unresolved_ref_shown_verbatim(self):
        """Test that a remaining $ref is reported, not followed."""
        schema = {"$ref": "#/components/schemas/User", "description": "dropped"}

        assert simplify(schema) == {"$ref": "#/components/schemas/User"}

    def test_circular_placeholder_shown_as_ref(self):
        """Test that circular placeholders display as their reference."""
        schema = {"$ref": "#/components/schemas/Node", "_circular": True}

        assert simplify(schema) == {"$ref": "#/components/schemas/Node"}

    def test_ref_inside_object(self):
        """Test that refs nested in properties are kept as refs."""
        schema = {
            "type": "object",
            "properties": {"owner": {"$ref": "#/components/schemas/User"}},
        }

        assert simplify(schema) == {"owner": {"$ref": "#/components/schemas/User"}}

    def test_object_without_properties_falls_back_to_type(self):
        """Test that an object with no properties shows its type."""
        assert simplify({"type": "object", "additionalProperties": True}) == "object"

    def test_unknown_type_returns_type(self):
        """Test that unknown types show the type value."""
        assert simplify({"type": "file"}) == "file"

    def test_untyped_node_returned_as_is(self):
        """Test that nodes without a type come back unchanged."""
        schema = {"oneOf": [{"type": "string"}, {"type": "integer"}]}

        assert simplify(schema) is schema

    @pytest.mark.parametrize("value", [None, "string", 7, [], {}])
    def test_non_schema_values_returned_as_is(self, value):
        """Test that non-dict or empty values pass through."""
        assert simplify(value) == value


class TestSimplifyDeepSchemas:
    """Tests for schemas nested deeper than the interpreter's recursion limit."""

    def test_deeply_nested_objects(self, chain_depth):
        """Test that 2000 nested objects simplify down to the leaf."""
        schema = {"type": "string", "format": "uuid"}
        for _ in range(2000):
            schema = {"type": "object", "properties": {"next": schema}}

        depth, leaf = chain_depth(simplify(schema))

        assert depth == 2000
        assert leaf == "uuid"

    def test_deeply_nested_arrays(self):
        """Test that 1500 nested arrays read as one long 'array of' label."""
        schema = {"type": "integer"}
        for _ in range(1500):
            schema = {"type": "array", "items": schema}

        result = simplify(schema)

        assert result == "array of " * 1500 + "integer"

    def test_arrays_inside_deep_objects(self, chain_depth):
        """Test that arrays nested under deep objects are still wrapped."""
        schema = {
            "type": "array",
            "items": {"type": "object", "properties": {"tags": {"type": "array", "items": {}}}},
        }
        for _ in range(1200):
            schema = {"type": "object", "properties": {"next": schema}}

        depth, leaf = chain_depth(simplify(schema))

        assert depth == 1200
        assert leaf == {
            "type": "array",
            "items": {"tags": {"type": "array", "items": {}}},
        }
