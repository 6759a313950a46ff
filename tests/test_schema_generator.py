"""Tests for needle schema generation."""

import json

from needle import generate_needle_schema, generate_needles_schema


class TestSchemaGeneration:
    """Test schema generation for registered needle kinds."""

    def test_generate_needles_schema_structure(self):
        """Test that every standard kind is described."""
        schema = generate_needles_schema()

        assert {"string", "string_match", "regex", "predicate"} <= set(schema)
        for kind, kind_schema in schema.items():
            assert kind_schema["kind"] == kind
            assert isinstance(kind_schema["description"], str)
            assert isinstance(kind_schema["fields"], dict)

    def test_string_match_schema(self):
        """Test the StringMatch fields, defaults and aliases."""
        schema = generate_needle_schema("string_match")

        assert schema["needle_class"] == "StringMatch"
        assert schema["source_type"] is None
        assert schema["description"].startswith("Matches candidates against a piece of text")

        fields = schema["fields"]
        assert set(fields) == {"text", "match_length", "case_sensitive"}
        assert fields["text"]["type"] == "string"
        assert fields["text"]["required"] is True
        assert "default" not in fields["text"]
        assert fields["match_length"]["type"] == "enum<full,partial,word>"
        assert fields["match_length"]["default"] == "full"
        assert fields["match_length"]["required"] is False
        assert fields["case_sensitive"]["type"] == "boolean"
        assert fields["case_sensitive"]["default"] is True
        assert fields["case_sensitive"]["alias"] == "case_sensitive"

    def test_adapter_schemas(self):
        """Test adapter source types and field types."""
        schema = generate_needles_schema()

        assert schema["string"]["source_type"] == "str"
        assert schema["regex"]["source_type"] == "Pattern"
        assert schema["regex"]["fields"]["pattern"]["type"] == "pattern"
        assert schema["regex"]["fields"]["flags"]["type"] == "integer"
        assert schema["regex"]["fields"]["flags"]["default"] == 0
        assert schema["predicate"]["source_type"] is None
        assert schema["predicate"]["fields"]["function"]["type"] == "callable<string>"

    def test_unknown_kind(self):
        """Test that unregistered kinds return None."""
        assert generate_needle_schema("does_not_exist") is None

    def test_schema_is_json_serializable(self):
        """Test the schema can be dumped to JSON as-is."""
        json.dumps(generate_needles_schema())
