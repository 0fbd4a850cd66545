"""Tests for the JSON manifest loader."""

import json

import pytest
from pydantic import ValidationError

from gql_sdlgen.core.descriptors import SchemaKind, ValueType
from gql_sdlgen.core.generator import generate_schema
from gql_sdlgen.core.manifest import load_manifest, parse_manifest


@pytest.fixture
def manifest_data():
    return {
        "types": [
            {
                "kind": "OBJECT",
                "operation_name": "doc",
                "fields": [
                    {"name": "title"},
                    {
                        "name": "url",
                        "nullable": False,
                        "parameters": [{"name": "welcome"}, {"name": "test"}],
                    },
                ],
            },
            {
                "kind": "ENUM",
                "operation_name": "docType",
                "fields": [
                    {"name": "MEDIA", "display_name": "media"},
                    {"name": "DOCUMENT", "display_name": "document"},
                ],
            },
            {
                "kind": "QUERY",
                "operation_name": "DocQuery",
                "fields": [
                    {
                        "name": "docs",
                        "type": "LIST",
                        "item_type": "OBJECT",
                        "object_type": "doc",
                        "nullable": False,
                        "parameters": [{"name": "type", "type": "OBJECT", "object_type": "kind"}],
                    }
                ],
            },
        ]
    }


class TestParseManifest:

    def test_descriptors(self, manifest_data):
        doc, doc_type, doc_query = parse_manifest(json.dumps(manifest_data))
        assert doc.kind is SchemaKind.OBJECT
        assert [f.key for f in doc.fields] == ["title", "url"]
        assert [p.name for p in doc.fields[1].parameters] == ["welcome", "test"]
        assert doc_type.kind is SchemaKind.ENUM
        assert doc_type.fields[0].key == "media"
        assert doc_query.fields[0].value_type is ValueType.LIST
        assert doc_query.fields[0].item_type is ValueType.OBJECT
        assert doc_query.fields[0].object_type_ref == "doc"

    def test_id_defaults_to_operation_name(self, manifest_data):
        manifest_data["types"][1]["id"] = "kind"
        descriptors = parse_manifest(json.dumps(manifest_data))
        assert [d.type_id for d in descriptors] == ["doc", "kind", "DocQuery"]

    def test_generates_schema(self, manifest_data):
        manifest_data["types"][1]["id"] = "kind"
        result = generate_schema(parse_manifest(json.dumps(manifest_data)))
        assert result.sdl == (
            "\n type doc {\ntitle: String\nurl( welcome: String,test: String) : String!\n}\n\n"
            "\n enum docType {\nmedia\ndocument\n}\n\n"
            "\n query {\ndocs( type: docType) : [doc]!\n}\n\n"
        )
        assert result.diagnostics == []

    def test_base_reference(self):
        text = json.dumps({
            "types": [
                {"operation_name": "Author"},
                {"kind": "IMPLEMENTATION", "operation_name": "Book", "base": "Author"},
            ]
        })
        author, book = parse_manifest(text)
        assert author.kind is SchemaKind.OBJECT
        assert book.base_type_ref == "Author"

    def test_empty_manifest(self):
        assert parse_manifest("{}") == []

    @pytest.mark.parametrize(
        "entry",
        [
            {"operation_name": ""},
            {"operation_name": "   "},
            {"operation_name": "X", "fields": [{"name": " "}]},
            {"operation_name": "X", "fields": [{"name": "f", "parameters": [{"name": "\t"}]}]},
            {"kind": "UNION", "operation_name": "X"},
            {"operation_name": "X", "fields": [{"name": "f", "type": "DATE"}]},
            {"operation_name": "X", "fields": [{"name": "f", "item_type": "LIST"}]},
            {"operation_name": "X", "fields": [{"name": "f", "parameters": [{"type": "INT"}]}]},
            {"operation_name": "X", "unknown": True},
        ],
    )
    def test_invalid_entries(self, entry):
        with pytest.raises(ValidationError):
            parse_manifest(json.dumps({"types": [entry]}))

    def test_blank_name_error_location(self):
        text = json.dumps({"types": [{"operation_name": "doc"}, {"operation_name": "   "}]})
        with pytest.raises(ValidationError) as exc_info:
            parse_manifest(text)
        [error] = exc_info.value.errors()
        assert error["loc"] == ("types", 1, "operation_name")
        assert "must not be blank" in error["msg"]

    def test_malformed_json(self):
        with pytest.raises(ValidationError):
            parse_manifest("{not json")


class TestLoadManifest:

    def test_load_from_file(self, tmp_path, manifest_data):
        path = tmp_path / "types.json"
        path.write_text(json.dumps(manifest_data))
        descriptors = load_manifest(path)
        assert [d.operation_name for d in descriptors] == ["doc", "docType", "DocQuery"]
