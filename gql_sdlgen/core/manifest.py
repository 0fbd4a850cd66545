"""JSON manifest of type descriptors.

A manifest lists schema types explicitly, for projects whose DTOs are not
Python classes:

    {
      "types": [
        {"kind": "OBJECT", "operation_name": "doc", "fields": [
          {"name": "title"},
          {"name": "url", "nullable": false,
           "parameters": [{"name": "welcome"}, {"name": "test"}]}
        ]},
        {"kind": "QUERY", "operation_name": "DocQuery", "fields": [
          {"name": "docs", "type": "LIST", "item_type": "OBJECT", "object_type": "doc"}
        ]}
      ]
    }

References (``base``, ``object_type``) name another entry's ``id``, which
defaults to its ``operation_name``.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .descriptors import (
    FieldDescriptor,
    ParameterDescriptor,
    SchemaKind,
    TypeDescriptor,
    ValueType,
)

KindName = Literal["QUERY", "MUTATION", "OBJECT", "INPUT", "INTERFACE", "IMPLEMENTATION", "ENUM"]
ValueTypeName = Literal["STRING", "INT", "FLOAT", "BOOLEAN", "ID", "OBJECT", "LIST"]
ItemTypeName = Literal["STRING", "INT", "FLOAT", "BOOLEAN", "ID", "OBJECT"]


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


class ParameterEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    type: ValueTypeName = "STRING"
    item_type: ItemTypeName = "STRING"
    object_type: str | None = None
    nullable: bool = True

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _not_blank(v)

    def to_descriptor(self) -> ParameterDescriptor:
        return ParameterDescriptor(
            name=self.name,
            value_type=ValueType[self.type],
            object_type_ref=self.object_type,
            nullable=self.nullable,
            item_type=ValueType[self.item_type],
        )


class FieldEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    display_name: str | None = None
    type: ValueTypeName = "STRING"
    item_type: ItemTypeName = "STRING"
    object_type: str | None = None
    nullable: bool = True
    parameters: list[ParameterEntry] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _not_blank(v)

    def to_descriptor(self) -> FieldDescriptor:
        return FieldDescriptor(
            source_name=self.name,
            display_name=self.display_name,
            value_type=ValueType[self.type],
            nullable=self.nullable,
            parameters=tuple(p.to_descriptor() for p in self.parameters),
            object_type_ref=self.object_type,
            item_type=ValueType[self.item_type],
        )


class TypeEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    operation_name: str = Field(min_length=1)
    kind: KindName = "OBJECT"
    id: str | None = None
    base: str | None = None
    fields: list[FieldEntry] = Field(default_factory=list)

    @field_validator("operation_name")
    @classmethod
    def validate_operation_name(cls, v: str) -> str:
        """Reject whitespace-only names, which min_length lets through."""
        return _not_blank(v)

    def to_descriptor(self) -> TypeDescriptor:
        return TypeDescriptor(
            operation_name=self.operation_name,
            kind=SchemaKind[self.kind],
            fields=tuple(f.to_descriptor() for f in self.fields),
            base_type_ref=self.base,
            type_id=self.id or "",
        )


class Manifest(BaseModel):
    """Top-level manifest document."""
    model_config = ConfigDict(extra="forbid")

    types: list[TypeEntry] = Field(default_factory=list)

    def to_descriptors(self) -> list[TypeDescriptor]:
        return [t.to_descriptor() for t in self.types]


def parse_manifest(text: str) -> list[TypeDescriptor]:
    """Parse manifest JSON into descriptors, in manifest order.

    Raises:
        pydantic.ValidationError: if the JSON is malformed or does not match
    """
    return Manifest.model_validate_json(text).to_descriptors()


def load_manifest(path: str | Path) -> list[TypeDescriptor]:
    """Load a manifest file."""
    return parse_manifest(Path(path).read_text())
