"""Descriptors for the types that make up a generated schema.

This module defines immutable dataclasses describing schema types, their
fields and field parameters. They are built once by a discovery step
(package scanning or a JSON manifest) and only read during generation.

Cross references between types are plain string ids (``type_id``), resolved
against the batch being generated by :class:`~gql_sdlgen.core.registry.TypeRegistry`.
"""

from dataclasses import dataclass, field
from enum import Enum

from .diagnostics import DescriptorError


class SchemaKind(Enum):
    """Kind of a schema type, with the SDL keyword it is declared with."""
    QUERY = "query"
    MUTATION = "mutation"
    OBJECT = "type"
    INPUT = "input"
    INTERFACE = "interface"
    IMPLEMENTATION = "implementation"
    ENUM = "enum"

    @property
    def keyword(self) -> str:
        # Implementations are written as "<Name> implements <Base>" with no keyword
        if self is SchemaKind.IMPLEMENTATION:
            return ""
        return self.value

    @property
    def is_operation_root(self) -> bool:
        return self in (SchemaKind.QUERY, SchemaKind.MUTATION)


class ValueType(Enum):
    """Value type of a field or parameter."""
    STRING = "String"
    INT = "Int"
    FLOAT = "Float"
    BOOLEAN = "Boolean"
    ID = "ID"
    OBJECT = "object"
    LIST = "list"

    @property
    def token(self) -> str | None:
        """The SDL literal for scalar types, None for OBJECT and LIST."""
        if self in (ValueType.OBJECT, ValueType.LIST):
            return None
        return self.value


def _require_name(value: str | None, what: str) -> None:
    if not value or not value.strip():
        raise DescriptorError(f"{what} is required and must be non-empty")


@dataclass(frozen=True)
class ParameterDescriptor:
    """Represents an argument of a field."""
    name: str
    value_type: ValueType = ValueType.STRING
    object_type_ref: str | None = None
    nullable: bool = True
    # Element type when value_type is LIST
    item_type: ValueType = ValueType.STRING

    def __post_init__(self):
        _require_name(self.name, "Parameter name")
        if self.item_type is ValueType.LIST:
            raise DescriptorError(f"Parameter {self.name}: nested lists are not supported")

    @property
    def references_object(self) -> bool:
        return self.value_type is ValueType.OBJECT or (
            self.value_type is ValueType.LIST and self.item_type is ValueType.OBJECT
        )


@dataclass(frozen=True)
class FieldDescriptor:
    """Represents a field of a type, or a value of an enum."""
    source_name: str
    display_name: str | None = None
    value_type: ValueType = ValueType.STRING
    nullable: bool = True
    parameters: tuple[ParameterDescriptor, ...] = ()
    object_type_ref: str | None = None
    item_type: ValueType = ValueType.STRING

    def __post_init__(self):
        _require_name(self.source_name, "Field source name")
        if self.item_type is ValueType.LIST:
            raise DescriptorError(f"Field {self.source_name}: nested lists are not supported")
        object.__setattr__(self, "parameters", tuple(self.parameters))

    @property
    def key(self) -> str:
        """Name the field is written under."""
        return self.display_name or self.source_name

    @property
    def references_object(self) -> bool:
        """True if rendering this field requires resolving another type."""
        return self.value_type is ValueType.OBJECT or (
            self.value_type is ValueType.LIST and self.item_type is ValueType.OBJECT
        )


@dataclass(frozen=True)
class TypeDescriptor:
    """Represents one schema-bearing type.

    ``type_id`` is what other descriptors use to reference this one. It
    defaults to the operation name.
    """
    operation_name: str
    kind: SchemaKind = SchemaKind.OBJECT
    fields: tuple[FieldDescriptor, ...] = ()
    base_type_ref: str | None = None
    type_id: str = field(default="")

    def __post_init__(self):
        _require_name(self.operation_name, "Operation name")
        object.__setattr__(self, "fields", tuple(self.fields))
        if not self.type_id:
            object.__setattr__(self, "type_id", self.operation_name)
