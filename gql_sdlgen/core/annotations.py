"""Declarative markers for Python classes that take part in a schema.

Example usage:
    from typing import Annotated

    from gql_sdlgen.core.annotations import GraphQLField, GraphQLFieldParameter, graphql_schema
    from gql_sdlgen.core.descriptors import SchemaKind, ValueType

    @graphql_schema("doc")
    class Doc:
        title: Annotated[str, GraphQLField()]
        url: Annotated[str, GraphQLField(
            nullable=False,
            parameters=(GraphQLFieldParameter("welcome"), GraphQLFieldParameter("test")),
        )]

    @graphql_schema("docType", schema_type=SchemaKind.ENUM)
    class DocType(Enum):
        MEDIA = "media"
        DOCUMENT = "document"
"""

from dataclasses import dataclass

from .descriptors import SchemaKind, ValueType
from .diagnostics import DescriptorError

SCHEMA_ATTR = "__graphql_schema__"


@dataclass(frozen=True)
class GraphQLFieldParameter:
    """Marks one argument of a field."""
    name: str
    param_type: ValueType = ValueType.STRING
    object_class: type | None = None
    nullable: bool = True
    item_type: ValueType = ValueType.STRING


@dataclass(frozen=True)
class GraphQLField:
    """Marks a class attribute as a schema field (used as Annotated metadata).

    ``object_class`` names the referenced class of OBJECT fields (and of LIST
    fields of objects). When left out it is taken from the attribute's
    own type hint.
    """
    field_type: ValueType = ValueType.STRING
    field_name: str = ""
    nullable: bool = True
    parameters: tuple[GraphQLFieldParameter, ...] = ()
    object_class: type | None = None
    item_type: ValueType | None = None

    def __post_init__(self):
        object.__setattr__(self, "parameters", tuple(self.parameters))


@dataclass(frozen=True)
class SchemaMarker:
    """Schema metadata attached to a class by :func:`graphql_schema`."""
    operation_name: str
    schema_type: SchemaKind = SchemaKind.OBJECT
    base: type | None = None


def graphql_schema(
    operation_name: str,
    schema_type: SchemaKind = SchemaKind.OBJECT,
    base: type | None = None,
):
    """Class decorator marking a class as a schema type.

    Raises:
        DescriptorError: if the operation name is empty
    """
    if not operation_name or not operation_name.strip():
        raise DescriptorError("Operation name is required and must be non-empty")
    marker = SchemaMarker(operation_name=operation_name, schema_type=schema_type, base=base)

    def decorator(cls):
        setattr(cls, SCHEMA_ATTR, marker)
        return cls

    return decorator


def get_schema_marker(cls: type) -> SchemaMarker | None:
    """Return the marker set on this class itself (markers are not inherited)."""
    return vars(cls).get(SCHEMA_ATTR)
