from typing import Annotated

from gql_sdlgen.core.annotations import GraphQLField, GraphQLFieldParameter, graphql_schema
from gql_sdlgen.core.descriptors import SchemaKind, ValueType

from ..docs import Doc, DocType


@graphql_schema("DocFilter", schema_type=SchemaKind.INPUT)
class DocFilter:
    title: Annotated[str | None, GraphQLField()]
    kind: Annotated[DocType, GraphQLField(field_type=ValueType.OBJECT)]


@graphql_schema("DocMutation", schema_type=SchemaKind.MUTATION)
class DocMutation:
    addDoc: Annotated[Doc, GraphQLField(
        field_type=ValueType.OBJECT,
        nullable=False,
        parameters=(
            GraphQLFieldParameter("filter", param_type=ValueType.OBJECT, object_class=DocFilter, nullable=False),
        ),
    )]


@graphql_schema("ExtraQuery", schema_type=SchemaKind.QUERY)
class ExtraQuery:
    ping: Annotated[bool, GraphQLField(field_type=ValueType.BOOLEAN)]
