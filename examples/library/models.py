from enum import Enum
from typing import Annotated

from gql_sdlgen.core import GraphQLField, GraphQLFieldParameter, SchemaKind, ValueType, graphql_schema


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


@graphql_schema("Author")
class Author:
    id: Annotated[str, GraphQLField(field_type=ValueType.ID, nullable=False)]
    name: Annotated[str, GraphQLField()]


@graphql_schema("Book", schema_type=SchemaKind.IMPLEMENTATION, base=Author)
class Book:
    title: Annotated[str, GraphQLField(nullable=False)]
    author: Annotated[Author, GraphQLField(field_type=ValueType.OBJECT)]
    kind: Annotated[DocType, GraphQLField(field_type=ValueType.OBJECT, field_name="docType")]
