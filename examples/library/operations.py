from typing import Annotated

from gql_sdlgen.core import GraphQLField, GraphQLFieldParameter, SchemaKind, ValueType, graphql_schema

from .models import Author, Book, Doc


@graphql_schema("BookQueries", schema_type=SchemaKind.QUERY)
class BookQueries:
    books: Annotated[list[Book], GraphQLField(
        field_type=ValueType.LIST,
        nullable=False,
        parameters=(GraphQLFieldParameter("first", param_type=ValueType.INT),),
    )]
    author: Annotated[Author, GraphQLField(
        field_type=ValueType.OBJECT,
        parameters=(GraphQLFieldParameter("id", param_type=ValueType.ID, nullable=False),),
    )]


@graphql_schema("DocQueries", schema_type=SchemaKind.QUERY)
class DocQueries:
    docs: Annotated[list[Doc], GraphQLField(field_type=ValueType.LIST)]


@graphql_schema("BookMutations", schema_type=SchemaKind.MUTATION)
class BookMutations:
    renameBook: Annotated[Book, GraphQLField(
        field_type=ValueType.OBJECT,
        parameters=(
            GraphQLFieldParameter("id", param_type=ValueType.ID, nullable=False),
            GraphQLFieldParameter("title", nullable=False),
        ),
    )]
