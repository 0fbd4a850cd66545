from typing import Annotated

from gql_sdlgen.core.annotations import GraphQLField, GraphQLFieldParameter, graphql_schema
from gql_sdlgen.core.descriptors import ValueType


@graphql_schema("Unnamed")
class UnnamedParameter:
    search: Annotated[str, GraphQLField(parameters=(GraphQLFieldParameter(""),))]


@graphql_schema("Nested")
class NestedList:
    grid: Annotated[list, GraphQLField(field_type=ValueType.LIST, item_type=ValueType.LIST)]


@graphql_schema("Tail")
class Tail:
    done: Annotated[bool, GraphQLField(field_type=ValueType.BOOLEAN)]
