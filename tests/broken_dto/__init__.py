"""A DTO package whose decorator fails at import time."""

from gql_sdlgen.core.annotations import graphql_schema


@graphql_schema("")
class Nameless:
    pass
