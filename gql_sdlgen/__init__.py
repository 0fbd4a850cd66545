"""Generate GraphQL SDL from annotated Python types."""

__version__ = "0.1.0"
