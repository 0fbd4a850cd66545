"""Annotated DTOs used by the discovery and CLI tests."""
