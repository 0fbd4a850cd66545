"""Core modules for GraphQL SDL generation."""

from .annotations import (
    GraphQLField,
    GraphQLFieldParameter,
    SchemaMarker,
    get_schema_marker,
    graphql_schema,
)
from .descriptors import (
    FieldDescriptor,
    ParameterDescriptor,
    SchemaKind,
    TypeDescriptor,
    ValueType,
)
from .diagnostics import DescriptorError, Diagnostic, Reason, Severity
from .discovery import DiscoveryResult, describe_class, describe_classes, discover
from .generator import GenerationResult, SchemaGenerator, generate_schema
from .hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .manifest import load_manifest, parse_manifest
from .registry import TypeRegistry
from .tokens import SDLToken

__all__ = [
    # Descriptors
    "FieldDescriptor",
    "ParameterDescriptor",
    "SchemaKind",
    "TypeDescriptor",
    "ValueType",
    # Diagnostics
    "DescriptorError",
    "Diagnostic",
    "Reason",
    "Severity",
    # Registry and tokens
    "TypeRegistry",
    "SDLToken",
    # Generator
    "GenerationResult",
    "SchemaGenerator",
    "generate_schema",
    # Hooks
    "AddHeaderHook",
    "FilterTypesHook",
    "HookRunner",
    "PostGenerateHook",
    "PreGenerateHook",
    # Discovery
    "GraphQLField",
    "GraphQLFieldParameter",
    "SchemaMarker",
    "get_schema_marker",
    "graphql_schema",
    "DiscoveryResult",
    "describe_class",
    "describe_classes",
    "discover",
    # Manifest
    "load_manifest",
    "parse_manifest",
]
