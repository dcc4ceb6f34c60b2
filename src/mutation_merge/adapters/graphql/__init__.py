"""Public interface for the graphql-core adapter."""

from __future__ import annotations

from .codec import GraphQLDocumentCodec
from .introspection import IntrospectionResponse, describe_introspection
from .schema import SchemaLoadError, describe_schema, load_schema, schema_from_sdl
from .translator import document_from_ast, document_to_ast

__all__ = [
    "GraphQLDocumentCodec",
    "IntrospectionResponse",
    "SchemaLoadError",
    "describe_introspection",
    "describe_schema",
    "document_from_ast",
    "document_to_ast",
    "load_schema",
    "schema_from_sdl",
]
