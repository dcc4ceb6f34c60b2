"""Schema descriptors from graphql-core schemas, SDL text and schema files."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from graphql import (
    GraphQLError,
    GraphQLSchema,
    build_schema,
    is_composite_type,
    is_interface_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
)
from pydantic import ValidationError

from mutation_merge.domain.schema import (
    ArgumentDescriptor,
    FieldDescriptor,
    SchemaDescriptor,
    TypeDescriptor,
    TypeRef,
)

from .introspection import IntrospectionResponse, describe_introspection

if TYPE_CHECKING:
    from pathlib import Path

    from graphql import GraphQLField, GraphQLNamedType, GraphQLType


log = getLogger(__name__)


class SchemaLoadError(RuntimeError):
    """Raised when a schema file cannot be read or understood."""


def describe_schema(schema: GraphQLSchema) -> SchemaDescriptor:
    mutation_type = schema.mutation_type
    return SchemaDescriptor(
        mutation_type_name=mutation_type.name if mutation_type else None,
        types=tuple(_type_descriptor(named) for named in schema.type_map.values()),
    )


def schema_from_sdl(sdl: str) -> SchemaDescriptor:
    try:
        return describe_schema(build_schema(sdl))
    except GraphQLError as exc:
        raise SchemaLoadError(f"Invalid schema definition: {exc.message}") from exc
    except TypeError as exc:
        # build_schema reports SDL validation errors as TypeError
        raise SchemaLoadError(f"Invalid schema definition: {exc}") from exc


def load_schema(path: Path) -> SchemaDescriptor:
    """Load SDL, or an introspection result when the file ends in ``.json``."""

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaLoadError(f"Cannot read schema file {path}: {exc}") from exc

    if path.suffix.lower() == ".json":
        try:
            descriptor = describe_introspection(IntrospectionResponse.model_validate_json(text))
        except (ValidationError, ValueError) as exc:
            raise SchemaLoadError(f"Invalid introspection payload in {path}: {exc}") from exc
    else:
        descriptor = schema_from_sdl(text)

    log.debug(
        "Loaded schema from %s: %s types, mutation type %s",
        path,
        len(descriptor.types),
        descriptor.mutation_type_name,
    )
    return descriptor


def _type_descriptor(named: GraphQLNamedType) -> TypeDescriptor:
    if not (is_object_type(named) or is_interface_type(named)):
        return TypeDescriptor(name=named.name, composite=is_composite_type(named))
    fields: dict[str, GraphQLField] = named.fields  # type: ignore[attr-defined]
    return TypeDescriptor(
        name=named.name,
        composite=True,
        fields=tuple(
            FieldDescriptor(
                name=field_name,
                type=_type_ref(field.type),
                args=tuple(
                    ArgumentDescriptor(name=arg_name, type=_type_ref(arg.type))
                    for arg_name, arg in field.args.items()
                ),
            )
            for field_name, field in fields.items()
        ),
    )


def _type_ref(type_: GraphQLType) -> TypeRef:
    if is_non_null_type(type_):
        return TypeRef.non_null(_type_ref(type_.of_type))  # type: ignore[attr-defined]
    if is_list_type(type_):
        return TypeRef.list_of(_type_ref(type_.of_type))  # type: ignore[attr-defined]
    return TypeRef.named(type_.name)  # type: ignore[attr-defined]
