"""Pydantic models describing GraphQL introspection payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final, Literal, cast

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mutation_merge.domain.schema import (
    ArgumentDescriptor,
    FieldDescriptor,
    SchemaDescriptor,
    TypeDescriptor,
    TypeRef,
)

TypeKind = Literal[
    "SCALAR",
    "OBJECT",
    "INTERFACE",
    "UNION",
    "ENUM",
    "INPUT_OBJECT",
    "LIST",
    "NON_NULL",
]

COMPOSITE_KINDS: Final[frozenset[TypeKind]] = frozenset({"OBJECT", "INTERFACE", "UNION"})


class IntrospectionBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class TypeRefPayload(IntrospectionBaseModel):
    kind: TypeKind
    name: str | None = None
    of_type: TypeRefPayload | None = Field(default=None, alias="ofType")


class InputValuePayload(IntrospectionBaseModel):
    name: str
    type: TypeRefPayload


class FieldPayload(IntrospectionBaseModel):
    name: str
    type: TypeRefPayload
    args: list[InputValuePayload] = Field(default_factory=list[InputValuePayload])


class TypePayload(IntrospectionBaseModel):
    kind: TypeKind
    name: str
    fields: list[FieldPayload] | None = None


class RootTypePayload(IntrospectionBaseModel):
    name: str


class SchemaPayload(IntrospectionBaseModel):
    mutation_type: RootTypePayload | None = Field(default=None, alias="mutationType")
    types: list[TypePayload]


class IntrospectionResponse(IntrospectionBaseModel):
    """``__schema`` payload, optionally wrapped in a ``data`` envelope.

    A bare client schema (``{"mutationType": ..., "types": [...]}``) is
    accepted as well.
    """

    schema_: SchemaPayload = Field(alias="__schema")

    @model_validator(mode="before")
    @classmethod
    def _unwrap_envelope(cls, value: object) -> object:
        if not isinstance(value, Mapping):
            return value
        mapping_value = cast(Mapping[str, object], value)
        data = mapping_value.get("data")
        if isinstance(data, Mapping):
            mapping_value = cast(Mapping[str, object], data)
        if "__schema" not in mapping_value and "types" in mapping_value:
            return {"__schema": mapping_value}
        return mapping_value


def describe_introspection(
    payload: IntrospectionResponse | Mapping[str, object],
) -> SchemaDescriptor:
    """Build schema descriptors from an introspection payload."""

    response = (
        payload
        if isinstance(payload, IntrospectionResponse)
        else IntrospectionResponse.model_validate(payload)
    )
    schema = response.schema_
    return SchemaDescriptor(
        mutation_type_name=schema.mutation_type.name if schema.mutation_type else None,
        types=tuple(_type_descriptor(type_payload) for type_payload in schema.types),
    )


def _type_descriptor(payload: TypePayload) -> TypeDescriptor:
    return TypeDescriptor(
        name=payload.name,
        composite=payload.kind in COMPOSITE_KINDS,
        fields=tuple(
            FieldDescriptor(
                name=field.name,
                type=_type_ref(field.type),
                args=tuple(
                    ArgumentDescriptor(name=arg.name, type=_type_ref(arg.type))
                    for arg in field.args
                ),
            )
            for field in payload.fields or ()
        ),
    )


def _type_ref(payload: TypeRefPayload) -> TypeRef:
    if payload.kind in ("NON_NULL", "LIST"):
        if payload.of_type is None:
            raise ValueError(f"{payload.kind} type reference without ofType")
        inner = _type_ref(payload.of_type)
        return TypeRef.non_null(inner) if payload.kind == "NON_NULL" else TypeRef.list_of(inner)
    if payload.name is None:
        raise ValueError(f"{payload.kind} type reference without a name")
    return TypeRef.named(payload.name)
