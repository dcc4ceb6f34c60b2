"""Read-only schema descriptors consulted while merging mutation documents.

The merge engine never talks to a schema library directly. Adapters translate
whatever schema representation they hold (a ``graphql-core`` schema, an
introspection payload) into these descriptors, which only answer name lookups:
which type is the mutation root, which fields a type has, which arguments a
field accepts and what a field returns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable


TYPENAME_FIELD_NAME: Final[str] = "__typename"


class TypeRefKind(StrEnum):
    """Wrapper kinds of a type reference."""

    NAMED = "named"
    LIST = "list"
    NON_NULL = "non_null"


@dataclass(frozen=True, slots=True)
class TypeRef:
    """Possibly wrapped reference to a named type, e.g. ``[Int!]!``."""

    kind: TypeRefKind
    name: str | None = None
    of_type: TypeRef | None = None

    def __post_init__(self) -> None:
        if self.kind is TypeRefKind.NAMED:
            if not self.name:
                raise ValueError("Named type reference requires a name")
        elif self.of_type is None:
            raise ValueError(f"{self.kind} type reference requires an inner type")

    @classmethod
    def named(cls, name: str) -> TypeRef:
        return cls(kind=TypeRefKind.NAMED, name=name)

    @classmethod
    def list_of(cls, inner: TypeRef) -> TypeRef:
        return cls(kind=TypeRefKind.LIST, of_type=inner)

    @classmethod
    def non_null(cls, inner: TypeRef) -> TypeRef:
        return cls(kind=TypeRefKind.NON_NULL, of_type=inner)

    @property
    def root(self) -> TypeRef:
        """Innermost named reference with list/non-null wrappers stripped."""

        current = self
        while current.of_type is not None:
            current = current.of_type
        return current

    @property
    def named_type(self) -> str:
        name = self.root.name
        if name is None:
            raise ValueError("Named type reference requires a name")
        return name

    def __str__(self) -> str:
        if self.kind is TypeRefKind.NON_NULL:
            return f"{self.of_type}!"
        if self.kind is TypeRefKind.LIST:
            return f"[{self.of_type}]"
        return str(self.name)


@dataclass(frozen=True, slots=True)
class ArgumentDescriptor:
    name: str
    type: TypeRef


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """A field of a composite type: its return type and accepted arguments."""

    name: str
    type: TypeRef
    args: tuple[ArgumentDescriptor, ...] = ()

    def arg(self, name: str) -> ArgumentDescriptor | None:
        for descriptor in self.args:
            if descriptor.name == name:
                return descriptor
        return None


TYPENAME_FIELD: Final[FieldDescriptor] = FieldDescriptor(
    name=TYPENAME_FIELD_NAME,
    type=TypeRef.non_null(TypeRef.named("String")),
)


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """A named schema type.

    ``composite`` marks object, interface and union types, the ones a selection
    set can be written against. Unions have no fields of their own; scalars, enums
    and input objects have neither fields nor ``__typename``.
    """

    name: str
    fields: tuple[FieldDescriptor, ...] = ()
    composite: bool = False
    _fields_by_name: dict[str, FieldDescriptor] = field(
        init=False, repr=False, compare=False, default_factory=dict[str, FieldDescriptor]
    )

    def __post_init__(self) -> None:
        for descriptor in self.fields:
            self._fields_by_name.setdefault(descriptor.name, descriptor)

    def field_named(self, name: str) -> FieldDescriptor | None:
        """Return the field called ``name``; ``__typename`` exists on every composite type."""

        found = self._fields_by_name.get(name)
        if found is None and name == TYPENAME_FIELD_NAME and (self.composite or self.fields):
            return TYPENAME_FIELD
        return found


@dataclass(frozen=True, slots=True)
class SchemaDescriptor:
    """Lookup view over a whole schema."""

    mutation_type_name: str | None
    types: tuple[TypeDescriptor, ...] = ()
    _types_by_name: dict[str, TypeDescriptor] = field(
        init=False, repr=False, compare=False, default_factory=dict[str, TypeDescriptor]
    )

    def __post_init__(self) -> None:
        for descriptor in self.types:
            self._types_by_name.setdefault(descriptor.name, descriptor)

    @classmethod
    def from_types(
        cls,
        types: Iterable[TypeDescriptor],
        *,
        mutation_type_name: str | None = "Mutation",
    ) -> SchemaDescriptor:
        return cls(mutation_type_name=mutation_type_name, types=tuple(types))

    def type_named(self, name: str) -> TypeDescriptor | None:
        return self._types_by_name.get(name)

    @property
    def mutation_type(self) -> TypeDescriptor | None:
        if self.mutation_type_name is None:
            return None
        return self.type_named(self.mutation_type_name)
