"""Explicit mutable tree for one mutation operation.

Merging grows a *target* tree in place while reading a *source* tree. Parsed
syntax trees from the document library are translated into these nodes by an
adapter, so the merge code never depends on the parser's node classes.
Fields, inline fragments, fragment spreads and fragment definitions are
explicit nodes; argument literals and directives are carried as opaque values
and handed back to the printer untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .schema import TypeRef


@dataclass(frozen=True, slots=True)
class VariableReference:
    """Argument value ``$name``."""

    name: str


@dataclass(frozen=True, slots=True)
class Argument:
    name: str
    value: object

    @property
    def variable(self) -> str | None:
        """Name of the referenced variable when the value is ``$name``."""

        if isinstance(self.value, VariableReference):
            return self.value.name
        return None


@dataclass(frozen=True, slots=True)
class VariableDefinition:
    """Declaration ``$name: Type = default`` on the operation."""

    name: str
    type: TypeRef
    default_value: object | None = None
    directives: tuple[object, ...] = ()


class VariableDefinitionBag:
    """Ordered, append-only collection of variable definitions, unique by name."""

    __slots__ = ("_definitions",)

    def __init__(self, definitions: Iterable[VariableDefinition] = ()) -> None:
        self._definitions: dict[str, VariableDefinition] = {}
        for definition in definitions:
            self.add(definition)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[VariableDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        names = ", ".join(f"${name}" for name in self._definitions)
        return f"VariableDefinitionBag({names})"

    def get(self, name: str) -> VariableDefinition | None:
        return self._definitions.get(name)

    def add(self, definition: VariableDefinition) -> bool:
        """Append ``definition`` unless its name is already present.

        Returns ``True`` when the definition was added.
        """

        if definition.name in self._definitions:
            return False
        self._definitions[definition.name] = definition
        return True

    def names(self) -> tuple[str, ...]:
        return tuple(self._definitions)


@dataclass(frozen=True, slots=True)
class FragmentSpread:
    """``...Name``; the selections live in the document's fragment definitions."""

    name: str
    directives: tuple[object, ...] = ()


@dataclass(slots=True)
class InlineFragment:
    """``... on Type { ... }``; without a type condition it keeps the enclosing type."""

    type_condition: str | None = None
    selections: list[Selection] = field(default_factory=list)
    directives: tuple[object, ...] = ()

    def clone(self) -> InlineFragment:
        return InlineFragment(
            type_condition=self.type_condition,
            selections=[clone_selection(selection) for selection in self.selections],
            directives=self.directives,
        )


@dataclass(slots=True)
class FieldSelection:
    """One field invocation with its arguments and nested selections.

    ``selections is None`` means the field is a leaf in this document; an
    empty list is never produced by the translators.
    """

    name: str
    alias: str | None = None
    arguments: list[Argument] = field(default_factory=list[Argument])
    selections: list[Selection] | None = None
    directives: tuple[object, ...] = ()

    def find(self, name: str) -> FieldSelection | None:
        """Return the first child field selection called ``name``."""

        for selection in self.selections or ():
            if isinstance(selection, FieldSelection) and selection.name == name:
                return selection
        return None

    def argument(self, name: str) -> Argument | None:
        for argument in self.arguments:
            if argument.name == name:
                return argument
        return None

    def clone(self) -> FieldSelection:
        """Structural copy; arguments, spreads and opaque values are immutable and shared."""

        return FieldSelection(
            name=self.name,
            alias=self.alias,
            arguments=list(self.arguments),
            selections=(
                None
                if self.selections is None
                else [clone_selection(selection) for selection in self.selections]
            ),
            directives=self.directives,
        )


Selection: TypeAlias = FieldSelection | InlineFragment | FragmentSpread


def clone_selection(selection: Selection) -> Selection:
    if isinstance(selection, FragmentSpread):
        return selection
    return selection.clone()


@dataclass(slots=True)
class FragmentDefinition:
    """``fragment Name on Type { ... }`` declared next to the operation."""

    name: str
    type_condition: str
    selections: list[Selection] = field(default_factory=list)
    directives: tuple[object, ...] = ()

    def clone(self) -> FragmentDefinition:
        return FragmentDefinition(
            name=self.name,
            type_condition=self.type_condition,
            selections=[clone_selection(selection) for selection in self.selections],
            directives=self.directives,
        )


@dataclass(slots=True)
class MutationDocument:
    """A single mutation operation with exactly one root field selection."""

    root: FieldSelection
    operation_name: str | None = None
    variables: VariableDefinitionBag = field(default_factory=VariableDefinitionBag)
    directives: tuple[object, ...] = ()
    fragments: dict[str, FragmentDefinition] = field(
        default_factory=dict[str, FragmentDefinition]
    )

    @property
    def root_field_name(self) -> str:
        return self.root.name
