"""Translate between graphql-core syntax trees and mutation document trees."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from graphql.language import (
    ArgumentNode,
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    ListTypeNode,
    NamedTypeNode,
    NameNode,
    NonNullTypeNode,
    OperationDefinitionNode,
    OperationType,
    SelectionSetNode,
    VariableDefinitionNode,
    VariableNode,
)

from mutation_merge.domain.document import (
    Argument,
    FieldSelection,
    FragmentDefinition,
    FragmentSpread,
    InlineFragment,
    MutationDocument,
    VariableDefinition,
    VariableDefinitionBag,
    VariableReference,
)
from mutation_merge.domain.merging.errors import InvalidDocumentError
from mutation_merge.domain.schema import TypeRef, TypeRefKind

if TYPE_CHECKING:
    from graphql.language import (
        DirectiveNode,
        SelectionNode,
        TypeNode,
        ValueNode,
    )

    from mutation_merge.domain.document import Selection


def document_from_ast(document: DocumentNode) -> MutationDocument:
    """Build a mutation tree from a parsed single-mutation document."""

    operations: list[OperationDefinitionNode] = []
    fragments: dict[str, FragmentDefinition] = {}
    for definition in document.definitions:
        if isinstance(definition, OperationDefinitionNode):
            operations.append(definition)
        elif isinstance(definition, FragmentDefinitionNode):
            fragments.setdefault(definition.name.value, _fragment_from_ast(definition))
        else:
            raise InvalidDocumentError(
                f"Unexpected {definition.kind} in a mutation document"
            )

    if len(operations) != 1:
        raise InvalidDocumentError(
            f"Expected exactly one operation definition, found {len(operations)}"
        )
    operation = operations[0]
    if operation.operation is not OperationType.MUTATION:
        raise InvalidDocumentError(
            f"Expected a mutation operation, found {operation.operation.value}"
        )

    selections = operation.selection_set.selections
    if len(selections) != 1 or not isinstance(selections[0], FieldNode):
        raise InvalidDocumentError("A mutation document must select exactly one root field")

    return MutationDocument(
        root=_field_from_ast(selections[0]),
        operation_name=operation.name.value if operation.name else None,
        variables=VariableDefinitionBag(
            _variable_from_ast(node) for node in operation.variable_definitions or ()
        ),
        directives=tuple(operation.directives or ()),
        fragments=fragments,
    )


def document_to_ast(document: MutationDocument) -> DocumentNode:
    operation = OperationDefinitionNode(
        operation=OperationType.MUTATION,
        name=NameNode(value=document.operation_name) if document.operation_name else None,
        variable_definitions=tuple(_variable_to_ast(v) for v in document.variables),
        directives=cast("tuple[DirectiveNode, ...]", document.directives),
        selection_set=SelectionSetNode(selections=(_field_to_ast(document.root),)),
    )
    fragments = tuple(_fragment_to_ast(fragment) for fragment in document.fragments.values())
    return DocumentNode(definitions=(operation, *fragments))


def type_ref_from_ast(node: TypeNode) -> TypeRef:
    if isinstance(node, NonNullTypeNode):
        return TypeRef.non_null(type_ref_from_ast(node.type))
    if isinstance(node, ListTypeNode):
        return TypeRef.list_of(type_ref_from_ast(node.type))
    return TypeRef.named(cast(NamedTypeNode, node).name.value)


def type_ref_to_ast(type_ref: TypeRef) -> TypeNode:
    if type_ref.kind is TypeRefKind.NAMED or type_ref.of_type is None:
        return NamedTypeNode(name=NameNode(value=type_ref.named_type))
    inner = type_ref_to_ast(type_ref.of_type)
    if type_ref.kind is TypeRefKind.LIST:
        return ListTypeNode(type=inner)
    return NonNullTypeNode(type=cast("NamedTypeNode | ListTypeNode", inner))


def _field_from_ast(node: FieldNode) -> FieldSelection:
    return FieldSelection(
        name=node.name.value,
        alias=node.alias.value if node.alias else None,
        arguments=[
            Argument(name=argument.name.value, value=_value_from_ast(argument.value))
            for argument in node.arguments or ()
        ],
        selections=(
            None if node.selection_set is None else _selections_from_ast(node.selection_set)
        ),
        directives=tuple(node.directives or ()),
    )


def _fragment_from_ast(node: FragmentDefinitionNode) -> FragmentDefinition:
    if node.variable_definitions:
        raise InvalidDocumentError(
            f"Fragment {node.name.value} declares variables, which is not supported"
        )
    return FragmentDefinition(
        name=node.name.value,
        type_condition=node.type_condition.name.value,
        selections=_selections_from_ast(node.selection_set),
        directives=tuple(node.directives or ()),
    )


def _selections_from_ast(node: SelectionSetNode) -> list[Selection]:
    return [_selection_from_ast(child) for child in node.selections]


def _selection_from_ast(node: SelectionNode) -> Selection:
    if isinstance(node, FieldNode):
        return _field_from_ast(node)
    if isinstance(node, InlineFragmentNode):
        return InlineFragment(
            type_condition=node.type_condition.name.value if node.type_condition else None,
            selections=_selections_from_ast(node.selection_set),
            directives=tuple(node.directives or ()),
        )
    if isinstance(node, FragmentSpreadNode):
        return FragmentSpread(name=node.name.value, directives=tuple(node.directives or ()))
    raise InvalidDocumentError(f"Unexpected {node.kind} in a selection set")


def _value_from_ast(node: ValueNode) -> object:
    if isinstance(node, VariableNode):
        return VariableReference(name=node.name.value)
    return node


def _variable_from_ast(node: VariableDefinitionNode) -> VariableDefinition:
    return VariableDefinition(
        name=node.variable.name.value,
        type=type_ref_from_ast(node.type),
        default_value=node.default_value,
        directives=tuple(node.directives or ()),
    )


def _field_to_ast(selection: FieldSelection) -> FieldNode:
    return FieldNode(
        alias=NameNode(value=selection.alias) if selection.alias else None,
        name=NameNode(value=selection.name),
        arguments=tuple(
            ArgumentNode(name=NameNode(value=argument.name), value=_value_to_ast(argument.value))
            for argument in selection.arguments
        ),
        directives=cast("tuple[DirectiveNode, ...]", selection.directives),
        selection_set=(
            None if selection.selections is None else _selections_to_ast(selection.selections)
        ),
    )


def _fragment_to_ast(fragment: FragmentDefinition) -> FragmentDefinitionNode:
    return FragmentDefinitionNode(
        name=NameNode(value=fragment.name),
        variable_definitions=(),
        type_condition=NamedTypeNode(name=NameNode(value=fragment.type_condition)),
        directives=cast("tuple[DirectiveNode, ...]", fragment.directives),
        selection_set=_selections_to_ast(fragment.selections),
    )


def _selections_to_ast(selections: list[Selection]) -> SelectionSetNode:
    return SelectionSetNode(selections=tuple(_selection_to_ast(child) for child in selections))


def _selection_to_ast(selection: Selection) -> SelectionNode:
    if isinstance(selection, FieldSelection):
        return _field_to_ast(selection)
    if isinstance(selection, InlineFragment):
        return InlineFragmentNode(
            type_condition=(
                NamedTypeNode(name=NameNode(value=selection.type_condition))
                if selection.type_condition
                else None
            ),
            directives=cast("tuple[DirectiveNode, ...]", selection.directives),
            selection_set=_selections_to_ast(selection.selections),
        )
    return FragmentSpreadNode(
        name=NameNode(value=selection.name),
        directives=cast("tuple[DirectiveNode, ...]", selection.directives),
    )


def _value_to_ast(value: object) -> ValueNode:
    if isinstance(value, VariableReference):
        return VariableNode(name=NameNode(value=value.name))
    return cast("ValueNode", value)


def _variable_to_ast(definition: VariableDefinition) -> VariableDefinitionNode:
    return VariableDefinitionNode(
        variable=VariableNode(name=NameNode(value=definition.name)),
        type=type_ref_to_ast(definition.type),
        default_value=cast("ValueNode | None", definition.default_value),
        directives=cast("tuple[DirectiveNode, ...]", definition.directives),
    )
