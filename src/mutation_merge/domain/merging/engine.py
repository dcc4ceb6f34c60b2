"""Schema-aware union of two mutation trees.

``merge_into`` grows ``target`` in place with everything reachable from
``source``; ``source`` is only read. Fields are matched by name, level by
level, with the schema resolving the type of the next level. Inline fragments
and fragment spreads are never matched; one is appended unless an equal one
is already there. Every variable referenced by an argument that lands in
``target`` gets a definition in the variable bag, typed from the schema,
including arguments nested in inline fragments and in adopted fragment
definitions.

Argument conflicts are not resolved: when both trees pass the same argument
to the same field, the value already on ``target`` is kept and the other one
is dropped. Supporting both values would require aliasing the field per
requesting component.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mutation_merge.domain.document import (
    FieldSelection,
    InlineFragment,
    VariableDefinition,
    clone_selection,
)

from .errors import InvalidArgumentError, MergeConflictError, SchemaMismatchError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mutation_merge.domain.document import (
        Argument,
        MutationDocument,
        Selection,
        VariableDefinitionBag,
    )
    from mutation_merge.domain.schema import FieldDescriptor, SchemaDescriptor, TypeDescriptor


def resolve_root_field(schema: SchemaDescriptor, field_name: str) -> FieldDescriptor:
    """Return the mutation root field called ``field_name``."""

    mutation_type = schema.mutation_type
    if mutation_type is None:
        raise SchemaMismatchError(
            "Schema does not define a mutation type",
            type_name=schema.mutation_type_name,
        )
    field = mutation_type.field_named(field_name)
    if field is None:
        raise SchemaMismatchError(
            f"Mutation {field_name} is not defined on type {mutation_type.name}",
            type_name=mutation_type.name,
            field_name=field_name,
        )
    return field


def resolve_type(schema: SchemaDescriptor, type_name: str) -> TypeDescriptor:
    found = schema.type_named(type_name)
    if found is None:
        raise SchemaMismatchError(
            f"Type {type_name} is not defined in the schema",
            type_name=type_name,
        )
    return found


def resolve_field(schema: SchemaDescriptor, type_name: str, field_name: str) -> FieldDescriptor:
    """Return the descriptor of ``field_name`` selected on ``type_name``."""

    field = resolve_type(schema, type_name).field_named(field_name)
    if field is None:
        raise SchemaMismatchError(
            f"Field {field_name} is not defined on type {type_name}",
            type_name=type_name,
            field_name=field_name,
        )
    return field


def resolve_child_field(
    schema: SchemaDescriptor,
    parent: FieldDescriptor,
    field_name: str,
) -> FieldDescriptor:
    """Return the descriptor of ``field_name`` on the type ``parent`` returns."""

    return resolve_field(schema, parent.type.named_type, field_name)


def make_variable_definition(
    variable_name: str,
    argument_name: str,
    field: FieldDescriptor,
) -> VariableDefinition:
    argument = field.arg(argument_name)
    if argument is None:
        raise InvalidArgumentError(argument=argument_name, field=field.name)
    return VariableDefinition(name=variable_name, type=argument.type.root)


def reconcile_arguments(
    bag: VariableDefinitionBag,
    arguments: Iterable[Argument],
    field: FieldDescriptor,
) -> None:
    """Make sure every variable-valued argument has a definition in ``bag``."""

    for argument in arguments:
        variable = argument.variable
        if variable is None or variable in bag:
            continue
        bag.add(make_variable_definition(variable, argument.name, field))


def reconcile_subtree(
    selection: FieldSelection,
    bag: VariableDefinitionBag,
    field: FieldDescriptor,
    schema: SchemaDescriptor,
) -> None:
    """Reconcile the arguments of ``selection`` and of every field below it."""

    reconcile_arguments(bag, selection.arguments, field)
    if selection.selections is not None:
        reconcile_selections(selection.selections, bag, field.type.named_type, schema)


def reconcile_selections(
    selections: Iterable[Selection],
    bag: VariableDefinitionBag,
    type_name: str,
    schema: SchemaDescriptor,
) -> None:
    """Reconcile ``selections`` written against ``type_name``.

    Inline fragments switch to their type condition. Spreads are skipped:
    their fragment definition is reconciled when it joins the document.
    """

    for selection in selections:
        if isinstance(selection, FieldSelection):
            child_field = resolve_field(schema, type_name, selection.name)
            reconcile_subtree(selection, bag, child_field, schema)
        elif isinstance(selection, InlineFragment):
            fragment_type = selection.type_condition or type_name
            resolve_type(schema, fragment_type)
            reconcile_selections(selection.selections, bag, fragment_type, schema)


def merge_documents(
    target: MutationDocument,
    source: MutationDocument,
    schema: SchemaDescriptor,
    *,
    root_field: FieldDescriptor | None = None,
) -> None:
    """Fold ``source`` into ``target``, collecting variables in ``target.variables``."""

    if source.root_field_name != target.root_field_name:
        raise MergeConflictError(
            target_field=target.root_field_name,
            source_field=source.root_field_name,
        )
    field = root_field or resolve_root_field(schema, target.root_field_name)
    merge_into(target.root, source.root, target.variables, field, schema)
    for name, fragment in source.fragments.items():
        # first definition of a name wins
        if name in target.fragments:
            continue
        adopted = fragment.clone()
        target.fragments[name] = adopted
        resolve_type(schema, adopted.type_condition)
        reconcile_selections(adopted.selections, target.variables, adopted.type_condition, schema)


def merge_into(
    target: FieldSelection,
    source: FieldSelection,
    bag: VariableDefinitionBag,
    field: FieldDescriptor,
    schema: SchemaDescriptor,
) -> None:
    """Union ``source`` into ``target``; ``field`` describes both selections."""

    _merge_selections(target, source, bag, field, schema)
    _merge_arguments(target, source, bag, field)


def _merge_selections(
    target: FieldSelection,
    source: FieldSelection,
    bag: VariableDefinitionBag,
    field: FieldDescriptor,
    schema: SchemaDescriptor,
) -> None:
    if source.selections is None:
        return

    type_name = field.type.named_type
    if target.selections is None:
        target.selections = [clone_selection(selection) for selection in source.selections]
        reconcile_selections(target.selections, bag, type_name, schema)
        return

    for selection in source.selections:
        if not isinstance(selection, FieldSelection):
            if selection not in target.selections:
                adopted = clone_selection(selection)
                target.selections.append(adopted)
                reconcile_selections((adopted,), bag, type_name, schema)
            continue

        child_field = resolve_field(schema, type_name, selection.name)
        matching = target.find(selection.name)
        if matching is None:
            adopted_field = selection.clone()
            target.selections.append(adopted_field)
            reconcile_subtree(adopted_field, bag, child_field, schema)
        else:
            merge_into(matching, selection, bag, child_field, schema)


def _merge_arguments(
    target: FieldSelection,
    source: FieldSelection,
    bag: VariableDefinitionBag,
    field: FieldDescriptor,
) -> None:
    if not target.arguments:
        target.arguments = list(source.arguments)
        reconcile_arguments(bag, target.arguments, field)
        return

    for argument in source.arguments:
        # first value wins; see module docstring
        if target.argument(argument.name) is None:
            target.arguments.append(argument)
            reconcile_arguments(bag, (argument,), field)
