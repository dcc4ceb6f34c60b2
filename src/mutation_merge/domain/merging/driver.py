"""Merge a set of mutation document strings into one document string."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .engine import merge_documents, reconcile_arguments, resolve_root_field

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from mutation_merge.domain.document import MutationDocument
    from mutation_merge.domain.ports import DocumentCodec
    from mutation_merge.domain.schema import SchemaDescriptor


log = getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class MutationStringSet:
    """Distinct mutation document strings, in first-seen order.

    Equality and membership ignore order: two sets built from the same
    strings in a different order are the same cache key.
    """

    strings: tuple[str, ...] = ()

    @classmethod
    def of(cls, strings: Iterable[str]) -> MutationStringSet:
        return cls(strings=tuple(dict.fromkeys(strings)))

    def __len__(self) -> int:
        return len(self.strings)

    def __iter__(self) -> Iterator[str]:
        return iter(self.strings)

    def __contains__(self, value: object) -> bool:
        return value in self.strings

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MutationStringSet):
            return NotImplemented
        return self.same_members(other)

    def __hash__(self) -> int:
        return hash(frozenset(self.strings))

    def same_members(self, other: MutationStringSet) -> bool:
        return len(self) == len(other) and all(string in other for string in self)


@dataclass(slots=True)
class StringSetMerger:
    """Parse every string, fold the trees into the first one, print the result."""

    codec: DocumentCodec

    def merge(self, string_set: MutationStringSet, schema: SchemaDescriptor) -> str:
        documents = [self.codec.parse(text) for text in string_set]
        merged = merge_mutation_documents(documents, schema)
        return self.codec.print(merged)


def merge_mutation_documents(
    documents: list[MutationDocument],
    schema: SchemaDescriptor,
) -> MutationDocument:
    """Fold ``documents[1:]`` into ``documents[0]`` and return the mutated base."""

    if not documents:
        raise ValueError("Cannot merge an empty set of mutation documents")
    base, *rest = documents
    root_field = resolve_root_field(schema, base.root_field_name)
    reconcile_arguments(base.variables, base.root.arguments, root_field)

    for document in rest:
        merge_documents(base, document, schema, root_field=root_field)

    log.debug(
        "Merged %s documents for mutation %s into %s variable definitions",
        len(documents),
        base.root_field_name,
        len(base.variables),
    )
    return base
