from __future__ import annotations

import pytest

from mutation_merge.adapters.graphql import GraphQLDocumentCodec
from mutation_merge.domain.merging import (
    MergeConflictError,
    MutationStringSet,
    StringSetMerger,
    merge_mutation_documents,
)
from mutation_merge.domain.schema import SchemaDescriptor
from tests.support.documents import CountingCodec, normalize

FIRST = "mutation M($a: Int) { m(arg: $a) { x } }"
SECOND = 'mutation M { m(arg: "lit") { y } }'


def test_string_set_collapses_duplicates_in_first_seen_order() -> None:
    string_set = MutationStringSet.of([SECOND, FIRST, SECOND])

    assert string_set.strings == (SECOND, FIRST)
    assert len(string_set) == 2
    assert FIRST in string_set


def test_string_set_equality_ignores_order() -> None:
    forward = MutationStringSet.of([FIRST, SECOND])
    backward = MutationStringSet.of([SECOND, FIRST])

    assert forward == backward
    assert hash(forward) == hash(backward)
    assert forward != MutationStringSet.of([FIRST])


def test_merger_uses_first_string_as_base(schema: SchemaDescriptor) -> None:
    merger = StringSetMerger(codec=GraphQLDocumentCodec())

    merged = merger.merge(MutationStringSet.of([FIRST, SECOND]), schema)

    assert merged == normalize("mutation M($a: Int) { m(arg: $a) { x y } }")


def test_merger_first_wins_depends_on_base(schema: SchemaDescriptor) -> None:
    merger = StringSetMerger(codec=GraphQLDocumentCodec())

    merged = merger.merge(MutationStringSet.of([SECOND, FIRST]), schema)

    assert merged == normalize('mutation M { m(arg: "lit") { y x } }')


def test_merger_parses_each_string_once_and_prints_once(
    counting_codec: CountingCodec, schema: SchemaDescriptor
) -> None:
    merger = StringSetMerger(codec=counting_codec)
    string_set = MutationStringSet.of(
        [FIRST, SECOND, "mutation M { m(other: $o) { nested(depth: 2) { x } } }"]
    )

    merged = merger.merge(string_set, schema)

    assert counting_codec.parse_calls == 3
    assert counting_codec.print_calls == 1
    assert merged == normalize(
        "mutation M($a: Int, $o: String) "
        "{ m(arg: $a, other: $o) { x y nested(depth: 2) { x } } }"
    )


def test_base_root_arguments_get_variable_definitions(
    codec: GraphQLDocumentCodec, schema: SchemaDescriptor
) -> None:
    documents = [
        codec.parse("mutation { createX(name: $name) { id } }"),
        codec.parse("mutation { createX { content } }"),
    ]

    merged = merge_mutation_documents(documents, schema)

    assert merged is documents[0]
    assert codec.print(merged) == normalize(
        "mutation ($name: String) { createX(name: $name) { id content } }"
    )


def test_fragment_definitions_are_unioned_by_name(schema: SchemaDescriptor) -> None:
    merger = StringSetMerger(codec=GraphQLDocumentCodec())
    fragment = "fragment CommentBits on Comment { id }"

    merged = merger.merge(
        MutationStringSet.of(
            [
                f'mutation {{ createComment(postId: "1") {{ ...CommentBits }} }} {fragment}',
                f'mutation {{ createComment(postId: "1") {{ ...CommentBits content }} }} '
                f"{fragment}",
            ]
        ),
        schema,
    )

    assert merged == normalize(
        f'mutation {{ createComment(postId: "1") {{ ...CommentBits content }} }} {fragment}'
    )


def test_conflicting_root_fields_fail_the_whole_merge(schema: SchemaDescriptor) -> None:
    merger = StringSetMerger(codec=GraphQLDocumentCodec())

    with pytest.raises(MergeConflictError):
        merger.merge(
            MutationStringSet.of(
                ['mutation { createX(name: "a") { id } }', 'mutation { deleteY(id: "1") { ok } }']
            ),
            schema,
        )


def test_empty_document_list_is_rejected(schema: SchemaDescriptor) -> None:
    with pytest.raises(ValueError, match="empty"):
        merge_mutation_documents([], schema)
