from __future__ import annotations

import pytest

from mutation_merge.adapters.listeners import InMemoryListenerRegistry
from mutation_merge.domain.merging import (
    MergeConflictError,
    MutationDispatcher,
    StringSetMerger,
)
from mutation_merge.domain.ports import UnknownListenerError
from mutation_merge.domain.schema import SchemaDescriptor
from tests.support.documents import CountingCodec, normalize

ID_ONLY = 'mutation {\n  createComment(postId: "1") { id }\n}'
CONTENT = 'mutation { createComment(postId: "1") { content } }'
AUTHOR = 'mutation { createComment(postId: "1") { author { name } } }'


@pytest.fixture
def dispatcher(
    registry: InMemoryListenerRegistry,
    counting_codec: CountingCodec,
    schema: SchemaDescriptor,
) -> MutationDispatcher:
    registry.register("createComment", "comment-list", ID_ONLY)
    registry.register("createComment", "comment-count", ID_ONLY)
    registry.register("createComment", "comment-body", CONTENT)
    registry.register("createComment", "comment-author", AUTHOR)
    return MutationDispatcher(
        listeners=registry,
        schema=schema,
        merger=StringSetMerger(codec=counting_codec),
    )


def test_single_component_gets_its_raw_document(
    dispatcher: MutationDispatcher, counting_codec: CountingCodec
) -> None:
    result = dispatcher.create_mutation_string("createComment", ["comment-list"])

    assert result == ID_ONLY
    assert counting_codec.parse_calls == 0
    assert "createComment" not in dispatcher.cache


def test_identical_documents_skip_the_merge(
    dispatcher: MutationDispatcher, counting_codec: CountingCodec
) -> None:
    result = dispatcher.create_mutation_string("createComment", ["comment-list", "comment-count"])

    assert result == ID_ONLY
    assert counting_codec.parse_calls == 0
    assert "createComment" not in dispatcher.cache


def test_distinct_documents_are_merged_and_cached(
    dispatcher: MutationDispatcher, counting_codec: CountingCodec
) -> None:
    result = dispatcher.create_mutation_string(
        "createComment", ["comment-list", "comment-count", "comment-body"]
    )

    assert result == normalize('mutation { createComment(postId: "1") { id content } }')
    assert counting_codec.parse_calls == 2
    entry = dispatcher.cache.entry("createComment")
    assert entry is not None
    assert entry.full_mutation == result


def test_repeated_request_hits_the_cache(
    dispatcher: MutationDispatcher, counting_codec: CountingCodec
) -> None:
    first = dispatcher.create_mutation_string("createComment", ["comment-list", "comment-body"])
    second = dispatcher.create_mutation_string("createComment", ["comment-list", "comment-body"])

    assert first == second
    assert counting_codec.parse_calls == 2


def test_cache_identity_is_the_set_of_documents(
    dispatcher: MutationDispatcher, counting_codec: CountingCodec
) -> None:
    first = dispatcher.create_mutation_string("createComment", ["comment-list", "comment-body"])
    second = dispatcher.create_mutation_string(
        "createComment", ["comment-body", "comment-count", "comment-list"]
    )

    assert second == first
    assert counting_codec.parse_calls == 2


def test_new_set_replaces_the_cached_merge(
    dispatcher: MutationDispatcher, counting_codec: CountingCodec
) -> None:
    dispatcher.create_mutation_string("createComment", ["comment-list", "comment-body"])
    with_author = dispatcher.create_mutation_string(
        "createComment", ["comment-list", "comment-author"]
    )
    dispatcher.create_mutation_string("createComment", ["comment-list", "comment-body"])

    assert with_author == normalize(
        'mutation { createComment(postId: "1") { id author { name } } }'
    )
    assert counting_codec.parse_calls == 6
    assert len(dispatcher.cache) == 1


def test_failed_merge_leaves_cache_untouched(
    dispatcher: MutationDispatcher, registry: InMemoryListenerRegistry
) -> None:
    registry.register("createComment", "rogue", 'mutation { deleteY(id: "1") { ok } }')

    with pytest.raises(MergeConflictError):
        dispatcher.create_mutation_string("createComment", ["comment-list", "rogue"])

    assert "createComment" not in dispatcher.cache


def test_unknown_mutation_or_component_is_reported(dispatcher: MutationDispatcher) -> None:
    with pytest.raises(UnknownListenerError, match="deleteY"):
        dispatcher.create_mutation_string("deleteY", ["comment-list"])

    with pytest.raises(UnknownListenerError) as excinfo:
        dispatcher.create_mutation_string("createComment", ["comment-list", "ghost"])
    assert excinfo.value.component_id == "ghost"


def test_empty_component_list_is_rejected(dispatcher: MutationDispatcher) -> None:
    with pytest.raises(ValueError, match="No components"):
        dispatcher.create_mutation_string("createComment", [])


def test_replacing_schema_clears_cache(
    dispatcher: MutationDispatcher, schema: SchemaDescriptor
) -> None:
    dispatcher.create_mutation_string("createComment", ["comment-list", "comment-body"])

    dispatcher.replace_schema(schema)

    assert len(dispatcher.cache) == 0
