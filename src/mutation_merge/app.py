"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from mutation_merge.adapters.graphql import GraphQLDocumentCodec, load_schema
from mutation_merge.adapters.listeners import InMemoryListenerRegistry
from mutation_merge.domain.merging import MutationDispatcher, StringSetMerger

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from mutation_merge.config import MergeConfig
    from mutation_merge.domain.ports import DocumentCodec, ListenerRegistry
    from mutation_merge.domain.schema import SchemaDescriptor


log = getLogger(__name__)

DEFAULT_MUTATION_NAME = "mutation"


def build_dispatcher(
    schema: SchemaDescriptor,
    *,
    registry: ListenerRegistry | None = None,
    codec: DocumentCodec | None = None,
) -> MutationDispatcher:
    """Wire a dispatcher with the graphql-core codec and an in-memory registry by default."""

    return MutationDispatcher(
        listeners=registry or InMemoryListenerRegistry(),
        schema=schema,
        merger=StringSetMerger(codec=codec or GraphQLDocumentCodec()),
    )


def merge_mutation_documents(
    documents: Sequence[str],
    schema: SchemaDescriptor,
    *,
    mutation_name: str = DEFAULT_MUTATION_NAME,
    codec: DocumentCodec | None = None,
) -> str:
    """Merge ``documents`` as if each had been registered by its own component."""

    registry = InMemoryListenerRegistry()
    component_ids: list[int] = []
    for index, document in enumerate(documents):
        registry.register(mutation_name, index, document)
        component_ids.append(index)

    dispatcher = build_dispatcher(schema, registry=registry, codec=codec)
    return dispatcher.create_mutation_string(mutation_name, component_ids)


def merge_mutation_files(
    paths: Sequence[Path],
    config: MergeConfig,
    *,
    mutation_name: str = DEFAULT_MUTATION_NAME,
) -> str:
    """Load the configured schema and merge the mutation documents stored in ``paths``."""

    schema_path = config.require_schema_path()
    schema = load_schema(schema_path)
    documents = [path.read_text(encoding="utf-8") for path in paths]
    log.info(
        "Merging %s documents for %s using schema %s",
        len(documents),
        mutation_name,
        schema_path,
    )
    merged = merge_mutation_documents(documents, schema, mutation_name=mutation_name)
    log.info("Finished merge for %s", mutation_name)
    return merged
