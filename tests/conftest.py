from __future__ import annotations

import pytest

from mutation_merge.adapters.graphql import GraphQLDocumentCodec, schema_from_sdl
from mutation_merge.adapters.listeners import InMemoryListenerRegistry
from mutation_merge.domain.schema import SchemaDescriptor
from tests.support.documents import SCHEMA_SDL, CountingCodec


@pytest.fixture(scope="session")
def schema() -> SchemaDescriptor:
    return schema_from_sdl(SCHEMA_SDL)


@pytest.fixture
def codec() -> GraphQLDocumentCodec:
    return GraphQLDocumentCodec()


@pytest.fixture
def counting_codec() -> CountingCodec:
    return CountingCodec()


@pytest.fixture
def registry() -> InMemoryListenerRegistry:
    return InMemoryListenerRegistry()
