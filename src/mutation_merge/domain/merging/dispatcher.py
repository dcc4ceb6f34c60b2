"""Entry point combining the mutations requested by several components.

Each component registers the mutation document it wants for a mutation name.
When a mutation fires for a group of components, ``create_mutation_string``
returns the single document to send, doing as little work as possible:

1. one component: its document, untouched
2. every component asked for the same document: that document, untouched
3. the same set of distinct documents as last time: the cached merge
4. otherwise: a fresh merge, which replaces the cache slot for that name

The dispatcher is not thread-safe. Concurrent callers for one mutation name
must serialise; an unserialised race only recomputes the same result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from mutation_merge.domain.ports import UnknownListenerError

from .cache import MutationCache
from .driver import MutationStringSet

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from mutation_merge.domain.ports import ComponentId, ListenerRegistry, MutationListener
    from mutation_merge.domain.schema import SchemaDescriptor

    from .driver import StringSetMerger


log = getLogger(__name__)


@dataclass(slots=True)
class MutationDispatcher:
    listeners: ListenerRegistry
    schema: SchemaDescriptor
    merger: StringSetMerger
    cache: MutationCache = field(default_factory=MutationCache)

    def create_mutation_string(
        self,
        mutation_name: str,
        component_ids: Sequence[ComponentId],
    ) -> str:
        """Return one mutation document covering every component in ``component_ids``."""

        if not component_ids:
            raise ValueError(f"No components requested mutation {mutation_name}")
        listener_map = self.listeners.listeners_for(mutation_name)

        if len(component_ids) == 1:
            log.debug("Single component for %s, skipping merge", mutation_name)
            return _listener(listener_map, mutation_name, component_ids[0]).mutation

        string_set = make_mutation_string_set(listener_map, mutation_name, component_ids)
        if len(string_set) == 1:
            log.debug(
                "%s components share one document for %s, skipping merge",
                len(component_ids),
                mutation_name,
            )
            return string_set.strings[0]

        cached = self.cache.lookup(mutation_name, string_set)
        if cached is not None:
            log.debug("Cache hit for %s (%s documents)", mutation_name, len(string_set))
            return cached

        log.debug("Cache miss for %s, merging %s documents", mutation_name, len(string_set))
        full_mutation = self.merger.merge(string_set, self.schema)
        self.cache.store(mutation_name, string_set, full_mutation)
        return full_mutation

    def invalidate(self, mutation_name: str | None = None) -> None:
        self.cache.invalidate(mutation_name)

    def replace_schema(self, schema: SchemaDescriptor) -> None:
        """Swap the schema; cached merges were typed against the old one."""

        self.schema = schema
        self.cache.invalidate()


def make_mutation_string_set(
    listener_map: Mapping[ComponentId, MutationListener],
    mutation_name: str,
    component_ids: Sequence[ComponentId],
) -> MutationStringSet:
    return MutationStringSet.of(
        _listener(listener_map, mutation_name, component_id).mutation
        for component_id in component_ids
    )


def _listener(
    listener_map: Mapping[ComponentId, MutationListener],
    mutation_name: str,
    component_id: ComponentId,
) -> MutationListener:
    listener = listener_map.get(component_id)
    if listener is None:
        raise UnknownListenerError(mutation_name, component_id)
    return listener
