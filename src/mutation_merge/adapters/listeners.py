"""In-memory listener registry."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from mutation_merge.domain.ports import UnknownListenerError

if TYPE_CHECKING:
    from mutation_merge.domain.ports import ComponentId


@dataclass(frozen=True, slots=True)
class RegisteredListener:
    """Mutation document a component wants, plus whatever the caller attaches to it."""

    mutation: str
    extras: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(slots=True)
class InMemoryListenerRegistry:
    _listeners_by_mutation: dict[str, dict[ComponentId, RegisteredListener]] = field(
        default_factory=dict
    )

    def register(
        self,
        mutation_name: str,
        component_id: ComponentId,
        mutation: str,
        **extras: object,
    ) -> RegisteredListener:
        """Register (or replace) the document ``component_id`` wants for ``mutation_name``."""

        listener = RegisteredListener(mutation=mutation, extras=MappingProxyType(dict(extras)))
        self._listeners_by_mutation.setdefault(mutation_name, {})[component_id] = listener
        return listener

    def unregister(self, mutation_name: str, component_id: ComponentId) -> None:
        listeners = self._listeners_by_mutation.get(mutation_name)
        if listeners is None or component_id not in listeners:
            raise UnknownListenerError(mutation_name, component_id)
        del listeners[component_id]
        if not listeners:
            del self._listeners_by_mutation[mutation_name]

    def listeners_for(self, mutation_name: str) -> Mapping[ComponentId, RegisteredListener]:
        listeners = self._listeners_by_mutation.get(mutation_name)
        if listeners is None:
            raise UnknownListenerError(mutation_name)
        return MappingProxyType(listeners)

    def mutation_names(self) -> tuple[str, ...]:
        return tuple(self._listeners_by_mutation)
