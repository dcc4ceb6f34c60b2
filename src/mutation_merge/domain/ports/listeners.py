"""Ports for looking up which mutation document each component registered."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Protocol, TypeAlias, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

ComponentId: TypeAlias = Hashable


class UnknownListenerError(LookupError):
    """Raised when a mutation name or component id has no registered listener."""

    def __init__(self, mutation_name: str, component_id: ComponentId | None = None) -> None:
        self.mutation_name = mutation_name
        self.component_id = component_id
        if component_id is None:
            message = f"No listeners registered for mutation {mutation_name}"
        else:
            message = f"Component {component_id!r} is not listening to mutation {mutation_name}"
        super().__init__(message)


@runtime_checkable
class MutationListener(Protocol):
    """What one component asked a mutation to return."""

    @property
    def mutation(self) -> str: ...


@runtime_checkable
class ListenerRegistry(Protocol):
    """Read-only view of the listeners registered per mutation name."""

    def listeners_for(self, mutation_name: str) -> Mapping[ComponentId, MutationListener]:
        """Return the listener map for ``mutation_name`` or raise ``UnknownListenerError``."""
        ...


__all__ = ["ComponentId", "ListenerRegistry", "MutationListener", "UnknownListenerError"]
