from __future__ import annotations

import pytest

from mutation_merge.adapters.listeners import InMemoryListenerRegistry
from mutation_merge.domain.ports import ListenerRegistry, UnknownListenerError


def test_registry_maps_components_to_documents(registry: InMemoryListenerRegistry) -> None:
    registry.register("createX", "a", "mutation { createX { id } }", optimistic=True)
    registry.register("createX", "b", "mutation { createX { content } }")

    listeners = registry.listeners_for("createX")

    assert isinstance(registry, ListenerRegistry)
    assert listeners["a"].mutation == "mutation { createX { id } }"
    assert listeners["a"].extras == {"optimistic": True}
    assert set(listeners) == {"a", "b"}


def test_registering_again_replaces_the_document(registry: InMemoryListenerRegistry) -> None:
    registry.register("createX", "a", "mutation { createX { id } }")
    registry.register("createX", "a", "mutation { createX { content } }")

    assert registry.listeners_for("createX")["a"].mutation == "mutation { createX { content } }"


def test_unregister_drops_empty_mutations(registry: InMemoryListenerRegistry) -> None:
    registry.register("createX", "a", "mutation { createX { id } }")

    registry.unregister("createX", "a")

    assert registry.mutation_names() == ()
    with pytest.raises(UnknownListenerError, match="createX"):
        registry.listeners_for("createX")
    with pytest.raises(UnknownListenerError):
        registry.unregister("createX", "a")


def test_registries_do_not_share_listeners() -> None:
    first = InMemoryListenerRegistry()
    second = InMemoryListenerRegistry()

    first.register("createX", "a", "mutation { createX { id } }")

    assert first.mutation_names() == ("createX",)
    with pytest.raises(UnknownListenerError):
        second.listeners_for("createX")
