"""Domain port definitions for adapters."""

from __future__ import annotations

from .documents import DocumentCodec
from .listeners import ComponentId, ListenerRegistry, MutationListener, UnknownListenerError

__all__ = [
    "ComponentId",
    "DocumentCodec",
    "ListenerRegistry",
    "MutationListener",
    "UnknownListenerError",
]
