"""Single-slot memo of merged mutations, one slot per mutation name."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .driver import MutationStringSet


@dataclass(frozen=True, slots=True)
class CacheEntry:
    full_mutation: str
    set_key: MutationStringSet


@dataclass(slots=True)
class MutationCache:
    """Remembers the last merge per mutation name, keyed by its string set.

    A write always replaces the previous entry for that name; there is no
    incremental update of an earlier merge.
    """

    _entries: dict[str, CacheEntry] = field(default_factory=dict[str, CacheEntry])

    def __contains__(self, mutation_name: object) -> bool:
        return mutation_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def entry(self, mutation_name: str) -> CacheEntry | None:
        return self._entries.get(mutation_name)

    def lookup(self, mutation_name: str, string_set: MutationStringSet) -> str | None:
        """Return the cached merge when it was built from exactly ``string_set``."""

        entry = self._entries.get(mutation_name)
        if entry is None or len(entry.set_key) != len(string_set):
            return None
        for mutation_string in string_set:
            if mutation_string not in entry.set_key:
                return None
        return entry.full_mutation

    def store(self, mutation_name: str, string_set: MutationStringSet, full_mutation: str) -> None:
        self._entries[mutation_name] = CacheEntry(full_mutation=full_mutation, set_key=string_set)

    def invalidate(self, mutation_name: str | None = None) -> None:
        """Drop the entry for ``mutation_name``, or every entry when it is omitted."""

        if mutation_name is None:
            self._entries.clear()
        else:
            self._entries.pop(mutation_name, None)
