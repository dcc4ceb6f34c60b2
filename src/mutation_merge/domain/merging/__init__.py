"""Combine the mutation documents of several components into one request.

Layers, leaves first:
1) ``engine``: schema-aware union of two mutation trees
2) ``driver``: parse a set of document strings, fold them, print the result
3) ``dispatcher``: per-mutation-name fast paths and a single-slot cache
"""

from __future__ import annotations

from .cache import CacheEntry, MutationCache
from .dispatcher import MutationDispatcher, make_mutation_string_set
from .driver import MutationStringSet, StringSetMerger, merge_mutation_documents
from .engine import merge_documents, merge_into
from .errors import (
    InvalidArgumentError,
    InvalidDocumentError,
    MergeConflictError,
    MergeErrorKind,
    MutationMergeError,
    SchemaMismatchError,
)

__all__ = [
    "CacheEntry",
    "InvalidArgumentError",
    "InvalidDocumentError",
    "MergeConflictError",
    "MergeErrorKind",
    "MutationCache",
    "MutationDispatcher",
    "MutationMergeError",
    "MutationStringSet",
    "SchemaMismatchError",
    "StringSetMerger",
    "make_mutation_string_set",
    "merge_documents",
    "merge_into",
    "merge_mutation_documents",
]
