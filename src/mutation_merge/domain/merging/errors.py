"""Failures raised while merging mutation documents.

None of these are transient: they are deterministic functions of the input
documents and the schema, so callers should surface them rather than retry.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class MergeErrorKind(StrEnum):
    MERGE_CONFLICT = "merge_conflict"
    INVALID_ARGUMENT = "invalid_argument"
    SCHEMA_MISMATCH = "schema_mismatch"
    INVALID_DOCUMENT = "invalid_document"


class MutationMergeError(RuntimeError):
    """Base class for every merge failure."""

    kind: ClassVar[MergeErrorKind]


class MergeConflictError(MutationMergeError):
    """Raised when two documents invoke different root mutation fields."""

    kind = MergeErrorKind.MERGE_CONFLICT

    def __init__(self, *, target_field: str, source_field: str) -> None:
        self.target_field = target_field
        self.source_field = source_field
        super().__init__(
            f"Cannot merge two different mutations: {source_field} and {target_field}. "
            "Make sure each mutation operation only calls a single mutation "
            "and that custom mutations don't call a separate mutation."
        )


class InvalidArgumentError(MutationMergeError):
    """Raised when a variable-valued argument is not declared on its field."""

    kind = MergeErrorKind.INVALID_ARGUMENT

    def __init__(self, *, argument: str, field: str) -> None:
        self.argument = argument
        self.field = field
        super().__init__(f"Invalid argument: {argument} is not declared on field {field}")


class SchemaMismatchError(MutationMergeError):
    """Raised when a selection cannot be resolved against the schema."""

    kind = MergeErrorKind.SCHEMA_MISMATCH

    def __init__(
        self,
        message: str,
        *,
        type_name: str | None = None,
        field_name: str | None = None,
    ) -> None:
        self.type_name = type_name
        self.field_name = field_name
        super().__init__(message)


class InvalidDocumentError(MutationMergeError):
    """Raised when a document cannot be parsed or is not a single-field mutation."""

    kind = MergeErrorKind.INVALID_DOCUMENT
