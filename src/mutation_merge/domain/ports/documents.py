"""Ports for turning document text into mutation trees and back."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mutation_merge.domain.document import MutationDocument


@runtime_checkable
class DocumentCodec(Protocol):
    """Parser/printer pair, assumed inverse for well-formed documents."""

    def parse(self, text: str) -> MutationDocument: ...

    def print(self, document: MutationDocument) -> str: ...


__all__ = ["DocumentCodec"]
