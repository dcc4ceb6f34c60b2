"""graphql-core backed parser/printer for mutation documents."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphql import GraphQLSyntaxError, parse, print_ast

from mutation_merge.domain.merging.errors import InvalidDocumentError

from .translator import document_from_ast, document_to_ast

if TYPE_CHECKING:
    from mutation_merge.domain.document import MutationDocument


class GraphQLDocumentCodec:
    """Parse without locations; printing uses graphql-core's canonical layout."""

    def parse(self, text: str) -> MutationDocument:
        try:
            document = parse(text, no_location=True)
        except GraphQLSyntaxError as exc:
            raise InvalidDocumentError(f"Cannot parse mutation document: {exc.message}") from exc
        return document_from_ast(document)

    def print(self, document: MutationDocument) -> str:
        return print_ast(document_to_ast(document))
