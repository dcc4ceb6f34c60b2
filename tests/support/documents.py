"""Helpers for comparing and counting mutation documents in tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphql import parse, print_ast

from mutation_merge.adapters.graphql import GraphQLDocumentCodec

if TYPE_CHECKING:
    from mutation_merge.domain.document import MutationDocument


SCHEMA_SDL = """
type Query {
  user(id: ID!): User
}

type User {
  id: ID!
  name: String
  avatar(size: String): String
  posts(first: Int, after: String): [Post!]!
}

type Post {
  id: ID!
  title: String
  body: String
}

type Comment {
  id: ID!
  content: String
  upvotes: Int
  author: User
}

type DeletePayload {
  id: ID!
  ok: Boolean
}

type Result {
  x: Int
  y: Int
  nested(depth: Int): Result
}

input CommentInput {
  content: String!
}

type Photo {
  id: ID!
  url(size: Int): String
}

type Video {
  id: ID!
  duration: Int
}

union Media = Photo | Video

type Mutation {
  m(arg: Int, other: String): Result
  createComment(postId: ID!, input: CommentInput): Comment
  updateUser(id: ID!, name: String): User
  createX(name: String): Comment
  deleteY(id: ID!): DeletePayload
  attachMedia(commentId: ID!): Media
}
"""


def normalize(text: str) -> str:
    """Print ``text`` the way the codec prints merged documents."""

    return print_ast(parse(text, no_location=True))


class CountingCodec:
    """Codec wrapper recording how often parsing and printing happen."""

    def __init__(self) -> None:
        self._inner = GraphQLDocumentCodec()
        self.parse_calls = 0
        self.print_calls = 0

    def parse(self, text: str) -> MutationDocument:
        self.parse_calls += 1
        return self._inner.parse(text)

    def print(self, document: MutationDocument) -> str:
        self.print_calls += 1
        return self._inner.print(document)
