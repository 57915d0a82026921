"""Shared fixtures for gql-tsgen tests."""

import pytest

SAMPLE_SDL = '''
"""Anything with an identity."""
interface Node {
  id: ID!
}

scalar Date
scalar JSON

enum Role {
  ADMIN
  EDITOR
  VIEWER
}

type User implements Node {
  id: ID!
  name: String
  role: Role!
  joined: Date
  posts(first: Int): [Post!]!
}

type Post implements Node {
  id: ID!
  title: String!
  tags: [String]
  meta: JSON
}

union SearchResult = User | Post

input NewPost {
  title: String!
  tags: [String!]
}

type Query {
  search(term: String!): [SearchResult!]!
}

type Mutation {
  addPost(input: NewPost!): Post
}
'''


@pytest.fixture
def sample_sdl():
    """A small schema touching every definition kind."""
    return SAMPLE_SDL


@pytest.fixture
def schema_file(tmp_path, sample_sdl):
    """The sample schema written to disk."""
    path = tmp_path / "schema.graphql"
    path.write_text(sample_sdl, encoding="utf-8")
    return path
