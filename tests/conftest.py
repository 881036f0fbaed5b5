"""Shared fixtures for the operation generator tests."""

import pytest
from graphql import build_schema, parse

from gql_opgen.core.ir import SourceDocument
from gql_opgen.core.resolver import TypeNameResolver
from gql_opgen.core.schema_index import SchemaIndex
from gql_opgen.core.targets import CSharpTarget, PythonTarget

SCHEMA_SDL = """
scalar AWSDateTime
scalar AWSJSON
scalar Cursor

enum Role {
  ADMIN
  MEMBER
}

interface Node {
  id: ID!
}

type User implements Node {
  id: ID!
  name: String
  case: String
  role: Role
  createdAt: AWSDateTime!
  tags: [String!]!
  matrix: [[Int]]
  friends: [User]
  manager: User
  cursor: Cursor
}

type Admin implements Node {
  id: ID!
  level: Int!
}

union SearchResult = User | Admin

type Query {
  user(id: ID!): User
  node(id: ID!): Node
  users(filter: UserFilter): [User!]!
  search(term: String!): [SearchResult]
}

type Mutation {
  createUser(input: CreateUserInput!): User!
}

type Subscription {
  userCreated: User
}

input CreateUserInput {
  name: String!
  address: AddressInput
}

input AddressInput {
  street: String!
  city: String
}

input UserFilter {
  name: String
  role: Role
  and: [UserFilter!]
  tree: TreeNode
}

input TreeNode {
  value: Int!
  children: [TreeNode!]
  parent: ParentNode
}

input ParentNode {
  child: TreeNode
}
"""

GET_USER = """query GetUser($id: ID!) {
  user(id: $id) {
    id
    name
  }
}
"""


@pytest.fixture
def schema():
    return build_schema(SCHEMA_SDL)


@pytest.fixture
def index(schema):
    return SchemaIndex(schema)


@pytest.fixture
def csharp_resolver():
    return TypeNameResolver(CSharpTarget())


@pytest.fixture
def python_resolver():
    return TypeNameResolver(PythonTarget())


@pytest.fixture
def make_document():
    """Build a SourceDocument from operation text."""

    def _make(text: str, path: str = "operations.graphql") -> SourceDocument:
        return SourceDocument(path=path, document=parse(text))

    return _make


@pytest.fixture
def get_user():
    return GET_USER
