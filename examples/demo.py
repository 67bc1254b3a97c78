#!/usr/bin/env python3
"""Demonstration of the TypeScript type builder.

This script shows how to:
1. Register a GraphQL model
2. Render result and variables types for operations
3. Render the input types those operations reference, once

Note: Nothing is executed against a server - only types are generated.
"""

from graphql import OperationDefinitionNode, parse

from gql_tsgen.core import Builder

MODEL = """
scalar AWSDateTime

input CommentFilter {
  author: String
  since: AWSDateTime
  or: [CommentFilter!]
}

type Comment {
  id: ID!
  body: String!
  author: String
  createdAt: AWSDateTime!
}

type Query {
  comments(filter: CommentFilter, first: Int = 20): [Comment!]!
}

type Mutation {
  addComment(body: String!): Comment!
}
"""

QUERIES = """
query GetComments($filter: CommentFilter) {
  comments(filter: $filter) {
    id
    body
    createdAt
  }
}

mutation AddComment($body: String!) {
  addComment(body: $body) {
    id
  }
}
"""


def main():
    print("=== TypeScript Types Demo ===\n")

    builder = Builder()
    builder.add_all_document(parse(MODEL))
    builder.add_scalar("AWSDateTime", "string")

    pending = []
    for definition in parse(QUERIES).definitions:
        if not isinstance(definition, OperationDefinitionNode):
            continue
        output = builder.render_operation(definition)
        pending.extend(output.pending_input_types)
        print(output.text)

    inputs = builder.render_input_types(pending)
    print(inputs.text, end="")


if __name__ == "__main__":
    main()
