"""Tests for argument validation."""

import pytest

from gql_tsgen.core import BuilderOptions
from gql_tsgen.core.errors import (
    ArgumentTypeMismatchError,
    MissingArgumentsError,
    UndeclaredVariableError,
    UnexpectedArgumentError,
)


MODEL = """
input Filter { term: String! limit: Int }
type Item { id: ID! }
type Query {
  items(filter: Filter, ids: [ID!], first: Int! = 10, after: String): [Item!]!
  item(id: ID!): Item
  search(filter: Filter!): [Item!]!
}
"""


class TestRequiredArguments:
    """Tests for required and optional arguments."""

    def test_missing_required(self, render):
        with pytest.raises(MissingArgumentsError) as exc_info:
            render(MODEL, "query Q { item { id } }")
        assert exc_info.value.missing == ["id"]
        assert exc_info.value.path == "Q.item"
        assert "missing arguments=id" in str(exc_info.value)

    def test_supplied_required(self, render):
        text = render(MODEL, 'query Q { item(id: "1") { id } }')
        assert "item: (/* Item */ {" in text

    def test_default_and_nullable_may_be_omitted(self, render):
        text = render(MODEL, "query Q { items { id } }")
        assert "items: Array<" in text

    def test_missing_tolerated(self, render):
        text = render(MODEL, "query Q { item { id } }", BuilderOptions(allow_missing_arguments=True))
        assert "item: (/* Item */ {" in text


class TestUnexpectedArguments:
    """Tests for arguments the field does not declare."""

    def test_ignored_by_default(self, render):
        render(MODEL, 'query Q { item(id: "1", extra: 2) { id } }')

    def test_strict(self, render):
        with pytest.raises(UnexpectedArgumentError):
            render(
                MODEL,
                'query Q { item(id: "1", extra: 2) { id } }',
                BuilderOptions(strict_arguments=True),
            )


class TestValueShapes:
    """Tests for the structural compatibility check."""

    def test_scalar_for_list(self, render):
        with pytest.raises(ArgumentTypeMismatchError):
            render(MODEL, 'query Q { items(ids: "1") { id } }')

    def test_list_for_list(self, render):
        render(MODEL, 'query Q { items(ids: ["1", "2"]) { id } }')

    def test_null_for_non_null(self, render):
        with pytest.raises(ArgumentTypeMismatchError):
            render(MODEL, "query Q { item(id: null) { id } }")

    def test_null_for_nullable(self, render):
        render(MODEL, "query Q { items(after: null) { id } }")

    def test_missing_input_field(self, render):
        with pytest.raises(MissingArgumentsError) as exc_info:
            render(MODEL, "query Q { search(filter: {limit: 3}) { id } }")
        assert exc_info.value.missing == ["term"]
        assert exc_info.value.path == "Q.search(filter)"

    def test_complete_input_object(self, render):
        render(MODEL, 'query Q { search(filter: {term: "a", limit: 3}) { id } }')


class TestVariables:
    """Tests for variables supplied as arguments."""

    def test_undeclared(self, render):
        with pytest.raises(UndeclaredVariableError):
            render(MODEL, "query Q { item(id: $id) { id } }")

    def test_undeclared_in_list(self, render):
        with pytest.raises(UndeclaredVariableError):
            render(MODEL, "query Q { items(ids: [$x]) { id } }")

    def test_undeclared_in_object(self, render):
        with pytest.raises(UndeclaredVariableError):
            render(MODEL, "query Q { search(filter: {term: $t}) { id } }")

    def test_declared(self, render):
        render(MODEL, "query Q($x: ID!) { items(ids: [$x]) { id } }")

    def test_non_list_variable_for_list(self, render):
        with pytest.raises(ArgumentTypeMismatchError):
            render(MODEL, "query Q($ids: ID) { items(ids: $ids) { id } }")

    def test_list_variable_for_list(self, render):
        render(MODEL, "query Q($ids: [ID!]) { items(ids: $ids) { id } }")
