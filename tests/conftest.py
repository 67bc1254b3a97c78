"""Shared helpers for building models and selections."""

import pytest
from graphql import FieldNode, parse

from gql_tsgen.core import Builder, BuilderOptions


def make_builder(model: str, options: BuilderOptions | None = None) -> Builder:
    """Create a builder with the given model source registered."""
    builder = Builder(options)
    builder.add_all_document(parse(model))
    return builder


def first_operation(source: str):
    """Parse source and return its first definition."""
    return parse(source).definitions[0]


def first_field(selection: str) -> FieldNode:
    """Parse a bare selection, e.g. "foo { bar }", into a FieldNode."""
    return first_operation(f"{{ {selection} }}").selection_set.selections[0]


@pytest.fixture
def render():
    """Render a single operation against a model and return its text."""
    def _render(model: str, query: str, options: BuilderOptions | None = None) -> str:
        builder = make_builder(model, options)
        return builder.render_operation(first_operation(query)).text
    return _render
