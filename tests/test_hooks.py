"""Tests for generation hooks."""

import pytest
from graphql import parse

from gql_tsgen.core.hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)


@pytest.fixture
def sample_document():
    """Create a sample model document for testing."""
    return parse("""
        schema { query: Query }
        enum Status { ACTIVE }
        enum _Internal { X }
        type User { id: ID! }
        type _Meta { id: ID! }
        type Product { id: ID! }
        input CreateUserInput { name: String! }
        input _DebugInput { flag: Boolean }
    """)


def type_names(document):
    return [d.name.value for d in document.definitions if hasattr(d, "name") and d.name]


class TestAddHeaderHook:
    """Tests for AddHeaderHook."""

    def test_adds_header(self):
        hook = AddHeaderHook("// Auto-generated")
        result = hook.post_generate("types.ts", "export type A = {};")
        assert result.startswith("// Auto-generated\n\n")

    def test_preserves_content(self):
        hook = AddHeaderHook("// Header")
        content = "export type A = {};"
        result = hook.post_generate("types.ts", content)
        assert content in result

    def test_handles_header_with_newline(self):
        hook = AddHeaderHook("// Header\n")
        result = hook.post_generate("types.ts", "code")
        # Should not double-up newlines
        assert result == "// Header\n\ncode"


class TestFilterTypesHook:
    """Tests for FilterTypesHook."""

    def test_exclude_prefix(self, sample_document):
        hook = FilterTypesHook(exclude_prefix="_")
        result = hook.pre_generate(sample_document)
        assert type_names(result) == ["Status", "User", "Product", "CreateUserInput"]

    def test_exclude_suffix(self, sample_document):
        hook = FilterTypesHook(exclude_suffix="Input")
        result = hook.pre_generate(sample_document)
        assert "CreateUserInput" not in type_names(result)
        assert "_DebugInput" not in type_names(result)
        assert "User" in type_names(result)

    def test_include_prefix(self, sample_document):
        hook = FilterTypesHook(include_prefix="_")
        result = hook.pre_generate(sample_document)
        assert type_names(result) == ["_Internal", "_Meta", "_DebugInput"]

    def test_keeps_schema_definition(self, sample_document):
        hook = FilterTypesHook(include_prefix="_")
        result = hook.pre_generate(sample_document)
        assert result.definitions[0].kind == "schema_definition"


class TestHookRunner:
    """Tests for HookRunner."""

    def test_runs_post_hooks_in_order(self):
        runner = HookRunner()
        runner.add_post_hook(AddHeaderHook("// second"))
        runner.add_post_hook(AddHeaderHook("// first"))
        result = runner.run_post_hooks("types.ts", "code")
        assert result == "// first\n\n// second\n\ncode"

    def test_runs_pre_hooks_in_order(self, sample_document):
        runner = HookRunner()
        runner.add_pre_hook(FilterTypesHook(exclude_prefix="_"))
        runner.add_pre_hook(FilterTypesHook(exclude_suffix="Input"))
        result = runner.run_pre_hooks(sample_document)
        assert type_names(result) == ["Status", "User", "Product"]

    def test_no_hooks(self, sample_document):
        runner = HookRunner()
        assert runner.run_pre_hooks(sample_document) is sample_document
        assert runner.run_post_hooks("types.ts", "code") == "code"


class TestHookProtocols:
    """Tests for protocol compliance."""

    def test_add_header_is_post_hook(self):
        assert isinstance(AddHeaderHook("x"), PostGenerateHook)

    def test_filter_types_is_pre_hook(self):
        assert isinstance(FilterTypesHook(), PreGenerateHook)
