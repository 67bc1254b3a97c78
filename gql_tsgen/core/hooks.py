"""Generation hooks for customizing code generation.

Provides protocols for pre- and post-generation hooks that can modify
the model before registration or transform the generated code after.

Example usage:
    from graphql import DocumentNode
    from gql_tsgen.core.hooks import PreGenerateHook, PostGenerateHook

    # Pre-generation hook to drop internal types
    class DropInternalTypes(PreGenerateHook):
        def pre_generate(self, document):
            definitions = [d for d in document.definitions if not d.name.value.startswith("_")]
            return DocumentNode(definitions=definitions)

    # Post-generation hook to add headers
    class AddLicenseHeader(PostGenerateHook):
        def post_generate(self, filename, content):
            header = "// Copyright 2024 My Company\\n\\n"
            return header + content
"""

from typing import Protocol, runtime_checkable

from graphql import DocumentNode, TypeDefinitionNode


@runtime_checkable
class PreGenerateHook(Protocol):
    """Protocol for pre-generation hooks.

    Pre-generation hooks receive each model document before its types are
    registered and can modify it. The returned document is registered.
    """

    def pre_generate(self, document: DocumentNode) -> DocumentNode:
        """Called before the model document is registered.

        Args:
            document: The parsed model document

        Returns:
            The (possibly modified) document to register
        """
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks.

    Post-generation hooks receive the generated module and can transform it
    before it's written out.

    Example:
        class StripBlankLines(PostGenerateHook):
            def post_generate(self, filename: str, content: str) -> str:
                return "\\n".join(l for l in content.splitlines() if l) + "\\n"
    """

    def post_generate(self, filename: str, content: str) -> str:
        """Called after code generation.

        Args:
            filename: The name of the generated file (e.g., "types.ts")
            content: The generated code content

        Returns:
            The (possibly transformed) code to write
        """
        ...


class AddHeaderHook:
    """Built-in hook to add a header to generated files.

    Example:
        hook = AddHeaderHook("// Auto-generated - do not edit")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        """Add a header to the beginning of the file."""
        if not self.header.endswith("\n"):
            header = self.header + "\n\n"
        else:
            header = self.header + "\n"
        return header + content


class FilterTypesHook:
    """Built-in hook to filter model types by name prefix/suffix.

    Definitions that aren't named types (e.g. schema or directive
    definitions) are kept as they are.

    Example:
        # Remove all types starting with underscore
        hook = FilterTypesHook(exclude_prefix="_")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def _should_include(self, name: str) -> bool:
        """Check if a type should be included."""
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def pre_generate(self, document: DocumentNode) -> DocumentNode:
        """Filter type definitions from the document."""
        definitions = tuple(
            d for d in document.definitions
            if not isinstance(d, TypeDefinitionNode) or self._should_include(d.name.value)
        )
        return DocumentNode(definitions=definitions, loc=document.loc)


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        """Add a pre-generation hook."""
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        """Add a post-generation hook."""
        self.post_hooks.append(hook)

    def run_pre_hooks(self, document: DocumentNode) -> DocumentNode:
        """Run all pre-generation hooks in order."""
        for hook in self.pre_hooks:
            document = hook.pre_generate(document)
        return document

    def run_post_hooks(self, filename: str, content: str) -> str:
        """Run all post-generation hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
