"""Generation hooks for customizing code generation.

Provides protocols for pre- and post-generation hooks that can filter the
operation documents before generation or transform the generated code after.

Example usage:
    from gql_opgen.core.hooks import PreGenerateHook, PostGenerateHook

    # Pre-generation hook to drop test documents
    class SkipTestDocuments(PreGenerateHook):
        def pre_generate(self, documents):
            return [d for d in documents if "test" not in d.path]

    # Post-generation hook to add headers
    class AddLicenseHeader(PostGenerateHook):
        def post_generate(self, filename, content):
            header = "// Copyright 2024 My Company\\n\\n"
            return header + content
"""

from dataclasses import replace
from typing import Protocol, runtime_checkable

from graphql import DocumentNode, OperationDefinitionNode

from .ir import SourceDocument


@runtime_checkable
class PreGenerateHook(Protocol):
    """Protocol for pre-generation hooks.

    Pre-generation hooks receive the parsed operation documents before code
    generation and return the documents to generate from.
    """

    def pre_generate(self, documents: list[SourceDocument]) -> list[SourceDocument]:
        """Called before code generation.

        Args:
            documents: The parsed operation documents

        Returns:
            The (possibly filtered) documents to use for generation
        """
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks.

    Post-generation hooks receive the generated code and can transform it
    before it's written to disk.
    """

    def post_generate(self, filename: str, content: str) -> str:
        """Called after code generation.

        Args:
            filename: The name of the generated file (e.g., "Operations.cs")
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


class FilterOperationsHook:
    """Built-in hook to filter operations by name prefix/suffix.

    Fragments are kept so the remaining operations can still spread them.

    Example:
        # Drop every operation whose name starts with "Debug"
        hook = FilterOperationsHook(exclude_prefix="Debug")
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
        """Check if an operation should be included."""
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def _keep(self, definition) -> bool:
        if not isinstance(definition, OperationDefinitionNode) or definition.name is None:
            return True
        return self._should_include(definition.name.value)

    def pre_generate(self, documents: list[SourceDocument]) -> list[SourceDocument]:
        """Filter operations out of every document."""
        result = []
        for source in documents:
            definitions = tuple(d for d in source.document.definitions if self._keep(d))
            document = DocumentNode(definitions=definitions, loc=source.document.loc)
            result.append(replace(source, document=document))
        return result


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

    def run_pre_hooks(self, documents: list[SourceDocument]) -> list[SourceDocument]:
        """Run all pre-generation hooks in order."""
        for hook in self.pre_hooks:
            documents = hook.pre_generate(documents)
        return documents

    def run_post_hooks(self, filename: str, content: str) -> str:
        """Run all post-generation hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
