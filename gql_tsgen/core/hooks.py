"""Generation hooks for customizing code generation.

Provides protocols for pre- and post-generation hooks that can replace
the parsed schema document before folding or transform the generated
declarations before they are written.

Example usage:
    from graphql import DocumentNode
    from gql_tsgen.core.hooks import PreGenerateHook, PostGenerateHook

    # Pre-generation hook to drop internal types
    class DropInternalTypes(PreGenerateHook):
        def pre_generate(self, document):
            return DocumentNode(definitions=tuple(
                d for d in document.definitions
                if not getattr(d, "name", None) or not d.name.value.startswith("_")
            ))

    # Post-generation hook to add headers
    class AddLicenseHeader(PostGenerateHook):
        def post_generate(self, filename, content):
            header = "// Copyright 2024 My Company\\n\\n"
            return header + content
"""

from typing import Protocol, runtime_checkable

from graphql import DocumentNode


@runtime_checkable
class PreGenerateHook(Protocol):
    """Protocol for pre-generation hooks.

    Pre-generation hooks receive the parsed schema document before it is
    folded and return the document to fold instead. Hooks must not modify
    the nodes they receive; build a new DocumentNode.
    """

    def pre_generate(self, document: DocumentNode) -> DocumentNode:
        """Called before folding.

        Args:
            document: The parsed schema document

        Returns:
            The document to generate declarations from
        """
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks.

    Post-generation hooks receive the generated declarations and can
    transform them before they are written to disk.

    Example:
        class AppendNewline(PostGenerateHook):
            def post_generate(self, filename: str, content: str) -> str:
                return content + "\\n"
    """

    def post_generate(self, filename: str, content: str) -> str:
        """Called after generation.

        Args:
            filename: The name of the generated file (e.g., "schema.d.ts")
            content: The generated declarations

        Returns:
            The (possibly transformed) text to write
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
    """Built-in hook to filter definitions by name prefix/suffix.

    Definitions without a name (schema definitions) are always kept.

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
        """Check if a definition should be included."""
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
        """Return a document without the filtered definitions."""
        definitions = tuple(
            definition
            for definition in document.definitions
            if getattr(definition, "name", None) is None
            or self._should_include(definition.name.value)
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
