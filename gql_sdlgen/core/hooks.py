"""Generation hooks for customizing schema generation.

Provides protocols for pre- and post-generation hooks that can change
the descriptor batch before generation or transform the generated SDL after.

Example usage:
    from gql_sdlgen.core.hooks import PreGenerateHook, PostGenerateHook

    # Pre-generation hook to drop internal types
    class FilterInternalTypes(PreGenerateHook):
        def pre_generate(self, descriptors):
            return [d for d in descriptors if not d.operation_name.startswith("_")]

    # Post-generation hook to add a header
    class AddLicenseHeader(PostGenerateHook):
        def post_generate(self, content):
            return "# Copyright 2024 My Company\\n\\n" + content
"""

from typing import Protocol, runtime_checkable

from .descriptors import TypeDescriptor


@runtime_checkable
class PreGenerateHook(Protocol):
    """Protocol for pre-generation hooks.

    Pre-generation hooks receive the ordered descriptor batch before
    generation and return the batch to generate. Order is kept as returned.
    """

    def pre_generate(self, descriptors: list[TypeDescriptor]) -> list[TypeDescriptor]:
        """Called before generation.

        Args:
            descriptors: The ordered descriptors of the batch

        Returns:
            The (possibly filtered or reordered) descriptors to generate
        """
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks.

    Post-generation hooks receive the generated SDL document and can
    transform it before it is returned to the caller.
    """

    def post_generate(self, content: str) -> str:
        """Called once with the complete SDL document.

        Args:
            content: The generated SDL

        Returns:
            The (possibly transformed) SDL
        """
        ...


class AddHeaderHook:
    """Built-in hook to add a header to the generated schema.

    Lines not already starting with "#" are turned into SDL comments.

    Example:
        hook = AddHeaderHook("Auto-generated - do not edit")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, content: str) -> str:
        """Add a header to the beginning of the schema."""
        lines = [
            line if line.startswith("#") else f"# {line}".rstrip()
            for line in self.header.rstrip("\n").split("\n")
        ]
        return "\n".join(lines) + "\n\n" + content


class FilterTypesHook:
    """Built-in hook to filter types by operation name prefix/suffix.

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

    def pre_generate(self, descriptors: list[TypeDescriptor]) -> list[TypeDescriptor]:
        """Filter descriptors by operation name."""
        return [d for d in descriptors if self._should_include(d.operation_name)]


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

    def run_pre_hooks(self, descriptors: list[TypeDescriptor]) -> list[TypeDescriptor]:
        """Run all pre-generation hooks in order."""
        for hook in self.pre_hooks:
            descriptors = list(hook.pre_generate(descriptors))
        return descriptors

    def run_post_hooks(self, content: str) -> str:
        """Run all post-generation hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(content)
        return content
