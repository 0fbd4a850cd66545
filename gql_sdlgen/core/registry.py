"""Batch-scoped lookup of type descriptors by their stable id."""

import logging
from typing import Iterable

from .descriptors import TypeDescriptor

logger = logging.getLogger(__name__)


class TypeRegistry:
    """Resolves type references against one generation batch.

    Example:
        registry = TypeRegistry(descriptors)
        author = registry.resolve("Author")
        if author is None:
            ...  # not part of this batch
    """

    def __init__(self, descriptors: Iterable[TypeDescriptor] = ()):
        self._types: dict[str, TypeDescriptor] = {}
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor: TypeDescriptor):
        """Add a descriptor. The first descriptor registered for an id wins."""
        if descriptor.type_id in self._types:
            logger.debug(
                "Duplicate type id %s (%s), keeping the first definition",
                descriptor.type_id,
                descriptor.operation_name,
            )
            return
        self._types[descriptor.type_id] = descriptor

    def resolve(self, ref: str | None) -> TypeDescriptor | None:
        """Look up a referenced type, or None if it is not in this batch."""
        if not ref:
            return None
        return self._types.get(ref)

    def has(self, ref: str) -> bool:
        return ref in self._types

    def __len__(self) -> int:
        return len(self._types)
