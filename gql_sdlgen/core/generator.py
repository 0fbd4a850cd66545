"""SDL generator for type descriptors.

Walks an ordered batch of :class:`TypeDescriptor` and renders one SDL
document. Each descriptor becomes one fragment:

    <newline> <keyword> <name> [implements <Base>]{
    key( arg: Type,other: Type!) : [Type]!
    }
    <newline>

Repeated Query and Mutation roots within a batch are written with
``extend`` so that every fragment after the first adds to the same root.

Example:
    generator = SchemaGenerator()
    result = generator.generate(descriptors)
    print(result.sdl)
    for diagnostic in result.diagnostics:
        print(diagnostic)
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from .descriptors import SchemaKind, TypeDescriptor, ValueType
from .diagnostics import Diagnostic, Reason
from .hooks import HookRunner
from .registry import TypeRegistry
from .tokens import SDLToken, render

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """SDL produced by one run plus everything that was left out of it."""
    sdl: str = ""
    diagnostics: list[Diagnostic] = field(default_factory=list)
    # Types rendered, after hooks and validation
    type_count: int = 0

    def diagnostics_for(self, reason: Reason) -> list[Diagnostic]:
        """Return the diagnostics reported for one reason."""
        return [d for d in self.diagnostics if d.reason is reason]

    def __str__(self) -> str:
        return self.sdl


@dataclass
class _GenerationRun:
    """State scoped to a single generate() call."""
    registry: TypeRegistry = field(default_factory=TypeRegistry)
    # Set once the first Query/Mutation root is written; later ones use "extend"
    query_root_opened: bool = False
    mutation_root_opened: bool = False
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def report(self, subject: str, reason: Reason, message: str):
        diagnostic = Diagnostic(subject=subject, reason=reason, message=message)
        logger.info("IGNORING: %s", diagnostic)
        self.diagnostics.append(diagnostic)


class SchemaGenerator:
    """Generates an SDL document from type descriptors.

    A generator keeps no state between calls, so the same instance can be
    reused for independent batches.

    Args:
        hooks: Optional hooks run before (on the descriptor batch) and after
            (on the SDL text) generation.
    """

    def __init__(self, hooks: HookRunner | None = None):
        self.hooks = hooks or HookRunner()

    def generate(self, descriptors: Iterable[TypeDescriptor]) -> GenerationResult:
        """Render the descriptors, in order, into one SDL document."""
        logger.info("START: GraphQL schema generation")
        batch = self.hooks.run_pre_hooks(list(descriptors))

        run = _GenerationRun()
        accepted = [d for d in batch if self._validate(d, run)]
        run.registry = TypeRegistry(accepted)

        sdl = "".join(self._render_type(d, run) for d in accepted)
        sdl = self.hooks.run_post_hooks(sdl)

        logger.info(
            "END: GraphQL schema generation (%d types, %d skipped elements)",
            len(accepted),
            len(run.diagnostics),
        )
        logger.debug("Generated schema:\n%s", sdl)
        return GenerationResult(sdl=sdl, diagnostics=run.diagnostics, type_count=len(accepted))

    def _validate(self, descriptor: TypeDescriptor, run: _GenerationRun) -> bool:
        """Reject descriptors without an operation name before rendering them."""
        name = getattr(descriptor, "operation_name", None)
        if not name or not str(name).strip():
            subject = getattr(descriptor, "type_id", None) or type(descriptor).__name__
            run.report(subject, Reason.MISSING_OPERATION_NAME, "type has no operation name")
            return False
        return True

    def _render_type(self, descriptor: TypeDescriptor, run: _GenerationRun) -> str:
        parts = [render(SDLToken.NEWLINE)]
        self._add_schema_type(descriptor, run, parts)
        self._add_operation_name(descriptor, parts)
        self._add_implementation(descriptor, run, parts)
        parts.append(render(SDLToken.BLOCK_OPEN))
        self._add_fields(descriptor, run, parts)
        parts.append(render(SDLToken.BLOCK_CLOSE))
        parts.append(render(SDLToken.NEWLINE))
        return "".join(parts)

    def _add_schema_type(self, descriptor: TypeDescriptor, run: _GenerationRun, parts: list[str]):
        """Write the declaring keyword, using "extend" for repeated roots."""
        kind = descriptor.kind
        keyword = kind.keyword
        if kind is SchemaKind.QUERY:
            if run.query_root_opened:
                keyword = f"extend {keyword}"
            else:
                run.query_root_opened = True
        elif kind is SchemaKind.MUTATION:
            if run.mutation_root_opened:
                keyword = f"extend {keyword}"
            else:
                run.mutation_root_opened = True
        parts.append(render(SDLToken.SPACE))
        parts.append(keyword)
        parts.append(render(SDLToken.SPACE))

    def _add_operation_name(self, descriptor: TypeDescriptor, parts: list[str]):
        # Query and Mutation roots are written without a name
        if descriptor.kind.is_operation_root:
            return
        parts.append(descriptor.operation_name)
        parts.append(render(SDLToken.SPACE))

    def _add_implementation(self, descriptor: TypeDescriptor, run: _GenerationRun, parts: list[str]):
        """Write "implements <Base>" for implementation types.

        The base must be an OBJECT type of the same batch. Otherwise the
        clause is left out and the type keeps only its field block.
        """
        if descriptor.kind is not SchemaKind.IMPLEMENTATION:
            return
        subject = descriptor.operation_name
        if not descriptor.base_type_ref:
            run.report(subject, Reason.NO_CLASS_REFERENCE, "implementation has no base type reference")
            return
        base = run.registry.resolve(descriptor.base_type_ref)
        if base is None:
            run.report(
                subject,
                Reason.UNRESOLVED_REFERENCE,
                f"base type {descriptor.base_type_ref} is not part of this schema",
            )
            return
        if base.kind is not SchemaKind.OBJECT:
            run.report(
                subject,
                Reason.INVALID_BASE_TYPE,
                f"base type {base.operation_name} is {base.kind.name}, need to be of type OBJECT",
            )
            return
        parts.append("implements ")
        parts.append(base.operation_name)

    def _add_fields(self, descriptor: TypeDescriptor, run: _GenerationRun, parts: list[str]):
        for fd in descriptor.fields:
            key = fd.key
            if descriptor.kind is SchemaKind.ENUM:
                parts.append(key)
                parts.append(render(SDLToken.NEWLINE))
                continue

            subject = f"{descriptor.operation_name}.{key}"
            value = self._render_value(subject, fd, run)
            if value is None:
                continue
            parts.append(key)
            parts.append(self._render_arguments(subject, fd.parameters, run))
            parts.append(render(SDLToken.KEY_SEP))
            parts.append(value)
            parts.append(render(SDLToken.NEWLINE))

    def _render_arguments(self, subject: str, parameters, run: _GenerationRun) -> str:
        """Render "( a: Type,b: Type!) ", or "" when no parameter survives."""
        entries = []
        for param in parameters:
            value = self._render_value(f"{subject}({param.name})", param, run)
            if value is None:
                continue
            entries.append(f"{param.name}{render(SDLToken.KEY_SEP)}{value}")
        if not entries:
            return ""
        return (
            render(SDLToken.ARGS_OPEN)
            + render(SDLToken.ARG_SEP).join(entries)
            + render(SDLToken.ARGS_CLOSE)
        )

    def _render_value(self, subject: str, element, run: _GenerationRun) -> str | None:
        """Render the type of a field or parameter, e.g. ``[Author]!``.

        Returns None if the element references a type that cannot be resolved.
        """
        if element.references_object:
            ref = element.object_type_ref
            if not ref:
                run.report(subject, Reason.NO_CLASS_REFERENCE, "object type but no type reference is provided")
                return None
            target = run.registry.resolve(ref)
            if target is None:
                run.report(subject, Reason.UNRESOLVED_REFERENCE, f"type {ref} is not part of this schema")
                return None
            type_name = target.operation_name
        elif element.value_type is ValueType.LIST:
            type_name = element.item_type.token
        else:
            type_name = element.value_type.token

        if element.value_type is ValueType.LIST:
            type_name = render(SDLToken.LIST_OPEN) + type_name + render(SDLToken.LIST_CLOSE)
        if not element.nullable:
            type_name += render(SDLToken.NON_NULL)
        return type_name


def generate_schema(
    descriptors: Iterable[TypeDescriptor],
    hooks: HookRunner | None = None,
) -> GenerationResult:
    """Generate SDL for one batch with a fresh generator."""
    return SchemaGenerator(hooks=hooks).generate(descriptors)
