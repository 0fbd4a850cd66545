"""Discovery of schema classes in Python packages.

Imports a package and all of its submodules, collects the classes marked
with :func:`~gql_sdlgen.core.annotations.graphql_schema` and turns each one
into a :class:`TypeDescriptor`. Modules are visited in name order and classes
in definition order, so the same packages always give the same batch.
"""

import importlib
import logging
import pkgutil
import types
import typing
from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, ClassVar, Iterator, Union, get_args, get_origin

from .annotations import GraphQLField, GraphQLFieldParameter, get_schema_marker
from .descriptors import FieldDescriptor, ParameterDescriptor, TypeDescriptor, ValueType
from .diagnostics import DescriptorError, Diagnostic, Reason

logger = logging.getLogger(__name__)

_PYTHON_SCALARS = {
    str: ValueType.STRING,
    int: ValueType.INT,
    float: ValueType.FLOAT,
    bool: ValueType.BOOLEAN,
}


@dataclass
class DiscoveryResult:
    """Descriptors found by discovery, in discovery order."""
    descriptors: list[TypeDescriptor] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)


def type_id_for(cls: type) -> str:
    """Stable id of a discovered class, e.g. 'app.dto.Doc'."""
    return f"{cls.__module__}.{cls.__qualname__}"


def discover(*packages: str) -> DiscoveryResult:
    """Collect schema classes from the given packages or modules.

    Classes that cannot be described are reported as INVALID_DESCRIPTOR and
    left out.

    Raises:
        ImportError: if a package or one of its modules cannot be imported
        DescriptorError: if a module fails while being imported (e.g.
            ``@graphql_schema("")``)
    """
    result = DiscoveryResult()
    seen: set[type] = set()
    for package in packages:
        for module in _iter_modules(package):
            for cls in _marked_classes(module):
                if cls in seen:
                    continue
                seen.add(cls)
                _collect(cls, result)
    logger.info("Discovered %d schema types in %s", len(result.descriptors), ", ".join(packages))
    return result


def describe_classes(*classes: type) -> DiscoveryResult:
    """Describe an explicit list of classes, in the given order."""
    result = DiscoveryResult()
    for cls in classes:
        _collect(cls, result)
    return result


def describe_class(cls: type) -> tuple[TypeDescriptor | None, list[Diagnostic]]:
    """Build the descriptor for one class.

    Returns None (with a MISSING_ANNOTATION diagnostic) for an unmarked class.

    Raises:
        DescriptorError: if a field or parameter of the class is invalid
    """
    diagnostics: list[Diagnostic] = []
    marker = get_schema_marker(cls)
    if marker is None:
        _report(diagnostics, type_id_for(cls), Reason.MISSING_ANNOTATION, "class should be annotated")
        return None, diagnostics

    if issubclass(cls, Enum):
        fields = _enum_fields(cls)
    else:
        fields = _class_fields(cls, diagnostics)

    base_ref = None
    if marker.base is not None:
        base_ref = _reference(marker.base, cls.__qualname__, diagnostics)

    descriptor = TypeDescriptor(
        operation_name=marker.operation_name,
        kind=marker.schema_type,
        fields=tuple(fields),
        base_type_ref=base_ref,
        type_id=type_id_for(cls),
    )
    return descriptor, diagnostics


def _collect(cls: type, result: DiscoveryResult):
    # A class that cannot be described is left out; discovery goes on
    try:
        descriptor, diagnostics = describe_class(cls)
    except DescriptorError as e:
        _report(result.diagnostics, type_id_for(cls), Reason.INVALID_DESCRIPTOR, str(e))
        return
    result.diagnostics.extend(diagnostics)
    if descriptor is not None:
        result.descriptors.append(descriptor)


def _iter_modules(package_name: str) -> Iterator[types.ModuleType]:
    module = importlib.import_module(package_name)
    yield module
    path = getattr(module, "__path__", None)
    if path is None:
        return
    names = sorted(
        info.name for info in pkgutil.walk_packages(path, prefix=f"{module.__name__}.")
    )
    for name in names:
        yield importlib.import_module(name)


def _marked_classes(module: types.ModuleType) -> list[type]:
    """Marked classes defined (not just imported) in a module."""
    return [
        obj
        for obj in vars(module).values()
        if isinstance(obj, type)
        and obj.__module__ == module.__name__
        and get_schema_marker(obj) is not None
    ]


def _report(diagnostics: list[Diagnostic], subject: str, reason: Reason, message: str):
    diagnostic = Diagnostic(subject=subject, reason=reason, message=message)
    logger.info("IGNORING: %s", diagnostic)
    diagnostics.append(diagnostic)


def _reference(target: type, subject: str, diagnostics: list[Diagnostic]) -> str:
    """Id of a referenced class; unmarked targets are reported but still referenced."""
    if get_schema_marker(target) is None:
        _report(
            diagnostics,
            subject,
            Reason.MISSING_ANNOTATION,
            f"referenced class {type_id_for(target)} should be annotated",
        )
    return type_id_for(target)


def _enum_fields(cls: type[Enum]) -> list[FieldDescriptor]:
    # String member values are used as the written names
    return [
        FieldDescriptor(
            source_name=member.name,
            display_name=member.value if isinstance(member.value, str) else None,
        )
        for member in cls
    ]


def _class_fields(cls: type, diagnostics: list[Diagnostic]) -> list[FieldDescriptor]:
    fields = []
    hints = typing.get_type_hints(cls, include_extras=True)
    for name, hint in hints.items():
        if name.startswith("_") or get_origin(hint) is ClassVar:
            continue
        marker = _field_marker(hint)
        if marker is None:
            _report(
                diagnostics,
                f"{cls.__qualname__}.{name}",
                Reason.MISSING_ANNOTATION,
                "field should be annotated",
            )
            continue
        fields.append(_describe_field(cls, name, get_args(hint)[0], marker, diagnostics))
    return fields


def _field_marker(hint) -> GraphQLField | None:
    if get_origin(hint) is not Annotated:
        return None
    for meta in hint.__metadata__:
        if isinstance(meta, GraphQLField):
            return meta
    return None


def _describe_field(
    cls: type,
    name: str,
    hint,
    marker: GraphQLField,
    diagnostics: list[Diagnostic],
) -> FieldDescriptor:
    subject = f"{cls.__qualname__}.{name}"
    hint = _strip_optional(hint)
    item_type = marker.item_type or ValueType.STRING
    object_class = marker.object_class

    if marker.field_type is ValueType.OBJECT and object_class is None and isinstance(hint, type):
        object_class = hint
    elif marker.field_type is ValueType.LIST and marker.item_type is None:
        element = _list_element(hint)
        if element in _PYTHON_SCALARS:
            item_type = _PYTHON_SCALARS[element]
        elif isinstance(element, type) or object_class is not None:
            item_type = ValueType.OBJECT
            object_class = object_class or element

    object_ref = None
    if object_class is not None and (
        marker.field_type is ValueType.OBJECT or item_type is ValueType.OBJECT
    ):
        object_ref = _reference(object_class, subject, diagnostics)

    return FieldDescriptor(
        source_name=name,
        display_name=marker.field_name or None,
        value_type=marker.field_type,
        nullable=marker.nullable,
        parameters=tuple(
            _describe_parameter(f"{subject}({p.name})", p, diagnostics) for p in marker.parameters
        ),
        object_type_ref=object_ref,
        item_type=item_type,
    )


def _describe_parameter(
    subject: str,
    param: GraphQLFieldParameter,
    diagnostics: list[Diagnostic],
) -> ParameterDescriptor:
    object_ref = None
    if param.object_class is not None and (
        param.param_type is ValueType.OBJECT or param.item_type is ValueType.OBJECT
    ):
        object_ref = _reference(param.object_class, subject, diagnostics)
    return ParameterDescriptor(
        name=param.name,
        value_type=param.param_type,
        object_type_ref=object_ref,
        nullable=param.nullable,
        item_type=param.item_type,
    )


def _strip_optional(hint):
    """``X | None`` -> ``X``."""
    if get_origin(hint) in (Union, types.UnionType):
        args = [a for a in get_args(hint) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def _list_element(hint):
    args = get_args(hint)
    if get_origin(hint) in (list, tuple, set, frozenset) and args:
        return _strip_optional(args[0])
    return None
