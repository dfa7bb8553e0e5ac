"""Describe Python type annotations as type descriptors.

This is the only module that inspects Python types. Everything downstream works
on the descriptors from toolschema.types.
"""
import collections
import collections.abc
import dataclasses
import inspect
import types
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, ClassVar, Literal, Union, get_args, get_origin, get_type_hints

from toolschema.annotations import Description, MemoryId, P
from toolschema.logging_utils import get_logger
from toolschema.types import (
    BOOLEAN_TYPE,
    INTEGER_TYPE,
    NUMBER_TYPE,
    STRING_TYPE,
    ArrayType,
    CollectionType,
    EnumType,
    FieldDescriptor,
    StructType,
    TypeDescriptor,
)

logger = get_logger(__name__)

# Element type comes from the single type argument
_COLLECTION_ORIGINS = (
    list,
    set,
    frozenset,
    collections.deque,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Collection,
    collections.abc.Iterable,
)

_UNION_ORIGINS = (Union, types.UnionType)


def describe_type(annotation: Any, structs: dict[Any, StructType] | None = None) -> TypeDescriptor:
    """Type descriptor for a Python annotation.
    structs maps classes to the StructType already created for them, so a class
    reached twice (including through a cycle) gets one descriptor.
    Anything without a schema shape (Any, dict, mixed unions) is an object without fields.
    """
    if structs is None:
        structs = {}
    annotation = strip_annotated(annotation)
    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin in _UNION_ORIGINS:
        members = [a for a in args if a is not type(None)]
        if len(members) == 1:
            return describe_type(members[0], structs)
        return _opaque(annotation, structs)

    if origin is Literal:
        return EnumType("Literal", tuple(str(a) for a in args))

    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return ArrayType(describe_type(args[0], structs))
        if args and all(a == args[0] for a in args):
            return ArrayType(describe_type(args[0], structs))
        return CollectionType()

    if origin in _COLLECTION_ORIGINS:
        if len(args) == 1:
            return CollectionType(describe_type(args[0], structs))
        return CollectionType()

    if annotation is tuple or annotation in _COLLECTION_ORIGINS:
        return CollectionType()

    if annotation is Any or origin is not None or not isinstance(annotation, type):
        return _opaque(annotation, structs)

    if issubclass(annotation, Enum):
        return EnumType(annotation.__name__, tuple(_enum_literal(m) for m in annotation))
    if issubclass(annotation, str):
        return STRING_TYPE
    if issubclass(annotation, bool):
        return BOOLEAN_TYPE
    if issubclass(annotation, int):
        return INTEGER_TYPE
    if issubclass(annotation, (float, Decimal)):
        return NUMBER_TYPE

    if annotation in (dict, object):
        return _opaque(annotation, structs)

    return _struct(annotation, structs)


def strip_annotated(annotation: Any) -> Any:
    while get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    return annotation


def annotation_metadata(annotation: Any) -> tuple[Any, ...]:
    """The metadata of an Annotated[...] annotation (outermost first), or ().
    Looks through Optional[...] / X | None, so Optional[Annotated[int, P(...)]] keeps its marker.
    """
    metadata: tuple[Any, ...] = ()
    while True:
        origin = get_origin(annotation)
        if origin is Annotated:
            metadata += annotation.__metadata__
            annotation = get_args(annotation)[0]
        elif origin in _UNION_ORIGINS:
            members = [a for a in get_args(annotation) if a is not type(None)]
            if len(members) != 1:
                return metadata
            annotation = members[0]
        else:
            return metadata


def parameter_metadata(annotation: Any) -> tuple[P | None, bool]:
    """(P marker or None, whether the parameter is a MemoryId) for a parameter annotation."""
    marker = None
    memory_id = False
    for item in annotation_metadata(annotation):
        if isinstance(item, P) and marker is None:
            marker = item
        elif isinstance(item, MemoryId) or item is MemoryId:
            memory_id = True
    return marker, memory_id


def field_description(annotation: Any, dataclass_field: dataclasses.Field | None = None) -> str | None:
    """Description attached to a field: Annotated[T, Description(...)] first, then
    dataclasses.field(metadata={"description": ...}).
    """
    for item in annotation_metadata(annotation):
        if isinstance(item, Description):
            return item.text
    if dataclass_field is not None:
        text = dataclass_field.metadata.get("description")
        if text is not None:
            return str(text)
    return None


def resolve_hints(obj: Any) -> dict[str, Any]:
    """get_type_hints with Annotated kept. Unresolvable forward references fall back to the raw annotations."""
    try:
        return get_type_hints(obj, include_extras=True)
    except (NameError, TypeError) as e:
        logger.warning("type_hints_unresolved", target=getattr(obj, "__qualname__", repr(obj)), error=str(e))
        if isinstance(obj, type):
            raw: dict[str, Any] = {}
            for klass in reversed(obj.__mro__):
                raw.update(vars(klass).get("__annotations__", {}))
            return raw
        return dict(getattr(obj, "__annotations__", {}))


def _struct(cls: type, structs: dict[Any, StructType]) -> StructType:
    if cls in structs:
        return structs[cls]
    struct = StructType(cls.__name__, loader=lambda: _struct_fields(cls, structs))
    structs[cls] = struct
    return struct


def _opaque(annotation: Any, structs: dict[Any, StructType]) -> StructType:
    """Object with no fields for annotations that have no schema shape."""
    name = getattr(annotation, "__name__", None) or repr(annotation)
    key = ("opaque", name)
    if key not in structs:
        structs[key] = StructType(name, fields=())
    return structs[key]


def _struct_fields(cls: type, structs: dict[Any, StructType]) -> list[FieldDescriptor]:
    dataclass_fields = {f.name: f for f in dataclasses.fields(cls)} if dataclasses.is_dataclass(cls) else {}
    fields: list[FieldDescriptor] = []
    for name, annotation in resolve_hints(cls).items():
        base = strip_annotated(annotation)
        static = base is ClassVar or get_origin(base) is ClassVar
        # InitVar pseudo-fields are constructor arguments, not stored instance data
        synthetic = isinstance(base, dataclasses.InitVar) or base is dataclasses.InitVar
        if isinstance(annotation, str):
            field_type: TypeDescriptor = _opaque(annotation, structs)
        elif static or synthetic:
            field_type = _opaque(base, structs)
        else:
            field_type = describe_type(annotation, structs)
        fields.append(
            FieldDescriptor(
                name=name,
                type=field_type,
                description=field_description(annotation, dataclass_fields.get(name)),
                static=static,
                synthetic=synthetic,
            )
        )
    return fields


def _enum_literal(member: Enum) -> str:
    if isinstance(member.value, str):
        return member.value
    return member.name


def default_annotation(parameter: inspect.Parameter) -> Any:
    """Annotation of a parameter; the default's type when unannotated; Any when neither."""
    if parameter.annotation is not inspect.Parameter.empty:
        return parameter.annotation
    if parameter.default is not inspect.Parameter.empty and parameter.default is not None:
        return type(parameter.default)
    return Any
