"""Type descriptors: the narrow view of a type that the schema builder works from."""
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Union


class Primitive(Enum):
    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"


@dataclass(frozen=True)
class PrimitiveType:
    kind: Primitive


@dataclass(frozen=True)
class ArrayType:
    """Fixed-shape native array (tuple[T, ...]) of a known element type."""

    element: "TypeDescriptor"


@dataclass(frozen=True)
class CollectionType:
    """Ordered collection or array-like container. element is None when it was not parameterized."""

    element: "TypeDescriptor | None" = None


@dataclass(frozen=True)
class EnumType:
    name: str
    values: tuple[str, ...]


@dataclass(frozen=True)
class FieldDescriptor:
    """One declared member of a structured type.
    static: belongs to the type's definition (class-level / meta), not instance data.
    synthetic: implicit reference added by the host (e.g. outer-instance back-reference).
    """

    name: str
    type: "TypeDescriptor"
    description: str | None = None
    static: bool = False
    synthetic: bool = False


class StructType:
    """Structured record; fields given directly or by a loader called on first access. Compared by identity."""

    def __init__(
        self,
        name: str,
        fields: Iterable[FieldDescriptor] | None = None,
        *,
        loader: Callable[[], Iterable[FieldDescriptor]] | None = None,
    ) -> None:
        if fields is not None and loader is not None:
            raise ValueError("StructType takes either fields or loader, not both")
        self.name = name
        self._fields: tuple[FieldDescriptor, ...] | None = tuple(fields) if fields is not None else None
        self._loader = loader
        self._lock = threading.Lock()

    @property
    def fields(self) -> tuple[FieldDescriptor, ...]:
        if self._fields is None:
            with self._lock:
                if self._fields is None:
                    self._fields = tuple(self._loader()) if self._loader else ()
                    self._loader = None
        return self._fields

    def set_fields(self, fields: Iterable[FieldDescriptor]) -> None:
        """Assign fields after construction (for hand-built cyclic graphs). Only allowed once."""
        with self._lock:
            if self._fields is not None or self._loader is not None:
                raise ValueError(f"fields of {self.name} are already defined")
            self._fields = tuple(fields)

    def __repr__(self) -> str:
        return f"StructType({self.name!r})"


TypeDescriptor = Union[PrimitiveType, ArrayType, CollectionType, EnumType, StructType]

STRING_TYPE = PrimitiveType(Primitive.STRING)
BOOLEAN_TYPE = PrimitiveType(Primitive.BOOLEAN)
INTEGER_TYPE = PrimitiveType(Primitive.INTEGER)
NUMBER_TYPE = PrimitiveType(Primitive.NUMBER)


@dataclass(frozen=True)
class ParameterDescriptor:
    """A callable's formal parameter as the schema builder sees it.
    memory_id: supplied by the calling runtime (conversation/session id); never part of the schema.
    """

    name: str
    type: TypeDescriptor
    required: bool = True
    description: str | None = None
    memory_id: bool = False


@dataclass(frozen=True)
class CallableDescriptor:
    """A tool-eligible callable: natural name, optional overrides, and ordered parameters."""

    natural_name: str
    parameters: tuple[ParameterDescriptor, ...] = ()
    name: str | None = None
    description_lines: tuple[str, ...] = ()

    @property
    def tool_name(self) -> str:
        if self.name and self.name.strip():
            return self.name
        return self.natural_name
