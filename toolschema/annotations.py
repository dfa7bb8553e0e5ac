"""Markers for declaring tools: @tool, P, MemoryId and Description.

Usage:
    class Weather:
        @tool("Current weather for a city")
        def current(
            self,
            city: Annotated[str, P("the city name")],
            days: Annotated[int, P("forecast length", required=False)] = 1,
            session: Annotated[str, MemoryId()] = "",
        ) -> str:
            ...

    @dataclass
    class Address:
        street: Annotated[str, Description("street and number")]
        zip: int
"""
from dataclasses import dataclass
from typing import Any, Callable

from toolschema.exceptions import ToolDefinitionError

TOOL_ATTRIBUTE = "__tool__"


@dataclass(frozen=True)
class ToolMetadata:
    description_lines: tuple[str, ...] = ()
    name: str | None = None


@dataclass(frozen=True)
class P:
    """Parameter metadata. required=False is the only way to make a parameter optional."""

    description: str
    required: bool = True


@dataclass(frozen=True)
class MemoryId:
    """Marks a parameter the runtime fills in (conversation/session id). Excluded from the schema."""


class Description:
    """Description of a structured type's field. Multiple lines are joined with a space."""

    __slots__ = ("lines",)

    def __init__(self, *lines: str) -> None:
        self.lines = lines

    @property
    def text(self) -> str:
        return " ".join(self.lines)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Description) and other.lines == self.lines

    def __hash__(self) -> int:
        return hash(self.lines)

    def __repr__(self) -> str:
        return f"Description{self.lines!r}"


def unwrap_method(member: Any) -> Callable[..., Any]:
    """The plain function behind a staticmethod/classmethod, or the member itself."""
    if isinstance(member, (staticmethod, classmethod)):
        return member.__func__
    return member


def tool(*args: Any, name: str | None = None) -> Any:
    """Mark a function or method as a tool.
    Bare: @tool. With description lines (joined with newlines): @tool("line one", "line two").
    name overrides the function's own name when it is not blank.
    """
    if len(args) == 1 and not isinstance(args[0], str) and name is None:
        return _mark(args[0], ToolMetadata())

    for line in args:
        if not isinstance(line, str):
            raise ToolDefinitionError(f"@tool description lines must be strings, got {type(line).__name__}")
    metadata = ToolMetadata(description_lines=tuple(args), name=name)

    def decorator(func: Any) -> Any:
        return _mark(func, metadata)

    return decorator


def tool_metadata(member: Any) -> ToolMetadata | None:
    return getattr(unwrap_method(member), TOOL_ATTRIBUTE, None)


def _mark(member: Any, metadata: ToolMetadata) -> Any:
    func = unwrap_method(member)
    if not callable(func):
        raise ToolDefinitionError(f"@tool can only decorate callables, got {type(member).__name__}")
    setattr(func, TOOL_ATTRIBUTE, metadata)
    return member
