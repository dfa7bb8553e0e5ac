"""Tool specifications straight from Python classes, instances and functions."""
import inspect
from typing import Any, Callable

from toolschema.annotations import tool_metadata
from toolschema.exceptions import ToolDefinitionError
from toolschema.members import describe_callable, tool_members
from toolschema.schema.builder import tool_specification_from
from toolschema.tools.base import ToolSpecification


def tool_specifications_from(target: Any) -> list[ToolSpecification]:
    """ToolSpecifications for all @tool members of a class, or of the class of an object."""
    return [tool_specification_from(descriptor) for descriptor in tool_members(target)]


def tool_specification_from_function(func: Callable[..., Any]) -> ToolSpecification:
    """ToolSpecification for one @tool function. Bound and unbound methods are described without self/cls."""
    metadata = tool_metadata(getattr(func, "__func__", func))
    if metadata is None:
        raise ToolDefinitionError(f"{getattr(func, '__name__', func)!r} is not decorated with @tool")
    return tool_specification_from(describe_callable(func, metadata, skip_first=_is_unbound_method(func)))


def _is_unbound_method(func: Callable[..., Any]) -> bool:
    """A function defined in a class body and taken from the class, e.g. Weather.current."""
    if not inspect.isfunction(func):
        return False
    owner, _, _ = func.__qualname__.rpartition(".")
    if not owner or owner.endswith("<locals>"):
        return False
    parameters = list(inspect.signature(func).parameters.values())
    return bool(parameters) and parameters[0].name in ("self", "cls")
