"""Find @tool members of a class and describe them as callable descriptors."""
import inspect
from typing import Any, Callable

from toolschema.annotations import ToolMetadata, tool_metadata, unwrap_method
from toolschema.exceptions import ToolDefinitionError
from toolschema.introspection import default_annotation, describe_type, parameter_metadata, resolve_hints
from toolschema.types import CallableDescriptor, ParameterDescriptor, StructType

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def tool_members(target: Any) -> list[CallableDescriptor]:
    """Callable descriptors for every @tool member of a class (or of an instance's class).
    Inherited tools are included; members appear in definition order, base classes first.
    """
    if target is None:
        raise ToolDefinitionError("Cannot enumerate tools of None")
    cls = target if isinstance(target, type) else type(target)

    members: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        members.update(vars(klass))

    descriptors: list[CallableDescriptor] = []
    for member in members.values():
        metadata = tool_metadata(member)
        if metadata is None:
            continue
        # self / cls are bound by the runtime
        skip_first = not isinstance(member, staticmethod)
        descriptors.append(describe_callable(unwrap_method(member), metadata, skip_first=skip_first))
    return descriptors


def describe_callable(
    func: Callable[..., Any],
    metadata: ToolMetadata | None = None,
    *,
    skip_first: bool = False,
) -> CallableDescriptor:
    """Callable descriptor for one function. metadata defaults to the function's @tool metadata.
    Variadic parameters (*args, **kwargs) are not part of the schema.
    """
    if metadata is None:
        metadata = tool_metadata(func) or ToolMetadata()
    signature = inspect.signature(func)
    hints = resolve_hints(func)
    structs: dict[Any, StructType] = {}

    parameters: list[ParameterDescriptor] = []
    for index, (name, parameter) in enumerate(signature.parameters.items()):
        if skip_first and index == 0:
            continue
        if parameter.kind in _VARIADIC:
            continue
        annotation = hints.get(name, default_annotation(parameter))
        marker, memory_id = parameter_metadata(annotation)
        parameters.append(
            ParameterDescriptor(
                name=name,
                type=describe_type(annotation, structs),
                required=marker.required if marker else True,
                description=marker.description if marker else None,
                memory_id=memory_id,
            )
        )

    return CallableDescriptor(
        natural_name=func.__name__,
        parameters=tuple(parameters),
        name=metadata.name,
        description_lines=metadata.description_lines,
    )
