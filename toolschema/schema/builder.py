"""Schema builder: tool specifications from callable descriptors.

Parameters are resolved one at a time. Simple types go through the classifier;
collections become arrays of their element schema; everything else is an object
whose properties are the recursively resolved fields of the structured type.

Cycles are cut with a visited set holding the structured types on the current
expansion path. A type is removed again once its fields are expanded, so two
sibling fields of the same type are both expanded in full. A field that points
back to one of its ancestors becomes {"type": "object"} without properties.
"""
from typing import Any

from toolschema.logging_utils import get_logger, log_tool_spec_built
from toolschema.schema.classifier import NOT_SIMPLE, classify
from toolschema.schema.properties import (
    ARRAY,
    OBJECT,
    SchemaProperty,
    description,
    fragment_items,
    items,
    properties,
    to_schema,
)
from toolschema.tools.base import ToolSpecification
from toolschema.types import (
    ArrayType,
    CallableDescriptor,
    CollectionType,
    StructType,
    TypeDescriptor,
)

logger = get_logger(__name__)


def tool_specification_from(callable_descriptor: CallableDescriptor) -> ToolSpecification:
    """Build the ToolSpecification for one tool-eligible callable."""
    name = callable_descriptor.tool_name
    parameters: dict[str, dict[str, Any]] = {}
    required: list[str] = []
    visited: set[StructType] = set()

    for parameter in callable_descriptor.parameters:
        if parameter.memory_id:
            logger.debug("parameter_skipped_memory_id", tool_name=name, parameter=parameter.name)
            continue
        parameters[parameter.name] = resolve_fragment(parameter.type, parameter.description, visited)
        if parameter.required:
            required.append(parameter.name)

    spec = ToolSpecification(
        name=name,
        description="\n".join(callable_descriptor.description_lines),
        parameters=parameters,
        required=tuple(required),
    )
    log_tool_spec_built(logger, name, parameter_count=len(parameters), required_count=len(required))
    return spec


def resolve_fragment(
    type_descriptor: TypeDescriptor,
    description_text: str | None = None,
    visited: set[StructType] | None = None,
) -> dict[str, Any]:
    """Schema fragment for one parameter or field, with its description merged in."""
    if visited is None:
        visited = set()
    description_property = description(description_text)

    simple = classify(type_descriptor, description_property)
    if simple is not NOT_SIMPLE:
        return to_schema(simple)

    if isinstance(type_descriptor, (CollectionType, ArrayType)):
        return to_schema([ARRAY, _array_items(type_descriptor.element, visited), description_property])

    if isinstance(type_descriptor, StructType):
        return to_schema([OBJECT, expand_fields(type_descriptor, visited), description_property])

    # Not a descriptor the builder knows: generic object rather than an error.
    return to_schema([OBJECT, description_property])


def expand_fields(struct: StructType, visited: set[StructType] | None = None) -> SchemaProperty | None:
    """properties={field name: fragment} for a structured type, or None if it is already on the path."""
    if visited is None:
        visited = set()
    if struct in visited:
        logger.debug("struct_cycle_truncated", struct=struct.name)
        return None

    visited.add(struct)
    try:
        fields: dict[str, dict[str, Any]] = {}
        for field in struct.fields:
            if field.static or field.synthetic:
                continue
            fields[field.name] = resolve_fragment(field.type, field.description, visited)
    finally:
        visited.discard(struct)
    return properties(fields)


def _array_items(element: TypeDescriptor | None, visited: set[StructType]) -> SchemaProperty:
    if element is None:
        logger.debug("collection_element_unknown")
        return items(OBJECT)
    return fragment_items(resolve_fragment(element, None, visited))
