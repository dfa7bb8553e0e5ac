"""Describe Python callables as JSON-schema tool specifications for LLM tool calling."""
from toolschema.annotations import Description, MemoryId, P, tool
from toolschema.specifications import tool_specification_from_function, tool_specifications_from
from toolschema.tools.base import ToolSpecification

__all__ = [
    "Description",
    "MemoryId",
    "P",
    "ToolSpecification",
    "tool",
    "tool_specification_from_function",
    "tool_specifications_from",
]
