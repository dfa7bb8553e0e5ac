"""Tool specifications and the registry that collects them."""
from toolschema.tools.base import ToolDefinition, ToolSpecification, make_tool

__all__ = ["ToolDefinition", "ToolSpecification", "make_tool"]
