"""Exceptions raised while declaring tools."""


class ToolSchemaError(Exception):
    """Base exception for toolschema errors."""


class ToolDefinitionError(ToolSchemaError):
    """Raised when a tool declaration is unusable (non-callable, bad enumeration target)."""
