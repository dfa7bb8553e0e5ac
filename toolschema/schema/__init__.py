"""Type classification and schema building."""
from toolschema.schema.builder import expand_fields, resolve_fragment, tool_specification_from
from toolschema.schema.classifier import NOT_SIMPLE, classify

__all__ = ["NOT_SIMPLE", "classify", "expand_fields", "resolve_fragment", "tool_specification_from"]
