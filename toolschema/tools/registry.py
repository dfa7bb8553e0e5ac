"""Central registry: collect tool specifications, get the OpenAI tool list."""
from typing import Any

from toolschema.logging_utils import get_logger, log_tool_registered
from toolschema.specifications import tool_specifications_from
from toolschema.tools.base import ToolDefinition, ToolSpecification

logger = get_logger(__name__)


class ToolRegistry:
    """Tool specifications by name, in registration order."""

    def __init__(self) -> None:
        self._specifications: dict[str, ToolSpecification] = {}

    def register(self, target: Any) -> list[ToolSpecification]:
        """Register every @tool member of a class or object. Returns the new specifications.
        Raises ValueError if a tool name is already registered; nothing is registered then.
        """
        specifications = tool_specifications_from(target)
        source = target.__qualname__ if isinstance(target, type) else type(target).__qualname__
        names = [spec.name for spec in specifications]
        for name in names:
            if name in self._specifications or names.count(name) > 1:
                raise ValueError(f"Tool '{name}' is already registered")
        for spec in specifications:
            self.add(spec, source=source)
        return specifications

    def add(self, specification: ToolSpecification, *, source: str = "direct") -> None:
        """Register one already built specification."""
        if specification.name in self._specifications:
            raise ValueError(f"Tool '{specification.name}' is already registered")
        self._specifications[specification.name] = specification
        log_tool_registered(logger, specification.name, source=source)

    def get_specifications(self) -> list[ToolSpecification]:
        return list(self._specifications.values())

    def get_openai_tools(self, include_tool_names: list[str] | None = None) -> list[ToolDefinition]:
        """OpenAI tool definitions for all tools, or only those named in include_tool_names."""
        include = set(include_tool_names) if include_tool_names is not None else None
        return [
            spec.to_openai_tool()
            for name, spec in self._specifications.items()
            if include is None or name in include
        ]

    def __contains__(self, name: Any) -> bool:
        return name in self._specifications

    def __len__(self) -> int:
        return len(self._specifications)


def get_tool_registry() -> ToolRegistry:
    """Return the singleton registry instance."""
    return _ToolRegistryInstance


_ToolRegistryInstance = ToolRegistry()
