"""Tool specification: name, description, and JSON schema for parameters."""
from dataclasses import dataclass, field
from typing import Any

from openai.types.chat import ChatCompletionToolParam

# OpenAI tool definition shape: "function" type with name, description, parameters (JSON Schema)
ToolDefinition = ChatCompletionToolParam  # {"type": "function", "function": {"name", "description", "parameters"}}


@dataclass(frozen=True)
class ToolSpecification:
    """A callable's name and description with the schema of its parameters.
    parameters: parameter name -> merged schema fragment, in declaration order.
    required: names of the parameters the caller must supply, in declaration order.
    """

    name: str
    description: str = ""
    parameters: dict[str, dict[str, Any]] = field(default_factory=dict)
    required: tuple[str, ...] = ()

    def parameters_schema(self) -> dict[str, Any]:
        """JSON Schema for the whole argument object."""
        return {
            "type": "object",
            "properties": self.parameters,
            "required": list(self.required),
        }

    def to_openai_tool(self) -> ToolDefinition:
        return make_tool(self.name, self.description, self.parameters_schema())


def make_tool(
    name: str,
    description: str,
    parameters: dict[str, Any],
) -> ToolDefinition:
    """Build an OpenAI tool definition.
    parameters: JSON Schema for the function (e.g. {"type": "object", "properties": {...}, "required": [...]}).
    """
    definition: ToolDefinition = {
        "type": "function",
        "function": {
            "name": name,
            "description": description,
            "parameters": parameters,
        },
    }
    return definition
