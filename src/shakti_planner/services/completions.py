"""Forced tool-call completion interface."""

from dataclasses import dataclass, field
from typing import Literal, Protocol

from shakti_planner.services.prompts import PromptPair

RawCompletion = dict[str, object]

FieldType = Literal["string", "number", "integer", "boolean"]


@dataclass(frozen=True)
class ToolField:
    """A single field of a tool's argument schema."""

    type: FieldType
    description: str = ""
    required: bool = True


@dataclass(frozen=True)
class ToolSchema:
    """Named function schema the completion endpoint must answer with."""

    name: str
    description: str
    fields: dict[str, ToolField] = field(default_factory=dict)

    def parameters(self) -> dict[str, object]:
        """Render the JSON schema for the tool arguments."""
        properties: dict[str, object] = {}
        for name, tool_field in self.fields.items():
            prop: dict[str, object] = {"type": tool_field.type}
            if tool_field.description:
                prop["description"] = tool_field.description
            properties[name] = prop
        return {
            "type": "object",
            "properties": properties,
            "required": [
                name for name, tool_field in self.fields.items() if tool_field.required
            ],
            "additionalProperties": False,
        }

    def tool_definition(self) -> dict[str, object]:
        """Return the tool entry for a chat completion request."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters(),
            },
        }

    def tool_choice(self) -> dict[str, object]:
        """Return the tool_choice value forcing this tool."""
        return {"type": "function", "function": {"name": self.name}}


class CompletionClient(Protocol):
    """Interface for a chat completion endpoint with forced tool calls."""

    async def complete(self, prompt: PromptPair, tool: ToolSchema) -> RawCompletion:
        """Send one request and return the raw completion body."""
