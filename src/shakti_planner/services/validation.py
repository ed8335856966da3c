"""Validation of forced tool call completions."""

import json
import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from shakti_planner.errors import MalformedPayloadError, NoStructuredPayloadError
from shakti_planner.services.completions import RawCompletion, ToolSchema

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)


def extract_payload(
    raw: RawCompletion, tool: ToolSchema, model: type[PayloadT]
) -> PayloadT:
    """Locate the forced tool call in a completion and validate its arguments."""
    arguments = extract_tool_arguments(raw, tool)
    return parse_arguments(arguments, model)


def extract_tool_arguments(raw: RawCompletion, tool: ToolSchema) -> str:
    """Return the raw argument string of the forced tool call."""
    choices = raw.get("choices")
    if not isinstance(choices, list) or not choices:
        raise NoStructuredPayloadError("Completion has no choices")
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    tool_calls = message.get("tool_calls") if isinstance(message, dict) else None
    if not isinstance(tool_calls, list) or not tool_calls:
        raise NoStructuredPayloadError()

    for call in tool_calls:
        function = call.get("function") if isinstance(call, dict) else None
        if not isinstance(function, dict) or function.get("name") != tool.name:
            continue
        arguments = function.get("arguments")
        if isinstance(arguments, dict):
            return json.dumps(arguments)
        if isinstance(arguments, str):
            return arguments
        raise MalformedPayloadError(
            f"Tool call {tool.name} has no argument payload",
            raw_arguments=None,
        )
    raise NoStructuredPayloadError(f"No {tool.name} tool call in response")


def parse_arguments(arguments: str, model: type[PayloadT]) -> PayloadT:
    """Parse a tool call argument string into the required payload model."""
    try:
        return model.model_validate_json(arguments)
    except ValidationError as exc:
        logger.warning(
            "Tool call arguments failed validation",
            extra={
                "payload_model": model.__name__,
                "arguments": arguments,
                "errors": exc.errors(include_url=False, include_input=False),
            },
        )
        raise MalformedPayloadError(
            f"Malformed tool call arguments: {_describe(exc)}",
            raw_arguments=arguments,
        ) from exc


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors(include_url=False, include_input=False):
        location = ".".join(str(part) for part in error["loc"]) or "payload"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)
