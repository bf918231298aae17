"""Data transfer objects: Alexa payloads, review input and LLM tool calls."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping


class ToolArgumentsError(ValueError):
    """Raised when a tool call carries arguments that cannot be decoded."""


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


@dataclass(frozen=True)
class Slot:
    """One named slot of an Alexa intent."""

    name: str = ""
    value: str = ""


@dataclass(frozen=True)
class AlexaRequest:
    """The parts of an Alexa skill request the service looks at."""

    type: str = ""
    intent_name: str = ""
    slots: dict[str, Slot] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AlexaRequest":
        request = _mapping(data.get("request"))
        intent = _mapping(request.get("intent"))
        slots = {
            key: Slot(name=slot.get("name") or "", value=slot.get("value") or "")
            for key, slot in _mapping(intent.get("slots")).items()
            if isinstance(slot, Mapping)
        }
        return cls(
            type=request.get("type") or "",
            intent_name=intent.get("name") or "",
            slots=slots,
        )


@dataclass(frozen=True)
class AlexaResponse:
    """A spoken reply for Alexa."""

    text: str = ""
    version: str = "1.0"
    output_type: str = "PlainText"
    should_end_session: bool = True

    @classmethod
    def plain_text(cls, text: str) -> "AlexaResponse":
        """A plain-text reply that ends the session."""
        return cls(text=text, version="1.0", output_type="PlainText", should_end_session=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "response": {
                "outputSpeech": {"type": self.output_type, "text": self.text},
                "shouldEndSession": self.should_end_session,
            },
        }


@dataclass(frozen=True)
class ReviewInput:
    """A review submitted by a participant."""

    name: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "ReviewInput":
        """Decode a review body; raises ValueError on a malformed document."""
        if not isinstance(data, Mapping):
            raise ValueError("review must be a JSON object")
        values = {}
        for key in ("name", "description"):
            value = data.get(key)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ValueError(f"review field {key!r} must be a string")
            values[key] = value
        return cls(**values)


@dataclass
class Function:
    """A function description, or a decoded call with its parameters."""

    name: str
    description: str = ""
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass
class Tool:
    """A tool offered to the model, tagged with the purpose it serves."""

    type: str
    function: Function
    purpose: str


@dataclass(frozen=True)
class FunctionCall:
    """A function call as returned by the model; arguments are undecoded."""

    name: str = ""
    arguments: Any = None


@dataclass(frozen=True)
class ToolCall:
    function: FunctionCall = field(default_factory=FunctionCall)


@dataclass(frozen=True)
class Message:
    content: str = ""
    tool_calls: list[ToolCall] = field(default_factory=list)


@dataclass(frozen=True)
class Choice:
    message: Message = field(default_factory=Message)


def _decode_arguments(arguments: Any) -> dict[str, Any]:
    if isinstance(arguments, str):
        try:
            decoded = json.loads(arguments)
        except json.JSONDecodeError as exc:
            raise ToolArgumentsError(f"error parsing tool arguments string: {exc}") from exc
        if decoded is None:
            return {}
        if not isinstance(decoded, dict):
            raise ToolArgumentsError(
                "error parsing tool arguments string: arguments must be a JSON object"
            )
        return decoded
    if isinstance(arguments, dict):
        return arguments
    raise ToolArgumentsError("error parsing tool arguments: arguments must be a JSON object")


@dataclass(frozen=True)
class Response:
    """A chat-completion response."""

    choices: list[Choice] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Response":
        choices = []
        for raw_choice in data.get("choices") or []:
            raw_message = _mapping(_mapping(raw_choice).get("message"))
            tool_calls = [
                ToolCall(
                    function=FunctionCall(
                        name=_mapping(call).get("function", {}).get("name") or ""
                        if isinstance(_mapping(call).get("function"), Mapping)
                        else "",
                        arguments=_mapping(_mapping(call).get("function")).get("arguments"),
                    )
                )
                for call in raw_message.get("tool_calls") or []
            ]
            choices.append(
                Choice(
                    message=Message(
                        content=raw_message.get("content") or "",
                        tool_calls=tool_calls,
                    )
                )
            )
        return cls(choices=choices)

    def functions(self) -> list[Function]:
        """Decode the tool calls of the first choice into functions."""
        if not self.choices:
            raise ValueError("no choices in response")
        return [
            Function(name=call.function.name, parameters=_decode_arguments(call.function.arguments))
            for call in self.choices[0].message.tool_calls
        ]


def new_tool(name: str, purpose: str, description: str, parameters: dict[str, Any]) -> Tool:
    """Create a function tool."""
    return Tool(
        type="function",
        purpose=purpose,
        function=Function(name=name, description=description, parameters=parameters),
    )


def tools_to_openai(tools: list[Tool]) -> list[dict[str, Any]]:
    """Render tools in the shape the chat-completion API expects."""
    return [
        {
            "type": tool.type,
            "function": {
                "name": tool.function.name,
                "description": tool.function.description,
                "parameters": tool.function.parameters,
            },
        }
        for tool in tools
    ]