from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_schema: Dict[str, Any]

    @staticmethod
    def from_spec(spec: Dict[str, Any]) -> "ToolDefinition":
        return ToolDefinition(
            name=spec["name"],
            description=spec.get("description", ""),
            input_schema=spec.get("inputSchema", {"type": "object", "properties": {}}),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


@dataclass
class ToolCallResult:
    content: List[Dict[str, str]] = field(default_factory=list)
    is_error: bool = False

    @staticmethod
    def text(text: str) -> "ToolCallResult":
        return ToolCallResult(content=[{"type": "text", "text": text}])

    @staticmethod
    def error(message: str) -> "ToolCallResult":
        return ToolCallResult(content=[{"type": "text", "text": f"Error: {message}"}], is_error=True)

    @property
    def first_text(self) -> str:
        return self.content[0]["text"] if self.content else ""

    def to_dict(self) -> Dict[str, Any]:
        return {"content": self.content, "isError": self.is_error}
