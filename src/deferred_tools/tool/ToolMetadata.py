"""ToolMetadata - the token-cheap view of a tool.

ToolMetadata carries only a tool's name and description. This is what gets
listed in a model's context up front; the input schema stays in the registry
until a call is actually attempted.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from deferred_tools.tool.Tool import Tool


@dataclass(frozen=True)
class ToolMetadata:
    """Tool metadata visible to the model (no schema).

    Attributes:
        name: Unique identifier for this tool
        description: Human-readable description (useful for LLM tool selection)
    """

    name: str
    description: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> ToolMetadata:
        """Build metadata from a raw tool record.

        A missing or null description becomes the empty string.
        """
        return cls(
            name=record["name"],
            description=record.get("description") or "",
        )

    @classmethod
    def from_tool(cls, tool: Tool) -> ToolMetadata:
        return cls(name=tool.name, description=tool.description)

    def to_json(self) -> dict[str, str]:
        """Serialize to exactly two keys, `name` and `description`."""
        return {"name": self.name, "description": self.description}
