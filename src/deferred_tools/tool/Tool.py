"""Tool - a typed tool definition.

Hosts that already parse tool listings into objects can load those directly
instead of raw records. A Tool converts to the same record shape the registry
stores for raw input.
"""

from __future__ import annotations

from dataclasses import dataclass

from deferred_tools.tool.ToolMetadata import ToolMetadata
from deferred_tools.tool.ToolRecord import ToolRecord
from deferred_tools.util.json_utils import JSONPyDict
from deferred_tools.util.snapshot import snapshot


@dataclass
class Tool:
    """A tool as listed by a tool server.

    Attributes:
        name: Unique identifier for this tool
        description: Human-readable description (useful for LLM tool selection)
        input_schema: JSON schema describing the call arguments, if any
    """

    name: str
    description: str = ""
    input_schema: JSONPyDict | None = None

    def to_record(self) -> ToolRecord:
        """Convert to a raw record, omitting `inputSchema` when there is none."""
        record: ToolRecord = {"name": self.name, "description": self.description}
        if self.input_schema is not None:
            record["inputSchema"] = snapshot(self.input_schema)
        return record

    def to_metadata(self) -> ToolMetadata:
        """Extract the lightweight metadata view."""
        return ToolMetadata.from_tool(self)
