"""Tests for ToolMetadata and Tool."""

import json

from deferred_tools.tool.Tool import Tool
from deferred_tools.tool.ToolMetadata import ToolMetadata


COMPLEX_SEARCH = {
    "name": "complex_search",
    "description": "Searches across multiple data sources",
    "inputSchema": {
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "Search query string"},
            "filters": {
                "type": "object",
                "properties": {
                    "date_from": {"type": "string", "format": "date"},
                    "date_to": {"type": "string", "format": "date"},
                    "categories": {"type": "array", "items": {"type": "string"}},
                },
            },
            "limit": {"type": "integer", "minimum": 1, "maximum": 100, "default": 10},
            "sort_by": {"type": "string", "enum": ["relevance", "date", "popularity"]},
        },
        "required": ["query"],
    },
}


class TestToolMetadata:
    """Tests for construction, equality and serialization."""

    def test_from_constructor(self) -> None:
        """Fields are stored as given."""
        metadata = ToolMetadata(name="test_tool", description="A test tool")

        assert metadata.name == "test_tool"
        assert metadata.description == "A test tool"

    def test_from_record(self) -> None:
        """from_record copies name and description and ignores the schema."""
        metadata = ToolMetadata.from_record(
            {
                "name": "search",
                "description": "Search for information",
                "inputSchema": {"type": "object"},
            }
        )

        assert metadata == ToolMetadata("search", "Search for information")

    def test_missing_description_defaults_to_empty(self) -> None:
        """A record without description gets an empty one."""
        assert ToolMetadata.from_record({"name": "no_desc_tool"}).description == ""

    def test_null_description_defaults_to_empty(self) -> None:
        """A null description is treated like a missing one."""
        metadata = ToolMetadata.from_record({"name": "t", "description": None})

        assert metadata.description == ""

    def test_to_json_has_exactly_name_and_description(self) -> None:
        """Serialized metadata has two keys and never inputSchema."""
        data = ToolMetadata(name="my_tool", description="My description").to_json()

        assert data == {"name": "my_tool", "description": "My description"}
        assert "inputSchema" not in data

    def test_equality_and_hash(self) -> None:
        """Equality and hash follow (name, description)."""
        a = ToolMetadata(name="tool", description="desc")
        b = ToolMetadata(name="tool", description="desc")
        c = ToolMetadata(name="tool", description="different")

        assert a == b
        assert hash(a) == hash(b)
        assert a != c

    def test_repr_mentions_fields(self) -> None:
        """repr shows both name and description."""
        text = repr(ToolMetadata(name="test", description="Test tool"))

        assert "test" in text
        assert "Test tool" in text


class TestTokenEfficiency:
    """The metadata view must stay much smaller than the full record."""

    def test_metadata_smaller_than_full_record(self) -> None:
        """Serialized metadata is under half the size of the serialized record."""
        metadata_json = ToolMetadata.from_record(COMPLEX_SEARCH).to_json()

        assert set(metadata_json) == {"name", "description"}
        assert len(json.dumps(metadata_json)) < len(json.dumps(COMPLEX_SEARCH)) / 2


class TestTool:
    """Tests for typed Tool objects."""

    def test_to_record_includes_input_schema(self) -> None:
        """to_record carries a copy of the input schema under inputSchema."""
        schema = {"type": "object", "required": ["expression"]}
        tool = Tool(name="calculator", description="Performs calculations", input_schema=schema)

        record = tool.to_record()

        assert record == {
            "name": "calculator",
            "description": "Performs calculations",
            "inputSchema": {"type": "object", "required": ["expression"]},
        }
        assert record["inputSchema"] is not schema

    def test_to_record_omits_missing_input_schema(self) -> None:
        """A tool without schema produces a record without inputSchema."""
        assert Tool(name="ping").to_record() == {"name": "ping", "description": ""}

    def test_to_metadata(self) -> None:
        """to_metadata matches ToolMetadata.from_tool."""
        tool = Tool(name="calculator", description="Performs calculations")

        assert tool.to_metadata() == ToolMetadata("calculator", "Performs calculations")
