"""ToolRecord - a raw tool definition as listed by a tool server.

Records are plain JSON documents. Only `name`, `description` and
`inputSchema.required` mean anything to this package; everything else is kept
verbatim for whoever executes the tool.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias

import jsonschema

from deferred_tools.errors import MalformedToolRecordError
from deferred_tools.util.json_utils import JSONPyValue

ToolRecord: TypeAlias = dict[str, JSONPyValue]

TOOL_RECORD_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["name"],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "description": {"type": ["string", "null"]},
        "inputSchema": {
            "type": ["object", "null"],
            "properties": {
                "required": {
                    "type": ["array", "null"],
                    "items": {"type": "string"},
                },
            },
        },
    },
}
"""Minimal shape every raw record must have before it can be cached."""

_record_validator = jsonschema.Draft202012Validator(TOOL_RECORD_SCHEMA)


def check_tool_record(record: Any, index: int) -> ToolRecord:
    """Check a raw record's shape and return it as a plain dict.

    Args:
        record: The raw record as received from the tool source
        index: Position of the record in its batch (for the error message)

    Returns:
        The record as a `dict` (a shallow conversion if it was another Mapping)

    Raises:
        MalformedToolRecordError: If the record has no usable name, or its
            description or inputSchema have the wrong type
    """
    if not isinstance(record, Mapping):
        raise MalformedToolRecordError(
            index, f"expected a mapping, got {type(record).__name__}"
        )
    record = dict(record)
    try:
        _record_validator.validate(record)
    except jsonschema.ValidationError as e:
        raise MalformedToolRecordError(index, e.message) from e
    return record
