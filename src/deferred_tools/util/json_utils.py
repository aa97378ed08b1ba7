from __future__ import annotations

from typing import TypeAlias

JSONPyPrimitive: TypeAlias = str | int | float | bool | None
"""Python primitives that convert to JSON without special treatment."""

JSONPyDict: TypeAlias = dict[str, "JSONPyValue"]

JSONPyList: TypeAlias = list["JSONPyValue"]

JSONPyValue: TypeAlias = JSONPyPrimitive | JSONPyDict | JSONPyList
