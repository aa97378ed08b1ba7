"""Exceptions raised by deferred_tools.

Lookups and call validation never raise: a missing tool is `None` or an invalid
`ValidationResult`. Only loading can fail, either because a record is
malformed or because the tool source itself raised (that error is propagated
unchanged, not wrapped).
"""

from __future__ import annotations


class DeferredToolsError(Exception):
    """Base class for errors raised by this package."""


class MalformedToolRecordError(DeferredToolsError, ValueError):
    """A raw tool record failed the record shape check.

    The load that contained it is rejected as a whole; the registry keeps
    whatever it held before.

    Attributes:
        index: Position of the offending record in the loaded sequence
        reason: Human-readable description of what is wrong with it
    """

    index: int
    reason: str

    def __init__(self, index: int, reason: str):
        self.index = index
        self.reason = reason
        super().__init__(f"Malformed tool record at index {index}: {reason}")
