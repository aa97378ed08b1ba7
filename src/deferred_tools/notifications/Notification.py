"""Notification - a server-pushed message the manager may react to.

The only method the manager understands is the MCP tool list change
notification; hosts forward whatever notifications their client receives and
the manager ignores the rest.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from deferred_tools.util.json_utils import JSONPyDict

TOOLS_LIST_CHANGED = "notifications/tools/list_changed"


@dataclass(frozen=True)
class Notification:
    """A protocol notification.

    Attributes:
        method: Notification method name, e.g. `notifications/tools/list_changed`
        params: Notification parameters, if any
    """

    method: str
    params: JSONPyDict = field(default_factory=dict)

    @classmethod
    def tools_list_changed(cls) -> Notification:
        return cls(method=TOOLS_LIST_CHANGED)

    @property
    def is_tools_list_changed(self) -> bool:
        return self.method == TOOLS_LIST_CHANGED
