"""ToolSetChange - what a registry load or invalidation changed."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from deepdiff import DeepDiff, parse_path

from deferred_tools.tool.ToolRecord import ToolRecord


def _tool_name_of(diff_path: str) -> str | None:
    """Return the top-level key of a DeepDiff path like root['search']['description']."""
    parts = parse_path(diff_path)
    return str(parts[0]) if parts else None


@dataclass(frozen=True)
class ToolSetChange:
    """Tool names added, removed and changed between two cache contents.

    Attributes:
        added: Names present only in the new contents (new load order)
        removed: Names present only in the old contents (old load order)
        changed: Names present in both whose records differ (new load order)
    """

    added: tuple[str, ...] = ()
    removed: tuple[str, ...] = ()
    changed: tuple[str, ...] = ()

    @staticmethod
    def between(
        old: Mapping[str, ToolRecord], new: Mapping[str, ToolRecord]
    ) -> ToolSetChange:
        """Diff two name -> record mappings."""
        added = tuple(name for name in new if name not in old)
        removed = tuple(name for name in old if name not in new)

        common_old = {name: old[name] for name in old if name in new}
        common_new = {name: new[name] for name in new if name in old}
        touched: set[str] = set()
        diff = DeepDiff(common_old, common_new)
        for report in diff.values():
            # Every report type iterates as DeepDiff paths
            for diff_path in report:
                name = _tool_name_of(diff_path)
                if name is not None:
                    touched.add(name)
        changed = tuple(name for name in common_new if name in touched)

        return ToolSetChange(added=added, removed=removed, changed=changed)

    def __bool__(self) -> bool:
        return bool(self.added or self.removed or self.changed)
