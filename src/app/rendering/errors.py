"""Exceptions raised while rendering report categories."""

from __future__ import annotations


class MissingGroupDefinition(LookupError):
    """An audit reference names a group absent from the group metadata."""

    def __init__(self, group_id: str) -> None:
        super().__init__(group_id)
        self.group_id = group_id

    def __str__(self) -> str:
        return f"No group definition found for group '{self.group_id}'."


__all__ = ["MissingGroupDefinition"]
