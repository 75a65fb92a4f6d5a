"""Partial updates for boards and tasks.

A request body is loaded into an update structure where every field is
either a value or ``UNSET``. ``apply_update`` copies the set fields onto a
record and leaves the rest alone, so a body of ``{"status": "done"}`` never
touches a task's title, assignee or due date.
"""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Mapping

from taskboard.models.enums import Priority, Status


class _Unset:
    """Marker for a field absent from the request body."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True)
class _FieldUpdate:
    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]):
        """Build an update from validated data; keys not in ``data`` stay UNSET."""
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in names})

    def changes(self) -> dict[str, Any]:
        """Fields that carry a value, keyed by name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def is_set(self, name: str) -> bool:
        return getattr(self, name) is not UNSET


@dataclass(frozen=True)
class BoardUpdate(_FieldUpdate):
    name: str = UNSET
    description: str | None = UNSET
    color: str | None = UNSET


@dataclass(frozen=True)
class TaskUpdate(_FieldUpdate):
    board_id: int = UNSET
    title: str = UNSET
    description: str | None = UNSET
    status: Status = UNSET
    priority: Priority | None = UNSET
    assigned_to: str | None = UNSET
    due_date: datetime | None = UNSET


def apply_update(record: Any, update: _FieldUpdate) -> list[str]:
    """Merge an update onto a record.

    Present fields overwrite, absent fields keep their current value.

    Args:
        record: Model instance to modify in place.
        update: Update carrying the fields supplied by the client.

    Returns:
        Names of the fields whose value actually changed.
    """
    changed = []
    for name, value in update.changes().items():
        if getattr(record, name) != value:
            setattr(record, name, value)
            changed.append(name)
    return changed
