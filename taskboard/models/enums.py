"""Closed value sets for task fields."""

import enum


class Status(str, enum.Enum):
    """Lifecycle stage of a task."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class Priority(str, enum.Enum):
    """Urgency tag of a task."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]
