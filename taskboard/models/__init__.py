"""Database models."""

from taskboard.models.board import Board
from taskboard.models.enums import Priority, Status
from taskboard.models.task import Task


__all__ = ["Board", "Task", "Status", "Priority"]
