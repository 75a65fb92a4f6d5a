"""Marshmallow schemas for serialization and validation."""

from taskboard.schemas.analytics import StatisticsSchema
from taskboard.schemas.board import (
    BoardCreateSchema,
    BoardSchema,
    BoardSummarySchema,
    BoardUpdateSchema,
)
from taskboard.schemas.task import (
    TaskCreateSchema,
    TaskSchema,
    TaskUpdateSchema,
)


__all__ = [
    "BoardSchema",
    "BoardCreateSchema",
    "BoardUpdateSchema",
    "BoardSummarySchema",
    "TaskSchema",
    "TaskCreateSchema",
    "TaskUpdateSchema",
    "StatisticsSchema",
]
