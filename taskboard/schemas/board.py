"""Board-related Marshmallow schemas."""

from marshmallow import EXCLUDE, Schema, fields, validate

from taskboard.extensions import ma
from taskboard.presentation import board_background
from taskboard.schemas.fields import not_blank
from taskboard.schemas.task import TaskSchema


class BoardSchema(ma.Schema):
    """Schema for board serialization, tasks embedded."""

    id = fields.Int(dump_only=True)
    name = fields.Str()
    description = fields.Str(allow_none=True)
    color = fields.Str(allow_none=True)
    created_at = fields.DateTime(dump_only=True, format="iso")
    updated_at = fields.DateTime(dump_only=True, format="iso")
    tasks = fields.List(fields.Nested(TaskSchema), dump_only=True)


class BoardCreateSchema(Schema):
    """Schema for board creation validation."""

    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=[not_blank, validate.Length(max=255)])
    description = fields.Str(allow_none=True)
    color = fields.Str(allow_none=True, validate=validate.Length(max=50))


class BoardUpdateSchema(Schema):
    """Schema for board update validation."""

    class Meta:
        unknown = EXCLUDE

    name = fields.Str(validate=[not_blank, validate.Length(max=255)])
    description = fields.Str(allow_none=True)
    color = fields.Str(allow_none=True, validate=validate.Length(max=50))


class BoardSummarySchema(ma.Schema):
    """Board card shown on the dashboard."""

    id = fields.Int()
    name = fields.Str()
    description = fields.Str(allow_none=True)
    color = fields.Str(allow_none=True)
    background = fields.Method("get_background")
    task_count = fields.Method("get_task_count")
    created_at = fields.DateTime(format="iso")

    def get_background(self, board) -> str:
        return board_background(board.color)

    def get_task_count(self, board) -> int:
        return len(board.tasks)
