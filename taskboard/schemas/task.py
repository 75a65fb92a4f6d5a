"""Task-related Marshmallow schemas."""

from marshmallow import EXCLUDE, Schema, fields, validate

from taskboard.errors import MAX_ID
from taskboard.extensions import ma
from taskboard.models import Priority, Status
from taskboard.schemas.fields import DueDate, WholeNumber, not_blank


class TaskSchema(ma.Schema):
    """Schema for task serialization."""

    id = fields.Int(dump_only=True)
    board_id = fields.Int()
    title = fields.Str()
    description = fields.Str(allow_none=True)
    status = fields.Enum(Status, by_value=True)
    priority = fields.Enum(Priority, by_value=True, allow_none=True)
    assigned_to = fields.Str(allow_none=True)
    due_date = fields.DateTime(format="iso", allow_none=True)
    created_at = fields.DateTime(dump_only=True, format="iso")
    updated_at = fields.DateTime(dump_only=True, format="iso")


class TaskCreateSchema(Schema):
    """Schema for task creation validation."""

    class Meta:
        unknown = EXCLUDE

    board_id = WholeNumber(required=True, validate=validate.Range(min=1, max=MAX_ID))
    title = fields.Str(required=True, validate=[not_blank, validate.Length(max=255)])
    description = fields.Str(allow_none=True)
    status = fields.Enum(Status, by_value=True, load_default=Status.TODO)
    priority = fields.Enum(Priority, by_value=True, allow_none=True)
    assigned_to = fields.Str(allow_none=True, validate=validate.Length(max=255))
    due_date = DueDate(allow_none=True)


class TaskUpdateSchema(Schema):
    """Schema for task update validation.

    Every field is optional; only the keys present in the body are loaded.
    """

    class Meta:
        unknown = EXCLUDE

    board_id = WholeNumber(validate=validate.Range(min=1, max=MAX_ID))
    title = fields.Str(validate=[not_blank, validate.Length(max=255)])
    description = fields.Str(allow_none=True)
    status = fields.Enum(Status, by_value=True)
    priority = fields.Enum(Priority, by_value=True, allow_none=True)
    assigned_to = fields.Str(allow_none=True, validate=validate.Length(max=255))
    due_date = DueDate(allow_none=True)
