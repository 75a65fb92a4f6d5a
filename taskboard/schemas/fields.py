"""Custom marshmallow fields and validators."""

import re
from datetime import datetime, timezone

from marshmallow import ValidationError, fields


_DATE_ONLY = re.compile(r"\d{4}-\d{2}-\d{2}")


def not_blank(value: str) -> None:
    """Reject empty and whitespace-only strings."""
    if not value or not value.strip():
        raise ValidationError("Field may not be blank.")


class DueDate(fields.DateTime):
    """Date-time field that also accepts a bare date or an empty string.

    Browser date inputs send ``YYYY-MM-DD``; an empty input means no date.
    Aware timestamps are converted to naive UTC.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault("format", "iso")
        super().__init__(**kwargs)

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, str):
            value = value.strip()
            if value == "":
                return None
            if _DATE_ONLY.fullmatch(value):
                try:
                    return datetime.strptime(value, "%Y-%m-%d")
                except ValueError as error:
                    raise self.make_error("invalid", input=value, obj_type=self.OBJ_TYPE) from error
        parsed = super()._deserialize(value, attr, data, **kwargs)
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        return parsed


class WholeNumber(fields.Integer):
    """Integer field that accepts numeric strings but never truncates fractions."""

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, float) and not value.is_integer():
            raise self.make_error("invalid")
        return super()._deserialize(value, attr, data, **kwargs)
