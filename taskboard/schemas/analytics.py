"""Analytics Marshmallow schemas."""

from marshmallow import fields

from taskboard.extensions import ma


class StatisticsSchema(ma.Schema):
    """Task statistics, keyed the way the dashboard client reads them."""

    total_tasks = fields.Int(data_key="totalTasks")
    todo_count = fields.Int(data_key="todoCount")
    in_progress_count = fields.Int(data_key="inProgressCount")
    done_count = fields.Int(data_key="doneCount")
    completion_percentage = fields.Int(data_key="completionPercentage")
