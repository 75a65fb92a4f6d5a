"""JSON and CSV export documents for boards and their tasks."""

import csv
import io
from datetime import datetime
from typing import Any, Sequence

from taskboard.analytics import TaskStatistics
from taskboard.models import Board
from taskboard.schemas import BoardSchema, StatisticsSchema


EXPORT_FORMATS = ("json", "csv")

BOARD_HEADER = [
    "Board Name",
    "Board Description",
    "Task Count",
    "Total Tasks",
    "Todo Count",
    "In Progress Count",
    "Done Count",
    "Completion %",
]

TASK_HEADER = [
    "Board Name",
    "Task Title",
    "Task Description",
    "Status",
    "Assigned To",
    "Priority",
    "Due Date",
    "Created Date",
]


def export_filename(fmt: str, now: datetime) -> str:
    return f"boards-export-{now.date().isoformat()}.{fmt}"


def export_json(boards: Sequence[Board], statistics: TaskStatistics, now: datetime) -> dict[str, Any]:
    """Build the JSON export document.

    Args:
        boards: Boards with their tasks loaded.
        statistics: Statistics over all tasks.
        now: Export timestamp.

    Returns:
        Serializable export document.
    """
    board_dicts = []
    for board, data in zip(boards, BoardSchema(many=True).dump(boards)):
        data["taskCount"] = len(board.tasks)
        board_dicts.append(data)

    return {
        "exportDate": now.isoformat(),
        "statistics": StatisticsSchema().dump(statistics),
        "boards": board_dicts,
    }


def _date(value: datetime | None, missing: str = "") -> str:
    return value.date().isoformat() if value else missing


def _enum_text(value) -> str:
    if value is None:
        return ""
    return getattr(value, "value", str(value))


def export_csv(boards: Sequence[Board], statistics: TaskStatistics) -> str:
    """Build the CSV export document.

    A board summary section comes first, then every task grouped by board.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")

    writer.writerow(BOARD_HEADER)
    for board in boards:
        writer.writerow(
            [
                board.name,
                board.description or "",
                len(board.tasks),
                statistics.total_tasks,
                statistics.todo_count,
                statistics.in_progress_count,
                statistics.done_count,
                f"{statistics.completion_percentage}%",
            ]
        )

    buffer.write("\n\nTasks by Board\n")
    writer.writerow(TASK_HEADER)
    for board in boards:
        for task in board.tasks:
            writer.writerow(
                [
                    board.name,
                    task.title,
                    task.description or "",
                    _enum_text(task.status),
                    task.assigned_to or "",
                    _enum_text(task.priority),
                    _date(task.due_date, missing="Not set"),
                    _date(task.created_at),
                ]
            )

    return buffer.getvalue()
