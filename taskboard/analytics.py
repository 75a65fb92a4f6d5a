"""Task statistics derived from a full task list."""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from taskboard.models.enums import Status


@dataclass(frozen=True)
class TaskStatistics:
    total_tasks: int = 0
    todo_count: int = 0
    in_progress_count: int = 0
    done_count: int = 0
    completion_percentage: int = 0


def completion_percentage(done: int, total: int) -> int:
    """Share of done tasks as a whole percentage, halves rounded up.

    Returns 0 when there are no tasks.
    """
    if total <= 0:
        return 0
    return (200 * done + total) // (2 * total)


def _status_of(task: Any) -> Status:
    value = task.get("status") if isinstance(task, Mapping) else getattr(task, "status", task)
    return Status(getattr(value, "value", value))


def compute_statistics(tasks: Iterable[Any]) -> TaskStatistics:
    """Count tasks per status and derive the completion percentage.

    Args:
        tasks: Task records, mappings with a ``status`` key, or statuses.

    Returns:
        Statistics over every task given.

    Raises:
        ValueError: If a task carries a status outside the Status enum.
    """
    counts = {status: 0 for status in Status}
    for task in tasks:
        counts[_status_of(task)] += 1

    total = sum(counts.values())
    done = counts[Status.DONE]
    return TaskStatistics(
        total_tasks=total,
        todo_count=counts[Status.TODO],
        in_progress_count=counts[Status.IN_PROGRESS],
        done_count=done,
        completion_percentage=completion_percentage(done, total),
    )
