"""Task CRUD endpoints."""

import logging

from flask import Blueprint, request
from marshmallow import ValidationError

from taskboard.errors import error_response, format_validation_error, parse_id
from taskboard.schemas import TaskCreateSchema, TaskSchema, TaskUpdateSchema
from taskboard.store import TaskBoardStore, inject_store
from taskboard.telemetry import get_meter, get_tracer
from taskboard.updates import TaskUpdate


logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)
meter = get_meter(__name__)

tasks_created = meter.create_counter(
    name="tasks.created",
    description="Tasks created",
    unit="1",
)

status_changes = meter.create_counter(
    name="tasks.status_changes",
    description="Task status transitions",
    unit="1",
)

tasks_bp = Blueprint("tasks", __name__, url_prefix="/api/tasks")


def board_filter() -> int | None:
    """Read the optional ``boardId`` query parameter."""
    raw = request.args.get("boardId")
    if raw is None or raw == "":
        return None
    return parse_id(raw, "boardId")


@tasks_bp.route("", methods=["GET"], strict_slashes=False)
@inject_store
def list_tasks(store: TaskBoardStore):
    """List tasks, newest first.

    Query params:
        boardId: Only return tasks of this board.

    Returns:
        JSON list of tasks.
    """
    tasks = store.list_tasks(board_filter())
    return TaskSchema(many=True).jsonify(tasks)


@tasks_bp.route("/<task_id>", methods=["GET"])
@inject_store
def get_task(task_id: str, store: TaskBoardStore):
    task = store.get_task(parse_id(task_id, "task id"))
    return TaskSchema().jsonify(task)


@tasks_bp.route("", methods=["POST"], strict_slashes=False)
@inject_store
def create_task(store: TaskBoardStore):
    """Create a task on an existing board.

    Returns:
        JSON response with created task.
    """
    with tracer.start_as_current_span("task.create") as span:
        # Validate request data
        try:
            data = TaskCreateSchema().load(request.get_json() or {})
        except ValidationError as err:
            return error_response(format_validation_error(err), 400)

        task = store.create_task(data)

        span.set_attribute("task.id", task.id)
        span.set_attribute("board.id", task.board_id)
        tasks_created.add(1, {"status": task.status.value})
        logger.info(f"Task created: {task.id}", extra={"task_id": task.id, "board_id": task.board_id})

        return TaskSchema().jsonify(task), 201


@tasks_bp.route("/<task_id>", methods=["PUT"])
@inject_store
def update_task(task_id: str, store: TaskBoardStore):
    """Update the fields present in the request body.

    Moving a task to another board is done by sending a new ``board_id``.

    Args:
        task_id: Task id from the URL.

    Returns:
        JSON response with updated task.
    """
    with tracer.start_as_current_span("task.update") as span:
        task_id = parse_id(task_id, "task id")
        span.set_attribute("task.id", task_id)

        try:
            data = TaskUpdateSchema().load(request.get_json() or {})
        except ValidationError as err:
            return error_response(format_validation_error(err), 400)

        task, changed = store.update_task(task_id, TaskUpdate.from_mapping(data))

        if "status" in changed:
            status_changes.add(1, {"status": task.status.value})
        span.set_attribute("task.changed_fields", ",".join(changed))
        logger.info(f"Task updated: {task.id}", extra={"task_id": task.id, "fields": changed})

        return TaskSchema().jsonify(task)


@tasks_bp.route("/<task_id>", methods=["DELETE"])
@inject_store
def delete_task(task_id: str, store: TaskBoardStore):
    """Delete a task.

    Args:
        task_id: Task id from the URL.

    Returns:
        Empty response with 204 status.
    """
    with tracer.start_as_current_span("task.delete") as span:
        task_id = parse_id(task_id, "task id")
        span.set_attribute("task.id", task_id)

        store.delete_task(task_id)

        logger.info(f"Task deleted: {task_id}", extra={"task_id": task_id})

        return "", 204
