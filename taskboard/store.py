"""Board and task persistence.

Handlers never touch the session directly: ``create_app`` builds one
``TaskBoardStore`` per application and ``inject_store`` hands it to each
handler as the ``store`` keyword argument.
"""

import logging
from functools import wraps
from typing import Any, Callable, Mapping, ParamSpec, TypeVar

from flask import current_app
from flask_sqlalchemy import SQLAlchemy

from taskboard.errors import InvalidArgument, NotFound
from taskboard.models import Board, Task
from taskboard.updates import BoardUpdate, TaskUpdate, apply_update


logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

EXTENSION_KEY = "taskboard.store"


class TaskBoardStore:
    """CRUD operations over boards and tasks.

    Every mutating method performs a single commit.
    """

    def __init__(self, database: SQLAlchemy):
        self._db = database

    @property
    def session(self):
        return self._db.session

    # Boards

    def list_boards(self) -> list[Board]:
        return (
            self.session.query(Board)
            .order_by(Board.created_at.desc(), Board.id.desc())
            .all()
        )

    def get_board(self, board_id: int) -> Board:
        board = self.session.get(Board, board_id)
        if board is None:
            raise NotFound(f"Board {board_id} not found")
        return board

    def create_board(self, data: Mapping[str, Any]) -> Board:
        board = Board(
            name=data["name"],
            description=data.get("description"),
            color=data.get("color"),
        )
        self.session.add(board)
        self.session.commit()
        return board

    def update_board(self, board_id: int, update: BoardUpdate) -> tuple[Board, list[str]]:
        board = self.get_board(board_id)
        changed = apply_update(board, update)
        if changed:
            self.session.commit()
        return board, changed

    def delete_board(self, board_id: int) -> None:
        board = self.get_board(board_id)
        logger.debug("Deleting board %s with %d tasks", board.id, len(board.tasks))
        self.session.delete(board)
        self.session.commit()

    # Tasks

    def list_tasks(self, board_id: int | None = None) -> list[Task]:
        query = self.session.query(Task)
        if board_id is not None:
            query = query.filter(Task.board_id == board_id)
        return query.order_by(Task.created_at.desc(), Task.id.desc()).all()

    def get_task(self, task_id: int) -> Task:
        task = self.session.get(Task, task_id)
        if task is None:
            raise NotFound(f"Task {task_id} not found")
        return task

    def create_task(self, data: Mapping[str, Any]) -> Task:
        self._require_board(data["board_id"])
        task = Task(
            board_id=data["board_id"],
            title=data["title"],
            description=data.get("description"),
            status=data["status"],
            priority=data.get("priority"),
            assigned_to=data.get("assigned_to"),
            due_date=data.get("due_date"),
        )
        self.session.add(task)
        self.session.commit()
        return task

    def update_task(self, task_id: int, update: TaskUpdate) -> tuple[Task, list[str]]:
        task = self.get_task(task_id)
        if update.is_set("board_id"):
            self._require_board(update.board_id)
        changed = apply_update(task, update)
        if changed:
            self.session.commit()
        return task, changed

    def delete_task(self, task_id: int) -> None:
        task = self.get_task(task_id)
        self.session.delete(task)
        self.session.commit()

    def _require_board(self, board_id: int) -> None:
        if self.session.get(Board, board_id) is None:
            raise InvalidArgument(f"board_id: Board {board_id} does not exist.")


def init_store(app, database: SQLAlchemy) -> TaskBoardStore:
    """Create the application's store and register it on the app."""
    store = TaskBoardStore(database)
    app.extensions[EXTENSION_KEY] = store
    return store


def inject_store(f: Callable[P, T]) -> Callable[P, T]:
    """Decorator passing the application's store as ``store=``."""

    @wraps(f)
    def decorated(*args: P.args, **kwargs: P.kwargs) -> T:
        kwargs["store"] = current_app.extensions[EXTENSION_KEY]
        return f(*args, **kwargs)

    return decorated
