"""Board CRUD endpoints."""

import logging

from flask import Blueprint, request
from marshmallow import ValidationError

from taskboard.errors import error_response, format_validation_error, parse_id
from taskboard.schemas import BoardCreateSchema, BoardSchema, BoardUpdateSchema
from taskboard.store import TaskBoardStore, inject_store
from taskboard.telemetry import get_meter, get_tracer
from taskboard.updates import BoardUpdate


logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)
meter = get_meter(__name__)

boards_created = meter.create_counter(
    name="boards.created",
    description="Boards created",
    unit="1",
)

boards_bp = Blueprint("boards", __name__, url_prefix="/api/boards")


@boards_bp.route("", methods=["GET"], strict_slashes=False)
@inject_store
def list_boards(store: TaskBoardStore):
    """List all boards, newest first, with their tasks.

    Returns:
        JSON list of boards.
    """
    boards = store.list_boards()
    return BoardSchema(many=True).jsonify(boards)


@boards_bp.route("/<board_id>", methods=["GET"])
@inject_store
def get_board(board_id: str, store: TaskBoardStore):
    """Get a single board with its tasks.

    Args:
        board_id: Board id from the URL.

    Returns:
        JSON response with board data.
    """
    board = store.get_board(parse_id(board_id, "board id"))
    return BoardSchema().jsonify(board)


@boards_bp.route("", methods=["POST"], strict_slashes=False)
@inject_store
def create_board(store: TaskBoardStore):
    """Create a new board.

    Returns:
        JSON response with created board.
    """
    with tracer.start_as_current_span("board.create") as span:
        # Validate request data
        try:
            data = BoardCreateSchema().load(request.get_json() or {})
        except ValidationError as err:
            return error_response(format_validation_error(err), 400)

        board = store.create_board(data)

        span.set_attribute("board.id", board.id)
        boards_created.add(1)
        logger.info(f"Board created: {board.id}", extra={"board_id": board.id})

        return BoardSchema().jsonify(board), 201


@boards_bp.route("/<board_id>", methods=["PUT"])
@inject_store
def update_board(board_id: str, store: TaskBoardStore):
    """Update the fields present in the request body.

    Args:
        board_id: Board id from the URL.

    Returns:
        JSON response with updated board.
    """
    with tracer.start_as_current_span("board.update") as span:
        board_id = parse_id(board_id, "board id")
        span.set_attribute("board.id", board_id)

        try:
            data = BoardUpdateSchema().load(request.get_json() or {})
        except ValidationError as err:
            return error_response(format_validation_error(err), 400)

        board, changed = store.update_board(board_id, BoardUpdate.from_mapping(data))

        span.set_attribute("board.changed_fields", ",".join(changed))
        logger.info(f"Board updated: {board.id}", extra={"board_id": board.id, "fields": changed})

        return BoardSchema().jsonify(board)


@boards_bp.route("/<board_id>", methods=["DELETE"])
@inject_store
def delete_board(board_id: str, store: TaskBoardStore):
    """Delete a board and all of its tasks.

    Args:
        board_id: Board id from the URL.

    Returns:
        Empty response with 204 status.
    """
    with tracer.start_as_current_span("board.delete") as span:
        board_id = parse_id(board_id, "board id")
        span.set_attribute("board.id", board_id)

        store.delete_board(board_id)

        logger.info(f"Board deleted: {board_id}", extra={"board_id": board_id})

        return "", 204
