"""Statistics, dashboard and export endpoints."""

import json
import logging
from datetime import datetime, timezone

from flask import Blueprint, Response, current_app, jsonify, request

from taskboard.analytics import compute_statistics
from taskboard.errors import InvalidArgument
from taskboard.export import EXPORT_FORMATS, export_csv, export_filename, export_json
from taskboard.presentation import paginate
from taskboard.routes.tasks import board_filter
from taskboard.schemas import BoardSummarySchema, StatisticsSchema
from taskboard.store import TaskBoardStore, inject_store
from taskboard.telemetry import get_meter, get_tracer


logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)
meter = get_meter(__name__)

exports_generated = meter.create_counter(
    name="exports.generated",
    description="Export documents generated",
    unit="1",
)

analytics_bp = Blueprint("analytics", __name__, url_prefix="/api")


@analytics_bp.route("/analytics", methods=["GET"])
@inject_store
def task_statistics(store: TaskBoardStore):
    """Task counts per status and completion percentage.

    Query params:
        boardId: Only count tasks of this board.

    Returns:
        JSON statistics.
    """
    statistics = compute_statistics(store.list_tasks(board_filter()))
    return StatisticsSchema().jsonify(statistics)


@analytics_bp.route("/dashboard", methods=["GET"])
@inject_store
def dashboard(store: TaskBoardStore):
    """One page of board cards plus statistics over every task.

    Query params:
        page: Page number (default 1, clamped to the available pages)

    Returns:
        JSON response with the board page and statistics.
    """
    page_number = request.args.get("page", 1, type=int)
    per_page = current_app.config.get("DASHBOARD_PAGE_SIZE", 6)

    page = paginate(store.list_boards(), page_number, per_page)
    statistics = compute_statistics(store.list_tasks())

    return jsonify(
        {
            "boards": BoardSummarySchema(many=True).dump(page.items),
            "page": page.page,
            "per_page": page.per_page,
            "total": page.total,
            "total_pages": page.total_pages,
            "statistics": StatisticsSchema().dump(statistics),
        }
    )


@analytics_bp.route("/export", methods=["GET"])
@inject_store
def export_boards(store: TaskBoardStore):
    """Download every board and task as JSON or CSV.

    Query params:
        format: ``json`` (default) or ``csv``

    Returns:
        Attachment response with the export document.
    """
    fmt = request.args.get("format", "json").lower()
    if fmt not in EXPORT_FORMATS:
        raise InvalidArgument(f"format: Must be one of: {', '.join(EXPORT_FORMATS)}.")

    with tracer.start_as_current_span("boards.export") as span:
        now = datetime.now(timezone.utc)
        boards = store.list_boards()
        statistics = compute_statistics(store.list_tasks())

        if fmt == "csv":
            body = export_csv(boards, statistics)
            mimetype = "text/csv"
        else:
            body = json.dumps(export_json(boards, statistics, now), indent=2)
            mimetype = "application/json"

        span.set_attribute("export.format", fmt)
        span.set_attribute("export.boards", len(boards))
        exports_generated.add(1, {"format": fmt})
        logger.info(f"Export generated: {fmt}", extra={"boards": len(boards)})

        return Response(
            body,
            mimetype=mimetype,
            headers={"Content-Disposition": f'attachment; filename="{export_filename(fmt, now)}"'},
        )
