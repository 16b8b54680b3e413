from flask import Blueprint, current_app, jsonify, request

from hotelier.config import config
from hotelier.errors import ConflictError, ForbiddenError, NotFoundError
from hotelier.paging import PageRequest

bp = Blueprint("cleanings", __name__)


def _service():
    return current_app.cleaning_service


def _page_request() -> PageRequest:
    return PageRequest(
        page_index=request.args.get("page", 0, type=int),
        page_size=request.args.get("size", config.default_page_size, type=int),
    )


def _int_field(data: dict, name: str, default: int = None) -> int:
    """Read an integer from a JSON body. Missing or non-integer values raise ValueError."""
    value = data.get(name, default)
    if value is None:
        raise ValueError(f"Missing required field: {name}")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Field {name} must be an integer, got {value!r}")
    return value


@bp.route("", methods=["GET"])
def list_cleanings():
    """List all cleaning tasks in work queue order."""
    page = _service().list_all(_page_request())
    return jsonify(page.to_dict())


@bp.route("/employees/<int:employee_id>", methods=["GET"])
def list_cleanings_by_employee(employee_id: int):
    """List the cleaning tasks assigned to an employee."""
    page = _service().list_by_employee(employee_id, _page_request())
    return jsonify(page.to_dict())


@bp.route("/rooms/<int:room_number>", methods=["GET"])
def get_cleaning(room_number: int):
    """Get the cleaning task for a room."""
    task = _service().find_by_room(room_number)
    return jsonify(task.to_dict())


@bp.route("", methods=["POST"])
def schedule_cleaning():
    """Schedule a room for cleaning."""
    data = request.get_json(silent=True) or {}
    task = _service().schedule_cleaning(
        employee_id=_int_field(data, "employee_id"),
        room_number=_int_field(data, "room_number"),
        priority=_int_field(data, "priority", default=0),
    )
    return jsonify(task.to_dict()), 201


@bp.route("/rooms/<int:room_number>/start", methods=["POST"])
def start_cleaning(room_number: int):
    """Start cleaning a room."""
    data = request.get_json(silent=True) or {}
    room = _service().start_cleaning(_int_field(data, "employee_id"), room_number)
    return jsonify(room.to_dict())


@bp.route("/rooms/<int:room_number>/finish", methods=["POST"])
def finish_cleaning(room_number: int):
    """Finish cleaning a room."""
    data = request.get_json(silent=True) or {}
    room = _service().finish_cleaning(_int_field(data, "employee_id"), room_number)
    return jsonify(room.to_dict())


@bp.route("/rooms/<int:room_number>", methods=["DELETE"])
def cancel_cleaning(room_number: int):
    """Cancel the cleaning task for a room and make the room available again."""
    room = _service().cancel_cleaning(room_number)
    return jsonify(room.to_dict())


# Error mapping


@bp.errorhandler(NotFoundError)
def handle_not_found(e):
    return jsonify({"error": str(e)}), 404


@bp.errorhandler(ForbiddenError)
def handle_forbidden(e):
    return jsonify({"error": str(e)}), 403


@bp.errorhandler(ConflictError)
def handle_conflict(e):
    return jsonify({"error": str(e)}), 409


@bp.errorhandler(ValueError)
def handle_bad_request(e):
    return jsonify({"error": str(e)}), 400
