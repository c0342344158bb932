from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from modaflex.controllers.helpers import error_response
from modaflex.services.calendar_service import CalendarService

calendar_bp = Blueprint("calendar", __name__)


@calendar_bp.get("")
@jwt_required()
def calendar_events():
    try:
        start, end = CalendarService.resolve_range(
            start=request.args.get("start"),
            end=request.args.get("end"),
            year=request.args.get("year"),
            month=request.args.get("month"),
        )
    except ValueError as e:
        return error_response(e)

    days = CalendarService.events_for_range(start, end)
    return jsonify({
        "success": True,
        "start": start.isoformat(),
        "end": end.isoformat(),
        "data": [{"date": day, "events": events} for day, events in days.items()],
    })
