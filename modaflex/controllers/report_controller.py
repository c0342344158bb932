from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from modaflex.controllers.helpers import error_response, query_int
from modaflex.services.report_service import ReportService
from modaflex.utils.serializers import rental_to_dict

report_bp = Blueprint("reports", __name__)


@report_bp.get("/rentals")
@jwt_required()
def rental_report():
    try:
        rows, summary = ReportService.rental_report(
            date_from=request.args.get("date_from"),
            date_to=request.args.get("date_to"),
            status=request.args.get("status"),
            customer_id=query_int("customer_id"),
        )
    except ValueError as e:
        return error_response(e)
    return jsonify({"success": True, "summary": summary, "data": [rental_to_dict(r) for r in rows]})


@report_bp.get("/dashboard")
@jwt_required()
def dashboard():
    return jsonify({"success": True, "data": ReportService.dashboard()})
