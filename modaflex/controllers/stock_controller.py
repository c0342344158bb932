from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from modaflex.controllers.helpers import json_body, error_response, current_user_id, query_int
from modaflex.services.stock_service import StockService
from modaflex.utils.serializers import movement_to_dict, clothing_to_dict

stock_bp = Blueprint("stock", __name__)


@stock_bp.get("")
@jwt_required()
def list_movements():
    try:
        rows = StockService.list_movements(clothing_id=query_int("clothing_id"))
    except ValueError as e:
        return error_response(e)
    return jsonify({"success": True, "data": [movement_to_dict(m) for m in rows]})


@stock_bp.post("")
@jwt_required()
def register_movement():
    try:
        m = StockService.register_movement(json_body(), user_id=current_user_id())
        return jsonify({"success": True, "data": movement_to_dict(m)}), 201
    except ValueError as e:
        return error_response(e)


@stock_bp.get("/alerts")
@jwt_required()
def stock_alerts():
    alerts = StockService.alerts()
    return jsonify({"success": True, "data": {
        "low_stock": [clothing_to_dict(c) for c in alerts["low_stock"]],
        "out_of_stock": [clothing_to_dict(c) for c in alerts["out_of_stock"]],
        "maintenance_due": [clothing_to_dict(c) for c in alerts["maintenance_due"]],
        "total_alerts": alerts["total_alerts"],
    }})
