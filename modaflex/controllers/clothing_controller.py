# modaflex/controllers/clothing_controller.py

from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from modaflex.controllers.helpers import json_body, error_response
from modaflex.services.clothing_service import ClothingService
from modaflex.utils.decorators import role_required
from modaflex.utils.serializers import clothing_to_dict

clothing_bp = Blueprint("clothes", __name__)


@clothing_bp.get("")
@jwt_required()
def list_clothes():
    try:
        rows = ClothingService.list_clothes(status=request.args.get("status"), q=request.args.get("q"))
    except ValueError as e:
        return error_response(e)
    return jsonify({"success": True, "data": [clothing_to_dict(c) for c in rows]})


@clothing_bp.get("/available")
@jwt_required()
def list_available():
    rows = ClothingService.list_available()
    return jsonify({"success": True, "data": [clothing_to_dict(c) for c in rows]})


@clothing_bp.get("/<int:clothing_id>")
@jwt_required()
def get_clothing(clothing_id: int):
    try:
        c = ClothingService.get_clothing(clothing_id)
        return jsonify({"success": True, "data": clothing_to_dict(c)})
    except ValueError as e:
        return error_response(e)


@clothing_bp.post("")
@jwt_required()
def create_clothing():
    try:
        c = ClothingService.create_clothing(json_body())
        return jsonify({"success": True, "data": clothing_to_dict(c)}), 201
    except ValueError as e:
        return error_response(e)


@clothing_bp.patch("/<int:clothing_id>")
@jwt_required()
def update_clothing(clothing_id: int):
    try:
        c = ClothingService.update_clothing(clothing_id, json_body())
        return jsonify({"success": True, "data": clothing_to_dict(c)})
    except ValueError as e:
        return error_response(e)


@clothing_bp.delete("/<int:clothing_id>")
@jwt_required()
@role_required("admin")
def delete_clothing(clothing_id: int):
    try:
        ClothingService.delete_clothing(clothing_id)
        return jsonify({"success": True})
    except ValueError as e:
        return error_response(e)
