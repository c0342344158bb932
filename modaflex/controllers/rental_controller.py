from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from modaflex.controllers.helpers import json_body, error_response, query_int
from modaflex.services.rental_service import RentalService
from modaflex.utils.serializers import rental_to_dict, fine_to_dict

rental_bp = Blueprint("rentals", __name__)


@rental_bp.get("")
@jwt_required()
def list_rentals():
    try:
        rows = RentalService.list_rentals(
            status=request.args.get("status"),
            customer_id=query_int("customer_id"),
        )
    except ValueError as e:
        return error_response(e)
    return jsonify({"success": True, "data": [rental_to_dict(r) for r in rows]})


@rental_bp.get("/active")
@jwt_required()
def list_active():
    rows = RentalService.list_open()
    return jsonify({"success": True, "data": [rental_to_dict(r) for r in rows]})


@rental_bp.get("/<int:rental_id>")
@jwt_required()
def get_rental(rental_id: int):
    try:
        r = RentalService.get_rental(rental_id)
        return jsonify({"success": True, "data": rental_to_dict(r)})
    except ValueError as e:
        return error_response(e)


@rental_bp.post("")
@jwt_required()
def create_rental():
    try:
        r = RentalService.create_rental(json_body())
        return jsonify({"success": True, "data": rental_to_dict(r)}), 201
    except ValueError as e:
        return error_response(e)


@rental_bp.patch("/<int:rental_id>")
@jwt_required()
def update_rental(rental_id: int):
    try:
        r = RentalService.update_rental(rental_id, json_body())
        return jsonify({"success": True, "data": rental_to_dict(r)})
    except ValueError as e:
        return error_response(e)


@rental_bp.get("/<int:rental_id>/fine")
@jwt_required()
def preview_fine(rental_id: int):
    try:
        result = RentalService.preview_fine(rental_id, request.args.get("as_of"))
        return jsonify({"success": True, "data": fine_to_dict(result)})
    except ValueError as e:
        return error_response(e)


@rental_bp.post("/<int:rental_id>/return")
@jwt_required()
def return_rental(rental_id: int):
    try:
        r = RentalService.return_rental(rental_id, json_body())
        return jsonify({"success": True, "data": rental_to_dict(r)})
    except ValueError as e:
        return error_response(e)


@rental_bp.post("/<int:rental_id>/cancel")
@jwt_required()
def cancel_rental(rental_id: int):
    try:
        r = RentalService.cancel_rental(rental_id)
        return jsonify({"success": True, "data": rental_to_dict(r)})
    except ValueError as e:
        return error_response(e)
