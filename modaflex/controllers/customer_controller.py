from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from modaflex.controllers.helpers import json_body, error_response
from modaflex.services.customer_service import CustomerService
from modaflex.utils.decorators import role_required
from modaflex.utils.serializers import customer_to_dict, rental_to_dict

customer_bp = Blueprint("customers", __name__)


@customer_bp.get("")
@jwt_required()
def list_customers():
    rows = CustomerService.list_customers(q=request.args.get("q"), cpf=request.args.get("cpf"))
    return jsonify({"success": True, "data": [customer_to_dict(c) for c in rows]})


@customer_bp.get("/<int:customer_id>")
@jwt_required()
def get_customer(customer_id: int):
    try:
        c = CustomerService.get_customer(customer_id)
        return jsonify({"success": True, "data": customer_to_dict(c)})
    except ValueError as e:
        return error_response(e)


@customer_bp.get("/<int:customer_id>/rentals")
@jwt_required()
def customer_rentals(customer_id: int):
    try:
        rows = CustomerService.rental_history(customer_id)
        return jsonify({"success": True, "data": [rental_to_dict(r) for r in rows]})
    except ValueError as e:
        return error_response(e)


@customer_bp.post("")
@jwt_required()
def create_customer():
    try:
        c = CustomerService.create_customer(json_body())
        return jsonify({"success": True, "data": customer_to_dict(c)}), 201
    except ValueError as e:
        return error_response(e)


@customer_bp.patch("/<int:customer_id>")
@jwt_required()
def update_customer(customer_id: int):
    try:
        c = CustomerService.update_customer(customer_id, json_body())
        return jsonify({"success": True, "data": customer_to_dict(c)})
    except ValueError as e:
        return error_response(e)


@customer_bp.delete("/<int:customer_id>")
@jwt_required()
@role_required("admin")
def delete_customer(customer_id: int):
    try:
        CustomerService.delete_customer(customer_id)
        return jsonify({"success": True})
    except ValueError as e:
        return error_response(e)
