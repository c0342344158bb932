from flask import jsonify, request
from flask_jwt_extended import get_jwt_identity

from modaflex.errors import ValidationError, NotFoundError, BusinessRuleError


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def json_error(message, code=400, errors=None):
    body = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return jsonify(body), code


def error_response(e: ValueError):
    if isinstance(e, ValidationError):
        return json_error(str(e), 400, e.errors)
    if isinstance(e, NotFoundError):
        return json_error(str(e), 404)
    if isinstance(e, BusinessRuleError):
        return json_error(str(e), 409)
    return json_error(str(e), 400)


def current_user_id():
    identity = get_jwt_identity()
    return int(identity) if identity is not None else None


def query_int(name: str):
    value = request.args.get(name)
    if value in (None, ""):
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError({name: "Número inteiro inválido"})
