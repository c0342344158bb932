from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required, get_jwt

from modaflex.controllers.helpers import json_body, json_error, current_user_id
from modaflex.services.auth_service import AuthService
from modaflex.repositories.user_repo import UserRepo

auth_bp = Blueprint("auth", __name__)


@auth_bp.post("/register", endpoint="auth_register")
def register():
    data = json_body()

    username = (data.get("username") or "").strip()
    email = (data.get("email") or "").strip()
    password = (data.get("password") or "").strip()

    if not username or not email or not password:
        return json_error("username/email/password são obrigatórios", 400)

    try:
        user = AuthService.register(
            username=username,
            email=email,
            password=password,
            role="attendant"  # perfil não vem do cliente
        )
        return jsonify({"success": True, "id": user.id, "username": user.username, "role": user.role}), 201
    except ValueError as e:
        return json_error(str(e), 400)


@auth_bp.post("/login", endpoint="auth_login")
def login():
    data = json_body()
    try:
        token, user = AuthService.login(
            (data.get("username") or "").strip(),
            (data.get("password") or "").strip()
        )
        return jsonify({
            "success": True,
            "access_token": token,
            "user": {"id": user.id, "username": user.username, "role": user.role}
        })
    except ValueError as e:
        return json_error(str(e), 401)


@auth_bp.get("/me", endpoint="auth_me")
@jwt_required()
def me():
    claims = get_jwt()
    user = UserRepo.get_by_id(current_user_id())
    if not user:
        return json_error("Usuário não encontrado", 404)

    return jsonify({
        "success": True,
        "user": {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "role": claims.get("role", user.role)
        }
    })
