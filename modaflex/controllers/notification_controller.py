from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from modaflex.services.notification_service import NotificationService
from modaflex.utils.decorators import role_required

notif_bp = Blueprint("notifications", __name__)


@notif_bp.post("/run-late-check")
@jwt_required()
@role_required("admin")
def run_late_check():
    result = NotificationService.check_and_notify()
    return jsonify({"success": True, "message": "Verificação de atrasos executada", "data": result})
