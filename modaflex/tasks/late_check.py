# modaflex/tasks/late_check.py
from modaflex.extensions import db
from modaflex.services.notification_service import NotificationService


def run_late_check_job(app):
    """
    Job periódico: lembretes de atraso / devolução próxima.
    Erros são logados e a sessão é revertida; o próximo ciclo tenta de novo.
    """
    with app.app_context():
        try:
            return NotificationService.check_and_notify()
        except Exception as e:
            db.session.rollback()
            app.logger.exception(f"[late_check] Erro: {e}")
            return None
