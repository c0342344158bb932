# modaflex/services/mail_service.py
from __future__ import annotations

from flask import current_app
from flask_mail import Message

from modaflex.extensions import mail
from modaflex.models.notification_log import NotificationLog
from modaflex.repositories.notification_repo import NotificationRepo
from modaflex.utils import clock


class MailService:
    @staticmethod
    def send_email(to_email: str, subject: str, body: str) -> tuple[bool, str | None]:
        """
        return: (success, error_text)
        """
        try:
            msg = Message(subject=subject, recipients=[to_email], body=body)
            mail.send(msg)
            return True, None
        except Exception as e:
            current_app.logger.warning(f"[MailService] Falha ao enviar e-mail: {e}")
            return False, str(e)

    @staticmethod
    def log_notification(
        rental_id: int,
        notif_type: str,
        to_email: str | None,
        message: str,
        success: bool,
        error: str | None = None,
    ) -> NotificationLog:
        # sem commit: quem chama faz um único commit no fim do lote
        row = NotificationLog(
            rental_id=rental_id,
            type=notif_type,
            email=to_email,
            message=message[:1000] if message else message,
            success=bool(success),
            error_message=error,
            sent_at=clock.utcnow(),
        )
        return NotificationRepo.add(row)

    @staticmethod
    def _rental_labels(rental):
        customer = getattr(rental, "customer", None)
        to_email = getattr(customer, "email", None) if customer else None
        name = getattr(customer, "name", "Cliente") if customer else "Cliente"
        items = ", ".join(c.name for c in rental.clothes if c is not None) or f"Aluguel #{rental.id}"
        return to_email, name, items, rental.return_date

    @staticmethod
    def _send_and_log(rental, notif_type: str, subject: str, body: str) -> bool:
        to_email, _name, _items, _due = MailService._rental_labels(rental)

        if not to_email:
            MailService.log_notification(
                rental_id=rental.id,
                notif_type=notif_type,
                to_email=None,
                message="E-mail do cliente não encontrado",
                success=False,
                error="missing_email",
            )
            return False

        ok, err = MailService.send_email(to_email, subject, body)
        MailService.log_notification(
            rental_id=rental.id,
            notif_type=notif_type,
            to_email=to_email,
            message=body,
            success=ok,
            error=err,
        )
        return ok

    @staticmethod
    def send_overdue_reminder(rental, days_late: int, fine) -> bool:
        _to, name, items, due = MailService._rental_labels(rental)
        subject = "ModaFlex: devolução em atraso"
        body = (
            f"Olá {name},\n\n"
            f"A devolução das peças ({items}) estava prevista para {due.isoformat()}.\n"
            f"Dias em atraso: {days_late}. Multa acumulada: R$ {fine:.2f}.\n\n"
            f"Por favor, realize a devolução o quanto antes.\n"
        )
        return MailService._send_and_log(rental, "overdue_reminder", subject, body)

    @staticmethod
    def send_due_soon_reminder(rental) -> bool:
        _to, name, items, due = MailService._rental_labels(rental)
        subject = "ModaFlex: devolução se aproximando"
        body = (
            f"Olá {name},\n\n"
            f"A devolução das peças ({items}) está prevista para {due.isoformat()}.\n\n"
            f"Não se esqueça!\n"
        )
        return MailService._send_and_log(rental, "due_soon_reminder", subject, body)
