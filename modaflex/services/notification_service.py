from datetime import timedelta

from flask import current_app

from modaflex.extensions import db
from modaflex.repositories.notification_repo import NotificationRepo
from modaflex.repositories.rental_repo import RentalRepo
from modaflex.services.mail_service import MailService
from modaflex.utils import clock
from modaflex.utils.fines import compute_fine, DEFAULT_DAILY_RATE


class NotificationService:
    @staticmethod
    def check_and_notify(today=None) -> dict:
        """
        Lembretes por e-mail para aluguéis em aberto:
        - overdue: devolução prevista já passou
        - due_soon: devolução prevista entre hoje e amanhã
        Cada tipo é enviado com sucesso no máximo uma vez por aluguel.
        O status persistido não muda; atraso continua derivado.
        """
        today = today or clock.today()
        rate = current_app.config.get("FINE_DAILY_RATE", DEFAULT_DAILY_RATE)

        overdue_rows = RentalRepo.find_overdue(today)
        due_soon_rows = RentalRepo.find_due_between(today, today + timedelta(days=1))

        sent = {"overdue": 0, "due_soon": 0, "skipped": 0, "failed": 0}

        for r in overdue_rows:
            if NotificationRepo.already_sent(r.id, "overdue_reminder"):
                sent["skipped"] += 1
                continue
            result = compute_fine(r.return_date, today, rate)
            if MailService.send_overdue_reminder(r, result.days_late, result.amount):
                sent["overdue"] += 1
            else:
                sent["failed"] += 1

        for r in due_soon_rows:
            if NotificationRepo.already_sent(r.id, "due_soon_reminder"):
                sent["skipped"] += 1
                continue
            if MailService.send_due_soon_reminder(r):
                sent["due_soon"] += 1
            else:
                sent["failed"] += 1

        # logs em um único commit
        db.session.commit()

        current_app.logger.info(
            f"[late_check] overdue={len(overdue_rows)} due_soon={len(due_soon_rows)} "
            f"sent_overdue={sent['overdue']} sent_due_soon={sent['due_soon']} "
            f"skipped={sent['skipped']} failed={sent['failed']}"
        )
        return sent
