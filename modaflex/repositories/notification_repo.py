from modaflex.models.notification_log import NotificationLog
from modaflex.extensions import db


class NotificationRepo:
    @staticmethod
    def already_sent(rental_id: int, notif_type: str = "overdue_reminder") -> bool:
        return NotificationLog.query.filter_by(
            rental_id=rental_id, type=notif_type, success=True
        ).first() is not None

    @staticmethod
    def add(entry: NotificationLog):
        db.session.add(entry)
        return entry
