from decimal import Decimal

from sqlalchemy import func

from modaflex.errors import ValidationError
from modaflex.extensions import db
from modaflex.models.clothing import Clothing, CLOTHING_STATUSES
from modaflex.models.rental import RENTAL_STATUSES
from modaflex.repositories.customer_repo import CustomerRepo
from modaflex.repositories.rental_repo import RentalRepo
from modaflex.utils import clock
from modaflex.utils.fines import effective_status, is_overdue
from modaflex.utils.validators import parse_date


def _dec(value) -> Decimal:
    return Decimal(str(value)) if value is not None else Decimal("0.00")


class ReportService:
    @staticmethod
    def rental_report(date_from=None, date_to=None, status=None, customer_id=None):
        errors = {}
        d_from = parse_date(date_from, "date_from", errors, required=False)
        d_to = parse_date(date_to, "date_to", errors, required=False)
        if status and status not in RENTAL_STATUSES:
            errors["status"] = "Status inválido"
        if errors:
            raise ValidationError(errors)

        today = clock.today()
        rows = []
        for r in RentalRepo.list_all(customer_id=customer_id):
            if d_from and r.rent_date < d_from:
                continue
            if d_to and r.rent_date > d_to:
                continue
            if status and effective_status(r.status, r.return_date, today) != status:
                continue
            rows.append(r)

        revenue = sum((_dec(r.total_value) + _dec(r.fine) for r in rows), Decimal("0.00"))
        fines = sum((_dec(r.fine) for r in rows), Decimal("0.00"))
        summary = {
            "total_rentals": len(rows),
            "total_revenue": float(revenue),
            "total_fines": float(fines),
            "open_rentals": sum(1 for r in rows if r.is_open),
            "overdue_rentals": sum(1 for r in rows if is_overdue(r.status, r.return_date, today)),
        }
        return rows, summary

    @staticmethod
    def dashboard():
        today = clock.today()

        counts = dict(
            db.session.query(Clothing.status, func.count(Clothing.id))
            .group_by(Clothing.status)
            .all()
        )
        clothing_by_status = {s: int(counts.get(s, 0)) for s in CLOTHING_STATUSES}

        open_rentals = RentalRepo.list_open()
        overdue = [r for r in open_rentals if is_overdue(r.status, r.return_date, today)]

        return {
            "total_clothes": sum(clothing_by_status.values()),
            "clothing_by_status": clothing_by_status,
            "active_rentals": len(open_rentals),
            "overdue_rentals": len(overdue),
            "overdue_rental_ids": [r.id for r in overdue],
            "total_customers": CustomerRepo.count(),
        }
