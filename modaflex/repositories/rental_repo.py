from datetime import date

from sqlalchemy import or_, and_

from modaflex.models.rental import Rental, RentalItem, OPEN_STATUSES
from modaflex.extensions import db


class RentalRepo:
    @staticmethod
    def get(rental_id: int):
        return db.session.get(Rental, rental_id)

    @staticmethod
    def list_all(status: str | None = None, customer_id: int | None = None):
        query = Rental.query
        if status:
            query = query.filter(Rental.status == status)
        if customer_id:
            query = query.filter(Rental.customer_id == customer_id)
        return query.order_by(Rental.id.desc()).all()

    @staticmethod
    def list_by_customer(customer_id: int):
        return Rental.query.filter_by(customer_id=customer_id).order_by(Rental.id.desc()).all()

    @staticmethod
    def list_open():
        return Rental.query.filter(Rental.status.in_(OPEN_STATUSES)).order_by(Rental.return_date.asc()).all()

    @staticmethod
    def count_open_for_customer(customer_id: int) -> int:
        return Rental.query.filter(
            Rental.customer_id == customer_id,
            Rental.status.in_(OPEN_STATUSES),
        ).count()

    @staticmethod
    def count_open_for_clothing(clothing_id: int) -> int:
        return (
            Rental.query
            .join(RentalItem, RentalItem.rental_id == Rental.id)
            .filter(RentalItem.clothing_id == clothing_id, Rental.status.in_(OPEN_STATUSES))
            .count()
        )

    @staticmethod
    def list_in_range(start: date, end: date):
        """Aluguéis com retirada ou devolução prevista dentro de [start, end]."""
        return Rental.query.filter(
            Rental.status != "cancelled",
            or_(
                and_(Rental.rent_date >= start, Rental.rent_date <= end),
                and_(Rental.return_date >= start, Rental.return_date <= end),
            ),
        ).order_by(Rental.rent_date.asc(), Rental.id.asc()).all()

    @staticmethod
    def find_overdue(today: date):
        return Rental.query.filter(
            Rental.status.in_(OPEN_STATUSES),
            Rental.actual_return_date.is_(None),
            Rental.return_date < today,
        ).all()

    @staticmethod
    def find_due_between(start: date, end: date):
        return Rental.query.filter(
            Rental.status.in_(OPEN_STATUSES),
            Rental.actual_return_date.is_(None),
            Rental.return_date >= start,
            Rental.return_date <= end,
        ).all()

    @staticmethod
    def add(rental: Rental):
        db.session.add(rental)
        return rental

    @staticmethod
    def commit():
        db.session.commit()

    @staticmethod
    def rollback():
        db.session.rollback()
