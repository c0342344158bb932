from sqlalchemy import or_

from modaflex.models.customer import Customer
from modaflex.extensions import db


class CustomerRepo:
    @staticmethod
    def list_all(q: str | None = None, cpf: str | None = None):
        query = Customer.query
        if cpf:
            query = query.filter(Customer.cpf == cpf)
        if q:
            like = f"%{q}%"
            query = query.filter(or_(
                Customer.name.ilike(like),
                Customer.email.ilike(like),
                Customer.phone.ilike(like),
                Customer.cpf.ilike(like),
            ))
        return query.order_by(Customer.name.asc()).all()

    @staticmethod
    def get(customer_id: int):
        return db.session.get(Customer, customer_id)

    @staticmethod
    def get_by_cpf(cpf: str):
        return Customer.query.filter_by(cpf=cpf).first()

    @staticmethod
    def count() -> int:
        return Customer.query.count()

    @staticmethod
    def create(customer: Customer):
        db.session.add(customer)
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        return customer

    @staticmethod
    def update():
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def delete(customer: Customer):
        db.session.delete(customer)
        db.session.commit()
