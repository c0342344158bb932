from sqlalchemy import or_

from modaflex.models.clothing import Clothing
from modaflex.extensions import db


class ClothingRepo:
    @staticmethod
    def list_all(status: str | None = None, q: str | None = None):
        query = Clothing.query
        if status:
            query = query.filter(Clothing.status == status)
        if q:
            like = f"%{q}%"
            query = query.filter(or_(
                Clothing.name.ilike(like),
                Clothing.type.ilike(like),
                Clothing.color.ilike(like),
            ))
        return query.order_by(Clothing.id.desc()).all()

    @staticmethod
    def get(clothing_id: int):
        return db.session.get(Clothing, clothing_id)

    @staticmethod
    def get_many(ids):
        rows = Clothing.query.filter(Clothing.id.in_(ids)).all()
        return {c.id: c for c in rows}

    @staticmethod
    def create(clothing: Clothing):
        db.session.add(clothing)
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        return clothing

    @staticmethod
    def update():
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def delete(clothing: Clothing):
        db.session.delete(clothing)
        db.session.commit()
