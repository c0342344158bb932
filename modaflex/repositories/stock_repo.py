from modaflex.models.stock_movement import StockMovement
from modaflex.extensions import db


class StockRepo:
    @staticmethod
    def list_all(clothing_id: int | None = None):
        query = StockMovement.query
        if clothing_id:
            query = query.filter_by(clothing_id=clothing_id)
        return query.order_by(StockMovement.date.desc(), StockMovement.id.desc()).all()

    @staticmethod
    def add(movement: StockMovement):
        db.session.add(movement)
        return movement
