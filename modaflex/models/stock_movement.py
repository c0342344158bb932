from datetime import datetime
from modaflex.extensions import db

MOVEMENT_TYPES = ("in", "out", "adjustment", "damage", "maintenance")


class StockMovement(db.Model):
    __tablename__ = "stock_movements"

    id = db.Column(db.Integer, primary_key=True)

    clothing_id = db.Column(db.Integer, db.ForeignKey("clothes.id"), nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True, index=True)

    type = db.Column(db.String(20), nullable=False)  # in/out/adjustment/damage/maintenance
    quantity = db.Column(db.Integer, nullable=False)
    previous_quantity = db.Column(db.Integer, nullable=False)
    new_quantity = db.Column(db.Integer, nullable=False)

    reason = db.Column(db.String(255), nullable=False)
    notes = db.Column(db.Text, nullable=True)

    date = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    clothing = db.relationship(
        "Clothing", backref=db.backref("stock_movements", cascade="all, delete-orphan")
    )
    user = db.relationship("User")
