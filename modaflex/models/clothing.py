from datetime import datetime
from modaflex.extensions import db

CLOTHING_STATUSES = ("available", "rented", "washing", "damaged")


class Clothing(db.Model):
    __tablename__ = "clothes"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    type = db.Column(db.String(100), nullable=False)
    size = db.Column(db.String(20), nullable=False)
    color = db.Column(db.String(50), nullable=False)
    photo = db.Column(db.String(500), nullable=True)
    price = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    status = db.Column(db.String(20), nullable=False, default="available", index=True)
    notes = db.Column(db.Text, nullable=True)

    # gestão de estoque avançada
    quantity = db.Column(db.Integer, nullable=False, default=1)
    min_quantity = db.Column(db.Integer, nullable=False, default=0)
    category = db.Column(db.String(100), nullable=True)
    season = db.Column(db.String(50), nullable=True)
    occasion = db.Column(db.String(100), nullable=True)
    brand = db.Column(db.String(100), nullable=True)
    material = db.Column(db.String(100), nullable=True)
    last_maintenance = db.Column(db.Date, nullable=True)
    next_maintenance = db.Column(db.Date, nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
