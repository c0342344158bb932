from datetime import datetime
from modaflex.extensions import db

RENTAL_STATUSES = ("active", "returned", "overdue", "cancelled")
OPEN_STATUSES = ("active", "overdue")


class Rental(db.Model):
    __tablename__ = "rentals"

    id = db.Column(db.Integer, primary_key=True)

    customer_id = db.Column(db.Integer, db.ForeignKey("customers.id"), nullable=False, index=True)

    rent_date = db.Column(db.Date, nullable=False, index=True)
    return_date = db.Column(db.Date, nullable=False, index=True)  # devolução prevista
    actual_return_date = db.Column(db.Date, nullable=True)

    total_value = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    status = db.Column(db.String(20), nullable=False, default="active", index=True)
    fine = db.Column(db.Numeric(10, 2), nullable=True)
    notes = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    customer = db.relationship("Customer", backref="rentals")
    items = db.relationship(
        "RentalItem",
        back_populates="rental",
        order_by="RentalItem.position",
        cascade="all, delete-orphan",
    )

    @property
    def clothing_ids(self):
        return [i.clothing_id for i in self.items]

    @property
    def clothes(self):
        return [i.clothing for i in self.items]

    @property
    def is_open(self) -> bool:
        return self.status in OPEN_STATUSES


class RentalItem(db.Model):
    __tablename__ = "rental_items"

    id = db.Column(db.Integer, primary_key=True)

    rental_id = db.Column(db.Integer, db.ForeignKey("rentals.id"), nullable=False, index=True)
    clothing_id = db.Column(db.Integer, db.ForeignKey("clothes.id"), nullable=False, index=True)

    position = db.Column(db.Integer, nullable=False, default=0)
    # preço da peça no momento do aluguel
    unit_price = db.Column(db.Numeric(10, 2), nullable=False)

    rental = db.relationship("Rental", back_populates="items")
    clothing = db.relationship("Clothing", backref="rental_items")
