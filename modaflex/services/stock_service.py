from flask import current_app

from modaflex.errors import ValidationError, NotFoundError
from modaflex.extensions import db
from modaflex.models.stock_movement import StockMovement, MOVEMENT_TYPES
from modaflex.repositories.clothing_repo import ClothingRepo
from modaflex.repositories.stock_repo import StockRepo
from modaflex.utils import clock
from modaflex.utils.validators import parse_int, require_text, require_choice, optional_text


def apply_movement(previous: int, movement_type: str, quantity: int) -> int:
    if movement_type == "in":
        return previous + quantity
    if movement_type in ("out", "damage", "maintenance"):
        return previous - quantity
    # adjustment define a quantidade diretamente
    return quantity


class StockService:
    @staticmethod
    def list_movements(clothing_id: int | None = None):
        return StockRepo.list_all(clothing_id=clothing_id)

    @staticmethod
    def register_movement(data: dict, user_id: int | None = None) -> StockMovement:
        errors = {}
        clothing_id = parse_int(data.get("clothing_id"), "clothing_id", errors, minimum=1)
        movement_type = require_choice(data.get("type"), "type", errors, MOVEMENT_TYPES)
        minimum = 0 if movement_type == "adjustment" else 1
        quantity = parse_int(data.get("quantity"), "quantity", errors, minimum=minimum)
        reason = require_text(data, "reason", errors, "Motivo")
        if errors:
            raise ValidationError(errors)

        clothing = ClothingRepo.get(clothing_id)
        if not clothing:
            raise NotFoundError("Roupa não encontrada")

        previous = clothing.quantity or 0
        new_quantity = apply_movement(previous, movement_type, quantity)
        if new_quantity < 0:
            raise ValidationError({"quantity": f"Estoque insuficiente (atual: {previous})"})

        movement = StockMovement(
            clothing_id=clothing.id,
            user_id=user_id,
            type=movement_type,
            quantity=quantity,
            previous_quantity=previous,
            new_quantity=new_quantity,
            reason=reason,
            notes=optional_text(data, "notes"),
            date=clock.utcnow(),
        )
        clothing.quantity = new_quantity

        try:
            StockRepo.add(movement)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        current_app.logger.info(
            f"[stock] clothing={clothing.id} type={movement_type} {previous}->{new_quantity}"
        )
        return movement

    @staticmethod
    def alerts(today=None) -> dict:
        today = today or clock.today()
        clothes = ClothingRepo.list_all()

        low_stock = [c for c in clothes if (c.quantity or 0) <= (c.min_quantity or 0)]
        out_of_stock = [c for c in clothes if (c.quantity or 0) == 0]
        maintenance_due = [c for c in clothes if c.next_maintenance and c.next_maintenance <= today]

        return {
            "low_stock": low_stock,
            "out_of_stock": out_of_stock,
            "maintenance_due": maintenance_due,
            "total_alerts": len(low_stock) + len(out_of_stock) + len(maintenance_due),
        }
