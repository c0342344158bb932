from flask import current_app

from modaflex.errors import ValidationError, NotFoundError, BusinessRuleError
from modaflex.models.clothing import Clothing, CLOTHING_STATUSES
from modaflex.repositories.clothing_repo import ClothingRepo
from modaflex.repositories.rental_repo import RentalRepo
from modaflex.utils.validators import (
    parse_date, parse_decimal, parse_int, require_text, optional_text, require_choice,
)

_REQUIRED_TEXT = {"name": "Nome", "type": "Tipo", "size": "Tamanho", "color": "Cor"}
_OPTIONAL_TEXT = ("photo", "notes", "category", "season", "occasion", "brand", "material")
_DATES = ("last_maintenance", "next_maintenance")


def _clean(data: dict, partial: bool) -> dict:
    errors = {}
    out = {}

    for field, label in _REQUIRED_TEXT.items():
        if partial and field not in data:
            continue
        out[field] = require_text(data, field, errors, label)

    if not partial or "price" in data:
        out["price"] = parse_decimal(data.get("price"), "price", errors)

    if "status" in data:
        out["status"] = require_choice(data.get("status"), "status", errors, CLOTHING_STATUSES)
    elif not partial:
        out["status"] = "available"

    for field in ("quantity", "min_quantity"):
        if field in data:
            out[field] = parse_int(data.get(field), field, errors, minimum=0)

    for field in _OPTIONAL_TEXT:
        if field in data:
            out[field] = optional_text(data, field)

    for field in _DATES:
        if field in data:
            out[field] = parse_date(data.get(field), field, errors, required=False)

    if errors:
        raise ValidationError(errors)
    return out


class ClothingService:
    @staticmethod
    def list_clothes(status: str | None = None, q: str | None = None):
        if status and status not in CLOTHING_STATUSES:
            raise ValidationError({"status": "Status inválido"})
        return ClothingRepo.list_all(status=status, q=(q or "").strip() or None)

    @staticmethod
    def list_available():
        return ClothingRepo.list_all(status="available")

    @staticmethod
    def get_clothing(clothing_id: int) -> Clothing:
        clothing = ClothingRepo.get(clothing_id)
        if not clothing:
            raise NotFoundError("Roupa não encontrada")
        return clothing

    @staticmethod
    def create_clothing(data: dict) -> Clothing:
        values = _clean(data, partial=False)
        # "rented" só é atribuído pelo fluxo de aluguel
        if values["status"] == "rented":
            raise ValidationError({"status": "Status 'rented' é definido pelo aluguel"})
        clothing = ClothingRepo.create(Clothing(**values))
        current_app.logger.info(f"[clothes] created id={clothing.id} name={clothing.name!r}")
        return clothing

    @staticmethod
    def update_clothing(clothing_id: int, data: dict) -> Clothing:
        clothing = ClothingService.get_clothing(clothing_id)
        values = _clean(data, partial=True)

        new_status = values.get("status")
        if new_status and new_status != clothing.status and "rented" in (new_status, clothing.status):
            raise BusinessRuleError("Status 'rented' só muda por aluguel, devolução ou cancelamento")

        for k, v in values.items():
            setattr(clothing, k, v)
        ClothingRepo.update()
        return clothing

    @staticmethod
    def delete_clothing(clothing_id: int):
        clothing = ClothingService.get_clothing(clothing_id)
        if RentalRepo.count_open_for_clothing(clothing.id):
            raise BusinessRuleError("Esta roupa está em um aluguel ativo")
        if clothing.rental_items:
            raise BusinessRuleError("Esta roupa possui histórico de aluguéis; marque-a como danificada")
        ClothingRepo.delete(clothing)
        current_app.logger.info(f"[clothes] deleted id={clothing_id}")
