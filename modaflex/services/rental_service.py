from decimal import Decimal

from flask import current_app

from modaflex.errors import ValidationError, NotFoundError, BusinessRuleError
from modaflex.models.rental import Rental, RentalItem, RENTAL_STATUSES
from modaflex.repositories.clothing_repo import ClothingRepo
from modaflex.repositories.customer_repo import CustomerRepo
from modaflex.repositories.rental_repo import RentalRepo
from modaflex.utils import clock
from modaflex.utils.fines import (
    FineResult, compute_fine, days_late, effective_status, DEFAULT_DAILY_RATE,
)
from modaflex.utils.validators import parse_date, parse_int, optional_text

_LOCKED = ("status", "actual_return_date", "fine", "total_value", "clothing_ids", "customer_id")


class RentalService:
    @staticmethod
    def _daily_rate():
        return current_app.config.get("FINE_DAILY_RATE", DEFAULT_DAILY_RATE)

    @staticmethod
    def get_rental(rental_id: int) -> Rental:
        rental = RentalRepo.get(rental_id)
        if not rental:
            raise NotFoundError("Aluguel não encontrado")
        return rental

    @staticmethod
    def list_rentals(status: str | None = None, customer_id: int | None = None):
        """
        ``status`` é comparado com o status efetivo: um aluguel ativo com
        devolução vencida aparece apenas em ``overdue``.
        """
        if status and status not in RENTAL_STATUSES:
            raise ValidationError({"status": "Status inválido"})
        rows = RentalRepo.list_all(customer_id=customer_id)
        if not status:
            return rows
        today = clock.today()
        return [r for r in rows if effective_status(r.status, r.return_date, today) == status]

    @staticmethod
    def list_open():
        return RentalRepo.list_open()

    @staticmethod
    def _parse_clothing_ids(raw, errors: dict):
        if not isinstance(raw, list) or not raw:
            errors["clothing_ids"] = "Selecione pelo menos uma roupa"
            return []
        ids = []
        for value in raw:
            n = parse_int(value, "clothing_ids", errors, minimum=1)
            if n is None:
                return []
            ids.append(n)
        if len(set(ids)) != len(ids):
            errors["clothing_ids"] = "Roupa selecionada mais de uma vez"
            return []
        return ids

    @staticmethod
    def create_rental(data: dict) -> Rental:
        errors = {}

        customer_id = None
        if data.get("customer_id") in (None, ""):
            errors["customer_id"] = "Cliente é obrigatório"
        else:
            customer_id = parse_int(data.get("customer_id"), "customer_id", errors, minimum=1)

        clothing_ids = RentalService._parse_clothing_ids(data.get("clothing_ids"), errors)
        rent_date = parse_date(data.get("rent_date"), "rent_date", errors)
        return_date = parse_date(data.get("return_date"), "return_date", errors)
        if rent_date and return_date and rent_date > return_date:
            errors["return_date"] = "Data de devolução anterior à data de retirada"

        if errors:
            raise ValidationError(errors)

        customer = CustomerRepo.get(customer_id)
        if not customer:
            raise ValidationError({"customer_id": "Cliente não encontrado"})

        # preços lidos agora; total_value não é recalculado depois
        clothes = ClothingRepo.get_many(clothing_ids)
        missing = [cid for cid in clothing_ids if cid not in clothes]
        if missing:
            raise ValidationError({"clothing_ids": f"Roupa(s) não encontrada(s): {missing}"})

        unavailable = [cid for cid in clothing_ids if clothes[cid].status != "available"]
        if unavailable:
            raise BusinessRuleError(f"Roupa(s) indisponível(is) para aluguel: {unavailable}")

        rental = Rental(
            customer_id=customer.id,
            rent_date=rent_date,
            return_date=return_date,
            status="active",
            notes=optional_text(data, "notes"),
        )

        total = Decimal("0.00")
        for position, cid in enumerate(clothing_ids):
            clothing = clothes[cid]
            price = Decimal(str(clothing.price))
            rental.items.append(RentalItem(clothing_id=cid, position=position, unit_price=price))
            total += price
            clothing.status = "rented"
        rental.total_value = total.quantize(Decimal("0.01"))

        # aluguel + status das roupas em um único commit
        try:
            RentalRepo.add(rental)
            RentalRepo.commit()
        except Exception:
            RentalRepo.rollback()
            raise

        current_app.logger.info(
            f"[rentals] created id={rental.id} customer={customer.id} "
            f"items={clothing_ids} total={rental.total_value}"
        )
        return rental

    @staticmethod
    def update_rental(rental_id: int, data: dict) -> Rental:
        rental = RentalService.get_rental(rental_id)

        errors = {}
        for field in _LOCKED:
            if field in data:
                errors[field] = "Campo não pode ser alterado por edição"
        if errors:
            raise ValidationError(errors)

        if not rental.is_open:
            raise BusinessRuleError("Somente aluguéis em aberto podem ser editados")

        rent_date = rental.rent_date
        return_date = rental.return_date
        if "rent_date" in data:
            rent_date = parse_date(data.get("rent_date"), "rent_date", errors)
        if "return_date" in data:
            return_date = parse_date(data.get("return_date"), "return_date", errors)
        if rent_date and return_date and rent_date > return_date:
            errors["return_date"] = "Data de devolução anterior à data de retirada"
        if errors:
            raise ValidationError(errors)

        rental.rent_date = rent_date
        rental.return_date = return_date
        if "notes" in data:
            rental.notes = optional_text(data, "notes")

        try:
            RentalRepo.commit()
        except Exception:
            RentalRepo.rollback()
            raise
        return rental

    @staticmethod
    def preview_fine(rental_id: int, as_of=None):
        """Multa que o aluguel teria se fosse devolvido em ``as_of`` (padrão: hoje)."""
        rental = RentalService.get_rental(rental_id)
        # devolvido: multa gravada no acerto, não recalculada pela taxa atual
        if rental.status == "returned":
            amount = Decimal(str(rental.fine or 0)).quantize(Decimal("0.01"))
            return FineResult(days_late=days_late(rental.return_date, rental.actual_return_date), amount=amount)
        if rental.status == "cancelled":
            return FineResult(days_late=0, amount=Decimal("0.00"))

        errors = {}
        comparison = parse_date(as_of, "as_of", errors, required=False) if as_of else clock.today()
        if errors:
            raise ValidationError(errors)
        return compute_fine(rental.return_date, comparison, RentalService._daily_rate())

    @staticmethod
    def return_rental(rental_id: int, data: dict | None = None) -> Rental:
        data = data or {}
        rental = RentalService.get_rental(rental_id)

        if rental.status == "returned":
            raise BusinessRuleError("Este aluguel já foi devolvido")
        if rental.status == "cancelled":
            raise BusinessRuleError("Aluguel cancelado não pode ser devolvido")

        errors = {}
        actual = parse_date(data.get("actual_return_date"), "actual_return_date", errors, required=False)
        if errors:
            raise ValidationError(errors)
        actual = actual or clock.today()
        if actual < rental.rent_date:
            raise ValidationError({"actual_return_date": "Devolução anterior à data de retirada"})

        result = compute_fine(rental.return_date, actual, RentalService._daily_rate())

        rental.actual_return_date = actual
        rental.status = "returned"
        rental.fine = result.amount
        for clothing in rental.clothes:
            if clothing is not None:
                clothing.status = "available"

        try:
            RentalRepo.commit()
        except Exception:
            RentalRepo.rollback()
            raise

        current_app.logger.info(
            f"[rentals] returned id={rental.id} days_late={result.days_late} fine={result.amount}"
        )
        return rental

    @staticmethod
    def cancel_rental(rental_id: int) -> Rental:
        rental = RentalService.get_rental(rental_id)
        if not rental.is_open:
            raise BusinessRuleError("Somente aluguéis em aberto podem ser cancelados")

        rental.status = "cancelled"
        for clothing in rental.clothes:
            if clothing is not None:
                clothing.status = "available"

        try:
            RentalRepo.commit()
        except Exception:
            RentalRepo.rollback()
            raise

        current_app.logger.info(f"[rentals] cancelled id={rental.id}")
        return rental
