from flask import current_app
from sqlalchemy.exc import IntegrityError

from modaflex.errors import ValidationError, NotFoundError, BusinessRuleError
from modaflex.models.customer import Customer
from modaflex.repositories.customer_repo import CustomerRepo
from modaflex.repositories.rental_repo import RentalRepo
from modaflex.utils.validators import require_text, optional_text, only_digits

_REQUIRED_TEXT = {
    "name": "Nome",
    "cpf": "CPF",
    "phone": "Telefone",
    "email": "E-mail",
    "address": "Endereço",
}


def _clean(data: dict, partial: bool) -> dict:
    errors = {}
    out = {}

    for field, label in _REQUIRED_TEXT.items():
        if partial and field not in data:
            continue
        out[field] = require_text(data, field, errors, label)

    if out.get("cpf"):
        cpf = only_digits(out["cpf"])
        if len(cpf) != 11:
            errors["cpf"] = "CPF deve ter 11 dígitos"
        out["cpf"] = cpf
    if out.get("phone"):
        phone = only_digits(out["phone"])
        if len(phone) < 10:
            errors["phone"] = "Telefone inválido"
        out["phone"] = phone
    if out.get("email") and "@" not in out["email"]:
        errors["email"] = "E-mail inválido"

    if "notes" in data:
        out["notes"] = optional_text(data, "notes")

    if errors:
        raise ValidationError(errors)
    return out


class CustomerService:
    @staticmethod
    def list_customers(q: str | None = None, cpf: str | None = None):
        return CustomerRepo.list_all(q=(q or "").strip() or None, cpf=only_digits(cpf) or None)

    @staticmethod
    def get_customer(customer_id: int) -> Customer:
        customer = CustomerRepo.get(customer_id)
        if not customer:
            raise NotFoundError("Cliente não encontrado")
        return customer

    @staticmethod
    def create_customer(data: dict) -> Customer:
        values = _clean(data, partial=False)
        if CustomerRepo.get_by_cpf(values["cpf"]):
            raise ValidationError({"cpf": "CPF já cadastrado"})
        try:
            customer = CustomerRepo.create(Customer(**values))
        except IntegrityError:
            # cadastro concorrente com o mesmo CPF
            raise ValidationError({"cpf": "CPF já cadastrado"})
        current_app.logger.info(f"[customers] created id={customer.id}")
        return customer

    @staticmethod
    def update_customer(customer_id: int, data: dict) -> Customer:
        customer = CustomerService.get_customer(customer_id)
        values = _clean(data, partial=True)
        if "cpf" in values and values["cpf"] != customer.cpf:
            other = CustomerRepo.get_by_cpf(values["cpf"])
            if other and other.id != customer.id:
                raise ValidationError({"cpf": "CPF já cadastrado"})
        for k, v in values.items():
            setattr(customer, k, v)
        try:
            CustomerRepo.update()
        except IntegrityError:
            raise ValidationError({"cpf": "CPF já cadastrado"})
        return customer

    @staticmethod
    def delete_customer(customer_id: int):
        customer = CustomerService.get_customer(customer_id)
        if RentalRepo.count_open_for_customer(customer.id):
            raise BusinessRuleError("Este cliente possui aluguéis ativos")
        if customer.rentals:
            raise BusinessRuleError("Este cliente possui histórico de aluguéis")
        CustomerRepo.delete(customer)
        current_app.logger.info(f"[customers] deleted id={customer_id}")

    @staticmethod
    def rental_history(customer_id: int):
        customer = CustomerService.get_customer(customer_id)
        return RentalRepo.list_by_customer(customer.id)
