from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation

# limite de Numeric(10, 2)
MAX_MONEY = Decimal("99999999.99")


def parse_date(value, field: str, errors: dict, required: bool = True):
    if value in (None, ""):
        if required:
            errors[field] = "Data é obrigatória"
        return None
    if isinstance(value, date):
        return value
    text = str(value).strip()
    # "2024-01-10T08:00:00Z" -> só a parte da data
    if "T" in text:
        text = text.split("T", 1)[0]
    try:
        return date.fromisoformat(text)
    except ValueError:
        errors[field] = "Data inválida (use AAAA-MM-DD)"
        return None


def parse_decimal(value, field: str, errors: dict, minimum=Decimal("0"), maximum=MAX_MONEY):
    if value in (None, ""):
        errors[field] = "Valor é obrigatório"
        return None
    try:
        # bool é int em python, não aceitar
        if isinstance(value, bool):
            raise InvalidOperation
        d = Decimal(str(value))
        if not d.is_finite():
            raise InvalidOperation
        if minimum is not None and d < minimum:
            errors[field] = "Valor deve ser positivo"
            return None
        if maximum is not None and d > maximum:
            errors[field] = f"Valor máximo é {maximum}"
            return None
        return d.quantize(Decimal("0.01"))
    except (InvalidOperation, ValueError):
        errors[field] = "Valor numérico inválido"
        return None


def parse_int(value, field: str, errors: dict, minimum: int | None = 0, required: bool = True):
    if value in (None, ""):
        if required:
            errors[field] = "Quantidade é obrigatória"
        return None
    if isinstance(value, bool):
        errors[field] = "Número inteiro inválido"
        return None
    try:
        n = int(value)
    except (TypeError, ValueError):
        errors[field] = "Número inteiro inválido"
        return None
    if minimum is not None and n < minimum:
        errors[field] = f"Deve ser maior ou igual a {minimum}"
        return None
    return n


def require_text(data: dict, field: str, errors: dict, label: str):
    value = data.get(field)
    if isinstance(value, str):
        value = value.strip()
    if not value:
        errors[field] = f"{label} é obrigatório"
        return None
    return value


def optional_text(data: dict, field: str):
    value = data.get(field)
    if isinstance(value, str):
        value = value.strip()
    return value or None


def require_choice(value, field: str, errors: dict, choices):
    if value not in choices:
        errors[field] = f"Valor inválido; opções: {', '.join(choices)}"
        return None
    return value


def only_digits(value: str) -> str:
    return "".join(ch for ch in (value or "") if ch.isdigit())
