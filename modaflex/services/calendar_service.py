"""Eventos de calendário derivados dos aluguéis.

Cada aluguel gera um evento de retirada em ``rent_date`` e um de devolução
em ``return_date``. A devolução é classificada em ``upcoming_return``,
``completed_return`` ou ``overdue_return`` a partir de hoje, da data
prevista e do status. Nada aqui é persistido.
"""
from __future__ import annotations

from collections import OrderedDict
from datetime import date, timedelta

from modaflex.errors import ValidationError
from modaflex.repositories.rental_repo import RentalRepo
from modaflex.utils import clock
from modaflex.utils.fines import is_overdue

MAX_RANGE_DAYS = 366


def month_grid(year: int, month: int) -> list[date]:
    """42 dias (seis semanas) começando no domingo anterior ao dia 1."""
    first = date(year, month, 1)
    offset = (first.weekday() + 1) % 7
    start = first - timedelta(days=offset)
    return [start + timedelta(days=i) for i in range(42)]


def return_category(status: str, expected: date, today: date) -> str:
    if status == "returned":
        return "completed_return"
    if is_overdue(status, expected, today):
        return "overdue_return"
    return "upcoming_return"


def derive_events(rentals, start: date, end: date, today: date) -> "OrderedDict[str, list]":
    days: OrderedDict[str, list] = OrderedDict()
    for i in range((end - start).days + 1):
        days[(start + timedelta(days=i)).isoformat()] = []

    for r in rentals:
        if r.status == "cancelled":
            continue
        customer_name = r.customer.name if getattr(r, "customer", None) else None

        pickup_key = r.rent_date.isoformat()
        if pickup_key in days:
            days[pickup_key].append({
                "rental_id": r.id,
                "customer_name": customer_name,
                "event_type": "pickup",
                "category": "pickup",
            })

        return_key = r.return_date.isoformat()
        if return_key in days:
            days[return_key].append({
                "rental_id": r.id,
                "customer_name": customer_name,
                "event_type": "return",
                "category": return_category(r.status, r.return_date, today),
            })

    return days


class CalendarService:
    @staticmethod
    def resolve_range(start=None, end=None, year=None, month=None) -> tuple[date, date]:
        errors = {}
        if start or end:
            try:
                s = date.fromisoformat(str(start)) if start else None
                e = date.fromisoformat(str(end)) if end else None
            except ValueError:
                raise ValidationError({"start": "Data inválida (use AAAA-MM-DD)"})
            if not s or not e:
                raise ValidationError({"start": "Informe start e end"})
            if s > e:
                errors["end"] = "end deve ser posterior a start"
            elif (e - s).days + 1 > MAX_RANGE_DAYS:
                errors["end"] = f"Intervalo máximo de {MAX_RANGE_DAYS} dias"
            if errors:
                raise ValidationError(errors)
            return s, e

        today = clock.today()
        try:
            y = int(year) if year else today.year
            m = int(month) if month else today.month
            grid = month_grid(y, m)
        except (ValueError, OverflowError):
            raise ValidationError({"month": "Mês/ano inválido"})
        return grid[0], grid[-1]

    @staticmethod
    def events_for_range(start: date, end: date):
        rentals = RentalRepo.list_in_range(start, end)
        return derive_events(rentals, start, end, clock.today())
