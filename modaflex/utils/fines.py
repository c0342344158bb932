"""Cálculo de atraso e multa de aluguel.

Funções puras: recebem a data prevista de devolução e a data de comparação
(hoje, para exibição, ou a data real de devolução no acerto) e não tocam no
banco.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

DEFAULT_DAILY_RATE = Decimal("20.00")

_OPEN = ("active", "overdue")


@dataclass(frozen=True)
class FineResult:
    days_late: int
    amount: Decimal

    @property
    def is_late(self) -> bool:
        return self.days_late > 0


def days_late(expected, comparison) -> int:
    """Dias inteiros de atraso; zero quando ``comparison <= expected``."""
    if expected is None or comparison is None:
        return 0

    if isinstance(expected, datetime) or isinstance(comparison, datetime):
        exp = _as_datetime(expected)
        cmp_ = _as_datetime(comparison)
        if cmp_ <= exp:
            return 0
        return math.ceil((cmp_ - exp).total_seconds() / 86400)

    if comparison <= expected:
        return 0
    return (comparison - expected).days


def compute_fine(expected, comparison, daily_rate=DEFAULT_DAILY_RATE) -> FineResult:
    days = days_late(expected, comparison)
    rate = Decimal(str(daily_rate))
    amount = (rate * Decimal(days)).quantize(Decimal("0.01"))
    return FineResult(days_late=days, amount=amount)


def is_overdue(status: str, expected: date, today: date) -> bool:
    return status in _OPEN and expected is not None and today > expected


def effective_status(status: str, expected: date, today: date) -> str:
    """Status exibido: aluguel aberto com data prevista vencida vira ``overdue``."""
    if is_overdue(status, expected, today):
        return "overdue"
    return status


def _as_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return value.replace(tzinfo=None) if value.tzinfo else value
    return datetime(value.year, value.month, value.day)
