"""Fonte única de "agora" para regras de atraso, calendário e alertas.

Todas as comparações de data usam o dia do calendário em UTC; os testes
substituem ``today``/``utcnow`` via monkeypatch.
"""
from datetime import datetime, date, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def today() -> date:
    return utcnow().date()
