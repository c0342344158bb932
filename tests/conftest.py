from datetime import date

import pytest

from modaflex import create_app
from modaflex.config import TestConfig
from modaflex.services.auth_service import AuthService


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        AuthService.register("admin", "admin@modaflex.local", "admin123", role="admin")
        AuthService.register("maria", "maria@modaflex.local", "maria123")
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, username, password):
    resp = client.post("/auth/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.get_json()
    return {"Authorization": f"Bearer {resp.get_json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return _login(client, "maria", "maria123")


@pytest.fixture
def admin_headers(client):
    return _login(client, "admin", "admin123")


@pytest.fixture
def set_today(monkeypatch):
    """Fixa o "hoje" usado por atraso, calendário e alertas."""
    from modaflex.utils import clock

    def _set(value: date):
        monkeypatch.setattr(clock, "today", lambda: value)
        return value

    return _set


@pytest.fixture
def make_customer(client, auth_headers):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        payload = {
            "name": f"Cliente {counter['n']}",
            "cpf": f"{counter['n']:011d}",
            "phone": "(11) 98765-4321",
            "email": f"cliente{counter['n']}@example.com",
            "address": "Rua das Flores, 100",
        }
        payload.update(overrides)
        resp = client.post("/customers", json=payload, headers=auth_headers)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["data"]

    return _make


@pytest.fixture
def make_clothing(client, auth_headers):
    def _make(name="Vestido longo", price=50.0, **overrides):
        payload = {
            "name": name,
            "type": "vestido",
            "size": "M",
            "color": "azul",
            "price": price,
        }
        payload.update(overrides)
        resp = client.post("/clothes", json=payload, headers=auth_headers)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["data"]

    return _make


@pytest.fixture
def make_rental(client, auth_headers):
    def _make(customer_id, clothing_ids, rent_date="2024-01-05", return_date="2024-01-10", **extra):
        payload = {
            "customer_id": customer_id,
            "clothing_ids": clothing_ids,
            "rent_date": rent_date,
            "return_date": return_date,
        }
        payload.update(extra)
        return client.post("/rentals", json=payload, headers=auth_headers)

    return _make
