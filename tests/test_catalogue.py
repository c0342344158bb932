import pytest


def test_clothing_crud_and_search(client, auth_headers, admin_headers, make_clothing):
    a = make_clothing("Vestido vermelho", color="vermelho")
    make_clothing("Terno", type="terno", color="preto")

    rows = client.get("/clothes?q=vermelho", headers=auth_headers).get_json()["data"]
    assert [c["id"] for c in rows] == [a["id"]]

    resp = client.patch(f"/clothes/{a['id']}", json={"status": "washing", "quantity": 3}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["status"] == "washing"
    assert resp.get_json()["data"]["quantity"] == 3

    rows = client.get("/clothes?status=washing", headers=auth_headers).get_json()["data"]
    assert [c["id"] for c in rows] == [a["id"]]
    assert len(client.get("/clothes/available", headers=auth_headers).get_json()["data"]) == 1

    assert client.delete(f"/clothes/{a['id']}", headers=admin_headers).status_code == 200
    assert client.get(f"/clothes/{a['id']}", headers=auth_headers).status_code == 404


def test_clothing_validation(client, auth_headers):
    resp = client.post("/clothes", json={"name": "", "price": -1, "status": "lost"}, headers=auth_headers)
    assert resp.status_code == 400
    errors = resp.get_json()["errors"]
    assert {"name", "type", "size", "color", "price", "status"} <= set(errors)

    assert client.get("/clothes?status=lost", headers=auth_headers).status_code == 400


def test_rented_status_is_owned_by_rentals(client, auth_headers, make_clothing):
    a = make_clothing()
    resp = client.patch(f"/clothes/{a['id']}", json={"status": "rented"}, headers=auth_headers)
    assert resp.status_code == 409

    resp = client.post("/clothes", json={
        "name": "X", "type": "t", "size": "P", "color": "c", "price": 1, "status": "rented",
    }, headers=auth_headers)
    assert resp.status_code == 400


def test_cannot_delete_clothing_in_open_rental(client, admin_headers, make_customer, make_clothing, make_rental):
    a = make_clothing()
    make_rental(make_customer()["id"], [a["id"]])
    resp = client.delete(f"/clothes/{a['id']}", headers=admin_headers)
    assert resp.status_code == 409


def test_customer_crud(client, auth_headers, admin_headers, make_customer):
    c = make_customer(name="Ana Souza", cpf="123.456.789-01")
    assert c["cpf"] == "12345678901"
    assert c["phone"] == "11987654321"

    rows = client.get("/customers?q=souza", headers=auth_headers).get_json()["data"]
    assert [x["id"] for x in rows] == [c["id"]]
    rows = client.get("/customers?cpf=123.456.789-01", headers=auth_headers).get_json()["data"]
    assert [x["id"] for x in rows] == [c["id"]]

    resp = client.patch(f"/customers/{c['id']}", json={"address": "Av. Paulista, 1000"}, headers=auth_headers)
    assert resp.get_json()["data"]["address"] == "Av. Paulista, 1000"

    assert client.delete(f"/customers/{c['id']}", headers=admin_headers).status_code == 200
    assert client.get(f"/customers/{c['id']}", headers=auth_headers).status_code == 404


def test_customer_validation_and_unique_cpf(client, auth_headers, make_customer):
    make_customer(cpf="11122233344")
    resp = client.post("/customers", json={
        "name": "Outro", "cpf": "111.222.333-44", "phone": "11999998888",
        "email": "outro@example.com", "address": "Rua X",
    }, headers=auth_headers)
    assert resp.status_code == 400
    assert "cpf" in resp.get_json()["errors"]

    resp = client.post("/customers", json={"cpf": "123", "email": "sem-arroba"}, headers=auth_headers)
    errors = resp.get_json()["errors"]
    assert {"name", "cpf", "phone", "email", "address"} <= set(errors)


def test_cannot_delete_customer_with_active_rental(client, auth_headers, admin_headers, make_customer, make_clothing, make_rental):
    c = make_customer()
    rental = make_rental(c["id"], [make_clothing()["id"]]).get_json()["data"]

    resp = client.delete(f"/customers/{c['id']}", headers=admin_headers)
    assert resp.status_code == 409
    assert "ativos" in resp.get_json()["message"]

    history = client.get(f"/customers/{c['id']}/rentals", headers=auth_headers).get_json()["data"]
    assert [r["id"] for r in history] == [rental["id"]]


@pytest.mark.parametrize("price", ["NaN", "Infinity", "-Infinity", "1e400", "100000000"])
def test_clothing_price_must_be_a_finite_amount(client, auth_headers, price):
    resp = client.post("/clothes", json={
        "name": "Vestido", "type": "vestido", "size": "M", "color": "azul", "price": price,
    }, headers=auth_headers)
    assert resp.status_code == 400
    assert "price" in resp.get_json()["errors"]


def test_concurrent_duplicate_cpf_is_a_field_error(client, auth_headers, monkeypatch, make_customer):
    from modaflex.repositories.customer_repo import CustomerRepo

    make_customer(cpf="11122233344")
    # outro cadastro gravou o CPF entre a checagem e o commit
    monkeypatch.setattr(CustomerRepo, "get_by_cpf", staticmethod(lambda cpf: None))
    resp = client.post("/customers", json={
        "name": "Outro", "cpf": "11122233344", "phone": "11999998888",
        "email": "outro@example.com", "address": "Rua X",
    }, headers=auth_headers)
    assert resp.status_code == 400
    assert "cpf" in resp.get_json()["errors"]
    monkeypatch.undo()

    # sessão limpa após o rollback
    make_customer(cpf="55566677788")
    assert len(client.get("/customers", headers=auth_headers).get_json()["data"]) == 2
