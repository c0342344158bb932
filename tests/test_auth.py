def test_login_and_me(client, auth_headers):
    resp = client.get("/auth/me", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()["user"]["role"] == "attendant"


def test_wrong_password(client):
    resp = client.post("/auth/login", json={"username": "maria", "password": "errada"})
    assert resp.status_code == 401


def test_register_always_creates_attendant(client):
    resp = client.post("/auth/register", json={
        "username": "joao", "email": "joao@modaflex.local", "password": "x1", "role": "admin",
    })
    assert resp.status_code == 201
    assert resp.get_json()["role"] == "attendant"

    resp = client.post("/auth/register", json={"username": "joao", "email": "j2@x.com", "password": "x"})
    assert resp.status_code == 400


def test_endpoints_require_token(client):
    assert client.get("/clothes").status_code == 401
    assert client.get("/rentals").status_code == 401


def test_delete_requires_admin(client, auth_headers, make_clothing):
    a = make_clothing()
    assert client.delete(f"/clothes/{a['id']}", headers=auth_headers).status_code == 403


def test_health(client):
    assert client.get("/health").get_json() == {"ok": True}
