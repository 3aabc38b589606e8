import pytest


PROTECTED = [
    ("get", "/operator/check-in?invoice_number=PL-100"),
    ("post", "/operator/counts"),
    ("get", "/history/"),
]


@pytest.mark.parametrize("method,url", PROTECTED)
def test_requires_session(client, data, method, url):
    resp = getattr(client, method)(url)
    assert resp.status_code == 401
    assert resp.get_json() == {"success": False, "error": "Acceso no autorizado."}


def test_digitizer_cannot_use_operator_endpoints(client, data, login):
    login(data.digitizer)

    resp = client.get("/operator/check-in?invoice_number=PL-100")
    assert resp.status_code == 403
    assert "data" not in resp.get_json()

    resp = client.post("/operator/counts", json={"check_in_id": data.pending, "total_counted": 100000})
    assert resp.status_code == 403


def test_history_is_admin_only(client, data, login):
    login(data.operator)
    resp = client.get("/history/")
    assert resp.status_code == 403
    assert resp.get_json()["success"] is False


def test_login_and_logout(client, data):
    resp = client.post("/auth/login", json={"email": "operador@test.com", "password": "secret123"})
    assert resp.status_code == 200
    assert resp.get_json()["data"]["role"] == "Operador"

    resp = client.get("/operator/check-in?invoice_number=PL-100")
    assert resp.status_code == 200

    assert client.post("/auth/logout").status_code == 200
    assert client.get("/operator/check-in?invoice_number=PL-100").status_code == 401


def test_login_rejects_bad_password(client, data):
    resp = client.post("/auth/login", json={"email": "operador@test.com", "password": "nope"})
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "Credenciales inválidas."


def test_health(client, app):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "database": "ok"}
