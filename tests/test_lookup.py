NOT_AVAILABLE = "Planilla no encontrada o ya fue procesada."


def test_pending_check_in_is_returned(client, data, login):
    login(data.operator)
    resp = client.get("/operator/check-in?invoice_number=PL-100")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"] == {
        "id": data.pending,
        "invoice_number": "PL-100",
        "seal_number": "S-100",
        "declared_value": 100000.0,
        "client_name": "Banco Uno",
    }


def test_admin_can_lookup_with_planilla_alias(client, data, login):
    login(data.admin)
    resp = client.get("/operator/check-in?planilla=PL-100")
    assert resp.status_code == 200
    assert resp.get_json()["data"]["id"] == data.pending


def test_processed_and_missing_look_the_same(client, data, login):
    login(data.operator)

    processed = client.get("/operator/check-in?invoice_number=PL-200")
    missing = client.get("/operator/check-in?invoice_number=NO-EXISTE")

    assert processed.status_code == missing.status_code == 404
    assert processed.get_json() == missing.get_json() == {"success": False, "error": NOT_AVAILABLE}


def test_missing_invoice_number(client, data, login):
    login(data.operator)
    resp = client.get("/operator/check-in")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "No se proporcionó número de planilla."
