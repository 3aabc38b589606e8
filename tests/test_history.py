from datetime import datetime
from decimal import Decimal

import pytest

from models import db
from models.check_in import CheckIn
from models.operator_count import OperatorCount
from services.history import summarize_history


@pytest.fixture
def history(app, data):
    """
    Cinco conteos en enero 2024:

    PL-H05  2024-01-05  operador        Procesado
    PL-H10  2024-01-10  operador        Faltante
    PL-H15  2024-01-15  otro operador   Discrepancia, cerrada por digitador
    PL-H20  2024-01-20  otro operador   Procesado, cerrada por digitador
    PL-H31  2024-01-31  operador        Discrepancia (sin cerrar)
    """
    rows = [
        ("PL-H05", datetime(2024, 1, 5, 9, 0), data.operator, "Procesado", None, "10000"),
        ("PL-H10", datetime(2024, 1, 10, 0, 0), data.operator, "Faltante", None, "20000"),
        ("PL-H15", datetime(2024, 1, 15, 14, 30), data.other_operator, "Discrepancia", data.digitizer, "30000"),
        ("PL-H20", datetime(2024, 1, 20, 8, 0), data.other_operator, "Procesado", data.digitizer, "40000"),
        ("PL-H31", datetime(2024, 1, 31, 23, 59), data.operator, "Discrepancia", None, "50000"),
    ]
    with app.app_context():
        for invoice, created_at, operator_id, status, digitizer_id, total in rows:
            ci = CheckIn(
                invoice_number=invoice,
                client_id=data.client,
                declared_value=Decimal(total),
                status=status,
                digitizer_status="Cerrado" if digitizer_id else None,
                closed_by_digitizer_id=digitizer_id,
            )
            db.session.add(ci)
            db.session.flush()
            db.session.add(OperatorCount(
                check_in_id=ci.id,
                operator_id=operator_id,
                total_counted=Decimal(total),
                discrepancy=Decimal("0"),
                created_at=created_at,
            ))
        db.session.commit()
    return data


def _get(client, **params):
    resp = client.get("/history/", query_string=params)
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    return body


def test_lists_all_rows_newest_first(client, history, login):
    login(history.admin)
    body = _get(client)

    assert [r["invoice_number"] for r in body["data"]] == ["PL-H31", "PL-H20", "PL-H15", "PL-H10", "PL-H05"]
    first = body["data"][0]
    assert first["client_name"] == "Banco Uno"
    assert first["operator_name"] == "Oscar Operador"
    assert first["digitizer_name"] is None
    assert first["total_counted"] == 50000.0
    assert first["created_at"].startswith("2024-01-31T23:59")


def test_final_status_priority(client, history, login):
    login(history.admin)
    statuses = {r["invoice_number"]: r["final_status"] for r in _get(client)["data"]}

    assert statuses == {
        "PL-H05": "Procesado",
        "PL-H10": "Faltante",
        "PL-H15": "Cerrado",
        "PL-H20": "Cerrado",
        "PL-H31": "Discrepancia",
    }


def test_start_date_is_inclusive(client, history, login):
    login(history.admin)
    invoices = [r["invoice_number"] for r in _get(client, start_date="2024-01-10")["data"]]

    assert "PL-H05" not in invoices
    assert "PL-H10" in invoices
    assert len(invoices) == 4


def test_end_date_includes_whole_day(client, history, login):
    login(history.admin)
    invoices = [r["invoice_number"] for r in _get(client, start_date="2024-01-10", end_date="2024-01-15")["data"]]
    assert invoices == ["PL-H15", "PL-H10"]

    invoices = [r["invoice_number"] for r in _get(client, end_date="2024-01-31")["data"]]
    assert "PL-H31" in invoices


def test_user_filter_matches_operator_or_digitizer(client, history, login):
    login(history.admin)

    as_digitizer = [r["invoice_number"] for r in _get(client, user_id=history.digitizer)["data"]]
    assert as_digitizer == ["PL-H20", "PL-H15"]

    as_operator = [r["invoice_number"] for r in _get(client, user_id=history.operator)["data"]]
    assert as_operator == ["PL-H31", "PL-H10", "PL-H05"]


def test_stats(client, history, login):
    login(history.admin)
    stats = _get(client)["stats"]

    assert stats["total_amount"] == 150000.0
    assert stats["total_count"] == 5
    assert stats["by_operator"] == [
        {"user_id": history.operator, "name": "Oscar Operador", "total": 80000.0, "count": 3},
        {"user_id": history.other_operator, "name": "Olga Operadora", "total": 70000.0, "count": 2},
    ]
    assert stats["by_digitizer"] == [
        {"user_id": history.digitizer, "name": "Diego Digitador", "total": 70000.0, "count": 2},
    ]


def test_empty_result(client, history, login):
    login(history.admin)
    body = _get(client, start_date="2025-01-01")
    assert body["data"] == []
    assert body["stats"] == {"total_amount": 0.0, "total_count": 0, "by_operator": [], "by_digitizer": []}


@pytest.mark.parametrize("params", [
    {"start_date": "10/01/2024"},
    {"end_date": "2024-13-01"},
    {"user_id": "uno"},
])
def test_bad_filters(client, history, login, params):
    login(history.admin)
    resp = client.get("/history/", query_string=params)
    assert resp.status_code == 400


class TestSummarizeHistory:

    def _row(self, op_id, name, total, dig_id=None, dig_name=None):
        return {
            "operator_id": op_id,
            "operator_name": name,
            "digitizer_id": dig_id,
            "digitizer_name": dig_name,
            "total_counted": total,
        }

    def test_ties_keep_encounter_order(self):
        rows = [
            self._row(3, "C", 100.0),
            self._row(1, "A", 300.0),
            self._row(2, "B", 100.0),
        ]
        stats = summarize_history(rows)
        assert [g["name"] for g in stats["by_operator"]] == ["A", "C", "B"]

    def test_total_is_sum_of_rows(self):
        rows = [self._row(1, "A", 0.1), self._row(1, "A", 0.2), self._row(2, "B", 1000.55)]
        stats = summarize_history(rows)
        assert stats["total_amount"] == 1000.85
        assert stats["by_operator"][0] == {"user_id": 2, "name": "B", "total": 1000.55, "count": 1}
        assert stats["by_operator"][1]["total"] == 0.3

    def test_rows_without_digitizer_are_skipped(self):
        rows = [self._row(1, "A", 10.0, dig_id=7, dig_name="D"), self._row(1, "A", 5.0)]
        stats = summarize_history(rows)
        assert stats["by_digitizer"] == [{"user_id": 7, "name": "D", "total": 10.0, "count": 1}]
