from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Optional

from sqlalchemy import case, or_, select
from sqlalchemy.orm import Session, aliased

from models.check_in import CheckIn, CheckInStatus
from models.client import Client
from models.operator_count import OperatorCount
from models.user import User


def _final_status():
    """Estado a mostrar: Cerrado (digitador) > Procesado > Faltante > Pendiente > estado guardado."""
    return case(
        (CheckIn.digitizer_status == CheckInStatus.CERRADO, CheckInStatus.CERRADO),
        (CheckIn.status == CheckInStatus.PROCESADO, CheckInStatus.PROCESADO),
        (CheckIn.status == CheckInStatus.FALTANTE, CheckInStatus.FALTANTE),
        (CheckIn.status == CheckInStatus.PENDIENTE, CheckInStatus.PENDIENTE),
        else_=CheckIn.status,
    )


def fetch_history(
    db: Session,
    *,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    user_id: Optional[int] = None,
) -> list:
    """
    Un registro por conteo de operador, del más reciente al más antiguo.
    - start_date / end_date: inclusivos, por fecha de creación del conteo.
    - user_id: coincide con el operador o con el digitador que cerró.
    """
    operator = aliased(User)
    digitizer = aliased(User)

    q = (
        select(
            OperatorCount.id,
            OperatorCount.created_at,
            OperatorCount.total_counted,
            OperatorCount.operator_id,
            CheckIn.invoice_number,
            CheckIn.closed_by_digitizer_id.label("digitizer_id"),
            Client.name.label("client_name"),
            operator.name.label("operator_name"),
            digitizer.name.label("digitizer_name"),
            _final_status().label("final_status"),
        )
        .join(CheckIn, OperatorCount.check_in_id == CheckIn.id)
        .join(Client, CheckIn.client_id == Client.id)
        .join(operator, OperatorCount.operator_id == operator.id)
        .outerjoin(digitizer, CheckIn.closed_by_digitizer_id == digitizer.id)
    )

    if start_date:
        q = q.where(OperatorCount.created_at >= datetime.combine(start_date, time.min))
    if end_date:
        q = q.where(OperatorCount.created_at < datetime.combine(end_date + timedelta(days=1), time.min))
    if user_id is not None:
        q = q.where(or_(OperatorCount.operator_id == user_id, CheckIn.closed_by_digitizer_id == user_id))

    q = q.order_by(OperatorCount.created_at.desc(), OperatorCount.id.desc())

    return [
        {
            "id": r.id,
            "created_at": r.created_at.isoformat(),
            "invoice_number": r.invoice_number,
            "client_name": r.client_name,
            "operator_id": r.operator_id,
            "operator_name": r.operator_name,
            "digitizer_id": r.digitizer_id,
            "digitizer_name": r.digitizer_name,
            "total_counted": float(r.total_counted),
            "final_status": r.final_status,
        }
        for r in db.execute(q).all()
    ]


def _group_totals(rows: list, id_key: str, name_key: str) -> list:
    groups = {}
    for row in rows:
        if row.get(id_key) is None:
            continue
        g = groups.setdefault(
            row[id_key],
            {"user_id": row[id_key], "name": row.get(name_key), "total": Decimal("0"), "count": 0},
        )
        g["total"] += Decimal(str(row["total_counted"]))
        g["count"] += 1

    # sorted() es estable: empates quedan en el orden en que aparecieron
    ordered = sorted(groups.values(), key=lambda g: g["total"], reverse=True)
    for g in ordered:
        g["total"] = float(g["total"])
    return ordered


def summarize_history(rows: list) -> dict:
    total = sum((Decimal(str(r["total_counted"])) for r in rows), Decimal("0"))
    return {
        "total_amount": float(total),
        "total_count": len(rows),
        "by_operator": _group_totals(rows, "operator_id", "operator_name"),
        "by_digitizer": _group_totals(rows, "digitizer_id", "digitizer_name"),
    }
