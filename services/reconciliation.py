"""
Conteo de planillas por parte del operador.

Flujo de registro (submit_operator_count):

1. Lectura: la planilla debe existir y estar Pendiente. La discrepancia se
   recalcula (total_counted - declared_value); si el cliente envió otra, es
   error de validación.
2. Si hay discrepancia, se revisa que check_ins.status admita "Discrepancia"
   (fuera de la transacción: en MySQL un ALTER hace commit implícito).
3. Transacción única:
   - INSERT operator_counts
   - UPDATE check_ins SET status=... WHERE id=? AND status='Pendiente'
     (si no actualiza nada, otro conteo ganó: rollback)
   - si hay discrepancia: alerta Critica -> tarea al grupo Digitador ->
     alerta Asignada
4. Commit. Las notificaciones van aparte (services.notifications).
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from flask import current_app
from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.alert import Alert, AlertPriority, AlertStatus
from models.check_in import CheckIn, CheckInStatus
from models.client import Client
from models.operator_count import DENOMINATIONS, OperatorCount
from models.task import Task, TaskStatus, TaskType
from models.user import UserRole
from services.errors import CheckInNotAvailable, TransactionError, ValidationError
from services.money import CENTS, format_amount, to_amount
from services.principal import Principal
from services.schema_guard import ensure_check_in_status_supports


@dataclass(frozen=True)
class CountInput:
    check_in_id: int
    bills: dict
    coins: Decimal
    total_counted: Decimal
    discrepancy: Optional[Decimal]
    observations: Optional[str]


@dataclass(frozen=True)
class CountResult:
    count_id: int
    check_in_id: int
    invoice_number: str
    status: str
    discrepancy: Decimal
    alert_id: Optional[int] = None
    task_id: Optional[int] = None


# -------------------------
# Consulta
# -------------------------
def find_pending_check_in(db: Session, invoice_number: str) -> dict:
    row = db.execute(
        select(
            CheckIn.id,
            CheckIn.invoice_number,
            CheckIn.seal_number,
            CheckIn.declared_value,
            CheckIn.status,
            Client.name.label("client_name"),
        )
        .join(Client, CheckIn.client_id == Client.id)
        .where(CheckIn.invoice_number == invoice_number)
    ).first()

    if row is None or row.status != CheckInStatus.PENDIENTE:
        current_app.logger.info(
            "Planilla %s no disponible para conteo (%s)",
            invoice_number,
            "no existe" if row is None else f"estado {row.status}",
        )
        raise CheckInNotAvailable()

    return {
        "id": row.id,
        "invoice_number": row.invoice_number,
        "seal_number": row.seal_number,
        "declared_value": float(row.declared_value),
        "client_name": row.client_name,
    }


# -------------------------
# Validación de entrada
# -------------------------
def _count_field(data: dict, key: str) -> int:
    raw = data.get(key, 0)
    if raw is None or raw == "":
        return 0
    if isinstance(raw, bool):
        raise ValidationError(f"Cantidad inválida en {key}.")
    try:
        value = int(str(raw).strip())
    except ValueError:
        raise ValidationError(f"Cantidad inválida en {key}.")
    if value < 0:
        raise ValidationError(f"La cantidad en {key} no puede ser negativa.")
    return value


def _amount_field(data: dict, key: str, required: bool = False) -> Optional[Decimal]:
    raw = data.get(key)
    if raw is None or raw == "":
        if required:
            raise ValidationError(f"Falta el campo {key}.")
        return None
    try:
        return to_amount(raw)
    except ValueError:
        raise ValidationError(f"Valor inválido en {key}.")


def parse_count_payload(data) -> CountInput:
    if not isinstance(data, dict):
        raise ValidationError("Cuerpo JSON inválido.")

    raw_id = data.get("check_in_id")
    if raw_id is None or isinstance(raw_id, bool):
        raise ValidationError("Falta el campo check_in_id.")
    try:
        check_in_id = int(str(raw_id).strip())
    except ValueError:
        raise ValidationError("check_in_id inválido.")
    if check_in_id <= 0:
        raise ValidationError("check_in_id inválido.")

    bills = {col: _count_field(data, col) for col, _ in DENOMINATIONS}

    coins = _amount_field(data, "coins") or Decimal("0.00")
    total_counted = _amount_field(data, "total_counted", required=True)
    if coins < 0 or total_counted < 0:
        raise ValidationError("Los montos contados no pueden ser negativos.")

    observations = data.get("observations")
    if observations is not None and not isinstance(observations, str):
        raise ValidationError("observations debe ser texto.")
    observations = (observations or "").strip() or None

    return CountInput(
        check_in_id=check_in_id,
        bills=bills,
        coins=coins,
        total_counted=total_counted,
        discrepancy=_amount_field(data, "discrepancy"),
        observations=observations,
    )


# -------------------------
# Registro
# -------------------------
def _create_alert(db: Session, *, check_in_id: int, invoice_number: str, discrepancy: Decimal) -> Alert:
    alert = Alert(
        title=f"Discrepancia en Planilla: {invoice_number}",
        description=f"Diferencia de ${format_amount(discrepancy)}. Requiere revisión y seguimiento.",
        priority=AlertPriority.CRITICA,
        status=AlertStatus.PENDIENTE,
        suggested_role=UserRole.DIGITADOR,
        check_in_id=check_in_id,
    )
    db.add(alert)
    db.flush()
    return alert


def _create_follow_up_task(db: Session, *, alert: Alert, invoice_number: str, created_by: int) -> Task:
    task = Task(
        alert_id=alert.id,
        assigned_to_group=UserRole.DIGITADOR,
        instruction=(
            f"Realizar seguimiento a la discrepancia ({invoice_number}), "
            "contactar a los responsables y documentar la resolución."
        ),
        type=TaskType.ASIGNACION,
        status=TaskStatus.PENDIENTE,
        priority=AlertPriority.CRITICA,
        created_by_user_id=created_by,
    )
    db.add(task)
    db.flush()
    return task


def _apply_count(
    db: Session,
    principal: Principal,
    count: CountInput,
    *,
    invoice_number: str,
    discrepancy: Decimal,
) -> CountResult:
    oc = OperatorCount(
        check_in_id=count.check_in_id,
        operator_id=principal.user_id,
        coins=count.coins,
        total_counted=count.total_counted,
        discrepancy=discrepancy,
        observations=count.observations,
        **count.bills,
    )
    db.add(oc)
    db.flush()

    new_status = CheckInStatus.PROCESADO if discrepancy == 0 else CheckInStatus.DISCREPANCIA
    updated = db.execute(
        update(CheckIn)
        .where(CheckIn.id == count.check_in_id, CheckIn.status == CheckInStatus.PENDIENTE)
        .values(status=new_status)
        .execution_options(synchronize_session=False)
    ).rowcount
    if updated != 1:
        raise CheckInNotAvailable()

    if discrepancy == 0:
        return CountResult(
            count_id=oc.id,
            check_in_id=count.check_in_id,
            invoice_number=invoice_number,
            status=new_status,
            discrepancy=discrepancy,
        )

    alert = _create_alert(
        db, check_in_id=count.check_in_id, invoice_number=invoice_number, discrepancy=discrepancy
    )
    task = _create_follow_up_task(
        db, alert=alert, invoice_number=invoice_number, created_by=principal.user_id
    )
    alert.status = AlertStatus.ASIGNADA
    db.flush()

    return CountResult(
        count_id=oc.id,
        check_in_id=count.check_in_id,
        invoice_number=invoice_number,
        status=new_status,
        discrepancy=discrepancy,
        alert_id=alert.id,
        task_id=task.id,
    )


def submit_operator_count(db: Session, principal: Principal, count: CountInput) -> CountResult:
    check_in = db.get(CheckIn, count.check_in_id)
    if check_in is None or check_in.status != CheckInStatus.PENDIENTE:
        db.rollback()
        raise CheckInNotAvailable()

    invoice_number = check_in.invoice_number
    discrepancy = (count.total_counted - check_in.declared_value).quantize(CENTS)

    if count.discrepancy is not None and count.discrepancy != discrepancy:
        db.rollback()
        raise ValidationError(
            f"La discrepancia enviada ({count.discrepancy}) no coincide con "
            f"total contado menos valor declarado ({discrepancy})."
        )

    # Cierra la lectura antes de un posible ALTER sobre check_ins
    db.rollback()

    if discrepancy != 0 and current_app.config.get("ENSURE_STATUS_COLUMN_ON_SUBMIT", True):
        with db.get_bind().begin() as conn:
            ensure_check_in_status_supports(conn, CheckInStatus.DISCREPANCIA)

    try:
        result = _apply_count(
            db, principal, count, invoice_number=invoice_number, discrepancy=discrepancy
        )
        db.commit()
    except CheckInNotAvailable:
        db.rollback()
        current_app.logger.warning(
            "Conteo rechazado: planilla %s ya no estaba Pendiente", count.check_in_id
        )
        raise
    except SQLAlchemyError as e:
        db.rollback()
        current_app.logger.exception("Error registrando conteo de planilla %s", count.check_in_id)
        raise TransactionError(e) from e

    current_app.logger.info(
        "Conteo %s registrado: planilla=%s operador=%s estado=%s discrepancia=%s",
        result.count_id, result.check_in_id, principal.user_id, result.status, result.discrepancy,
    )
    return result
