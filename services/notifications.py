from flask import current_app, render_template
from sqlalchemy import select
from sqlalchemy.orm import Session

from models.check_in import CheckIn
from models.client import Client
from models.operator_count import DENOMINATIONS
from models.user import User, UserRole
from services.mailer import send_task_email
from services.reconciliation import CountInput, CountResult


def notification_recipients(db: Session) -> list:
    """Admins y digitadores con correo no vacío."""
    rows = db.execute(
        select(User.email, User.name)
        .where(
            User.role.in_((UserRole.ADMIN, UserRole.DIGITADOR)),
            User.email.is_not(None),
            User.email != "",
        )
        .order_by(User.id)
    ).all()
    return [(r.email, r.name) for r in rows]


def notify_operator_count(db: Session, *, operator_id: int, count: CountInput, result: CountResult) -> int:
    """
    Avisa por correo de un conteo ya confirmado en la BD.
    Cualquier error se registra y se ignora. Devuelve cuántos correos salieron.
    """
    try:
        details = db.execute(
            select(
                CheckIn.invoice_number,
                Client.name.label("client_name"),
                User.name.label("operator_name"),
            )
            .join(Client, CheckIn.client_id == Client.id)
            .join(User, User.id == operator_id)
            .where(CheckIn.id == result.check_in_id)
        ).first()
        if details is None:
            current_app.logger.warning("Sin detalles para notificar la planilla %s", result.check_in_id)
            return 0

        recipients = notification_recipients(db)
        if not recipients:
            return 0

        if result.discrepancy != 0:
            subject = f"Discrepancia en Planilla: {details.invoice_number}"
        else:
            subject = f"Nuevo Conteo de Operador: Planilla {details.invoice_number}"

        body = render_template(
            "emails/operator_count.html",
            details=details,
            denominations=[(value, count.bills[col]) for col, value in DENOMINATIONS],
            coins=count.coins,
            total_counted=count.total_counted,
            discrepancy=result.discrepancy,
            observations=count.observations,
        )

        sent = 0
        for email, name in recipients:
            if send_task_email(email, name, subject, body):
                sent += 1
        return sent

    except Exception:
        current_app.logger.exception("Error al enviar correo de notificación de conteo")
        return 0
