from flask import Blueprint, current_app, jsonify, request
from flask_login import login_required

from models import db
from models.user import UserRole
from routes.guards import current_principal, require_roles
from services.errors import ValidationError
from services.notifications import notify_operator_count
from services.reconciliation import find_pending_check_in, parse_count_payload, submit_operator_count


operator_bp = Blueprint("operator", __name__, url_prefix="/operator")


@operator_bp.get("/check-in")
@login_required
@require_roles(UserRole.ADMIN, UserRole.OPERADOR)
def check_in_lookup():
    """Planilla Pendiente por número, para empezar el conteo."""
    invoice_number = (request.args.get("invoice_number") or request.args.get("planilla") or "").strip()
    if not invoice_number:
        raise ValidationError("No se proporcionó número de planilla.")

    data = find_pending_check_in(db.session, invoice_number)
    return jsonify({"success": True, "data": data})


@operator_bp.post("/counts")
@login_required
@require_roles(UserRole.ADMIN, UserRole.OPERADOR)
def count_submit():
    principal = current_principal()
    count = parse_count_payload(request.get_json(silent=True))

    result = submit_operator_count(db.session, principal, count)

    # La BD ya confirmó: el correo no cambia la respuesta
    if current_app.config.get("NOTIFY_ON_COUNT", True):
        notify_operator_count(db.session, operator_id=principal.user_id, count=count, result=result)

    return jsonify({
        "success": True,
        "message": "Conteo guardado.",
        "data": {
            "count_id": result.count_id,
            "check_in_id": result.check_in_id,
            "status": result.status,
            "discrepancy": float(result.discrepancy),
            "alert_id": result.alert_id,
            "task_id": result.task_id,
        },
    })
