from datetime import datetime

from flask import Blueprint, jsonify, request
from flask_login import login_required

from models import db
from models.user import UserRole
from routes.guards import require_roles
from services.errors import ValidationError
from services.history import fetch_history, summarize_history


history_bp = Blueprint("history", __name__, url_prefix="/history")


def _parse_date(name: str):
    """Acepta YYYY-MM-DD. Vacío -> None."""
    s = (request.args.get(name) or "").strip()
    if not s:
        return None
    try:
        return datetime.strptime(s, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Fecha inválida en {name} (use AAAA-MM-DD).")


def _parse_user_id():
    s = (request.args.get("user_id") or "").strip()
    if not s:
        return None
    try:
        return int(s)
    except ValueError:
        raise ValidationError("user_id inválido.")


@history_bp.get("/")
@login_required
@require_roles(UserRole.ADMIN)
def history_list():
    """
    Historial de conteos con filtros opcionales:
    - start_date / end_date (inclusivos)
    - user_id: operador o digitador que cerró
    """
    start_date = _parse_date("start_date")
    end_date = _parse_date("end_date")
    user_id = _parse_user_id()

    rows = fetch_history(db.session, start_date=start_date, end_date=end_date, user_id=user_id)
    return jsonify({"success": True, "data": rows, "stats": summarize_history(rows)})
