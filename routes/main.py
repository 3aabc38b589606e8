from flask import current_app, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from models import db
from routes import main_bp


@main_bp.get("/health")
def health():
    """Chequeo básico: la app responde y la BD acepta consultas."""
    try:
        db.session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Health check: base de datos no disponible")
        return jsonify({"success": False, "database": "error"}), 503
    return jsonify({"success": True, "database": "ok"})
