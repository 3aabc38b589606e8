from flask import jsonify, request, session
from flask_login import login_required, login_user, logout_user

from models import db
from models.user import User
from routes import auth_bp
from services.errors import AuthorizationError, ValidationError


@auth_bp.post("/login")
def login_post():
    data = request.get_json(silent=True) or {}
    email = (data.get("email") or "").strip().lower()
    password = data.get("password") or ""
    if not email or not password:
        raise ValidationError("Correo y contraseña son obligatorios.")

    user = db.session.query(User).filter(User.email == email, User.is_active.is_(True)).first()
    if not user or not user.check_password(password):
        raise AuthorizationError("Credenciales inválidas.", status_code=401)

    session.clear()
    login_user(user)
    return jsonify({"success": True, "data": {"id": user.id, "name": user.name, "role": user.role}})


@auth_bp.post("/logout")
@login_required
def logout():
    logout_user()
    session.clear()
    return jsonify({"success": True})
