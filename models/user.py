from datetime import datetime
from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash
from . import db, login_manager


class UserRole:
    ADMIN = "Admin"
    OPERADOR = "Operador"
    DIGITADOR = "Digitador"

    ALL = {ADMIN, OPERADOR, DIGITADOR}


class User(db.Model, UserMixin):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)

    name = db.Column(db.String(120), nullable=False)
    # Puede estar vacío: sin correo no recibe notificaciones
    email = db.Column(db.String(180), nullable=True, unique=True, index=True)

    role = db.Column(db.String(20), nullable=False, index=True)  # Admin / Operador / Digitador

    password_hash = db.Column(db.String(255), nullable=False)

    is_active = db.Column(db.Boolean, default=True, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def set_password(self, password: str) -> None:
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    def __repr__(self) -> str:
        return f"<User {self.id} {self.name} role={self.role}>"


@login_manager.user_loader
def load_user(user_id: str):
    return db.session.get(User, int(user_id))
