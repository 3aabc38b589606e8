from datetime import datetime

from models import db


class TaskType:
    ASIGNACION = "Asignacion"

    ALL = {ASIGNACION}


class TaskStatus:
    PENDIENTE = "Pendiente"
    EN_PROGRESO = "En Progreso"
    COMPLETADA = "Completada"

    ALL = {PENDIENTE, EN_PROGRESO, COMPLETADA}


class Task(db.Model):
    """Trabajo derivado de una alerta.

    Se asigna a un grupo (rol), no a una persona. created_by_user_id es quien
    originó la alerta (el operador que registró la discrepancia).
    """

    __tablename__ = "tasks"

    id = db.Column(db.Integer, primary_key=True)

    alert_id = db.Column(db.Integer, db.ForeignKey("alerts.id"), nullable=False, index=True)
    assigned_to_group = db.Column(db.String(20), nullable=False, index=True)

    instruction = db.Column(db.Text, nullable=False)
    type = db.Column(db.String(20), nullable=False, default=TaskType.ASIGNACION)
    status = db.Column(db.String(20), nullable=False, default=TaskStatus.PENDIENTE, index=True)
    priority = db.Column(db.String(20), nullable=False)

    created_by_user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)

    alert = db.relationship("Alert", back_populates="tasks")

    def __repr__(self):
        return f"<Task {self.id} alert={self.alert_id} group={self.assigned_to_group}>"
