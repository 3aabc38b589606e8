from datetime import datetime

from models import db


class AlertPriority:
    BAJA = "Baja"
    MEDIA = "Media"
    ALTA = "Alta"
    CRITICA = "Critica"

    ALL = {BAJA, MEDIA, ALTA, CRITICA}


class AlertStatus:
    PENDIENTE = "Pendiente"
    ASIGNADA = "Asignada"
    RESUELTA = "Resuelta"

    ALL = {PENDIENTE, ASIGNADA, RESUELTA}


class Alert(db.Model):
    __tablename__ = "alerts"

    id = db.Column(db.Integer, primary_key=True)

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)

    priority = db.Column(db.String(20), nullable=False, default=AlertPriority.MEDIA)
    status = db.Column(db.String(20), nullable=False, default=AlertStatus.PENDIENTE, index=True)
    suggested_role = db.Column(db.String(20), nullable=True)

    check_in_id = db.Column(db.Integer, db.ForeignKey("check_ins.id"), nullable=True, index=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)

    tasks = db.relationship("Task", back_populates="alert")

    def __repr__(self):
        return f"<Alert {self.id} {self.priority} status={self.status}>"
