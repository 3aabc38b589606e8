from datetime import datetime

from models import db


class CheckInStatus:
    PENDIENTE = "Pendiente"
    PROCESADO = "Procesado"
    DISCREPANCIA = "Discrepancia"
    FALTANTE = "Faltante"
    CERRADO = "Cerrado"

    ALL = {PENDIENTE, PROCESADO, DISCREPANCIA, FALTANTE, CERRADO}


class CheckIn(db.Model):
    """Planilla de entrega de efectivo esperada.

    La crea un flujo externo con el valor declarado. El conteo del operador la
    saca de Pendiente; el cierre del digitador (externo) llena digitizer_status
    y closed_by_digitizer_id.
    """

    __tablename__ = "check_ins"

    id = db.Column(db.Integer, primary_key=True)

    invoice_number = db.Column(db.String(60), nullable=False, unique=True, index=True)
    client_id = db.Column(db.Integer, db.ForeignKey("clients.id"), nullable=False, index=True)

    seal_number = db.Column(db.String(60), nullable=True)
    declared_value = db.Column(db.Numeric(14, 2), nullable=False)

    status = db.Column(db.String(32), nullable=False, default=CheckInStatus.PENDIENTE, index=True)

    digitizer_status = db.Column(db.String(32), nullable=True)
    closed_by_digitizer_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)

    client = db.relationship("Client", back_populates="check_ins")
    closed_by_digitizer = db.relationship("User", foreign_keys=[closed_by_digitizer_id])

    def __repr__(self):
        return f"<CheckIn {self.id} {self.invoice_number} status={self.status}>"
