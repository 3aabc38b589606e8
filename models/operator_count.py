from datetime import datetime

from models import db


# (columna, valor del billete)
DENOMINATIONS = (
    ("bills_100k", 100_000),
    ("bills_50k", 50_000),
    ("bills_20k", 20_000),
    ("bills_10k", 10_000),
    ("bills_5k", 5_000),
    ("bills_2k", 2_000),
)


class OperatorCount(db.Model):
    """Conteo físico de una planilla hecho por un operador.

    Se crea una sola vez por envío aceptado y no se edita después.
    discrepancy = total_counted - declared_value (con signo).
    """

    __tablename__ = "operator_counts"

    id = db.Column(db.Integer, primary_key=True)

    check_in_id = db.Column(db.Integer, db.ForeignKey("check_ins.id"), nullable=False, index=True)
    operator_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)

    bills_100k = db.Column(db.Integer, nullable=False, default=0)
    bills_50k = db.Column(db.Integer, nullable=False, default=0)
    bills_20k = db.Column(db.Integer, nullable=False, default=0)
    bills_10k = db.Column(db.Integer, nullable=False, default=0)
    bills_5k = db.Column(db.Integer, nullable=False, default=0)
    bills_2k = db.Column(db.Integer, nullable=False, default=0)
    coins = db.Column(db.Numeric(14, 2), nullable=False, default=0)

    total_counted = db.Column(db.Numeric(14, 2), nullable=False)
    discrepancy = db.Column(db.Numeric(14, 2), nullable=False, default=0)

    observations = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)

    check_in = db.relationship("CheckIn")
    operator = db.relationship("User", foreign_keys=[operator_id])

    def __repr__(self):
        return f"<OperatorCount {self.id} check_in={self.check_in_id} total={self.total_counted}>"
