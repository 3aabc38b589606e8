from datetime import datetime
from . import db


class Client(db.Model):
    __tablename__ = "clients"

    id = db.Column(db.Integer, primary_key=True)

    name = db.Column(db.String(160), nullable=False, index=True)
    tax_id = db.Column(db.String(40), nullable=True)

    is_active = db.Column(db.Boolean, default=True, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    check_ins = db.relationship("CheckIn", back_populates="client")

    def __repr__(self):
        return f"<Client {self.id} {self.name}>"
