from decimal import Decimal

from app import create_app
from models import db
from models.check_in import CheckIn, CheckInStatus
from models.client import Client
from models.user import User, UserRole


DEMO_USERS = [
    ("admin@demo.com", "Admin Demo", UserRole.ADMIN, "admin1234"),
    ("operador@demo.com", "Operador Demo", UserRole.OPERADOR, "operador1234"),
    ("digitador@demo.com", "Digitador Demo", UserRole.DIGITADOR, "digitador1234"),
]

DEMO_CHECK_INS = [
    ("PL-0001", "SELLO-0001", Decimal("100000.00")),
    ("PL-0002", "SELLO-0002", Decimal("250000.00")),
    ("PL-0003", "SELLO-0003", Decimal("1372000.00")),
]


def run():
    app = create_app()
    with app.app_context():
        # No usamos db.create_all(): el esquema sale de las migraciones.
        # Asegúrate de haber corrido: flask db upgrade

        # 1) Usuarios demo (uno por rol)
        for email, name, role, password in DEMO_USERS:
            user = db.session.query(User).filter_by(email=email).first()
            if not user:
                user = User(email=email, name=name, role=role, is_active=True)
                user.set_password(password)
                db.session.add(user)
            else:
                user.is_active = True
                user.role = role

        # 2) Cliente demo
        client = db.session.query(Client).filter_by(name="Cliente Demo").first()
        if not client:
            client = Client(name="Cliente Demo", is_active=True)
            db.session.add(client)
            db.session.flush()

        # 3) Planillas pendientes
        for invoice_number, seal_number, declared_value in DEMO_CHECK_INS:
            ci = db.session.query(CheckIn).filter_by(invoice_number=invoice_number).first()
            if not ci:
                db.session.add(CheckIn(
                    invoice_number=invoice_number,
                    client_id=client.id,
                    seal_number=seal_number,
                    declared_value=declared_value,
                    status=CheckInStatus.PENDIENTE,
                ))

        db.session.commit()

        print("Seed listo.")
        for email, _, role, password in DEMO_USERS:
            print(f"{role}: {email} / {password}")
        print("Planillas pendientes:", ", ".join(n for n, _, _ in DEMO_CHECK_INS))


if __name__ == "__main__":
    run()
