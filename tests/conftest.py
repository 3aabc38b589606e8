"""
Fixtures comunes.

- app: aplicación sobre un SQLite temporal (tablas con db.create_all()).
- data: usuarios por rol, un cliente y planillas; devuelve solo ids para no
  arrastrar instancias fuera del app context.
- login: escribe la sesión de Flask-Login directamente.
- sent_emails: reemplaza el envío SMTP y guarda lo que se habría mandado.
"""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from app import create_app
from config import Config
from models import db
from models.check_in import CheckIn, CheckInStatus
from models.client import Client
from models.user import User, UserRole


@pytest.fixture
def app(tmp_path):
    class TestConfig(Config):
        TESTING = True
        SECRET_KEY = "test"
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'test.db'}"
        LOG_DIR = str(tmp_path / "logs")
        MAIL_SERVER = None
        MAIL_DEFAULT_SENDER = None
        NOTIFY_ON_COUNT = True
        ENSURE_STATUS_COLUMN_ON_SUBMIT = True

    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _user(name, email, role, password="secret123"):
    u = User(name=name, email=email, role=role, is_active=True)
    u.set_password(password)
    return u


@pytest.fixture
def data(app):
    with app.app_context():
        admin = _user("Ana Admin", "admin@test.com", UserRole.ADMIN)
        operator = _user("Oscar Operador", "operador@test.com", UserRole.OPERADOR)
        other_operator = _user("Olga Operadora", None, UserRole.OPERADOR)
        digitizer = _user("Diego Digitador", "digitador@test.com", UserRole.DIGITADOR)
        digitizer_no_email = _user("Dora Digitadora", "", UserRole.DIGITADOR)
        bank = Client(name="Banco Uno", is_active=True)
        db.session.add_all([admin, operator, other_operator, digitizer, digitizer_no_email, bank])
        db.session.flush()

        pending = CheckIn(
            invoice_number="PL-100",
            client_id=bank.id,
            seal_number="S-100",
            declared_value=Decimal("100000.00"),
            status=CheckInStatus.PENDIENTE,
        )
        processed = CheckIn(
            invoice_number="PL-200",
            client_id=bank.id,
            seal_number="S-200",
            declared_value=Decimal("50000.00"),
            status=CheckInStatus.PROCESADO,
        )
        db.session.add_all([pending, processed])
        db.session.commit()

        return SimpleNamespace(
            admin=admin.id,
            operator=operator.id,
            other_operator=other_operator.id,
            digitizer=digitizer.id,
            digitizer_no_email=digitizer_no_email.id,
            client=bank.id,
            pending=pending.id,
            processed=processed.id,
        )


@pytest.fixture
def login(client):
    def _login(user_id: int):
        with client.session_transaction() as sess:
            sess["_user_id"] = str(user_id)
            sess["_fresh"] = True

    return _login


@pytest.fixture
def sent_emails(monkeypatch):
    sent = []

    def fake_send(recipient_email, recipient_name, subject, html_body):
        sent.append(SimpleNamespace(email=recipient_email, name=recipient_name, subject=subject, body=html_body))
        return True

    monkeypatch.setattr("services.notifications.send_task_email", fake_send)
    return sent
