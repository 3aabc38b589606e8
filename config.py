import os

basedir = os.path.abspath(os.path.dirname(__file__))


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev_secret_key_change_me")

    DB_PATH = os.environ.get("DB_PATH", os.path.join(basedir, "conteos.db"))
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", f"sqlite:///{DB_PATH}")

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Cookies de sesión más seguras (ajusta en producción)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"

    LOG_DIR = os.environ.get("LOG_DIR", os.path.join(basedir, "logs"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper().strip()

    # Correo (si falta MAIL_SERVER o remitente, no se envía nada)
    MAIL_SERVER = os.environ.get("MAIL_SERVER")
    MAIL_PORT = int(os.environ.get("MAIL_PORT", 587))
    MAIL_USERNAME = os.environ.get("MAIL_USERNAME")
    MAIL_PASSWORD = os.environ.get("MAIL_PASSWORD")
    MAIL_DEFAULT_SENDER = os.environ.get("MAIL_DEFAULT_SENDER", MAIL_USERNAME)
    MAIL_USE_TLS = _env_flag("MAIL_USE_TLS", True)
    MAIL_TIMEOUT = float(os.environ.get("MAIL_TIMEOUT", 20))

    NOTIFY_ON_COUNT = _env_flag("NOTIFY_ON_COUNT", True)

    # La migración b2statuswide02 ya amplía la columna; esto la revisa por request
    ENSURE_STATUS_COLUMN_ON_SUBMIT = _env_flag("ENSURE_STATUS_COLUMN_ON_SUBMIT", True)
