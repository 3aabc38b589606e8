from flask import Blueprint

auth_bp = Blueprint("auth", __name__, url_prefix="/auth")
main_bp = Blueprint("main", __name__)

from routes import auth, main  # noqa: E402,F401
