from flask import Flask
from flask_migrate import Migrate

from config import Config
from models import db, login_manager


migrate = Migrate()


def create_app(config_class=Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_class)

    # -------------------------
    # Extensiones
    # -------------------------
    db.init_app(app)
    migrate.init_app(app, db)

    login_manager.init_app(app)

    # -------------------------
    # Importar modelos (Alembic)
    # -------------------------
    from models.client import Client  # noqa: F401
    from models.user import User  # noqa: F401
    from models.check_in import CheckIn  # noqa: F401
    from models.operator_count import OperatorCount  # noqa: F401
    from models.alert import Alert  # noqa: F401
    from models.task import Task  # noqa: F401

    # -------------------------
    # Blueprints
    # -------------------------
    from routes import auth_bp, main_bp
    from routes.operator import operator_bp
    from routes.history import history_bp

    blueprints = [
        auth_bp,
        main_bp,

        # Operación
        operator_bp,

        # Reportes
        history_bp,
    ]

    for bp in blueprints:
        app.register_blueprint(bp)

    from services.money import format_amount
    app.jinja_env.filters["money"] = format_amount

    # -------------------------
    # Logging + manejo global de errores
    # -------------------------
    import os
    import logging
    from logging.handlers import RotatingFileHandler
    from flask import jsonify, request
    from services.errors import ConteoError

    log_dir = app.config.get("LOG_DIR") or os.path.join(os.path.dirname(__file__), "logs")
    os.makedirs(log_dir, exist_ok=True)

    level = getattr(logging, app.config.get("LOG_LEVEL", "INFO"), logging.INFO)

    file_handler = RotatingFileHandler(
        os.path.join(log_dir, "app.log"),
        maxBytes=2_000_000,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    ))

    if not any(isinstance(h, RotatingFileHandler) for h in app.logger.handlers):
        app.logger.addHandler(file_handler)
    app.logger.setLevel(level)

    @login_manager.unauthorized_handler
    def _unauthorized():
        return jsonify({"success": False, "error": "Acceso no autorizado."}), 401

    @app.errorhandler(ConteoError)
    def _handle_conteo_error(e):
        return jsonify({"success": False, "error": e.message}), e.status_code

    @app.errorhandler(404)
    def _handle_404(e):
        return jsonify({"success": False, "error": "Recurso no encontrado."}), 404

    @app.errorhandler(405)
    def _handle_405(e):
        return jsonify({"success": False, "error": "Método no permitido."}), 405

    @app.errorhandler(500)
    def _handle_500(e):
        app.logger.exception("Error 500 no manejado: %s %s", request.method, request.path)
        return jsonify({"success": False, "error": "Ocurrió un error interno. El problema fue registrado."}), 500

    return app


app = create_app()


if __name__ == "__main__":
    # Debug controlado por config / variables de entorno
    app.run(debug=app.config.get("DEBUG", False))
